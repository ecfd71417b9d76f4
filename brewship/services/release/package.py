"""Packaging of the release binary into a checksummed tarball."""

from __future__ import annotations

import hashlib
import tarfile
from pathlib import Path

from brewship.core.result import Err, Ok, Result
from brewship.output.console import ConsoleProtocol
from brewship.services.release.errors import ReleaseError
from brewship.services.release.model import PackagedArtifact, ReleaseMetadata
from brewship.services.release.ports import Archiver, Checksum

_EXEC_BITS = 0o111


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def _force_executable(info: tarfile.TarInfo) -> tarfile.TarInfo:
    info.mode |= _EXEC_BITS
    return info


class TarArchiver:
    """Gzip tarball containing a single file."""

    def archive(self, *, source: Path, arcname: str, dest: Path) -> Result[None, ReleaseError]:
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with tarfile.open(dest, "w:gz") as tf:
                tf.add(source, arcname=arcname, recursive=False, filter=_force_executable)
        except (OSError, tarfile.TarError) as e:
            return Err(
                ReleaseError(
                    kind="package_failed",
                    message=f"failed to create {dest.name}",
                    hint=str(e),
                )
            )
        return Ok(None)


class Sha256Checksum:
    def digest(self, path: Path) -> Result[str, ReleaseError]:
        try:
            return Ok(_sha256_file(path))
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="package_failed",
                    message=f"failed to checksum {path.name}",
                    hint=str(e),
                )
            )


def package_binary(
    *,
    metadata: ReleaseMetadata,
    out_dir: Path,
    archiver: Archiver,
    checksum: Checksum,
    console: ConsoleProtocol,
) -> Result[PackagedArtifact, ReleaseError]:
    tarball_name = metadata.tarball_name
    tarball_path = out_dir / tarball_name

    archived = archiver.archive(
        source=metadata.binary_path,
        arcname=metadata.binary_name,
        dest=tarball_path,
    )
    if isinstance(archived, Err):
        return archived

    digest = checksum.digest(tarball_path)
    if isinstance(digest, Err):
        return digest

    console.success(f"packaged {tarball_name} (sha256 {digest.value})")
    return Ok(
        PackagedArtifact(
            tarball_path=tarball_path,
            tarball_name=tarball_name,
            sha256=digest.value,
        )
    )
