"""Release pipeline: preflight, metadata, reconcile, tag, package, publish, formula.

Each step returns a Result and the driver stops at the first Err. The whole
run executes inside one temporary directory that is removed on every exit
path, including operator aborts and external command failures.
"""

from __future__ import annotations

import tempfile
from collections.abc import Iterable
from pathlib import Path

from brewship.core.config import load_config_or_default
from brewship.core.result import Err, Ok, Result
from brewship.git.repository import Repository
from brewship.output.console import ConsoleProtocol
from brewship.platform.process import run_combined
from brewship.services.release.config import REQUIRED_TOOLS, TEMP_DIR_PREFIX
from brewship.services.release.errors import ReleaseError
from brewship.services.release.formula import update_formula
from brewship.services.release.gh import GhReleaseHost
from brewship.services.release.metadata import find_repo_root, resolve_metadata
from brewship.services.release.model import ReleaseResult
from brewship.services.release.package import Sha256Checksum, TarArchiver, package_binary
from brewship.services.release.preflight import ensure_host_authenticated, ensure_tools_available
from brewship.services.release.publish import publish_release, tag_and_push
from brewship.services.release.reconcile import reconcile_release_state
from brewship.services.release.ports import (
    Archiver,
    BinaryRunner,
    Checksum,
    Confirm,
    OpenRepository,
    ReleaseHost,
    VersionControl,
)


class ReleaseService:
    """Runs one release of the project checked out at ``cwd``.

    Collaborators default to the real git/gh/tarfile/hashlib implementations;
    tests inject fakes.
    """

    def __init__(
        self,
        *,
        cwd: Path,
        console: ConsoleProtocol,
        confirm: Confirm,
        vcs: VersionControl | None = None,
        host: ReleaseHost | None = None,
        archiver: Archiver | None = None,
        checksum: Checksum | None = None,
        open_repository: OpenRepository | None = None,
        runner: BinaryRunner = run_combined,
        required_tools: Iterable[str] = REQUIRED_TOOLS,
        temp_base: Path | None = None,
    ) -> None:
        self._cwd = cwd
        self._console = console
        self._confirm = confirm
        self._vcs: VersionControl = vcs or Repository(cwd)
        self._host: ReleaseHost = host or GhReleaseHost(cwd)
        self._archiver: Archiver = archiver or TarArchiver()
        self._checksum: Checksum = checksum or Sha256Checksum()
        self._open_repository: OpenRepository = open_repository or Repository
        self._runner = runner
        self._required_tools = tuple(required_tools)
        self._temp_base = temp_base

    def run(self) -> Result[ReleaseResult, ReleaseError]:
        with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX, dir=self._temp_base) as tmp:
            return self._run_in(Path(tmp))

    def _run_in(self, work_dir: Path) -> Result[ReleaseResult, ReleaseError]:
        console = self._console

        console.header("Preflight")
        ok = ensure_tools_available(self._required_tools)
        if isinstance(ok, Err):
            return ok
        ok = ensure_host_authenticated(self._host)
        if isinstance(ok, Err):
            return ok
        console.success("tools available, gh authenticated")

        console.header("Metadata")
        root = find_repo_root(self._vcs)
        if isinstance(root, Err):
            return root
        repo_root = root.value

        config = load_config_or_default(repo_root)
        if isinstance(config, Err):
            return Err(
                ReleaseError(
                    kind="config_invalid",
                    message=config.error.message,
                    hint=str(config.error.path) if config.error.path else None,
                )
            )

        metadata = resolve_metadata(
            repo_root=repo_root,
            vcs=self._vcs,
            host=self._host,
            config=config.value,
            console=console,
            runner=self._runner,
        )
        if isinstance(metadata, Err):
            return metadata
        meta = metadata.value

        console.header(f"Reconcile {meta.version_tag}")
        conflict = reconcile_release_state(
            tag=meta.version_tag,
            vcs=self._vcs,
            host=self._host,
            confirm=self._confirm,
            console=console,
        )
        if isinstance(conflict, Err):
            return conflict

        console.header("Tag")
        ok = tag_and_push(metadata=meta, vcs=self._vcs, console=console)
        if isinstance(ok, Err):
            return ok

        console.header("Package")
        artifact = package_binary(
            metadata=meta,
            out_dir=work_dir,
            archiver=self._archiver,
            checksum=self._checksum,
            console=console,
        )
        if isinstance(artifact, Err):
            return artifact

        console.header("Publish")
        ok = publish_release(
            metadata=meta,
            artifact=artifact.value,
            host=self._host,
            notes=config.value.notes,
            console=console,
        )
        if isinstance(ok, Err):
            return ok

        console.header(f"Formula ({meta.tap})")
        formula = update_formula(
            metadata=meta,
            artifact=artifact.value,
            work_dir=work_dir,
            host=self._host,
            open_repository=self._open_repository,
            confirm=self._confirm,
            console=console,
            runner=self._runner,
        )
        if isinstance(formula, Err):
            return formula

        return Ok(
            ReleaseResult(
                metadata=meta,
                artifact=artifact.value,
                formula_path=formula.value,
                conflict=conflict.value,
            )
        )
