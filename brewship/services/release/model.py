from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LicenseType(Enum):
    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    GPL_2 = "GPL-2.0"
    GPL_3 = "GPL-3.0"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value

    @property
    def is_known(self) -> bool:
        return self is not LicenseType.UNKNOWN


class ConflictState(Enum):
    NO_CONFLICT = "no_conflict"
    CONFLICT_DETECTED = "conflict_detected"
    OVERWRITE_CONFIRMED = "overwrite_confirmed"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class ReleaseMetadata:
    """Everything derived about the project before anything is mutated.

    ``version_tag`` only ever comes from running the binary.
    """

    repo_name: str
    repo_root: Path
    binary_name: str
    binary_path: Path
    formula_class: str
    version_tag: str
    homepage: str
    test_flag: str
    tap: str
    license: LicenseType = LicenseType.UNKNOWN
    description: str | None = None

    @property
    def tarball_name(self) -> str:
        return f"{self.binary_name}-{self.version_tag}.tar.gz"

    @property
    def download_url(self) -> str:
        return f"{self.homepage}/releases/download/{self.version_tag}/{self.tarball_name}"

    @property
    def formula_filename(self) -> str:
        return f"{self.binary_name}.rb"


@dataclass(frozen=True, slots=True)
class PackagedArtifact:
    tarball_path: Path
    tarball_name: str
    sha256: str


@dataclass(frozen=True, slots=True)
class RemoteReleaseState:
    tag_exists_remote: bool
    release_exists_on_host: bool

    @property
    def has_conflict(self) -> bool:
        return self.tag_exists_remote or self.release_exists_on_host

    @property
    def state(self) -> ConflictState:
        if self.has_conflict:
            return ConflictState.CONFLICT_DETECTED
        return ConflictState.NO_CONFLICT


@dataclass(frozen=True, slots=True)
class ReleaseResult:
    metadata: ReleaseMetadata
    artifact: PackagedArtifact
    formula_path: str
    conflict: ConflictState
