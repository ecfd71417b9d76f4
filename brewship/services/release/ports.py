"""Narrow interfaces for the external collaborators of a release run.

Real implementations: ``brewship.git.Repository`` (VersionControl),
``GhReleaseHost`` (ReleaseHost), ``TarArchiver`` and ``Sha256Checksum``.
Tests substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from brewship.core.result import Result
from brewship.git.repository import GitError
from brewship.platform.process import ProbeOutput, ProcessError
from brewship.services.release.errors import ReleaseError


class VersionControl(Protocol):
    path: Path

    def toplevel(self) -> Result[Path, GitError]: ...

    def has_unstaged_changes(self) -> Result[bool, GitError]: ...

    def has_staged_changes(self) -> Result[bool, GitError]: ...

    def remote_tag_exists(self, tag: str) -> Result[bool, GitError]: ...

    def create_tag(self, tag: str) -> Result[None, GitError]: ...

    def push_tag(self, tag: str) -> Result[None, GitError]: ...

    def delete_local_tag(self, tag: str) -> Result[None, GitError]: ...

    def delete_remote_tag(self, tag: str) -> Result[None, GitError]: ...

    def add(self, paths: list[str]) -> Result[None, GitError]: ...

    def commit(self, message: str) -> Result[None, GitError]: ...

    def push(self) -> Result[None, GitError]: ...


class ReleaseHost(Protocol):
    def is_authenticated(self) -> bool: ...

    def repo_owner(self) -> Result[str, ReleaseError]: ...

    def repo_description(self) -> Result[str | None, ReleaseError]: ...

    def release_exists(self, tag: str) -> Result[bool, ReleaseError]: ...

    def create_release(
        self, *, tag: str, title: str, notes: str, asset: Path
    ) -> Result[None, ReleaseError]: ...

    def delete_release(self, tag: str) -> Result[None, ReleaseError]: ...

    def clone_repo(self, *, slug: str, dest: Path) -> Result[None, ReleaseError]: ...


class Archiver(Protocol):
    def archive(
        self, *, source: Path, arcname: str, dest: Path
    ) -> Result[None, ReleaseError]: ...


class Checksum(Protocol):
    def digest(self, path: Path) -> Result[str, ReleaseError]: ...


OpenRepository = Callable[[Path], VersionControl]
BinaryRunner = Callable[[list[str], Path], Result[ProbeOutput, ProcessError]]
Confirm = Callable[[str], bool]
