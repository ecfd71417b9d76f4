"""Git repository abstraction.

``Repository`` wraps the git commands a release needs: locating the working
tree root, the two dirty-tree queries, tag management against ``origin``,
and the add/commit/push sequence used on the tap checkout. All operations
return Result types.

Usage:
    repo = Repository(Path("/path/to/project"))

    match repo.remote_tag_exists("v1.2.3"):
        case Ok(True):
            print("tag already on origin")
        case Ok(False):
            print("free to tag")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from brewship.core.result import Err, Ok, Result
from brewship.platform.process import ProcessError
from brewship.platform.process import run as run_process

__all__ = ["GitError", "Repository"]

DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message (git's stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A git working tree.

    Attributes:
        path: Directory git commands run against (any path inside the tree)
        remote: Remote used for tag and branch pushes
    """

    def __init__(self, path: Path, remote: str = DEFAULT_REMOTE) -> None:
        self.path = path
        self.remote = remote

    def toplevel(self) -> Result[Path, GitError]:
        """Absolute path of the working tree root.

        Fails when ``path`` is not inside a git repository.
        """
        result = self._run(["rev-parse", "--show-toplevel"])
        match result:
            case Err(e):
                return Err(self._error("rev-parse --show-toplevel", e, "not a git repository"))
            case Ok(stdout):
                return Ok(Path(stdout.strip()))

    def has_unstaged_changes(self) -> Result[bool, GitError]:
        """True if the working tree differs from the index."""
        return self._diff_quiet([])

    def has_staged_changes(self) -> Result[bool, GitError]:
        """True if the index differs from HEAD."""
        return self._diff_quiet(["--cached"])

    def remote_tag_exists(self, tag: str) -> Result[bool, GitError]:
        result = self._run(["ls-remote", "--tags", self.remote, f"refs/tags/{tag}"])
        match result:
            case Err(e):
                return Err(self._error("ls-remote --tags", e, "ls-remote failed"))
            case Ok(stdout):
                return Ok(bool(stdout.strip()))

    def create_tag(self, tag: str) -> Result[None, GitError]:
        return self._simple(["tag", tag], "tag")

    def push_tag(self, tag: str) -> Result[None, GitError]:
        return self._simple(["push", self.remote, f"refs/tags/{tag}"], "push tag")

    def delete_local_tag(self, tag: str) -> Result[None, GitError]:
        return self._simple(["tag", "-d", tag], "tag -d")

    def delete_remote_tag(self, tag: str) -> Result[None, GitError]:
        return self._simple(["push", self.remote, f":refs/tags/{tag}"], "push --delete tag")

    def add(self, paths: list[str]) -> Result[None, GitError]:
        return self._simple(["add", "--", *paths], "add")

    def commit(self, message: str) -> Result[None, GitError]:
        return self._simple(["commit", "-m", message], "commit")

    def push(self) -> Result[None, GitError]:
        return self._simple(["push", self.remote, "HEAD"], "push")

    def _diff_quiet(self, extra: list[str]) -> Result[bool, GitError]:
        # `git diff --quiet` exits 1 when there are differences.
        result = self._run(["diff", *extra, "--quiet"])
        match result:
            case Ok(_):
                return Ok(False)
            case Err(e) if e.returncode == 1:
                return Ok(True)
            case Err(e):
                return Err(self._error(" ".join(["diff", *extra]), e, "git diff failed"))

    def _simple(self, args: list[str], command: str) -> Result[None, GitError]:
        result = self._run(args)
        if isinstance(result, Err):
            return Err(self._error(command, result.error, f"git {command} failed"))
        return Ok(None)

    def _error(self, command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or fallback,
            returncode=e.returncode,
        )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)
