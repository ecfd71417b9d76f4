from __future__ import annotations

import json
from pathlib import Path

from brewship.core.result import Err, Ok, Result
from brewship.core.structured import StrDict, as_str_dict, get_str, get_table
from brewship.platform.process import ProcessError
from brewship.platform.process import run as run_process
from brewship.services.release.errors import ReleaseError


def _is_not_found(error: ProcessError) -> bool:
    text = f"{error.stderr}\n{error.stdout}".lower()
    return "not found" in text or "could not find" in text


def ensure_gh_auth(*, repo_root: Path) -> Result[None, ReleaseError]:
    result = run_process(["gh", "auth", "status"], cwd=repo_root)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="gh_auth_required",
                message="gh auth required",
                hint="Run: gh auth login",
            )
        )
    return Ok(None)


class GhReleaseHost:
    """GitHub releases and repositories through the ``gh`` CLI.

    Commands run from ``repo_root`` so gh resolves the project repository
    from its git remote.
    """

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    def is_authenticated(self) -> bool:
        return isinstance(ensure_gh_auth(repo_root=self.repo_root), Ok)

    def repo_owner(self) -> Result[str, ReleaseError]:
        data = self._repo_view("owner")
        if isinstance(data, Err):
            return data

        owner = get_table(data.value, "owner")
        login = get_str(owner, "login") if owner is not None else None
        if login is None:
            return Err(ReleaseError(kind="command_failed", message="missing repository owner"))
        return Ok(login)

    def repo_description(self) -> Result[str | None, ReleaseError]:
        data = self._repo_view("description")
        if isinstance(data, Err):
            return data
        return Ok(get_str(data.value, "description"))

    def release_exists(self, tag: str) -> Result[bool, ReleaseError]:
        result = run_process(["gh", "release", "view", tag, "--json", "tagName"], cwd=self.repo_root)
        match result:
            case Ok(_):
                return Ok(True)
            case Err(e) if _is_not_found(e):
                return Ok(False)
            case Err(e):
                return Err(
                    ReleaseError(
                        kind="command_failed",
                        message=f"failed to look up release: {tag}",
                        hint=e.detail(),
                    )
                )

    def create_release(
        self, *, tag: str, title: str, notes: str, asset: Path
    ) -> Result[None, ReleaseError]:
        cmd = [
            "gh",
            "release",
            "create",
            tag,
            str(asset),
            "--title",
            title,
            "--notes",
            notes,
            "--verify-tag",
        ]
        result = run_process(cmd, cwd=self.repo_root)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"failed to create release: {tag}",
                    hint=result.error.detail(),
                )
            )
        return Ok(None)

    def delete_release(self, tag: str) -> Result[None, ReleaseError]:
        result = run_process(["gh", "release", "delete", tag, "--yes"], cwd=self.repo_root)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"failed to delete release: {tag}",
                    hint=result.error.detail(),
                )
            )
        return Ok(None)

    def clone_repo(self, *, slug: str, dest: Path) -> Result[None, ReleaseError]:
        dest.parent.mkdir(parents=True, exist_ok=True)
        result = run_process(["gh", "repo", "clone", slug, str(dest)], cwd=self.repo_root)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"failed to clone {slug}",
                    hint=result.error.detail(),
                )
            )
        return Ok(None)

    def _repo_view(self, field: str) -> Result[StrDict, ReleaseError]:
        result = run_process(["gh", "repo", "view", "--json", field], cwd=self.repo_root)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message="failed to query repository",
                    hint=result.error.detail(),
                )
            )

        try:
            obj: object = json.loads(result.value)
        except json.JSONDecodeError as e:
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"invalid JSON from gh repo view: {e}",
                )
            )

        data = as_str_dict(obj)
        if data is None:
            return Err(
                ReleaseError(kind="command_failed", message="unexpected payload from gh repo view")
            )
        return Ok(data)
