from __future__ import annotations

from pathlib import Path

import pytest

from brewship.core.result import Err, Ok, Result
from brewship.platform.process import ProcessError
from brewship.services.release import gh as gh_mod


def _err(*, stderr: str, returncode: int = 1) -> Err[ProcessError]:
    return Err(
        ProcessError(
            command=("gh", "release", "view"),
            returncode=returncode,
            stdout="",
            stderr=stderr,
        )
    )


class _FakeGh:
    def __init__(self, *responses: Result[str, ProcessError]) -> None:
        self.responses = list(responses)
        self.calls: list[list[str]] = []

    def __call__(self, cmd: list[str], *, cwd: Path) -> Result[str, ProcessError]:
        del cwd
        self.calls.append(cmd)
        return self.responses.pop(0)


@pytest.fixture
def fake_gh(monkeypatch: pytest.MonkeyPatch):
    def install(*responses: Result[str, ProcessError]) -> _FakeGh:
        fake = _FakeGh(*responses)
        monkeypatch.setattr(gh_mod, "run_process", fake)
        return fake

    return install


def test_ensure_gh_auth_failure(fake_gh, tmp_path: Path) -> None:
    fake_gh(_err(stderr="You are not logged into any GitHub hosts."))

    result = gh_mod.ensure_gh_auth(repo_root=tmp_path)

    assert isinstance(result, Err)
    assert result.error.kind == "gh_auth_required"
    assert result.error.hint == "Run: gh auth login"


def test_is_authenticated(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok("Logged in to github.com"))
    assert gh_mod.GhReleaseHost(tmp_path).is_authenticated() is True
    assert fake.calls == [["gh", "auth", "status"]]


def test_repo_owner(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok('{"owner": {"id": "X", "login": "acme"}}'))

    result = gh_mod.GhReleaseHost(tmp_path).repo_owner()

    assert isinstance(result, Ok)
    assert result.value == "acme"
    assert fake.calls == [["gh", "repo", "view", "--json", "owner"]]


def test_repo_owner_missing_login(fake_gh, tmp_path: Path) -> None:
    fake_gh(Ok('{"owner": {}}'))
    result = gh_mod.GhReleaseHost(tmp_path).repo_owner()
    assert isinstance(result, Err)
    assert result.error.kind == "command_failed"


def test_repo_owner_invalid_json(fake_gh, tmp_path: Path) -> None:
    fake_gh(Ok("not json"))
    result = gh_mod.GhReleaseHost(tmp_path).repo_owner()
    assert isinstance(result, Err)
    assert "invalid JSON" in result.error.message


def test_repo_description_may_be_absent(fake_gh, tmp_path: Path) -> None:
    fake_gh(Ok('{"description": ""}'), Ok('{"description": "A tool"}'))
    host = gh_mod.GhReleaseHost(tmp_path)

    empty = host.repo_description()
    filled = host.repo_description()

    assert isinstance(empty, Ok)
    assert not empty.value
    assert isinstance(filled, Ok)
    assert filled.value == "A tool"


def test_release_exists(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok('{"tagName": "v1.2.3"}'))

    result = gh_mod.GhReleaseHost(tmp_path).release_exists("v1.2.3")

    assert isinstance(result, Ok)
    assert result.value is True
    assert fake.calls == [["gh", "release", "view", "v1.2.3", "--json", "tagName"]]


def test_release_not_found_is_false(fake_gh, tmp_path: Path) -> None:
    fake_gh(_err(stderr="release not found"))
    result = gh_mod.GhReleaseHost(tmp_path).release_exists("v1.2.3")
    assert isinstance(result, Ok)
    assert result.value is False


def test_release_lookup_failure_is_error(fake_gh, tmp_path: Path) -> None:
    fake_gh(_err(stderr="HTTP 502 Bad Gateway"))

    result = gh_mod.GhReleaseHost(tmp_path).release_exists("v1.2.3")

    assert isinstance(result, Err)
    assert result.error.kind == "command_failed"
    assert result.error.hint == "HTTP 502 Bad Gateway"


def test_create_release_command(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok("https://github.com/acme/my-tool/releases/tag/v1.2.3\n"))
    asset = tmp_path / "myTool-v1.2.3.tar.gz"

    result = gh_mod.GhReleaseHost(tmp_path).create_release(
        tag="v1.2.3", title="v1.2.3", notes="Release v1.2.3", asset=asset
    )

    assert isinstance(result, Ok)
    assert fake.calls == [
        [
            "gh",
            "release",
            "create",
            "v1.2.3",
            str(asset),
            "--title",
            "v1.2.3",
            "--notes",
            "Release v1.2.3",
            "--verify-tag",
        ]
    ]


def test_create_release_failure_carries_stderr(fake_gh, tmp_path: Path) -> None:
    fake_gh(_err(stderr="tag v1.2.3 doesn't exist"))

    result = gh_mod.GhReleaseHost(tmp_path).create_release(
        tag="v1.2.3", title="v1.2.3", notes="", asset=tmp_path / "a.tar.gz"
    )

    assert isinstance(result, Err)
    assert result.error.category == "external_command"
    assert result.error.hint == "tag v1.2.3 doesn't exist"


def test_delete_release_is_non_interactive(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok(""))
    assert isinstance(gh_mod.GhReleaseHost(tmp_path).delete_release("v1.2.3"), Ok)
    assert fake.calls == [["gh", "release", "delete", "v1.2.3", "--yes"]]


def test_clone_repo(fake_gh, tmp_path: Path) -> None:
    fake = fake_gh(Ok(""))
    dest = tmp_path / "work" / "tap"

    result = gh_mod.GhReleaseHost(tmp_path).clone_repo(slug="acme/homebrew-tap", dest=dest)

    assert isinstance(result, Ok)
    assert dest.parent.is_dir()
    assert fake.calls == [["gh", "repo", "clone", "acme/homebrew-tap", str(dest)]]
