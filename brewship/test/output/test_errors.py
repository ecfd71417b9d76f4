from __future__ import annotations

import pytest

from brewship.core.errors import ErrorCode
from brewship.output.console import MockConsole, Style
from brewship.output.errors import print_release_error, release_error_exit_code
from brewship.services.release.errors import ReleaseError


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("invalid_name", ErrorCode.USER_ERROR),
        ("config_invalid", ErrorCode.USER_ERROR),
        ("tool_missing", ErrorCode.ENV_ERROR),
        ("gh_auth_required", ErrorCode.ENV_ERROR),
        ("dirty_tree", ErrorCode.ENV_ERROR),
        ("version_not_found", ErrorCode.DETECTION_ERROR),
        ("version_invalid", ErrorCode.DETECTION_ERROR),
        ("conflict_declined", ErrorCode.ABORTED),
        ("formula_declined", ErrorCode.ABORTED),
        ("command_failed", ErrorCode.EXTERNAL_ERROR),
        ("push_failed", ErrorCode.EXTERNAL_ERROR),
    ],
)
def test_exit_code_mapping(kind: str, code: ErrorCode) -> None:
    error = ReleaseError(kind=kind, message="x")  # type: ignore[arg-type]
    assert release_error_exit_code(error) == int(code)


def test_print_release_error_with_hint() -> None:
    console = MockConsole()

    print_release_error(
        ReleaseError(kind="gh_auth_required", message="gh auth required", hint="Run: gh auth login"),
        console,
    )

    assert console.messages == ["error: gh auth required", "hint: Run: gh auth login"]
    assert console.outputs[1].style == Style.DIM


def test_print_release_error_without_hint() -> None:
    console = MockConsole()
    print_release_error(ReleaseError(kind="push_failed", message="push rejected"), console)
    assert console.messages == ["error: push rejected"]
