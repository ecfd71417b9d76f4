from __future__ import annotations

import pytest

from brewship.core.result import Err, Ok
from brewship.services.release.naming import (
    FALLBACK_NAME,
    is_kebab_case,
    to_kebab_case,
    to_pascal_case,
    validate_kebab_case,
)


@pytest.mark.parametrize("name", ["tool", "my-cool-tool", "a1-b2", "x", "2fa-helper", "v2"])
def test_validate_kebab_case_accepts_unchanged(name: str) -> None:
    result = validate_kebab_case(name)
    assert isinstance(result, Ok)
    assert result.value == name


@pytest.mark.parametrize(
    "name",
    [
        "MyCoolTool",
        "my_cool_tool",
        "my--tool",
        "-tool",
        "tool-",
        "my tool",
        "HTTPServer",
        "Tool.v2",
        "",
        "___",
        "café-tool",
    ],
)
def test_validate_kebab_case_rejects_with_valid_suggestion(name: str) -> None:
    result = validate_kebab_case(name)
    assert isinstance(result, Err)
    assert result.error.kind == "invalid_name"
    assert result.error.category == "precondition"

    suggestion = to_kebab_case(name)
    assert is_kebab_case(suggestion)
    assert result.error.hint is not None
    assert suggestion in result.error.hint


def test_to_kebab_case_splits_case_boundaries() -> None:
    assert to_kebab_case("MyCoolTool") == "my-cool-tool"
    assert to_kebab_case("myTool") == "my-tool"
    assert to_kebab_case("HTTPServer") == "http-server"
    assert to_kebab_case("my_cool__tool") == "my-cool-tool"
    assert to_kebab_case("Tool2Go") == "tool2-go"


def test_to_kebab_case_keeps_valid_name() -> None:
    assert to_kebab_case("my-cool-tool") == "my-cool-tool"


def test_to_kebab_case_without_alphanumerics_falls_back() -> None:
    assert to_kebab_case("--__--") == FALLBACK_NAME


def test_to_pascal_case() -> None:
    assert to_pascal_case("my-cool-tool") == "MyCoolTool"
    assert to_pascal_case("my_cool__tool") == "MyCoolTool"
    assert to_pascal_case("myTool") == "MyTool"
    assert to_pascal_case("tool") == "Tool"
    assert to_pascal_case("-a-b-") == "AB"
