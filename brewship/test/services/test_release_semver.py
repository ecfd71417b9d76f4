from __future__ import annotations

from brewship.core.result import Err, Ok
from brewship.services.release.semver import (
    SemVer,
    extract_version_tag,
    find_version_token,
    parse_version,
)


def test_parse_version_accepts_with_and_without_prefix() -> None:
    assert parse_version("1.2.3") == SemVer(1, 2, 3)
    assert parse_version("v10.0.7") == SemVer(10, 0, 7)


def test_parse_version_rejects_leading_zeros_and_suffixes() -> None:
    assert parse_version("01.2.3") is None
    assert parse_version("1.02.3") is None
    assert parse_version("1.2.3-beta") is None
    assert parse_version("1.2") is None


def test_extract_version_from_prose() -> None:
    result = extract_version_tag("mytool version 2.3.4 (built today)\n")
    assert isinstance(result, Ok)
    assert result.value == "v2.3.4"


def test_extract_version_keeps_existing_prefix() -> None:
    result = extract_version_tag("myTool v1.2.3")
    assert isinstance(result, Ok)
    assert result.value == "v1.2.3"


def test_extract_version_truncates_prerelease_suffix() -> None:
    result = extract_version_tag("tool v1.0.0-beta")
    assert isinstance(result, Ok)
    assert result.value == "v1.0.0"


def test_extract_version_uses_first_match_only() -> None:
    result = extract_version_tag("tool 3.1.4 (libfoo 9.9.9)")
    assert isinstance(result, Ok)
    assert result.value == "v3.1.4"


def test_extract_version_without_triple_is_detection_failure() -> None:
    result = extract_version_tag("usage: tool [options]\nversion 1.2\n")
    assert isinstance(result, Err)
    assert result.error.kind == "version_not_found"
    assert result.error.category == "detection"
    assert result.error.hint is not None
    assert "usage: tool" in result.error.hint


def test_extract_version_from_empty_output() -> None:
    result = extract_version_tag("")
    assert isinstance(result, Err)
    assert result.error.kind == "version_not_found"


def test_extract_version_rejects_leading_zero_match() -> None:
    result = extract_version_tag("tool 01.2.3")
    assert isinstance(result, Err)
    assert result.error.kind == "version_invalid"


def test_find_version_token_ignores_non_ascii_digits() -> None:
    assert find_version_token("v١.٢.٣") is None
