"""Project name validation and case conversion."""

from __future__ import annotations

import re

from brewship.core.result import Err, Ok, Result
from brewship.services.release.errors import ReleaseError

_KEBAB_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")
# "fooBar" -> "foo-Bar", "HTTPServer" -> "HTTP-Server"
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")

FALLBACK_NAME = "project"


def is_kebab_case(name: str) -> bool:
    return _KEBAB_RE.fullmatch(name) is not None


def to_kebab_case(name: str) -> str:
    """Lowercase ``name`` with hyphens at case boundaries and separators.

    The result always passes ``is_kebab_case``; input without any ASCII
    letter or digit maps to ``FALLBACK_NAME``.
    """
    s = _ACRONYM_RE.sub(r"\1-\2", name)
    s = _LOWER_UPPER_RE.sub(r"\1-\2", s)
    s = _SEPARATOR_RE.sub("-", s).strip("-").lower()
    return s or FALLBACK_NAME


def to_pascal_case(name: str) -> str:
    """``my_cool__tool`` -> ``MyCoolTool``."""
    segments = [seg for seg in _SEPARATOR_RE.split(name) if seg]
    return "".join(seg[0].upper() + seg[1:] for seg in segments)


def validate_kebab_case(name: str) -> Result[str, ReleaseError]:
    if is_kebab_case(name):
        return Ok(name)

    return Err(
        ReleaseError(
            kind="invalid_name",
            message=f"project name is not kebab-case: {name}",
            hint=f"Rename the repository directory, e.g. to: {to_kebab_case(name)}",
        )
    )
