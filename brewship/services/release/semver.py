from __future__ import annotations

import re
from dataclasses import dataclass

from brewship.core.result import Err, Ok, Result
from brewship.services.release.errors import ReleaseError

# First version-shaped token anywhere in the output; suffixes such as
# "-beta" are not captured.
_SEARCH_RE = re.compile(r"v?[0-9]+\.[0-9]+\.[0-9]+")
_STABLE_RE = re.compile(r"^v?(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)$")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def to_tag(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> SemVer | None:
    """Parse ``1.2.3`` or ``v1.2.3`` exactly (no leading zeros)."""
    m = _STABLE_RE.match(text)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def find_version_token(output: str) -> str | None:
    m = _SEARCH_RE.search(output)
    return m.group(0) if m is not None else None


def extract_version_tag(output: str) -> Result[str, ReleaseError]:
    """Derive the release tag from a binary's version output.

    Only the first version-shaped token counts. The tag is normalised to
    ``v<major>.<minor>.<patch>``.
    """
    token = find_version_token(output)
    if token is None:
        snippet = output.strip().splitlines()[0] if output.strip() else "<no output>"
        return Err(
            ReleaseError(
                kind="version_not_found",
                message="no version found in binary output",
                hint=f"Output was: {snippet}",
            )
        )

    version = parse_version(token)
    if version is None:
        return Err(
            ReleaseError(
                kind="version_invalid",
                message=f"invalid semantic version: {token}",
                hint="Expected MAJOR.MINOR.PATCH without leading zeros.",
            )
        )

    return Ok(version.to_tag())
