from __future__ import annotations

import shutil
from collections.abc import Iterable

from brewship.core.result import Err, Ok, Result
from brewship.services.release.config import REQUIRED_TOOLS
from brewship.services.release.errors import ReleaseError
from brewship.services.release.ports import ReleaseHost

_INSTALL_HINTS = {
    "git": "Install git: https://git-scm.com/downloads",
    "gh": "Install GitHub CLI: https://cli.github.com/",
}


def ensure_tools_available(tools: Iterable[str] = REQUIRED_TOOLS) -> Result[None, ReleaseError]:
    """Fail on the first tool not found on PATH."""
    for tool in tools:
        if shutil.which(tool) is None:
            return Err(
                ReleaseError(
                    kind="tool_missing",
                    message=f"{tool}: missing",
                    hint=_INSTALL_HINTS.get(tool),
                )
            )
    return Ok(None)


def ensure_host_authenticated(host: ReleaseHost) -> Result[None, ReleaseError]:
    if not host.is_authenticated():
        return Err(
            ReleaseError(
                kind="gh_auth_required",
                message="gh auth required",
                hint="Run: gh auth login",
            )
        )
    return Ok(None)
