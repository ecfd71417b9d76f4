"""Error presentation utilities.

Centralized release error formatting and exit code mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from brewship.core.errors import ErrorCode
from brewship.output.console import Style

if TYPE_CHECKING:
    from brewship.output.console import ConsoleProtocol
    from brewship.services.release.errors import ReleaseError

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    if error.kind in {"invalid_name", "config_invalid"}:
        return int(ErrorCode.USER_ERROR)
    match error.category:
        case "precondition":
            return int(ErrorCode.ENV_ERROR)
        case "detection":
            return int(ErrorCode.DETECTION_ERROR)
        case "conflict_abort" | "user_abort":
            return int(ErrorCode.ABORTED)
        case "external_command":
            return int(ErrorCode.EXTERNAL_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.EXTERNAL_ERROR)
