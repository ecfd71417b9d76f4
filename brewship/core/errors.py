"""Process exit codes.

Every terminal failure of a release run maps onto one of these codes. The
values are part of the CLI contract and should remain stable:
- 0: Success
- 1: User error (invalid project name, malformed brewship.toml)
- 2: Environment error (missing tool, gh not authenticated, dirty tree)
- 3: Detection error (binary printed no usable version)
- 4: External command error (git/gh failed, archive not written)
- 5: Aborted (operator declined a confirmation)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the brewship CLI."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    DETECTION_ERROR = 3
    EXTERNAL_ERROR = 4
    ABORTED = 5
