from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "tool_missing",
    "gh_auth_required",
    "not_a_repo",
    "invalid_name",
    "binary_missing",
    "dirty_tree",
    "config_invalid",
    "version_not_found",
    "version_invalid",
    "conflict_declined",
    "formula_declined",
    "sanity_declined",
    "command_failed",
    "package_failed",
    "commit_failed",
    "push_failed",
]

ReleaseErrorCategory = Literal[
    "precondition",
    "detection",
    "conflict_abort",
    "external_command",
    "user_abort",
]

_CATEGORIES: dict[str, ReleaseErrorCategory] = {
    "tool_missing": "precondition",
    "gh_auth_required": "precondition",
    "not_a_repo": "precondition",
    "invalid_name": "precondition",
    "binary_missing": "precondition",
    "dirty_tree": "precondition",
    "config_invalid": "precondition",
    "version_not_found": "detection",
    "version_invalid": "detection",
    "conflict_declined": "conflict_abort",
    "formula_declined": "user_abort",
    "sanity_declined": "user_abort",
    "command_failed": "external_command",
    "package_failed": "external_command",
    "commit_failed": "external_command",
    "push_failed": "external_command",
}


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    @property
    def category(self) -> ReleaseErrorCategory:
        return _CATEGORIES[self.kind]

    @property
    def is_abort(self) -> bool:
        """True when the operator declined a confirmation."""
        return self.category in {"conflict_abort", "user_abort"}
