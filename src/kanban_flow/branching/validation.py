"""Git ref-name checks for generated or user-supplied branch names."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..constants import MAX_BRANCH_LENGTH, MIN_BRANCH_LENGTH

TOO_LONG = "too long"
TOO_SHORT = "too short"
INVALID_CHARACTERS = "invalid characters"
EDGE_HYPHEN = "cannot start/end with hyphen"
CONSECUTIVE_SEPARATORS = "cannot contain consecutive slash or hyphen"
EDGE_SLASH = "cannot start/end with slash"

_ALLOWED = re.compile(r"[a-zA-Z0-9/_-]+")


@dataclass
class BranchValidation:
    """Outcome of ``validate_branch_name``; errors are in check order."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"is_valid": self.is_valid, "errors": list(self.errors)}


def validate_branch_name(branch_name: str) -> BranchValidation:
    """Check ``branch_name`` against the naming rules and report every violation.

    All checks run, so a name with several problems lists each of them.  The
    name is never modified.
    """
    errors: list[str] = []

    if len(branch_name) > MAX_BRANCH_LENGTH:
        errors.append(TOO_LONG)
    if len(branch_name) < MIN_BRANCH_LENGTH:
        errors.append(TOO_SHORT)
    if not _ALLOWED.fullmatch(branch_name):
        errors.append(INVALID_CHARACTERS)
    if branch_name.startswith("-") or branch_name.endswith("-"):
        errors.append(EDGE_HYPHEN)
    if "//" in branch_name or "--" in branch_name:
        errors.append(CONSECUTIVE_SEPARATORS)
    if branch_name.startswith("/") or branch_name.endswith("/"):
        errors.append(EDGE_SLASH)

    return BranchValidation(is_valid=not errors, errors=errors)
