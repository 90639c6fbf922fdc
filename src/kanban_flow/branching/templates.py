"""Branch categories and their naming templates.

A template is a fixed sequence of placeholders and literal separators.  It is
rendered segment by segment, so a slug can never be mistaken for a
placeholder.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

TaskType = Literal["feature", "bugfix", "hotfix", "refactor", "docs"]
Priority = Literal["low", "medium", "high"]

TASK_TYPES: tuple[str, ...] = ("feature", "bugfix", "hotfix", "refactor", "docs")
PRIORITIES: tuple[str, ...] = ("low", "medium", "high")
DEFAULT_TASK_TYPE: TaskType = "feature"
DEFAULT_PRIORITY: Priority = "medium"


class Placeholder(enum.Enum):
    PREFIX = "prefix"
    SERVICE = "service"
    TITLE = "title"
    ID = "id"


@dataclass(frozen=True)
class BranchTemplate:
    """A named branch category: its prefix, layout and display label."""

    prefix: str
    pattern: tuple[Placeholder | str, ...]
    description: str

    @property
    def includes_id(self) -> bool:
        return Placeholder.ID in self.pattern

    def pattern_text(self) -> str:
        """Return the pattern in ``{prefix}/{service}-{title}`` notation."""
        return "".join(
            f"{{{segment.value}}}" if isinstance(segment, Placeholder) else segment
            for segment in self.pattern
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "prefix": self.prefix,
            "pattern": self.pattern_text(),
            "description": self.description,
        }


_WITH_ID = (
    Placeholder.PREFIX, "/", Placeholder.SERVICE, "-", Placeholder.TITLE, "-", Placeholder.ID,
)
_WITHOUT_ID = (Placeholder.PREFIX, "/", Placeholder.SERVICE, "-", Placeholder.TITLE)

BRANCH_TEMPLATES: MappingProxyType[str, BranchTemplate] = MappingProxyType(
    {
        "feature": BranchTemplate("feature", _WITH_ID, "New feature development"),
        "bugfix": BranchTemplate("bugfix", _WITH_ID, "Bug fix"),
        "hotfix": BranchTemplate("hotfix", _WITH_ID, "Urgent production fix"),
        "refactor": BranchTemplate("refactor", _WITHOUT_ID, "Code refactoring"),
        "docs": BranchTemplate("docs", _WITHOUT_ID, "Documentation update"),
    }
)


def get_branch_templates() -> MappingProxyType[str, BranchTemplate]:
    """Return the read-only mapping of task type to template."""
    return BRANCH_TEMPLATES


def template_for(task_type: str) -> BranchTemplate:
    """Return the template for ``task_type``, defaulting to ``feature``."""
    return BRANCH_TEMPLATES.get(task_type, BRANCH_TEMPLATES[DEFAULT_TASK_TYPE])
