"""Rule-based task type detection.

Rules are evaluated top to bottom and the first match wins, so a title that
mentions both a bug and a refactor is a ``bugfix``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from .templates import DEFAULT_PRIORITY, DEFAULT_TASK_TYPE, Priority, TaskType

URGENT_KEYWORDS = ("紧急", "修复", "bug", "错误", "urgent", "fix", "error", "critical")
BUG_KEYWORDS = ("修复", "bug", "错误", "问题", "fix", "error", "problem")
REFACTOR_KEYWORDS = ("重构", "优化", "refactor", "optimize", "optimise")
DOCS_KEYWORDS = ("文档", "说明", "readme", "docs", "documentation")


class ClassifierRule(NamedTuple):
    task_type: TaskType
    matches: Callable[[str, str], bool]


def _mentions(keywords: tuple[str, ...]) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


_urgent = _mentions(URGENT_KEYWORDS)
_bug = _mentions(BUG_KEYWORDS)
_refactor = _mentions(REFACTOR_KEYWORDS)
_docs = _mentions(DOCS_KEYWORDS)

RULES: tuple[ClassifierRule, ...] = (
    ClassifierRule("hotfix", lambda text, priority: priority == "high" and _urgent(text)),
    ClassifierRule("bugfix", lambda text, priority: _bug(text)),
    ClassifierRule("refactor", lambda text, priority: _refactor(text)),
    ClassifierRule("docs", lambda text, priority: _docs(text)),
)


def detect_task_type(title: str, description: str = "", priority: Priority = DEFAULT_PRIORITY) -> TaskType:
    """Return the branch category for a task, ``feature`` when no rule matches."""
    text = f"{title or ''} {description or ''}".lower()
    for rule in RULES:
        if rule.matches(text, priority):
            return rule.task_type
    return DEFAULT_TASK_TYPE
