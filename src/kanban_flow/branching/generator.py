"""Branch name generation for kanban tasks.

``generate_branch_name`` turns one task and one service into a branch name;
``generate_multi_service_branches`` does the same for a list of services
while keeping the task type and id suffix identical across them.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from ..constants import (
    BRANCH_SEPARATOR_RESERVE,
    EMPTY_SLUG_PLACEHOLDER,
    ID_SUFFIX_LENGTH,
    MAX_BRANCH_LENGTH,
)
from .classifier import detect_task_type
from .slug import clean_for_branch_name
from .templates import (
    DEFAULT_PRIORITY,
    PRIORITIES,
    TASK_TYPES,
    BranchTemplate,
    Placeholder,
    Priority,
    TaskType,
    template_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchNameRequest:
    """Task fields that feed branch name generation.

    ``task_id`` makes the output deterministic; without it the last digits
    of the current time in milliseconds are used.
    """

    task_title: str
    service_name: str
    priority: Priority = DEFAULT_PRIORITY
    task_type: TaskType | None = None
    task_id: str | None = None
    description: str = ""
    assignee: str | None = None

    def __post_init__(self) -> None:
        if self.priority not in PRIORITIES:
            raise ValueError(f"Unknown priority '{self.priority}'; expected one of {', '.join(PRIORITIES)}")
        if self.task_type is not None and self.task_type not in TASK_TYPES:
            raise ValueError(f"Unknown task type '{self.task_type}'; expected one of {', '.join(TASK_TYPES)}")

    def resolved_task_type(self) -> TaskType:
        return self.task_type or detect_task_type(self.task_title, self.description, self.priority)


@dataclass(frozen=True)
class ServiceBranch:
    service_name: str
    branch_name: str
    task_type: TaskType

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _clock_id() -> str:
    return str(time.time_ns() // 1_000_000)


def id_suffix(task_id: str | None) -> str:
    """Return the identifier suffix for a branch.

    The last characters of ``task_id`` are slugged so that an id with unsafe
    characters cannot produce an invalid ref.
    """
    if not task_id:
        return _clock_id()[-ID_SUFFIX_LENGTH:]
    return clean_for_branch_name(task_id[-ID_SUFFIX_LENGTH:]) or EMPTY_SLUG_PLACEHOLDER


def _render(template: BranchTemplate, values: dict[Placeholder, str]) -> str:
    return "".join(
        values[segment] if isinstance(segment, Placeholder) else segment
        for segment in template.pattern
    )


def render_branch_name(
    template: BranchTemplate,
    clean_service: str,
    clean_title: str,
    suffix: str,
    separator_reserve: int = BRANCH_SEPARATOR_RESERVE,
) -> str:
    """Render ``template`` with already-cleaned values.

    A result longer than ``MAX_BRANCH_LENGTH`` is rendered once more with the
    title cut down to fit.  The output is not validated here.
    """
    values = {
        Placeholder.PREFIX: template.prefix,
        Placeholder.SERVICE: clean_service,
        Placeholder.TITLE: clean_title,
        Placeholder.ID: suffix,
    }
    branch_name = _render(template, values)

    if len(branch_name) > MAX_BRANCH_LENGTH:
        max_title = MAX_BRANCH_LENGTH - len(template.prefix) - len(clean_service) - len(suffix) - separator_reserve
        values[Placeholder.TITLE] = clean_title[:max(max_title, 0)].rstrip("-") or EMPTY_SLUG_PLACEHOLDER
        branch_name = _render(template, values)

    return branch_name


def generate_branch_name(request: BranchNameRequest) -> str:
    """Return the branch name for one task on one service."""
    task_type = request.resolved_task_type()
    template = template_for(task_type)

    clean_service = clean_for_branch_name(request.service_name) or EMPTY_SLUG_PLACEHOLDER
    clean_title = clean_for_branch_name(request.task_title) or EMPTY_SLUG_PLACEHOLDER

    branch_name = render_branch_name(template, clean_service, clean_title, id_suffix(request.task_id))
    logger.debug("Generated branch %s for task type %s", branch_name, task_type)
    return branch_name


def generate_multi_service_branches(
    task_title: str,
    services: Sequence[str],
    *,
    priority: Priority = DEFAULT_PRIORITY,
    task_type: TaskType | None = None,
    task_id: str | None = None,
    description: str = "",
    assignee: str | None = None,
) -> list[ServiceBranch]:
    """Generate one branch per service, in input order.

    The task type is decided once for the whole call.  Without a ``task_id``
    the clock is read once, so every branch carries the same suffix.
    """
    base = BranchNameRequest(
        task_title=task_title,
        service_name="",
        priority=priority,
        task_type=task_type,
        task_id=task_id or _clock_id(),
        description=description,
        assignee=assignee,
    )
    shared_type = base.resolved_task_type()

    branches: list[ServiceBranch] = []
    for service_name in services:
        request = BranchNameRequest(
            task_title=task_title,
            service_name=service_name,
            priority=priority,
            task_type=shared_type,
            task_id=base.task_id,
            description=description,
            assignee=assignee,
        )
        branches.append(
            ServiceBranch(
                service_name=service_name,
                branch_name=generate_branch_name(request),
                task_type=shared_type,
            )
        )
    logger.debug("Generated %d branches for task type %s", len(branches), shared_type)
    return branches
