"""Branch naming tool implementations.

Thin wrappers over ``kanban_flow.branching`` that accept plain keyword
arguments and return JSON-serializable dictionaries.  None of these tools
touch the network.
"""

from __future__ import annotations

from ..branching import (
    BranchNameRequest,
    clean_for_branch_name,
    detect_task_type,
    generate_branch_name,
    generate_multi_service_branches,
    get_branch_templates,
    validate_branch_name,
)


def branch_generate(
    task_title: str,
    service_name: str,
    priority: str = "medium",
    task_type: str | None = None,
    task_id: str | None = None,
    description: str = "",
    assignee: str | None = None,
) -> dict[str, object]:
    """Generate a branch name for one task on one service.

    Returns the branch name, the task type used and the validation result.
    Pass ``task_id`` for a reproducible name.
    """
    request = BranchNameRequest(
        task_title=task_title,
        service_name=service_name,
        priority=priority,
        task_type=task_type,
        task_id=task_id,
        description=description,
        assignee=assignee,
    )
    branch_name = generate_branch_name(request)
    return {
        "branch_name": branch_name,
        "task_type": request.resolved_task_type(),
        "validation": validate_branch_name(branch_name).to_dict(),
    }


def branch_generate_multi(
    task_title: str,
    services: list[str],
    priority: str = "medium",
    task_type: str | None = None,
    task_id: str | None = None,
    description: str = "",
    assignee: str | None = None,
) -> dict[str, object]:
    """Generate one branch per service, all sharing the same task type."""
    branches = generate_multi_service_branches(
        task_title,
        services,
        priority=priority,
        task_type=task_type,
        task_id=task_id,
        description=description,
        assignee=assignee,
    )
    return {"branches": [branch.to_dict() for branch in branches]}


def branch_validate(branch_name: str) -> dict[str, object]:
    """Report every naming rule the branch name breaks."""
    return validate_branch_name(branch_name).to_dict()


def branch_classify(title: str, description: str = "", priority: str = "medium") -> dict[str, str]:
    return {"task_type": detect_task_type(title, description, priority)}


def branch_clean(text: str) -> dict[str, str]:
    return {"slug": clean_for_branch_name(text)}


def branch_templates() -> dict[str, dict[str, str]]:
    """List the branch categories with their prefix, pattern and description."""
    return {key: template.to_dict() for key, template in get_branch_templates().items()}
