"""Templates for generating GitHub PR bodies from kanban tasks."""

from __future__ import annotations

from collections.abc import Sequence


def generate_pr_body(
    summary: str,
    task_type: str,
    priority: str,
    branch_name: str,
    services: Sequence[str] = (),
    assignee: str | None = None,
    task_url: str | None = None,
) -> str:
    """Return a Markdown pull request body for a task branch.

    The body carries a Summary section followed by a Task section listing
    type, priority, branch, assignee and the services touched by the task.
    A ``task_url`` is appended as a link back to the board when given.
    """
    body_parts: list[str] = []
    body_parts.append("### Summary\n")
    body_parts.append((summary or "").strip() + "\n\n")
    body_parts.append("### Task\n")
    body_parts.append(f"- Type: `{task_type}`\n")
    body_parts.append(f"- Priority: `{priority}`\n")
    body_parts.append(f"- Branch: `{branch_name}`\n")
    if assignee:
        body_parts.append(f"- Assignee: @{assignee.lstrip('@')}\n")
    if services:
        body_parts.append("\n### Services\n")
        for service in services:
            body_parts.append(f"- {service}\n")
    if task_url:
        body_parts.append(f"\nTask: {task_url}\n")
    return "".join(body_parts)
