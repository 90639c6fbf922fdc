"""GitHub tool implementations.

Wraps GitHub API interactions for opening, inspecting and merging pull
requests of a service's repository.  Delegates to the ``github.api`` module,
which handles authentication and HTTP calls.

Every tool that contacts GitHub accepts optional ``github_configs`` (named
owner/domain/token entries) and ``config_id`` to target a configuration other
than the one loaded from the environment.
"""

from __future__ import annotations

from ..branching import validate_branch_name
from ..config import Config, select_github_config
from ..github import api as github_api
from ..github.templates import generate_pr_body
from ..state import CONFIG


def _config_for(github_configs: list[dict[str, object]] | None, config_id: str | None) -> Config:
    config = select_github_config(CONFIG, github_configs, config_id)
    config.require_token()
    return config


def github_create_pull_request(
    service_name: str,
    title: str,
    head: str,
    base: str | None = None,
    body: str = "",
    github_configs: list[dict[str, object]] | None = None,
    config_id: str | None = None,
) -> dict[str, object]:
    """Open a pull request for a task branch.

    The head branch must pass branch name validation; otherwise a
    ``ValueError`` listing every violation is raised before GitHub is
    contacted.  ``base`` defaults to the configured base branch.
    """
    validation = validate_branch_name(head)
    if not validation.is_valid:
        raise ValueError(f"Invalid head branch '{head}': {'; '.join(validation.errors)}")

    config = _config_for(github_configs, config_id)
    return github_api.create_pull_request(
        config,
        service_name=service_name,
        title=title,
        head=head,
        base=base or config.base_branch,
        body=body,
    )


def github_pr_status(
    service_name: str,
    pull_request_url: str,
    github_configs: list[dict[str, object]] | None = None,
    config_id: str | None = None,
) -> dict[str, object]:
    """Get merge state and CI check summary for a pull request URL."""
    config = _config_for(github_configs, config_id)
    return github_api.get_pull_request_status(config, service_name, pull_request_url)


def github_merge_pull_request(
    service_name: str,
    pull_number: int,
    merge_method: str = "merge",
    github_configs: list[dict[str, object]] | None = None,
    config_id: str | None = None,
) -> dict[str, object]:
    config = _config_for(github_configs, config_id)
    return github_api.merge_pull_request(config, service_name, pull_number, merge_method)


def github_get_branch(
    service_name: str,
    branch_name: str,
    github_configs: list[dict[str, object]] | None = None,
    config_id: str | None = None,
) -> dict[str, object]:
    """Look up a branch; returns ``{"exists": False}`` when it is missing."""
    config = _config_for(github_configs, config_id)
    branch = github_api.get_branch(config, service_name, branch_name)
    if branch is None:
        return {"exists": False}
    return {"exists": True, "name": branch.get("name"), "sha": (branch.get("commit") or {}).get("sha")}


def github_render_pr_body(
    summary: str,
    task_type: str,
    priority: str,
    branch_name: str,
    services: list[str] | None = None,
    assignee: str | None = None,
    task_url: str | None = None,
) -> dict[str, str]:
    """Render a pull request body for a task branch without calling GitHub."""
    return {
        "body": generate_pr_body(
            summary,
            task_type=task_type,
            priority=priority,
            branch_name=branch_name,
            services=services or (),
            assignee=assignee,
            task_url=task_url,
        )
    }
