"""GitHub API integration."""

from .api import (
    create_pull_request,
    get_branch,
    get_pull_request_status,
    merge_pull_request,
    summarize_checks,
)
from .auth import get_github_client
from .templates import generate_pr_body

__all__ = [
    "get_github_client",
    "create_pull_request",
    "get_pull_request_status",
    "merge_pull_request",
    "get_branch",
    "summarize_checks",
    "generate_pr_body",
]
