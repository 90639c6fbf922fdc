"""Authentication helpers for the GitHub API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..config import Config
from ..constants import GITHUB_TIMEOUT_S


def get_github_client(config: Config) -> httpx.Client:
    """Return an httpx client with the Authorization header set.

    Raises ``RuntimeError`` when the configuration carries no token.
    """
    return httpx.Client(
        headers={
            "Authorization": f"Bearer {config.require_token()}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": f"kanban-flow-mcp/{__version__}",
        },
        timeout=GITHUB_TIMEOUT_S,
    )
