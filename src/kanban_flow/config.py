"""Configuration loading for Kanban Flow MCP.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Optional variables with defaults:
- GITHUB_TOKEN (no default; GitHub tools refuse to run without it)
- GITHUB_OWNER (default: 'your-org')
- GITHUB_DOMAIN (default: 'github.com')
- GITHUB_BASE_BRANCH (default: 'main')
- LOG_LEVEL (default: 'INFO')

Callers may also pass a list of named GitHub configurations per request (one
per organisation or GitHub Enterprise host).  ``select_github_config`` picks
one of them and falls back to the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_GITHUB_DOMAIN,
    DEFAULT_GITHUB_OWNER,
)


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    github_token: str | None
    github_owner: str
    github_domain: str
    base_branch: str
    log_level: str

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  A missing token is not an
        error here; branch tools work offline.  Use ``require_token`` at the
        point where GitHub is contacted.
        """
        load_dotenv()

        github_token = os.getenv("GITHUB_TOKEN") or None
        github_owner = os.getenv("GITHUB_OWNER") or DEFAULT_GITHUB_OWNER
        github_domain = os.getenv("GITHUB_DOMAIN") or DEFAULT_GITHUB_DOMAIN
        base_branch = os.getenv("GITHUB_BASE_BRANCH") or DEFAULT_BASE_BRANCH
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls(
            github_token=github_token,
            github_owner=github_owner,
            github_domain=github_domain,
            base_branch=base_branch,
            log_level=log_level,
        )

    def require_token(self) -> str:
        """Return the GitHub token or raise ``RuntimeError`` if it is unset."""
        if not self.github_token:
            raise RuntimeError("GitHub token not configured: set GITHUB_TOKEN or pass a configuration with a token")
        return self.github_token


def select_github_config(
    base: Config,
    github_configs: Sequence[Mapping[str, object]] | None = None,
    config_id: str | None = None,
) -> Config:
    """Choose the GitHub configuration to use for a request.

    Selection order: the entry whose ``id`` equals ``config_id`` (when given),
    otherwise the entry flagged ``is_default``, otherwise the first entry.
    With no matching entry the environment-backed ``base`` is returned.

    Entries are plain dicts with ``domain``, ``owner`` and ``token`` keys.
    Missing keys inherit from ``base``.
    """
    configs = list(github_configs or [])
    selected: Mapping[str, object] | None = None

    if config_id:
        selected = next((c for c in configs if c.get("id") == config_id), None)
    elif configs:
        selected = next((c for c in configs if c.get("is_default")), configs[0])

    if selected is None:
        return base

    return Config(
        github_token=str(selected.get("token") or "") or None,
        github_owner=str(selected.get("owner") or base.github_owner),
        github_domain=str(selected.get("domain") or base.github_domain),
        base_branch=str(selected.get("base_branch") or base.base_branch),
        log_level=base.log_level,
    )
