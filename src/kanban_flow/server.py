"""MCP stdio server entrypoint for Kanban Flow.

The server runs over standard input/output using the Model Context Protocol.
It registers the branch naming tools and the GitHub pull request tools.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import MCP_TRANSPORT
from .state import CONFIG
from .tools import branch_tools, github_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns a JSON-serializable
    dictionary.
    """
    return {
        # Branch naming
        "branch_generate": branch_tools.branch_generate,
        "branch_generate_multi": branch_tools.branch_generate_multi,
        "branch_validate": branch_tools.branch_validate,
        "branch_classify": branch_tools.branch_classify,
        "branch_clean": branch_tools.branch_clean,
        "branch_templates": branch_tools.branch_templates,
        # GitHub
        "github_create_pull_request": github_tools.github_create_pull_request,
        "github_pr_status": github_tools.github_pr_status,
        "github_merge_pull_request": github_tools.github_merge_pull_request,
        "github_get_branch": github_tools.github_get_branch,
        "github_render_pr_body": github_tools.github_render_pr_body,
    }


def main() -> None:
    """Entrypoint for the Kanban Flow MCP server."""
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, CONFIG.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    logger.info("Starting Kanban Flow MCP server")

    mcp = FastMCP("kanban-flow-mcp")

    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)

    logger.info("Registered %d tools", len(dispatch))

    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
