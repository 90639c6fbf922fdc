"""Tool module exports for Kanban Flow MCP.

This package provides one submodule per group of MCP tools.  Each submodule
exposes plain functions that the server registers by name.

Usage:

    from kanban_flow.tools import branch_tools
    branch_tools.branch_generate(task_title="Fix login", service_name="auth")
"""

from . import (
    branch_tools,  # noqa: F401
    github_tools,  # noqa: F401
)

__all__ = [
    "branch_tools",
    "github_tools",
]
