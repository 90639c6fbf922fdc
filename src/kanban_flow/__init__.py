"""Top‑level package for Kanban Flow MCP.

This package derives Git branch names for kanban tasks and bridges the
resulting branches to GitHub pull requests.  The branch engine lives in
``kanban_flow.branching``; the tools-only MCP server in ``kanban_flow.server``.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
