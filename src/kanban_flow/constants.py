"""Global constants for Kanban Flow MCP.

These values serve as defaults for branch naming limits, GitHub access and
logging.  Override them through environment variables rather than editing
this module.
"""

import os

# Branch naming limits
MAX_BRANCH_LENGTH = int(os.environ.get("MAX_BRANCH_LENGTH", 100))
MIN_BRANCH_LENGTH = int(os.environ.get("MIN_BRANCH_LENGTH", 3))
MAX_SLUG_LENGTH = int(os.environ.get("MAX_SLUG_LENGTH", 50))
# Room kept for the literal separators when a long title is truncated
BRANCH_SEPARATOR_RESERVE = int(os.environ.get("BRANCH_SEPARATOR_RESERVE", 10))
ID_SUFFIX_LENGTH = int(os.environ.get("ID_SUFFIX_LENGTH", 6))

# Slug used when free text cleans down to nothing
EMPTY_SLUG_PLACEHOLDER = "item"

# GitHub
GITHUB_TIMEOUT_S = float(os.environ.get("GITHUB_TIMEOUT_S", 10.0))
DEFAULT_GITHUB_DOMAIN = "github.com"
DEFAULT_GITHUB_OWNER = "your-org"
DEFAULT_BASE_BRANCH = "main"

# Transport
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")
