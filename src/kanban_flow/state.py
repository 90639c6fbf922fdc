"""Shared state module for Kanban Flow MCP.

This module provides the single configuration instance used by the tool
modules.  Tool modules should import CONFIG from here instead of loading
their own copy.
"""

from __future__ import annotations

from .config import Config

# Single shared configuration loaded once at import time
CONFIG: Config = Config.load_from_env()
