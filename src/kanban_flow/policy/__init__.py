"""Policy utilities for Kanban Flow MCP."""

from .redaction import redact_secrets

__all__ = ["redact_secrets"]
