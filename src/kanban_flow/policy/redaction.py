"""Secret redaction for GitHub error output.

GitHub error bodies and transport exceptions are logged and re-raised to the
tool caller.  Before that happens, the configured token and anything shaped
like a GitHub credential is replaced with ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

REDACTED = "<REDACTED>"

_TOKEN_PATTERNS = [
    # Classic and fine-grained personal access tokens, app and OAuth tokens
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    # Authorization header values echoed back in errors
    re.compile(r"(Bearer|token)\s+[A-Za-z0-9\-\._~\+/]{16,}=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str | None] = ()) -> str:
    """Return ``text`` with explicit secrets and GitHub token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: secret strings to redact verbatim; empty values are ignored
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, REDACTED)
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub(REDACTED, redacted)
    return redacted
