"""Free text to Git-ref-safe slug conversion."""

from __future__ import annotations

import re

from ..constants import MAX_SLUG_LENGTH
from .transliteration import transliterate

_UNSAFE = re.compile(r"[^a-z0-9]")
_HYPHEN_RUN = re.compile(r"-+")


def clean_for_branch_name(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Turn ``text`` into a lowercase ``[a-z0-9-]`` slug of at most ``max_length`` chars.

    Known Chinese terms are transliterated first (see ``transliterate``).
    The result never starts or ends with a hyphen but may be empty, for
    example when the input is only punctuation.
    """
    slug = transliterate((text or "").lower().strip())
    slug = _UNSAFE.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    slug = slug.strip("-")
    return slug[:max_length].rstrip("-")
