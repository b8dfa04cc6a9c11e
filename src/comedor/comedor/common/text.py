"""Text normalization used for dictionary keys and label matching."""

from __future__ import annotations

import unicodedata


def strip_accents(text: str) -> str:
    """Remove combining marks after canonical (NFD) decomposition."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize(value: object) -> str:
    """Lowercase, strip accents, trim.

    Total and idempotent: ``None`` yields ``""``, other non-strings go through
    ``str()`` first. ``normalize(normalize(x)) == normalize(x)``.
    """
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    return strip_accents(text.lower()).strip()
