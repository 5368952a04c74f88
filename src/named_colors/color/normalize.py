"""
normalize
=========

Does: Turn a user-facing color name into the key stored in a ColorTable.
      Lookup, insertion and parsing all go through normalize_name() so the
      three paths cannot disagree.
Returns: normalize_name().
"""

from __future__ import annotations

import unicodedata

__all__ = ["normalize_name"]


def normalize_name(name: str) -> str:
    """
    Does: NFKC fold, strip surrounding whitespace, lowercase.
    Returns: Table key (may be empty if `name` is blank).
    """
    if not isinstance(name, str):
        raise TypeError(f"color name must be str, got {type(name).__name__}")
    return unicodedata.normalize("NFKC", name).strip().lower()
