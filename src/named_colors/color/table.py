"""
table.py
========

Does: Serve case-insensitive lookups against a ColorTable and add new entries
      with duplicate rejection.
Returns: lookup() → Color | None; add() → None (mutates the table in memory).
Used By: api (public façade) and callers holding a table across lookups.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping

from named_colors.color.normalize import normalize_name
from named_colors.color.types import Color
from named_colors.errors import DuplicateColorError

__all__ = ["lookup", "add"]

logger = logging.getLogger(__name__)


def lookup(table: Mapping[str, Color], name: str) -> Color | None:
    """Does: Return the Color stored under `name` (any letter case), or None if absent."""
    return table.get(normalize_name(name))


def add(table: MutableMapping[str, Color], name: str, r: int, g: int, b: int) -> None:
    """
    Does: Insert `name` → (r, g, b) under its normalized key.
    Raises: DuplicateColorError if the key already exists (the entry is left as is),
            ValueError if a channel is not an int in 0–255.
    """
    key = normalize_name(name)
    if key in table:
        raise DuplicateColorError(key)
    table[key] = Color.of(r, g, b)
    logger.debug("[ADD] %r → %s", key, table[key])
