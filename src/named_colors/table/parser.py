"""
parser.py
=========

Does: Decode a raw table blob (bundled, user-supplied or downloaded) into a
      ColorTable, validating the name → {"r", "g", "b"} shape.
Returns: parse_table() → dict[str, Color] keyed by normalized names.
Raises: ParseError for any syntax or structural problem; never touches disk or network.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from named_colors.color.normalize import normalize_name
from named_colors.color.types import Color, ColorTable, validate_channel
from named_colors.errors import ParseError

__all__ = ["parse_table"]

logger = logging.getLogger(__name__)

_CHANNELS = ("r", "g", "b")


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, str):
        return raw
    try:
        # utf-8-sig drops a leading BOM if present
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Table is not valid UTF-8: {e}") from e


def _parse_entry(name: str, entry: Any) -> Color:
    """Does: Validate one {"r","g","b"} object and build its Color."""
    if not isinstance(entry, dict):
        raise ParseError(f"{name!r}: expected object, got {type(entry).__name__}")
    missing = [c for c in _CHANNELS if c not in entry]
    if missing:
        raise ParseError(f"{name!r}: missing channel(s) {', '.join(missing)}")
    try:
        return Color(*(validate_channel(entry[c], c) for c in _CHANNELS))
    except ValueError as e:
        raise ParseError(f"{name!r}: {e}") from e


def parse_table(raw: str | bytes) -> ColorTable:
    """
    Does: Parse JSON text/bytes into a ColorTable.
    Returns: {normalized name: Color}; extra keys inside an entry are ignored.
    Raises: ParseError (with lineno/colno for JSON syntax errors).
    """
    text = _decode(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", lineno=e.lineno, colno=e.colno) from e
    except (ValueError, RecursionError) as e:
        # int digit limit, nesting too deep
        raise ParseError(f"Cannot decode JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object at top level, got {type(data).__name__}")

    table: ColorTable = {}
    for name, entry in data.items():
        key = normalize_name(name)
        if key in table:
            raise ParseError(f"Duplicate color name after normalization: {name!r} → {key!r}")
        table[key] = _parse_entry(name, entry)

    logger.debug("Parsed color table with %d entries", len(table))
    return table
