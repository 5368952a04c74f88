"""
errors.py
=========

Does: Define the exception taxonomy raised by table loading, parsing and
      mutation. Every error derives from NamedColorsError and from the closest
      builtin, so callers can branch on "malformed input" vs "I/O failure".
Used By: table.parser, table.sources, color.table, api.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "NamedColorsError",
    "ParseError",
    "DuplicateColorError",
    "CacheIOError",
    "FetchError",
]


# ── Base ─────────────────────────────────────────────────────────────────────
class NamedColorsError(Exception):
    """Base class for every error raised by named_colors."""


# ── Input errors ─────────────────────────────────────────────────────────────
class ParseError(NamedColorsError, ValueError):
    """Raise when table data is not valid JSON or not in the name → {r,g,b} shape.

    `lineno`/`colno` are set when the JSON decoder reports a position.
    The underlying decoder error is chained as `__cause__`.
    """

    def __init__(self, message: str, *, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class DuplicateColorError(NamedColorsError, KeyError):
    """Raise when adding a name that already exists in a table."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        return f"The color '{self.name}' already exists."


# ── I/O errors ───────────────────────────────────────────────────────────────
class CacheIOError(NamedColorsError, OSError):
    """Raise when a table file on disk cannot be read or written.

    Covers the remote table's cache file and the bundled asset; for the
    latter `path` is the resource name inside named_colors/data.
    """

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class FetchError(NamedColorsError, ConnectionError):
    """Raise when the remote table cannot be retrieved."""

    def __init__(self, message: str, url: str, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status
