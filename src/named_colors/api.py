"""
api.py
======

Does: Public entry points: load a ColorTable from one of the configured sources,
      then look names up or add entries to it.
Returns: ColorTable / Color | None.
Used By: Library callers (re-exported from the package root).

Each load_* call builds a fresh table; callers that want to reuse one across
lookups keep it themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from named_colors import config
from named_colors.color import Color, ColorTable, add, lookup
from named_colors.errors import CacheIOError
from named_colors.table.parser import parse_table
from named_colors.table.sources import (
    Bundled,
    HTTPSession,
    RemoteCached,
    TableSource,
    UserProvided,
    resolve,
)

__all__ = [
    "load_table",
    "load_bundled",
    "load_from_string",
    "load_remote_cached",
    "get_color_by_name",
    "lookup",
    "add",
]

logger = logging.getLogger(__name__)


def load_table(source: TableSource, *, session: HTTPSession | None = None) -> ColorTable:
    """Does: Resolve `source` to bytes and parse them into a new ColorTable."""
    return parse_table(resolve(source, session=session))


def load_bundled() -> ColorTable:
    """Does: Load the table shipped with the package."""
    return load_table(Bundled())


def load_from_string(json_data: str | bytes) -> ColorTable:
    """
    Does: Parse a caller-supplied JSON table (the caller owns its storage).
    Example:
        >>> table = load_from_string('{"blue": {"r": 0, "g": 0, "b": 255}}')
        >>> lookup(table, "BLUE")
        Color(r=0, g=0, b=255)
    """
    return load_table(UserProvided(json_data))


def load_remote_cached(
    url: str | None = None,
    cache_path: Path | str | None = None,
    ttl: float | None = None,
    *,
    session: HTTPSession | None = None,
    on_cache_error: Callable[[CacheIOError], None] | None = None,
) -> ColorTable:
    """
    Does: Load the remote table, served from `cache_path` while it is younger
          than `ttl` seconds and refetched (and re-cached) otherwise.
    Args: Unset arguments fall back to named_colors.config.
    Raises: FetchError when a fetch is needed and fails; ParseError for bad data.
    Blocks on network and filesystem I/O.
    """
    source = RemoteCached(
        url=url if url is not None else config.TABLE_URL,
        cache_path=Path(cache_path) if cache_path is not None else config.default_cache_path(),
        ttl=ttl if ttl is not None else config.CACHE_TTL,
        on_cache_error=on_cache_error,
    )
    return load_table(source, session=session)


def get_color_by_name(
    name: str,
    source: TableSource | None = None,
    *,
    session: HTTPSession | None = None,
) -> Color | None:
    """
    Does: One-shot lookup: load a table (bundled by default) and look `name` up.
    Returns: Color or None when the name is absent.
    Raises: Any load error; a table that fails to load is not treated as empty.
    """
    table = load_table(source if source is not None else Bundled(), session=session)
    return lookup(table, name)
