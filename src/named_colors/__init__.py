"""
named_colors
============

Does: Resolve human-readable color names ("red", "Sky Blue") to RGB triples
      from a bundled, user-supplied or remotely fetched (and locally cached)
      name → color table.
Returns: Public API: load_* functions, lookup(), add(), Color and the error types.

Example:
    >>> from named_colors import load_bundled, lookup
    >>> lookup(load_bundled(), "Red")
    Color(r=255, g=0, b=0)
"""

from .api import (
    add,
    get_color_by_name,
    load_bundled,
    load_from_string,
    load_remote_cached,
    load_table,
    lookup,
)
from .color import Color, ColorTable, normalize_name
from .errors import (
    CacheIOError,
    DuplicateColorError,
    FetchError,
    NamedColorsError,
    ParseError,
)
from .table import Bundled, Remote, RemoteCached, TableSource, UserProvided, parse_table

__all__ = [
    # loading
    "load_bundled",
    "load_from_string",
    "load_remote_cached",
    "load_table",
    "parse_table",
    "Bundled",
    "UserProvided",
    "Remote",
    "RemoteCached",
    "TableSource",
    # lookup / mutation
    "lookup",
    "add",
    "get_color_by_name",
    "normalize_name",
    "Color",
    "ColorTable",
    # errors
    "NamedColorsError",
    "ParseError",
    "DuplicateColorError",
    "CacheIOError",
    "FetchError",
]
__docformat__ = "google"
