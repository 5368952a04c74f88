"""
table package.
=============

Does: Obtain raw color tables (bundled, user-supplied, remote with cache) and
      parse them into ColorTable mappings.
"""

from .parser import parse_table
from .sources import (
    Bundled,
    Remote,
    RemoteCached,
    TableSource,
    UserProvided,
    fetch_table,
    is_cache_fresh,
    resolve,
)

__all__ = [
    "parse_table",
    "Bundled",
    "UserProvided",
    "Remote",
    "RemoteCached",
    "TableSource",
    "resolve",
    "fetch_table",
    "is_cache_fresh",
]

__docformat__ = "google"
