"""
config.py
=========

Does: Hold env-overridable defaults for the remote table source and its cache.
Used By: table.sources and api.load_remote_cached().
"""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "TABLE_NAME",
    "TABLE_URL",
    "CACHE_DIR",
    "CACHE_TTL",
    "FETCH_TIMEOUT",
    "default_cache_path",
]

# ── Config (env-overridable) ─────────────────────────────────────────────────
TABLE_NAME = "named_colors"
TABLE_URL = os.getenv(
    "NAMED_COLORS_URL",
    "https://raw.githubusercontent.com/named-colors/named-colors/master/assets/named_colors.json",
)
CACHE_DIR = Path(os.getenv("NAMED_COLORS_CACHE_DIR", "cache"))
CACHE_TTL = float(os.getenv("NAMED_COLORS_TTL", str(24 * 60 * 60)))  # seconds
FETCH_TIMEOUT = float(os.getenv("NAMED_COLORS_TIMEOUT", "10"))  # seconds


def default_cache_path(table_name: str = TABLE_NAME) -> Path:
    """Does: Return <CACHE_DIR>/<table_name>.json (relative paths resolve against cwd)."""
    return CACHE_DIR / f"{table_name}.json"
