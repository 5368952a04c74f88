"""
color.
=====

Does: Aggregate the color record, name normalization, and the lookup/mutation
      operations performed on an in-memory ColorTable.
Returns: Pure data structures and functions; no I/O.
"""

from .normalize import normalize_name
from .table import add, lookup
from .types import Color, ColorTable, validate_channel

__all__ = [
    "Color",
    "ColorTable",
    "validate_channel",
    "normalize_name",
    "lookup",
    "add",
]
