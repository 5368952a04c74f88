"""
types.py
========

Does: Define the Color record (an immutable RGB triple with byte-range channels)
      and the ColorTable alias.
Returns: Color, ColorTable, validate_channel().
Used By: table.parser (building tables), color.table (lookup/add), api.
"""

from __future__ import annotations

from typing import NamedTuple

import webcolors

__all__ = ["Color", "ColorTable", "validate_channel"]
__docformat__ = "google"


def validate_channel(value: object, channel: str = "value") -> int:
    """Does: Check that `value` is an int in 0–255 (bools rejected) and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{channel} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{channel} out of range 0-255: {value}")
    return value


class Color(NamedTuple):
    """An RGB color. Compares equal to the plain (r, g, b) tuple."""

    r: int
    g: int
    b: int

    @classmethod
    def of(cls, r: object, g: object, b: object) -> Color:
        """Does: Build a Color after validating each channel."""
        return cls(
            validate_channel(r, "r"),
            validate_channel(g, "g"),
            validate_channel(b, "b"),
        )

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Does: Parse '#rgb' or '#rrggbb' into a Color (raises ValueError)."""
        r, g, b = webcolors.hex_to_rgb(value)
        return cls(r, g, b)

    @property
    def hex(self) -> str:
        """Lowercase '#rrggbb' form."""
        return webcolors.rgb_to_hex((self.r, self.g, self.b))

    def as_dict(self) -> dict[str, int]:
        """Does: Return the {"r", "g", "b"} JSON shape used by table files."""
        return {"r": self.r, "g": self.g, "b": self.b}


# Keys are normalized names (see color.normalize.normalize_name)
ColorTable = dict[str, Color]
