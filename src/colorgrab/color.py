# src/colorgrab/color.py

"""
Value types and the HEX formatter.

A pick event produces a ScreenPoint (where the cursor was), a Color (what the
pixel looked like) and a HEX string (what ends up on the clipboard). None of
these are retained after the event.
"""

from typing import NamedTuple


class ScreenPoint(NamedTuple):
    """Screen pixel coordinates of the mouse cursor."""
    x: int
    y: int


class Color(NamedTuple):
    """An RGB color, each channel in the range [0, 255]."""
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Formats three color channels as a lowercase `#rrggbb` string.

    No validation is performed; callers are expected to pass values in
    [0, 255]. Anything else yields meaningless digits.

    Args:
        r: Red channel.
        g: Green channel.
        b: Blue channel.

    Returns:
        A 7-character string, e.g. ``rgb_to_hex(16, 32, 48) == '#102030'``.
    """
    return f"#{r:02x}{g:02x}{b:02x}"
