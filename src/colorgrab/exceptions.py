# src/colorgrab/exceptions.py

"""
Exception types raised by ColorGrab.

Only one failure is considered fatal: losing (or never obtaining) a connection
to the display / windowing system. Everything else is either impossible given
internally produced inputs or handled best-effort where it occurs.
"""


class ColorGrabError(Exception):
    """Base class for all ColorGrab errors."""


class DisplayConnectionError(ColorGrabError):
    """Raised when the display or windowing system cannot be reached."""
