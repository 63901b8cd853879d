# src/colorgrab/__init__.py

"""
ColorGrab: a small desktop utility that picks the screen color under the cursor.

Press Ctrl+Alt+C anywhere and the pixel under the mouse pointer is printed as
HEX and RGB and copied to the system clipboard as a `#rrggbb` string.
"""

__version__ = "0.1.0"
