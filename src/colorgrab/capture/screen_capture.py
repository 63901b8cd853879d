# src/colorgrab/capture/screen_capture.py

"""
Reads the color of a single screen pixel using the 'mss' library.

Every call opens its own mss connection and closes it again, so nothing is
held between picks. mss performs a real framebuffer read on Windows, macOS
and X11 alike.
"""

import logging

import mss
import numpy as np
from mss.exception import ScreenShotError

from colorgrab.color import Color
from colorgrab.exceptions import DisplayConnectionError

logger = logging.getLogger(__name__)


def sample_pixel(x: int, y: int) -> Color:
    """
    Returns the color of the pixel at screen coordinate (x, y).

    Args:
        x: Horizontal screen coordinate, within the display bounds.
        y: Vertical screen coordinate, within the display bounds.

    Returns:
        The pixel's Color.

    Raises:
        DisplayConnectionError: If mss cannot connect to the display.
    """
    # mss uses a dictionary format for the capture area.
    monitor = {"top": y, "left": x, "width": 1, "height": 1}

    try:
        with mss.mss() as sct:
            sct_img = sct.grab(monitor)
            # The raw format from mss is BGRA (Blue, Green, Red, Alpha).
            img_bgra = np.array(sct_img)
    except ScreenShotError as e:
        raise DisplayConnectionError(str(e)) from e

    b, g, r = (int(channel) for channel in img_bgra[0, 0, :3])
    logger.debug(f"Sampled pixel at ({x}, {y}): {r}, {g}, {b}")
    return Color(r, g, b)
