# src/colorgrab/utils/config.py

"""
Application constants.

The hotkey, loop timings and log level are fixed; ColorGrab reads no config
file, command line flags or environment variables.
"""

import logging

APP_NAME = "colorgrab"

# pynput hotkey syntax, see pynput.keyboard.HotKey.parse
HOTKEY_COMBINATION = '<ctrl>+<alt>+c'

# Seconds between hotkey polls while idle.
POLL_INTERVAL = 0.01
# Seconds to wait after a pick so a single key press isn't picked twice.
DEBOUNCE_INTERVAL = 0.3

LOG_LEVEL = logging.WARNING

BANNER_LINES = (
    "Point your mouse cursor at anywhere on the screen, press Ctrl+Alt+C",
    "The HEX color code will be copied to your clipboard (and printed here)",
)
