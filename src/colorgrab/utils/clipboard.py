# src/colorgrab/utils/clipboard.py

"""
A simple wrapper module for the 'pyperclip' library.

pyperclip hands the text to the platform clipboard API or to a helper such as
xclip/pbcopy via stdin, so the payload is never part of a shell command line.
"""

import logging
import pyperclip

# Configure a logger for this module
logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Replaces the clipboard text with `text`.

    This is best-effort: failures are logged and swallowed, never raised to
    the caller and never retried.

    Args:
        text: The string to be copied to the clipboard.
    """
    try:
        pyperclip.copy(text)
        logger.debug(f"Copied '{text}' to the system clipboard.")
    except pyperclip.PyperclipException as e:
        # No clipboard mechanism available (e.g. xclip/xsel missing on Linux).
        logger.warning(f"Failed to copy text to clipboard. pyperclip error: {e}")
    except Exception as e:
        # e.g. OSError from a clipboard helper process
        logger.warning(f"An unexpected error occurred during clipboard operation: {e}")
