# src/colorgrab/capture/backend.py

"""
The desktop capability interface.

Everything ColorGrab needs from the operating system is reached through a
DesktopBackend: where the cursor is, what color a pixel has, whether the
hotkey is held, and writing text to the clipboard. SystemBackend is the real
implementation, built on pynput, mss and pyperclip; tests substitute their own.
"""

import logging
from abc import ABC, abstractmethod

from colorgrab.capture.hotkey import HotkeyListener
from colorgrab.capture.screen_capture import sample_pixel
from colorgrab.color import Color, ScreenPoint
from colorgrab.exceptions import DisplayConnectionError
from colorgrab.utils.clipboard import copy_to_clipboard
from colorgrab.utils.config import HOTKEY_COMBINATION

logger = logging.getLogger(__name__)


class DesktopBackend(ABC):
    """Abstract access to cursor, screen, keyboard and clipboard."""

    def start(self) -> None:
        """Acquires any long-lived resources. Called once before polling."""

    def stop(self) -> None:
        """Releases whatever start() acquired."""

    @abstractmethod
    def cursor_position(self) -> ScreenPoint:
        ...

    @abstractmethod
    def sample_pixel(self, point: ScreenPoint) -> Color:
        ...

    @abstractmethod
    def is_hotkey_pressed(self) -> bool:
        ...

    @abstractmethod
    def write_clipboard(self, text: str) -> None:
        ...


class SystemBackend(DesktopBackend):
    """DesktopBackend for the local desktop session."""

    def __init__(self, hotkey: str = HOTKEY_COMBINATION, hotkey_listener: HotkeyListener = None, mouse_controller=None):
        """
        Args:
            hotkey (str): Combination in pynput syntax.
            hotkey_listener (HotkeyListener, optional): Listener to use instead
                of one built on pynput's keyboard module.
            mouse_controller (optional): Object with a `position` attribute,
                used instead of `pynput.mouse.Controller()`.
        """
        self._hotkey_listener = hotkey_listener if hotkey_listener is not None else HotkeyListener(hotkey)
        if mouse_controller is None:
            mouse_controller = self._create_mouse_controller()
        self._mouse = mouse_controller

    @staticmethod
    def _create_mouse_controller():
        try:
            from pynput import mouse
        except ImportError as e:
            raise DisplayConnectionError(f"Mouse backend unavailable: {e}") from e
        try:
            return mouse.Controller()
        except Exception as e:
            # The Xlib backend connects eagerly and raises its own error types.
            raise DisplayConnectionError(f"Could not open mouse controller: {e}") from e

    def start(self) -> None:
        self._hotkey_listener.start()

    def stop(self) -> None:
        self._hotkey_listener.stop()

    def cursor_position(self) -> ScreenPoint:
        try:
            x, y = self._mouse.position
        except Exception as e:
            # e.g. Xlib's ConnectionClosedError once the X server goes away
            raise DisplayConnectionError(f"Could not read cursor position: {e}") from e
        return ScreenPoint(int(x), int(y))

    def sample_pixel(self, point: ScreenPoint) -> Color:
        return sample_pixel(point.x, point.y)

    def is_hotkey_pressed(self) -> bool:
        return self._hotkey_listener.is_pressed()

    def write_clipboard(self, text: str) -> None:
        copy_to_clipboard(text)


def create_backend() -> DesktopBackend:
    """
    Returns the backend for the current platform.

    pynput, mss and pyperclip each pick their native implementation
    internally, so a single backend class covers Windows, macOS and X11.

    Raises:
        DisplayConnectionError: If the windowing system cannot be reached.
    """
    backend = SystemBackend()
    logger.debug(f"Using {type(backend).__name__}")
    return backend
