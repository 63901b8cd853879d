# src/colorgrab/capture/hotkey.py

"""
Global hotkey detection.

HotkeyDetector answers "is the combination held right now?" as a level-triggered,
non-blocking query. It is fed key-down/key-up events by HotkeyListener, which
wraps a pynput keyboard listener. Keys are only observed, never suppressed, so
other applications still receive the key press.
"""

import logging
import threading

from colorgrab.exceptions import DisplayConnectionError

logger = logging.getLogger(__name__)

# Seconds between liveness checks while waiting for the listener to come up.
LISTENER_START_POLL = 0.05


class HotkeyDetector:
    """
    Tracks which keys are currently held and matches them against a combination.

    Keys can be any hashable value as long as `press`/`release` receive the
    same representation as the combination (pynput canonical keys in
    production).
    """

    def __init__(self, combination):
        self._combination = frozenset(combination)
        if not self._combination:
            raise ValueError("Hotkey combination must contain at least one key")
        self._held = set()
        self._lock = threading.Lock()

    @property
    def combination(self) -> frozenset:
        return self._combination

    def press(self, key) -> None:
        with self._lock:
            self._held.add(key)

    def release(self, key) -> None:
        with self._lock:
            self._held.discard(key)

    def is_pressed(self) -> bool:
        """True only while every key of the combination is held down."""
        with self._lock:
            return self._combination <= self._held


class HotkeyListener:
    """
    Connects a HotkeyDetector to pynput's global keyboard listener.

    pynput is imported lazily because importing it fails outright when no
    display is available; that failure is reported as a DisplayConnectionError.
    """

    def __init__(self, hotkey: str, keyboard=None):
        """
        Args:
            hotkey (str): Combination in pynput syntax, e.g. '<ctrl>+<alt>+c'.
            keyboard: Module providing `HotKey` and `Listener`. Defaults to
                      `pynput.keyboard`.
        """
        if keyboard is None:
            try:
                from pynput import keyboard
            except ImportError as e:
                raise DisplayConnectionError(f"Keyboard backend unavailable: {e}") from e

        self._keyboard = keyboard
        self.hotkey = hotkey
        self.detector = HotkeyDetector(keyboard.HotKey.parse(hotkey))
        self._listener = None

    def _on_press(self, key):
        # Canonicalize the same way GlobalHotKeys does, so ctrl_l/ctrl_r both
        # count as ctrl and 'C' counts as 'c'.
        self.detector.press(self._listener.canonical(key))

    def _on_release(self, key):
        self.detector.release(self._listener.canonical(key))

    def start(self) -> None:
        """
        Starts listening for key events in pynput's background thread.

        Returns once the listener is ready.

        Raises:
            DisplayConnectionError: If the listener dies before it is ready.
        """
        self._listener = self._keyboard.Listener(
            on_press=self._on_press,
            on_release=self._on_release,
        )
        try:
            self._listener.start()
        except Exception as e:
            # Xlib raises its own error types when the X server refuses us.
            raise DisplayConnectionError(f"Could not start keyboard listener: {e}") from e

        # Listener.wait() never returns if the listener fails before it is
        # ready, so wait on a helper thread and watch the listener meanwhile.
        waiter = threading.Thread(target=self._listener.wait, name="colorgrab-listener-wait", daemon=True)
        waiter.start()
        while waiter.is_alive():
            if not self._listener.is_alive():
                raise DisplayConnectionError("Keyboard listener stopped during startup")
            waiter.join(LISTENER_START_POLL)
        logger.info(f"Listening for hotkey: {self.hotkey}")

    def stop(self) -> None:
        if self._listener is not None and self._listener.is_alive():
            self._listener.stop()
            logger.info("Keyboard listener stopped.")

    def is_pressed(self) -> bool:
        """
        Raises:
            DisplayConnectionError: If the listener thread is not running, since
                no further key events could ever arrive.
        """
        if self._listener is None or not self._listener.is_alive():
            raise DisplayConnectionError("Keyboard listener is not running")
        return self.detector.is_pressed()
