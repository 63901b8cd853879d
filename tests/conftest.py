import threading
import types

import numpy as np
import pytest

from colorgrab.capture.backend import DesktopBackend
from colorgrab.color import Color, ScreenPoint
from colorgrab.exceptions import DisplayConnectionError


class FakeClock:
    """
    Stands in for the monitor's stop event. Every wait() advances simulated
    time instead of sleeping, and the event sets itself once `until` seconds
    have passed.
    """

    def __init__(self, until: float):
        self.now = 0.0
        self.until = until
        self.waits = []
        self._set = False

    def is_set(self):
        return self._set

    def set(self):
        self._set = True

    def wait(self, timeout):
        self.waits.append(timeout)
        self.now += timeout
        if self.now >= self.until:
            self._set = True
        return self._set


class FakeBackend(DesktopBackend):
    """A desktop with a scripted screen, cursor, keyboard and clipboard."""

    def __init__(self, cursor=(0, 0), screen=None, hotkey=lambda: False, fail_after=None):
        self.cursor = ScreenPoint(*cursor)
        self.screen = screen or {}
        self.hotkey = hotkey
        self.fail_after = fail_after
        self.clipboard = []
        self.samples = 0
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def cursor_position(self):
        return self.cursor

    def sample_pixel(self, point):
        if self.fail_after is not None and self.samples >= self.fail_after:
            raise DisplayConnectionError("no display")
        self.samples += 1
        return self.screen.get(point, Color(0, 0, 0))

    def is_hotkey_pressed(self):
        return self.hotkey()

    def write_clipboard(self, text):
        self.clipboard.append(text)


@pytest.fixture
def backend():
    return FakeBackend(
        cursor=(100, 200),
        screen={ScreenPoint(100, 200): Color(16, 32, 48)},
    )


class FakeMSS:
    """Replacement for `mss.mss` that returns a single scripted BGRA pixel."""

    def __init__(self, bgra=None, error=None):
        self.bgra = bgra
        self.error = error
        self.grabbed = []
        self.closed = False

    def __call__(self):
        if self.error:
            raise self.error
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def grab(self, monitor):
        self.grabbed.append(monitor)
        return np.array([[self.bgra]], dtype=np.uint8)


class FakeHotKey:
    @staticmethod
    def parse(keys):
        return [part.strip("<>") for part in keys.split("+")]


class FakeKeyboardListener:
    """
    Mimics pynput.keyboard.Listener with string keys. Left/right modifier
    names collapse to the plain modifier, letters are lowercased.
    """

    CANONICAL = {
        "ctrl_l": "ctrl", "ctrl_r": "ctrl",
        "alt_l": "alt", "alt_r": "alt",
        "shift_l": "shift", "shift_r": "shift",
    }

    def __init__(self, on_press, on_release, becomes_ready=True):
        self.on_press = on_press
        self.on_release = on_release
        self._alive = False
        self._ready = threading.Event()
        self._becomes_ready = becomes_ready

    def canonical(self, key):
        return self.CANONICAL.get(key, key.lower())

    def start(self):
        if self._becomes_ready:
            self._alive = True
            self._ready.set()
        # Otherwise the thread "crashes" before it is ready: it is not alive
        # and wait() never returns.

    def wait(self):
        self._ready.wait()

    def is_alive(self):
        return self._alive

    def stop(self):
        self._alive = False

    def crash(self):
        self._alive = False


def fake_keyboard(becomes_ready=True):
    """A stand-in for the `pynput.keyboard` module."""
    def listener(on_press, on_release):
        return FakeKeyboardListener(on_press, on_release, becomes_ready=becomes_ready)

    return types.SimpleNamespace(HotKey=FakeHotKey, Listener=listener)
