# src/colorgrab/app_logic/monitor.py

"""
The hotkey monitor loop.

MonitorLoop runs on a single worker thread and alternates between two phases:
IDLE, where the hotkey is polled every POLL_INTERVAL seconds, and TRIGGERED,
where one color pick is carried out and the loop then waits DEBOUNCE_INTERVAL
seconds before polling again. All waiting goes through the stop event, so
setting it ends the loop promptly.
"""

import logging
import sys
import threading
from enum import Enum, auto
from typing import NamedTuple, Optional, TextIO

from colorgrab.capture.backend import DesktopBackend
from colorgrab.color import Color, ScreenPoint
from colorgrab.exceptions import DisplayConnectionError
from colorgrab.utils.config import DEBOUNCE_INTERVAL, POLL_INTERVAL

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Enumeration for the monitor loop's phases."""
    IDLE = auto()
    TRIGGERED = auto()
    STOPPED = auto()


class PickResult(NamedTuple):
    """Everything produced by one hotkey press."""
    point: ScreenPoint
    color: Color
    hex: str


def format_report(result: PickResult) -> str:
    """Builds the block printed to stdout for a pick."""
    point, color = result.point, result.color
    return (
        "\nColor Grabbed\n"
        f"Coordinates: X = {point.x}, Y = {point.y}\n"
        f"HEX: {result.hex}\n"
        f"RGB: {color.r}, {color.g}, {color.b}"
    )


class MonitorLoop:
    """
    Polls the hotkey and performs the pick-format-print-copy sequence.

    The stop event doubles as the loop's sleep primitive: `wait(timeout)`
    returns early once the event is set.
    """

    def __init__(
        self,
        backend: DesktopBackend,
        stop_event: Optional[threading.Event] = None,
        poll_interval: float = POLL_INTERVAL,
        debounce_interval: float = DEBOUNCE_INTERVAL,
        out: Optional[TextIO] = None,
    ):
        self._backend = backend
        self._stop_event = stop_event if stop_event is not None else threading.Event()
        self._poll_interval = poll_interval
        self._debounce_interval = debounce_interval
        self._out = out
        self.state = LoopState.IDLE
        self.picks = 0
        self.error: Optional[Exception] = None

    @property
    def stop_event(self) -> threading.Event:
        return self._stop_event

    def stop(self) -> None:
        """Requests the loop to finish after its current step."""
        self._stop_event.set()

    def pick(self) -> PickResult:
        """
        Samples the color under the cursor, prints it and copies its HEX code.

        The steps run strictly in order; if sampling fails nothing is printed
        and the clipboard is left untouched.

        Returns:
            PickResult: The cursor position, color and HEX string.

        Raises:
            DisplayConnectionError: If the display cannot be reached.
        """
        point = self._backend.cursor_position()
        color = self._backend.sample_pixel(point)
        result = PickResult(point, color, color.hex)

        out = self._out if self._out is not None else sys.stdout
        print(format_report(result), file=out, flush=True)

        self._backend.write_clipboard(result.hex)
        self.picks += 1
        logger.info(f"Picked {result.hex} at ({point.x}, {point.y})")
        return result

    def step(self) -> None:
        """Runs one iteration: a poll plus the matching wait."""
        if self._backend.is_hotkey_pressed():
            self.state = LoopState.TRIGGERED
            self.pick()
            self._stop_event.wait(self._debounce_interval)
        else:
            self.state = LoopState.IDLE
            self._stop_event.wait(self._poll_interval)

    def run(self) -> None:
        """
        Loops until the stop event is set.

        Any exception ends the loop: it is stored in `self.error` and the stop
        event is set so the owner can shut the process down with a failure
        exit code. A DisplayConnectionError is the expected fatal case.
        """
        logger.debug("Monitor loop started.")
        try:
            while not self._stop_event.is_set():
                self.step()
        except DisplayConnectionError as e:
            # The owner reports this one to the user.
            logger.debug(f"Lost connection to the display: {e}")
            self.error = e
            self._stop_event.set()
        except Exception as e:
            logger.exception("Unexpected error in the monitor loop.")
            self.error = e
            self._stop_event.set()
        finally:
            self.state = LoopState.STOPPED
            logger.debug(f"Monitor loop stopped after {self.picks} pick(s).")
