#!/usr/bin/env python3
# src/colorgrab/main.py

"""
Main entry point for the ColorGrab application.

This script prints the usage banner, connects to the desktop, and runs the
hotkey monitor loop on a background thread until the user stops it with
Ctrl+C or the loop fails.
"""

import logging
import sys
import threading

from colorgrab.app_logic.monitor import MonitorLoop
from colorgrab.capture.backend import create_backend
from colorgrab.exceptions import DisplayConnectionError
from colorgrab.utils.config import BANNER_LINES, LOG_LEVEL

# How often the main thread wakes up while waiting, so Ctrl+C is noticed.
JOIN_TIMEOUT = 0.5

EXIT_OK = 0
EXIT_FAILURE = 1


def setup_logging():
    """Configures basic logging for the application."""
    # stdout is reserved for the banner and pick reports.
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    # Reduce verbosity from libraries that use logging
    logging.getLogger("pynput").setLevel(logging.WARNING)
    logging.info("ColorGrab application starting...")


def _report_failure(e: Exception) -> int:
    if isinstance(e, DisplayConnectionError):
        print(f"Cannot open display: {e}", file=sys.stderr)
    else:
        print(f"Unexpected error: {e}", file=sys.stderr)
    return EXIT_FAILURE


def main() -> int:
    """Main execution function for ColorGrab. Returns the process exit code."""
    setup_logging()

    for line in BANNER_LINES:
        print(line)
    sys.stdout.flush()

    try:
        backend = create_backend()
        backend.start()
    except DisplayConnectionError as e:
        return _report_failure(e)

    monitor = MonitorLoop(backend)
    worker = threading.Thread(target=monitor.run, name="colorgrab-monitor", daemon=True)
    worker.start()

    try:
        # Join in slices; a plain join() would swallow Ctrl+C on some platforms.
        while worker.is_alive():
            worker.join(JOIN_TIMEOUT)
    except KeyboardInterrupt:
        logging.info("Stopped by user (Ctrl+C).")
        monitor.stop()
        worker.join()
    finally:
        backend.stop()
        logging.info("ColorGrab application has shut down.")

    if monitor.error is not None:
        return _report_failure(monitor.error)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
