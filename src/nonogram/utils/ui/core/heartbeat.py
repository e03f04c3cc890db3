"""
Spinner shown while the grid is rendered off-screen.

When the grid does not fit the terminal nothing is visible until the final
flush, so a single spinning character tells the user the program is still
working.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .terminal import TerminalDevice

logger = logging.getLogger(__name__)

SPINNER_FRAMES = "/-\\|"


class Heartbeat:
    """Low-frequency spinner running on a daemon thread."""

    def __init__(
        self,
        device: TerminalDevice,
        interval: float = 0.5,
        frames: str = SPINNER_FRAMES,
    ):
        """
        Initialize the heartbeat.

        Args:
            device: Device the spinner is written to
            interval: Seconds between frames
            frames: Characters cycled through
        """
        self._device = device
        self._interval = interval
        self._frames = frames
        self._frame_idx = 0
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _loop(self) -> None:
        while not self._stop_event.wait(self._interval):
            self._frame_idx = (self._frame_idx + 1) % len(self._frames)
            try:
                self._device.write_raw(self._frames[self._frame_idx] + "\b")
            except (OSError, ValueError):
                logger.debug("Heartbeat output failed, stopping", exc_info=True)
                return

    def start(self) -> None:
        """Start spinning."""
        with self._lock:
            if self._thread is not None:
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._loop, name="nonogram-heartbeat", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop spinning and erase the spinner."""
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._thread = None
            self._stop_event.set()

        thread.join(timeout=max(self._interval * 2, 1.0))
        try:
            self._device.write_raw(" \b")
        except (OSError, ValueError):
            logger.debug("Could not erase heartbeat", exc_info=True)
