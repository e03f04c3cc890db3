"""
Drift-compensated pacing for animated output.

Sleeping for a few milliseconds at a time is imprecise: most sleeps run a
little long. PacingWaiter remembers how much longer than requested every
sleep actually took and spends that surplus on later waits, so a long run of
waits takes as long as the sum of the requested delays.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol


class Waiter(Protocol):
    """Anything that can be waited on repeatedly between animation steps."""

    def wait(self) -> None: ...


class PacingWaiter:
    """
    Wait a configured delay, catching up on previous overruns.

    The banked surplus belongs to one render session; create one waiter per
    session and pass it to every call that animates.
    """

    def __init__(
        self,
        delay: float = 0.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the waiter.

        Args:
            delay: Default delay per wait, in seconds
            clock: Monotonic clock used to measure real sleep time
            sleep: Blocking sleep function
        """
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.delay = delay
        self._clock = clock
        self._sleep = sleep
        self._banked = 0.0

    @property
    def banked(self) -> float:
        """Surplus time already waited and not yet spent."""
        return self._banked

    def wait(self, delay: Optional[float] = None) -> None:
        """
        Wait for ``delay`` seconds, less any banked surplus.

        Returns immediately when the bank already covers the delay.
        """
        if delay is None:
            delay = self.delay
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")

        if self._banked < delay:
            started = self._clock()
            self._sleep(delay - self._banked)
            self._banked += self._clock() - started
        self._banked -= delay
