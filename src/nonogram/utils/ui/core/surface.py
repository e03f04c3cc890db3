"""
Character buffer that mirrors itself onto a terminal.

RenderSurface keeps every character it has been given in a row-major buffer.
When the terminal can hold the whole buffer the surface is a "screen" and
each write is also sent to the terminal at its position, so drawing is
visible as it happens. Otherwise nothing is shown until flush(), which prints
the buffer as one block.

Box-drawing lines are merged with whatever they cross (see glyphs.py); text
and fills overwrite.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ...timing.pacing import Waiter
from .heartbeat import Heartbeat
from .glyphs import Axis, merge_glyph, segment_arms
from .terminal import ConsoleDevice, TerminalDevice
from ....exceptions import BoundsError, ClosedSurfaceError

logger = logging.getLogger(__name__)


class RenderSurface:
    """
    Fixed-size character buffer with direct or buffered output.

    Not thread-safe: a surface belongs to the code that created it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        device: Optional[TerminalDevice] = None,
        heartbeat_interval: float = 0.5,
    ):
        """
        Initialize the surface and pick its output mode.

        Args:
            width: Width of the buffer, in characters
            height: Height of the buffer, in characters
            device: Output device, a Rich console on stdout by default
            heartbeat_interval: Seconds between spinner frames in buffered mode
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"surface must not be empty, got {width}x{height}")

        self.width = width
        self.height = height
        self._device: TerminalDevice = device if device is not None else ConsoleDevice()
        self._buffer: List[str] = [" "] * (width * height)
        self._closed = False
        self._flushed = False
        self._heartbeat: Optional[Heartbeat] = None

        self.is_screen = False
        if not self._device.is_output_redirected:
            if self._device.can_resize(width, height):
                self.is_screen = True
                self._device.clear_screen()
            else:
                self._heartbeat = Heartbeat(self._device, interval=heartbeat_interval)
                self._heartbeat.start()

        logger.debug(
            "Render surface %dx%d in %s mode",
            width,
            height,
            "screen" if self.is_screen else "buffered",
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def __getitem__(self, position: Tuple[int, int]) -> str:
        x, y = position
        self._check_bounds(x, y)
        return self._buffer[y * self.width + x]

    def __enter__(self) -> "RenderSurface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def lines(self) -> List[str]:
        """Return the buffer as one string per row."""
        return [
            "".join(self._buffer[y * self.width : (y + 1) * self.width])
            for y in range(self.height)
        ]

    def _check_open(self) -> None:
        if self._closed:
            raise ClosedSurfaceError("Render surface has been closed")

    def _check_bounds(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise BoundsError(f"x={x} outside 0..{self.width - 1}")
        if not 0 <= y < self.height:
            raise BoundsError(f"y={y} outside 0..{self.height - 1}")

    def _put(self, x: int, y: int, char: str, waiter: Optional[Waiter]) -> None:
        self._buffer[y * self.width + x] = char
        self._flushed = False
        if self.is_screen:
            self._device.set_cursor(x, y)
            self._device.write_raw(char)
        if waiter is not None:
            waiter.wait()

    def write_char(self, x: int, y: int, char: str, waiter: Optional[Waiter] = None) -> None:
        """
        Write one character at (x, y), replacing what was there.

        Raises:
            ClosedSurfaceError: The surface has been closed
            BoundsError: (x, y) is outside the buffer
        """
        self._check_open()
        self._check_bounds(x, y)
        self._put(x, y, char, waiter)

    def write_text(self, x: int, y: int, text: str, waiter: Optional[Waiter] = None) -> None:
        """
        Write a string horizontally starting at (x, y).

        Text that reaches the right edge continues at column 0 of the next
        row. Anything past the last row is dropped.
        """
        for char in text:
            self.write_char(x, y, char, waiter)
            x += 1
            if x >= self.width:
                y += 1
                if y >= self.height:
                    return
                x = 0

    def draw_line(
        self,
        axis: Axis,
        fixed: int,
        start: int,
        end: int,
        short_start: bool = False,
        short_end: bool = False,
        waiter: Optional[Waiter] = None,
    ) -> None:
        """
        Draw a box-drawing line, merging it with the glyphs it crosses.

        Args:
            axis: HORIZONTAL lines run along row ``fixed``, VERTICAL lines
                along column ``fixed``
            fixed: Row or column the line runs along
            start: First cell of the line, inclusive
            end: Last cell of the line, inclusive
            short_start: The line stops at the centre of its first cell
            short_end: The line stops at the centre of its last cell
            waiter: Paces each cell drawn
        """
        self._check_open()
        if start > end:
            start, end = end, start
            short_start, short_end = short_end, short_start

        if start == end and short_start and short_end:
            return

        if axis is Axis.HORIZONTAL:
            self._check_bounds(start, fixed)
            self._check_bounds(end, fixed)
        else:
            self._check_bounds(fixed, start)
            self._check_bounds(fixed, end)

        for pos in range(start, end + 1):
            arms = segment_arms(
                axis,
                short_before=short_start and pos == start,
                short_after=short_end and pos == end,
            )
            x, y = (pos, fixed) if axis is Axis.HORIZONTAL else (fixed, pos)
            self._put(x, y, merge_glyph(self._buffer[y * self.width + x], arms), waiter)

    def draw_horizontal_line(
        self,
        y: int,
        x0: int,
        x1: int,
        short_start: bool = False,
        short_end: bool = False,
        waiter: Optional[Waiter] = None,
    ) -> None:
        self.draw_line(Axis.HORIZONTAL, y, x0, x1, short_start, short_end, waiter)

    def draw_vertical_line(
        self,
        x: int,
        y0: int,
        y1: int,
        short_start: bool = False,
        short_end: bool = False,
        waiter: Optional[Waiter] = None,
    ) -> None:
        self.draw_line(Axis.VERTICAL, x, y0, y1, short_start, short_end, waiter)

    def fill_rect(
        self,
        x0: int,
        y0: int,
        x1: int,
        y1: int,
        char: str,
        waiter: Optional[Waiter] = None,
    ) -> None:
        """Overwrite every cell of the inclusive rectangle with ``char``."""
        self._check_open()
        x0, x1 = min(x0, x1), max(x0, x1)
        y0, y1 = min(y0, y1), max(y0, y1)
        self._check_bounds(x0, y0)
        self._check_bounds(x1, y1)

        for y in range(y0, y1 + 1):
            for x in range(x0, x1 + 1):
                self._put(x, y, char, waiter)

    def flush(self) -> None:
        """
        Make the buffer's current contents visible.

        In screen mode the cursor is moved to the line below the buffer, or
        to its bottom-right corner when the terminal has no room below. In
        buffered mode the whole buffer is printed as one block; a running
        heartbeat is paused around the write so no spinner frame lands
        inside the block.
        """
        self._check_open()

        if self.is_screen:
            if self._device.can_resize(self.width, self.height + 1):
                self._device.set_cursor(0, self.height)
            else:
                self._device.set_cursor(self.width - 1, self.height - 1)
        else:
            heartbeat = self._heartbeat
            if heartbeat is not None:
                heartbeat.stop()
            try:
                self._device.write_raw("\n" + "".join(line + "\n" for line in self.lines()))
            finally:
                if heartbeat is not None:
                    heartbeat.start()

        self._flushed = True

    def close(self) -> None:
        """
        Stop the heartbeat, flush if needed and close the surface.

        Safe to call more than once. A failing final flush is logged and
        does not propagate.
        """
        if self._closed:
            return

        if self._heartbeat is not None:
            self._heartbeat.stop()
            self._heartbeat = None

        if not self._flushed:
            try:
                self.flush()
            except Exception:
                logger.warning("Final flush of render surface failed", exc_info=True)

        self._closed = True

    dispose = close
