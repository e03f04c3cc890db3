"""
Output device the render surface draws on.

The surface only needs a handful of capabilities from its environment. They
are described by TerminalDevice so tests and embedders can supply their own;
ConsoleDevice implements them on a Rich console.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from rich.console import Console
from rich.control import Control


class TerminalDevice(Protocol):
    """Capabilities the render surface consumes."""

    @property
    def is_output_redirected(self) -> bool: ...

    def can_resize(self, width: int, height: int) -> bool: ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def clear_screen(self) -> None: ...

    def write_raw(self, text: str) -> None: ...


class ConsoleDevice:
    """TerminalDevice backed by a Rich console."""

    def __init__(self, console: Optional[Console] = None, file: Optional[TextIO] = None):
        self.console = console or Console(file=file or sys.stdout, highlight=False)

    @property
    def is_output_redirected(self) -> bool:
        return not self.console.is_terminal

    def can_resize(self, width: int, height: int) -> bool:
        """
        Return True if the terminal is, or can be made, width x height.

        Terminals are not resized programmatically, so this is a fit check.
        """
        if self.is_output_redirected:
            return False
        cols, rows = self.console.size
        return cols >= width and rows >= height

    def set_cursor(self, x: int, y: int) -> None:
        self.console.control(Control.move_to(x, y))

    def clear_screen(self) -> None:
        self.console.clear()

    def write_raw(self, text: str) -> None:
        self.console.file.write(text)
        self.console.file.flush()
