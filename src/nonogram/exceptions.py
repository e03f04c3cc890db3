"""
Exception types raised by the solver and the render surface.
"""

from __future__ import annotations

from typing import Optional, Tuple


class NonogramError(Exception):
    """Base class for all nonogram errors."""


class ContradictionError(NonogramError):
    """
    The puzzle reached a logically impossible state.

    Raised when a line's active range collapses while it still has cells to
    fill, when a clue no longer fits its range, or when a cell is asked to
    hold two different resolved values.

    Attributes:
        x: Column of the offending cell, if a single cell is involved
        y: Row of the offending cell, if a single cell is involved
        line: (kind, index) of the offending line, if a line is involved
    """

    def __init__(
        self,
        message: str,
        x: Optional[int] = None,
        y: Optional[int] = None,
        line: Optional[Tuple[object, int]] = None,
    ):
        super().__init__(message)
        self.x = x
        self.y = y
        self.line = line


class BoundsError(NonogramError, IndexError):
    """A render surface coordinate falls outside the buffer."""


class ClosedSurfaceError(NonogramError, RuntimeError):
    """A render surface was used after it was closed."""
