"""
Line model: one row or column of the puzzle.

A line owns its clue, the number of cells it still has to fill and the
active sub-range ``[start, end)`` that has not been proven empty at either
end. Cells themselves live in the grid; the line only looks at them when
narrowing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from ..exceptions import ContradictionError


class Cell(Enum):
    """Tri-state puzzle cell."""

    UNKNOWN = "?"
    FILLED = "#"
    EMPTY = "."


class LineKind(Enum):
    """Orientation of a line."""

    ROW = "row"
    COLUMN = "column"


def normalize_clue(raw: Iterable[int]) -> List[int]:
    """
    Drop non-positive entries from a raw clue.

    A clue of ``[0]`` (or any clue without positive entries) normalizes to
    ``[]``, the canonical form of a line with no filled cells.
    """
    return [int(n) for n in raw if int(n) > 0]


@dataclass
class Line:
    """
    One row or column.

    Attributes:
        kind: ROW or COLUMN
        index: Row number for rows, column number for columns
        size: Number of cells in the line
        clue: Normalized clue, cleared once the line is complete
        remaining: Filled cells still to be placed
        start: First cell of the active range
        end: One past the last cell of the active range
        title: Clue entries as displayed, including zero entries
    """

    kind: LineKind
    index: int
    size: int
    clue: List[int]
    remaining: int
    start: int = 0
    end: int = 0
    title: List[str] = field(default_factory=list)

    @classmethod
    def from_clue(
        cls, kind: LineKind, index: int, raw: Sequence[int], size: int
    ) -> "Line":
        clue = normalize_clue(raw)
        return cls(
            kind=kind,
            index=index,
            size=size,
            clue=clue,
            remaining=sum(clue),
            start=0,
            end=size,
            title=[str(n) for n in raw],
        )

    def quota(self) -> int:
        """Sum of the current clue entries."""
        return sum(self.clue)

    @property
    def span(self) -> int:
        return self.end - self.start

    @property
    def is_complete(self) -> bool:
        return self.remaining == 0

    @property
    def label(self) -> str:
        return f"{self.kind.value} {self.index}"

    def coord(self, position: int) -> Tuple[int, int]:
        """Return the grid (x, y) of a position within this line."""
        if self.kind is LineKind.ROW:
            return position, self.index
        return self.index, position

    def consume(self) -> bool:
        """
        Account for one newly filled cell.

        Returns:
            True if this fill completed the line
        """
        if self.remaining <= 0:
            raise ContradictionError(
                f"{self.label} has more filled cells than its clue allows",
                line=(self.kind, self.index),
            )
        self.remaining -= 1
        return self.remaining == 0

    def clear(self) -> None:
        """Drop the clue of a complete line so sweeps skip it."""
        self.clue = []

    def narrow(self, cells: Sequence[Cell], position: int) -> None:
        """
        Shrink the active range after the cell at ``position`` resolved.

        Only a resolution on a boundary of the range moves it. The boundary
        walks inward over contiguous EMPTY cells and stops at the first
        non-empty cell or at the opposite boundary.
        """
        if position == self.start:
            while self.start < self.end and cells[self.start] is Cell.EMPTY:
                self.start += 1
        if position == self.end - 1:
            while self.end > self.start and cells[self.end - 1] is Cell.EMPTY:
                self.end -= 1

        if self.start >= self.end and self.remaining > 0:
            raise ContradictionError(
                f"{self.label} has no room left for {self.remaining} filled cells",
                line=(self.kind, self.index),
            )
