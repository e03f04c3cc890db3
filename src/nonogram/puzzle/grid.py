"""
Puzzle grid: cells, lines and the on-screen layout.

The grid owns the tri-state cell matrix, one Line per row and column, and
the render surface the puzzle is drawn on. Layout on the surface:

    title_width chars of row titles, a border column, then for every puzzle
    column cell_size chars of cell followed by a border column.
    title_height rows of column titles, a border row, then for every puzzle
    row cell_size rows of cell followed by a border row.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..utils.timing.pacing import Waiter
from ..utils.ui.core.surface import RenderSurface
from ..utils.ui.core.terminal import TerminalDevice
from .line import Cell, Line, LineKind

logger = logging.getLogger(__name__)

FILLED_CHAR = "█"
EMPTY_CHAR = "╳"


@dataclass(frozen=True)
class GridLayout:
    """Character geometry of a drawn puzzle."""

    columns: int
    rows: int
    cell_size: int
    title_width: int
    title_height: int

    @classmethod
    def from_lines(cls, rows: Sequence[Line], columns: Sequence[Line]) -> "GridLayout":
        cell_size = max(
            (len(entry) for column in columns for entry in column.title), default=1
        )
        return cls(
            columns=len(columns),
            rows=len(rows),
            cell_size=max(cell_size, 1),
            title_width=max((len(" ".join(row.title)) for row in rows), default=0),
            title_height=max((len(column.title) for column in columns), default=0),
        )

    @property
    def pitch(self) -> int:
        """Distance between the origins of neighbouring cells."""
        return self.cell_size + 1

    @property
    def width(self) -> int:
        return self.title_width + 1 + self.columns * self.pitch

    @property
    def height(self) -> int:
        return self.title_height + 1 + self.rows * self.pitch

    def cell_origin(self, x: int, y: int) -> Tuple[int, int]:
        """Top-left surface character of puzzle cell (x, y)."""
        return (
            self.title_width + 1 + x * self.pitch,
            self.title_height + 1 + y * self.pitch,
        )


class Grid:
    """Cell matrix plus per-line bookkeeping for one puzzle."""

    def __init__(
        self,
        row_clues: Sequence[Sequence[int]],
        column_clues: Sequence[Sequence[int]],
        device: Optional[TerminalDevice] = None,
        heartbeat_interval: float = 0.5,
    ):
        """
        Build the grid and a render surface sized to fit it.

        Args:
            row_clues: One clue per row, top to bottom
            column_clues: One clue per column, left to right
            device: Output device for the render surface
            heartbeat_interval: Spinner interval used in buffered mode
        """
        self.width = len(column_clues)
        self.height = len(row_clues)
        self.rows: List[Line] = [
            Line.from_clue(LineKind.ROW, y, clue, self.width)
            for y, clue in enumerate(row_clues)
        ]
        self.columns: List[Line] = [
            Line.from_clue(LineKind.COLUMN, x, clue, self.height)
            for x, clue in enumerate(column_clues)
        ]
        self._cells: List[Cell] = [Cell.UNKNOWN] * (self.width * self.height)

        self.layout = GridLayout.from_lines(self.rows, self.columns)
        self.surface = RenderSurface(
            self.layout.width,
            self.layout.height,
            device=device,
            heartbeat_interval=heartbeat_interval,
        )
        logger.debug(
            "Grid %dx%d drawn on %dx%d characters",
            self.width,
            self.height,
            self.layout.width,
            self.layout.height,
        )

    def __enter__(self) -> "Grid":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y * self.width + x]

    def cells_of(self, line: Line) -> List[Cell]:
        """Current cells of a row or column, in line order."""
        if line.kind is LineKind.ROW:
            start = line.index * self.width
            return self._cells[start : start + self.width]
        return self._cells[line.index :: self.width]

    def lines(self) -> List[Line]:
        """All rows followed by all columns."""
        return self.rows + self.columns

    def set_cell(self, x: int, y: int, value: Cell, waiter: Optional[Waiter] = None) -> None:
        """Store a resolved value and paint it. Does no consistency checks."""
        self._cells[y * self.width + x] = value
        left, top = self.layout.cell_origin(x, y)
        size = self.layout.cell_size - 1
        char = FILLED_CHAR if value is Cell.FILLED else EMPTY_CHAR
        self.surface.fill_rect(left, top, left + size, top + size, char, waiter)

    def draw_frame(self, waiter: Optional[Waiter] = None) -> None:
        """Draw clue titles and cell borders."""
        layout = self.layout
        surface = self.surface
        right = layout.width - 1
        bottom = layout.height - 1

        surface.draw_vertical_line(layout.title_width, 0, bottom, short_end=True, waiter=waiter)
        for column in self.columns:
            left, _ = layout.cell_origin(column.index, 0)
            offset = layout.title_height - len(column.title)
            for i, entry in enumerate(column.title):
                surface.write_text(left, offset + i, entry, waiter)
            surface.draw_vertical_line(
                left + layout.cell_size, 0, bottom, short_end=True, waiter=waiter
            )

        surface.draw_horizontal_line(layout.title_height, 0, right, short_end=True, waiter=waiter)
        for row in self.rows:
            _, top = layout.cell_origin(0, row.index)
            title = " ".join(row.title)
            if title:
                surface.write_text(layout.title_width - len(title), top, title, waiter)
            surface.draw_horizontal_line(
                top + layout.cell_size, 0, right, short_end=True, waiter=waiter
            )

    def counts(self) -> Dict[Cell, int]:
        counter = Counter(self._cells)
        return {state: counter.get(state, 0) for state in Cell}

    def is_solved(self) -> bool:
        return all(line.is_complete for line in self.lines())

    def picture(self) -> List[str]:
        """Plain-text picture, one string per row: '#' filled, '.' empty, '?' unknown."""
        return [
            "".join(self.cell(x, y).value for x in range(self.width))
            for y in range(self.height)
        ]

    def close(self) -> None:
        """Tear down the render surface, flushing it if needed."""
        self.surface.close()
