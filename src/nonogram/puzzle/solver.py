"""
Deductive line solver.

One pass looks at every row and then every column on its own. Within the
line's active range the clue segments, with one separator between each, can
slide by ``gap`` cells. A segment longer than the gap covers the same
``length - gap`` cells wherever it slides, so those cells are filled.

Every resolved cell feeds back into its row and column: filled cells count
down the line's quota (a line with nothing left to fill gets its unknown
cells emptied), and empty cells on a range boundary narrow the range.

There is no guessing or backtracking. A pass may leave cells unknown; that
is a normal outcome, not an error.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..exceptions import ContradictionError
from ..schemas.solve_report import SolveStatus
from ..utils.timing.pacing import Waiter
from .grid import Grid
from .line import Cell, Line

logger = logging.getLogger(__name__)


def compute_gap(clue: Sequence[int], span: int) -> int:
    """Slack left in ``span`` cells after placing the clue as tightly as possible."""
    return span - sum(clue) - (len(clue) - 1)


class LineSolver:
    """Fills in the cells of a grid that its clues force."""

    def __init__(self, grid: Grid, waiter: Optional[Waiter] = None):
        self.grid = grid
        self.waiter = waiter

    def solve(self) -> SolveStatus:
        """
        Run one deductive pass: a row sweep followed by a column sweep.

        Returns:
            FULLY_SOLVED when every line is complete, PARTIALLY_SOLVED otherwise

        Raises:
            ContradictionError: The clues cannot be satisfied. Cells resolved
                before the contradiction keep their values.
        """
        for line in self.grid.lines():
            if line.is_complete:
                self._complete(line)

        for row in self.grid.rows:
            self._sweep(row)
        for column in self.grid.columns:
            self._sweep(column)

        if self.waiter is not None:
            self.waiter.wait()

        if self.grid.is_solved():
            logger.info("Puzzle solved")
            return SolveStatus.FULLY_SOLVED

        logger.info(
            "Pass finished with %d unknown cells", self.grid.counts()[Cell.UNKNOWN]
        )
        return SolveStatus.PARTIALLY_SOLVED

    def resolve(self, x: int, y: int, value: Cell) -> None:
        """
        Resolve cell (x, y) to FILLED or EMPTY.

        Raises:
            ContradictionError: The cell already holds the other value, or
                the resolution leaves a line unable to fit its clue
        """
        current = self.grid.cell(x, y)
        if current is value:
            return
        if current is not Cell.UNKNOWN:
            raise ContradictionError(
                f"Tried to set cell ({x}, {y}) to {value.name} but it is {current.name}",
                x=x,
                y=y,
            )

        self.grid.set_cell(x, y, value, self.waiter)
        row = self.grid.rows[y]
        column = self.grid.columns[x]

        if value is Cell.FILLED:
            if row.consume():
                self._complete(row)
            if column.consume():
                self._complete(column)

        row.narrow(self.grid.cells_of(row), x)
        column.narrow(self.grid.cells_of(column), y)

    def _complete(self, line: Line) -> None:
        """Empty every unknown cell of a line that has no cells left to fill."""
        line.clear()
        for position, cell in enumerate(self.grid.cells_of(line)):
            if cell is Cell.UNKNOWN:
                self.resolve(*line.coord(position), Cell.EMPTY)

    def _sweep(self, line: Line) -> None:
        if not line.clue:
            return

        clue = list(line.clue)
        gap = compute_gap(clue, line.span)
        if gap < 0:
            raise ContradictionError(
                f"{line.label} clue {clue} does not fit in {line.span} cells",
                line=(line.kind, line.index),
            )
        logger.debug("Sweep %s clue=%s range=[%d, %d) gap=%d", line.label, clue, line.start, line.end, gap)

        cursor = line.start
        for length in clue:
            if length > gap:
                for position in range(cursor + gap, cursor + length):
                    self.resolve(*line.coord(position), Cell.FILLED)
                if not line.clue:
                    return
            cursor += length + 1
