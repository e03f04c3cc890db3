"""
Solving session: draw the puzzle, run the solver, report the outcome.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config.timing_config import TimingConfig, get_timing_config
from ..exceptions import ContradictionError
from ..puzzle.grid import Grid
from ..puzzle.line import Cell
from ..puzzle.solver import LineSolver
from ..schemas.puzzle import PuzzleDefinition
from ..schemas.solve_report import SolveReport, SolveStatus
from ..utils.timing.pacing import PacingWaiter
from ..utils.ui.core.terminal import TerminalDevice

logger = logging.getLogger(__name__)


def solve_puzzle(
    puzzle: PuzzleDefinition,
    timing: Optional[TimingConfig] = None,
    device: Optional[TerminalDevice] = None,
    passes: int = 1,
) -> SolveReport:
    """
    Animate solving a puzzle and summarize the result.

    The render surface is always flushed and closed before this returns, so
    whatever was drawn stays visible even when the puzzle is contradictory.

    Args:
        puzzle: Clues to solve
        timing: Animation timing, from the environment by default
        device: Output device, stdout by default
        passes: Maximum number of deductive passes; stops early once solved
            or when a pass resolves nothing new

    Returns:
        SolveReport describing the final grid
    """
    if passes < 1:
        raise ValueError(f"passes must be at least 1, got {passes}")
    timing = timing or get_timing_config()
    waiter = PacingWaiter(timing.character_delay)

    logger.info("Solving %s (%s), up to %d passes", puzzle.name, puzzle.size, passes)

    status = SolveStatus.UNSOLVED
    error: Optional[ContradictionError] = None
    completed = 0

    with Grid(
        puzzle.rows,
        puzzle.columns,
        device=device,
        heartbeat_interval=timing.heartbeat_interval,
    ) as grid:
        grid.draw_frame(waiter)
        solver = LineSolver(grid, waiter)
        try:
            while completed < passes:
                unknown_before = grid.counts()[Cell.UNKNOWN]
                status = solver.solve()
                completed += 1
                if status is SolveStatus.FULLY_SOLVED:
                    break
                if grid.counts()[Cell.UNKNOWN] == unknown_before:
                    logger.info("Pass %d made no progress", completed)
                    break
        except ContradictionError as exc:
            logger.warning("Puzzle %s is contradictory: %s", puzzle.name, exc)
            status = SolveStatus.CONTRADICTION
            error = exc
            completed += 1

    counts = grid.counts()
    report = SolveReport(
        puzzle=puzzle.name,
        status=status,
        passes=completed,
        filled=counts[Cell.FILLED],
        empty=counts[Cell.EMPTY],
        unknown=counts[Cell.UNKNOWN],
        picture=grid.picture(),
    )
    if error is not None:
        report.error = str(error)
        if error.x is not None and error.y is not None:
            report.error_cell = [error.x, error.y]
        if error.line is not None:
            kind, index = error.line
            report.error_line = f"{kind.value} {index}"
    return report
