"""
Animated deductive nonogram solver for the terminal.
"""

from .exceptions import BoundsError, ClosedSurfaceError, ContradictionError, NonogramError
from .puzzle import Cell, Grid, LineSolver
from .schemas import PuzzleDefinition, SolveReport, SolveStatus
from .services import solve_puzzle

__version__ = "0.1.0"

__all__ = [
    "BoundsError",
    "Cell",
    "ClosedSurfaceError",
    "ContradictionError",
    "Grid",
    "LineSolver",
    "NonogramError",
    "PuzzleDefinition",
    "SolveReport",
    "SolveStatus",
    "solve_puzzle",
]
