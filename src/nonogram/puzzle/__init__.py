"""
Puzzle model and solver.
"""

from .grid import Grid, GridLayout
from .line import Cell, Line, LineKind, normalize_clue
from .solver import LineSolver, compute_gap

__all__ = [
    "Cell",
    "Grid",
    "GridLayout",
    "Line",
    "LineKind",
    "LineSolver",
    "compute_gap",
    "normalize_clue",
]
