"""
Pydantic models for puzzle input and solve results.
"""

from .puzzle import PuzzleDefinition
from .solve_report import SolveReport, SolveStatus

__all__ = ["PuzzleDefinition", "SolveReport", "SolveStatus"]
