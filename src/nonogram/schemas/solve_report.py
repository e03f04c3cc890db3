"""
Outcome of a solving session.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SolveStatus(str, Enum):
    """State of a puzzle after solving."""

    UNSOLVED = "unsolved"
    PARTIALLY_SOLVED = "partially_solved"
    FULLY_SOLVED = "fully_solved"
    CONTRADICTION = "contradiction"


class SolveReport(BaseModel):
    """
    Summary of one solving session, produced after the surface is flushed.
    """

    puzzle: str = Field(description="Name of the puzzle that was solved")
    status: SolveStatus = Field(description="Final state of the puzzle")
    passes: int = Field(description="Number of deductive passes run", ge=0)
    filled: int = Field(description="Cells resolved as filled", ge=0)
    empty: int = Field(description="Cells resolved as empty", ge=0)
    unknown: int = Field(description="Cells still unresolved", ge=0)
    picture: List[str] = Field(
        default_factory=list,
        description="One string per row: '#' filled, '.' empty, '?' unknown",
    )
    error: Optional[str] = Field(
        default=None, description="Contradiction message if the puzzle is unsolvable"
    )
    error_cell: Optional[List[int]] = Field(
        default=None, description="[x, y] of the conflicting cell, if any"
    )
    error_line: Optional[str] = Field(
        default=None, description="Row or column that collapsed, e.g. 'row 3'"
    )

    @property
    def is_contradiction(self) -> bool:
        return self.status == SolveStatus.CONTRADICTION
