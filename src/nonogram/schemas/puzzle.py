"""
Validated puzzle input.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class PuzzleDefinition(BaseModel):
    """
    Row and column clues of a puzzle.

    A clue is a list of non-negative run lengths; ``[0]`` or ``[]`` marks a
    line without filled cells.
    """

    name: str = Field(default="custom", description="Display name of the puzzle")
    rows: List[List[int]] = Field(description="Clues for each row, top to bottom")
    columns: List[List[int]] = Field(description="Clues for each column, left to right")

    @field_validator("rows", "columns")
    @classmethod
    def _check_clues(cls, clues: List[List[int]]) -> List[List[int]]:
        if not clues:
            raise ValueError("a puzzle needs at least one row and one column")
        for clue in clues:
            if any(n < 0 for n in clue):
                raise ValueError(f"clue entries must not be negative: {clue}")
        return clues

    @model_validator(mode="after")
    def _check_totals(self) -> "PuzzleDefinition":
        row_total = sum(sum(clue) for clue in self.rows)
        column_total = sum(sum(clue) for clue in self.columns)
        if row_total != column_total:
            raise ValueError(
                f"row clues fill {row_total} cells but column clues fill {column_total}"
            )
        return self

    @property
    def size(self) -> str:
        return f"{len(self.columns)}x{len(self.rows)}"
