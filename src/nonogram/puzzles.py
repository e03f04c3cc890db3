"""
Built-in puzzles and the clue text format used on the command line.

Clue text lists one clue per line separated by commas, with the run lengths
of each clue separated by whitespace::

    "3, 1 1, 0, 2 2"

An empty entry or ``0`` denotes a line without filled cells.
"""

from __future__ import annotations

from typing import Dict, List

from .schemas.puzzle import PuzzleDefinition

_PUZZLES: Dict[str, Dict[str, List[List[int]]]] = {
    "default": {
        "rows": [
            [3],
            [1, 1],
            [3, 1],
            [2, 1, 2, 2],
            [1, 2, 1],
            [2, 1, 1],
            [15],
            [4, 4],
            [15],
            [12],
            [2, 2],
            [15],
            [15],
            [10],
            [6],
        ],
        "columns": [
            [3, 3],
            [5, 3],
            [1, 5, 2],
            [2, 4, 3],
            [1, 1, 2, 3],
            [3, 1, 2, 4],
            [1, 1, 1, 2, 4],
            [1, 3, 2, 4],
            [1, 1, 1, 2, 4],
            [1, 1, 1, 2, 4],
            [1, 1, 2, 4],
            [1, 4, 3],
            [1, 4, 3],
            [9],
            [3, 3],
        ],
    },
    "cross": {
        "rows": [[1], [1], [5], [1], [1]],
        "columns": [[1], [1], [5], [1], [1]],
    },
    "bar": {
        "rows": [[3]],
        "columns": [[1], [1], [1]],
    },
    "blank": {
        "rows": [[0], [0]],
        "columns": [[0], [0], [0]],
    },
}


def list_puzzles() -> List[str]:
    """Names of the built-in puzzles."""
    return sorted(_PUZZLES)


def get_puzzle(name: str) -> PuzzleDefinition:
    """
    Look up a built-in puzzle.

    Raises:
        KeyError: No puzzle has this name
    """
    try:
        clues = _PUZZLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown puzzle {name!r}; choose from {', '.join(list_puzzles())}"
        ) from None
    return PuzzleDefinition(name=name, rows=clues["rows"], columns=clues["columns"])


def parse_clue_text(text: str) -> List[List[int]]:
    """
    Parse clue text into one list of run lengths per line.

    Raises:
        ValueError: An entry is not a non-negative integer
    """
    clues: List[List[int]] = []
    for part in text.split(","):
        entries = []
        for token in part.split():
            if not token.isdigit():
                raise ValueError(f"Invalid clue entry {token!r} in {part.strip()!r}")
            entries.append(int(token))
        clues.append(entries or [0])
    return clues
