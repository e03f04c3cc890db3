"""
Box-drawing glyph merge table.

Every box glyph is the union of up to four arms reaching from the centre of
the cell to one of its edges. Drawing a line through a cell adds arms to
whatever is already there, so the result never depends on the order lines
were drawn in and drawing the same line twice changes nothing.

A line end marked "short" stops at the centre of its cell instead of
continuing to the far edge, which is how borders meet in corners and tees.
"""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Dict, Tuple


class Arm(IntFlag):
    """Edge of a cell an arm of a glyph reaches."""

    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 4
    LEFT = 8


class Axis(Enum):
    """Direction a line is drawn in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


GLYPHS: Dict[Arm, str] = {
    Arm.NONE: " ",
    Arm.UP: "╵",
    Arm.RIGHT: "╶",
    Arm.DOWN: "╷",
    Arm.LEFT: "╴",
    Arm.UP | Arm.DOWN: "│",
    Arm.LEFT | Arm.RIGHT: "─",
    Arm.DOWN | Arm.RIGHT: "┌",
    Arm.DOWN | Arm.LEFT: "┐",
    Arm.UP | Arm.RIGHT: "└",
    Arm.UP | Arm.LEFT: "┘",
    Arm.UP | Arm.DOWN | Arm.RIGHT: "├",
    Arm.UP | Arm.DOWN | Arm.LEFT: "┤",
    Arm.DOWN | Arm.LEFT | Arm.RIGHT: "┬",
    Arm.UP | Arm.LEFT | Arm.RIGHT: "┴",
    Arm.UP | Arm.DOWN | Arm.LEFT | Arm.RIGHT: "┼",
}

ARMS_BY_GLYPH: Dict[str, Arm] = {glyph: arms for arms, glyph in GLYPHS.items()}

# (existing glyph, incoming arms) -> resulting glyph, for every pair
MERGE_TABLE: Dict[Tuple[str, Arm], str] = {
    (glyph, incoming): GLYPHS[arms | incoming]
    for arms, glyph in GLYPHS.items()
    for incoming in GLYPHS
}

_AXIS_ARMS: Dict[Axis, Tuple[Arm, Arm]] = {
    Axis.HORIZONTAL: (Arm.LEFT, Arm.RIGHT),
    Axis.VERTICAL: (Arm.UP, Arm.DOWN),
}


def is_box_glyph(char: str) -> bool:
    return char in ARMS_BY_GLYPH


def segment_arms(axis: Axis, short_before: bool, short_after: bool) -> Arm:
    """
    Arms a line occupies within one of its cells.

    Args:
        axis: Direction of the line
        short_before: The line does not continue towards lower coordinates
        short_after: The line does not continue towards higher coordinates

    Returns:
        Arm set for the cell
    """
    before, after = _AXIS_ARMS[axis]
    arms = Arm.NONE
    if not short_before:
        arms |= before
    if not short_after:
        arms |= after
    return arms


def merge_glyph(existing: str, arms: Arm) -> str:
    """
    Return the glyph showing ``existing`` with ``arms`` drawn through it.

    A character that is not a box glyph is treated as blank, unless no arms
    are drawn, in which case the cell is left untouched.
    """
    if not arms:
        return existing
    if not is_box_glyph(existing):
        return GLYPHS[arms]
    return MERGE_TABLE[(existing, arms)]
