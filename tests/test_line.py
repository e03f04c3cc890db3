"""
Tests for the line model: clue normalization and endpoint narrowing.
"""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from nonogram.exceptions import ContradictionError
from nonogram.puzzle.line import Cell, Line, LineKind, normalize_clue

E, F, U = Cell.EMPTY, Cell.FILLED, Cell.UNKNOWN


def test_normalize_drops_non_positive_entries() -> None:
    assert normalize_clue([3, 0, 1]) == [3, 1]
    assert normalize_clue([0]) == []
    assert normalize_clue([]) == []


def test_from_clue_sets_quota_and_full_range() -> None:
    line = Line.from_clue(LineKind.ROW, 2, [2, 0, 3], size=8)
    assert line.clue == [2, 3]
    assert line.quota() == 5
    assert line.remaining == 5
    assert (line.start, line.end) == (0, 8)
    assert line.title == ["2", "0", "3"]


def test_blank_clue_is_already_complete() -> None:
    line = Line.from_clue(LineKind.COLUMN, 0, [0], size=4)
    assert line.clue == []
    assert line.is_complete


def test_coord_depends_on_kind() -> None:
    row = Line.from_clue(LineKind.ROW, 3, [1], size=5)
    column = Line.from_clue(LineKind.COLUMN, 3, [1], size=5)
    assert row.coord(1) == (1, 3)
    assert column.coord(1) == (3, 1)


def test_consume_reports_completion_then_rejects_extra_fill() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [2], size=3)
    assert line.consume() is False
    assert line.consume() is True
    with pytest.raises(ContradictionError):
        line.consume()


def test_narrow_walks_contiguous_empties_from_start() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [1], size=5)
    line.narrow([E, E, U, U, U], 0)
    assert (line.start, line.end) == (2, 5)


def test_narrow_walks_contiguous_empties_from_end() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [1], size=5)
    line.narrow([U, E, U, E, E], 4)
    assert (line.start, line.end) == (0, 3)


def test_narrow_ignores_resolutions_inside_the_range() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [1], size=5)
    line.narrow([U, E, E, U, U], 2)
    assert (line.start, line.end) == (0, 5)


def test_narrow_stops_at_filled_cell() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [1], size=4)
    line.narrow([F, U, U, U], 0)
    assert (line.start, line.end) == (0, 4)


def test_collapse_with_remaining_quota_is_contradiction() -> None:
    line = Line.from_clue(LineKind.COLUMN, 4, [1], size=2)
    with pytest.raises(ContradictionError) as info:
        line.narrow([E, E], 0)
    assert info.value.line == (LineKind.COLUMN, 4)


def test_collapse_of_complete_line_is_fine() -> None:
    line = Line.from_clue(LineKind.ROW, 0, [0], size=2)
    line.narrow([E, E], 0)
    assert line.span == 0


@given(
    size=st.integers(min_value=1, max_value=12),
    data=st.data(),
)
def test_narrowing_never_grows_the_range(size: int, data) -> None:
    """The active range only shrinks as cells become empty."""
    line = Line.from_clue(LineKind.ROW, 0, [], size=size)
    cells = [U] * size
    positions = data.draw(
        st.lists(st.integers(min_value=0, max_value=size - 1), max_size=2 * size)
    )

    for position in positions:
        before = (line.start, line.end)
        cells[position] = E
        line.narrow(cells, position)
        assert line.start >= before[0]
        assert line.end <= before[1]
        assert line.start <= line.end
