"""
Tests for the solving session service and the report display.
"""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from nonogram.config.timing_config import TimingConfig
from nonogram.puzzles import get_puzzle
from nonogram.schemas.puzzle import PuzzleDefinition
from nonogram.schemas.solve_report import SolveReport, SolveStatus
from nonogram.services.solve_service import solve_puzzle
from nonogram.utils.ui.result import print_solve_report

from conftest import FakeDevice

FAST = TimingConfig(character_delay=0.0, heartbeat_interval=0.01)


def test_cross_is_fully_solved(device) -> None:
    report = solve_puzzle(get_puzzle("cross"), timing=FAST, device=device)

    assert report.status is SolveStatus.FULLY_SOLVED
    assert report.passes == 1
    assert (report.filled, report.empty, report.unknown) == (9, 16, 0)
    assert report.picture[2] == "#####"
    assert report.error is None


def test_surface_is_flushed_after_solving(device) -> None:
    solve_puzzle(get_puzzle("bar"), timing=FAST, device=device)

    assert device.writes
    assert "███" not in device.output
    assert "█ █ █" in device.output.replace("│", " ")


def test_stuck_puzzle_stops_early() -> None:
    puzzle = PuzzleDefinition(rows=[[1, 1], [1, 1]], columns=[[1]] * 4)
    report = solve_puzzle(puzzle, timing=FAST, device=FakeDevice(), passes=5)

    assert report.status is SolveStatus.PARTIALLY_SOLVED
    assert report.passes == 1
    assert report.unknown == 8


def test_contradiction_is_reported_and_still_drawn(device) -> None:
    puzzle = PuzzleDefinition(name="broken", rows=[[2]], columns=[[1], [0], [1]])
    report = solve_puzzle(puzzle, timing=FAST, device=device)

    assert report.is_contradiction
    assert report.error_cell == [1, 0]
    assert report.error_line is None
    assert "(1, 0)" in report.error
    assert "╳" in device.output


def test_invalid_pass_count(device) -> None:
    with pytest.raises(ValueError):
        solve_puzzle(get_puzzle("bar"), timing=FAST, device=device, passes=0)


@pytest.mark.parametrize(
    "status,label",
    [
        (SolveStatus.FULLY_SOLVED, "Solved"),
        (SolveStatus.PARTIALLY_SOLVED, "Partially solved"),
        (SolveStatus.CONTRADICTION, "Contradiction"),
    ],
)
def test_report_display(status, label) -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=80)
    report = SolveReport(
        puzzle="cross",
        status=status,
        passes=1,
        filled=9,
        empty=16,
        unknown=0,
        picture=["..#.."],
        error="row 0 has no room left" if status is SolveStatus.CONTRADICTION else None,
    )

    print_solve_report(console, report, show_picture=True)
    text = buffer.getvalue()

    assert label in text
    assert "filled 9" in text
    assert "..#.." in text
    if report.error:
        assert report.error in text


def test_report_display_prints_markup_literally() -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=80)
    report = SolveReport(
        puzzle="[bold]odd[/bold]",
        status=SolveStatus.CONTRADICTION,
        passes=1,
        filled=0,
        empty=0,
        unknown=4,
        error="row [0] collapsed",
    )

    print_solve_report(console, report)
    text = buffer.getvalue()

    assert "[bold]odd[/bold]" in text
    assert "row [0] collapsed" in text
