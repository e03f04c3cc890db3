"""
Solve report formatting for display.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from ...schemas.solve_report import SolveReport, SolveStatus
from .theme import ICONS, THEME

_STATUS_STYLE = {
    SolveStatus.FULLY_SOLVED: ("success", "success", "Solved"),
    SolveStatus.PARTIALLY_SOLVED: ("warning", "partial", "Partially solved"),
    SolveStatus.UNSOLVED: ("muted", "partial", "Unsolved"),
    SolveStatus.CONTRADICTION: ("error", "error", "Contradiction"),
}


def print_solve_report(console: Console, report: SolveReport, show_picture: bool = False) -> None:
    """
    Display a solve report.

    Args:
        console: Rich console
        report: Report to show
        show_picture: Also print the plain-text picture of the grid
    """
    color, icon, label = _STATUS_STYLE[report.status]
    console.print()
    console.print(
        f"[bold {THEME[color]}]{ICONS[icon]} {label}[/] "
        f"[{THEME['muted']}]{escape(report.puzzle)}, {report.passes} pass(es)[/]"
    )
    console.print(
        f"  [{THEME['text']}]filled {report.filled} {ICONS['bullet']} "
        f"empty {report.empty} {ICONS['bullet']} unknown {report.unknown}[/]"
    )

    if report.error:
        console.print(f"  [{THEME['error']}]{escape(report.error)}[/]")

    if show_picture:
        for row in report.picture:
            console.print(f"  {row}", highlight=False)
    console.print()
