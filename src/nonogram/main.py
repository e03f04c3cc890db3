"""
Main entry point for the animated nonogram solver.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console

from .config.timing_config import create_custom_timing
from .puzzles import get_puzzle, list_puzzles, parse_clue_text
from .schemas.puzzle import PuzzleDefinition
from .schemas.solve_report import SolveReport
from .services.solve_service import solve_puzzle
from .utils.logging.logging_config import setup_logging
from .utils.ui.result import print_solve_report
from .utils.ui.theme import THEME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nonogram",
        description="Animate a deductive nonogram solver in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Clue text: one clue per line separated by commas, run lengths "
            'separated by spaces, e.g. --rows "3, 1 1, 0".'
        ),
    )
    parser.add_argument(
        "-p",
        "--puzzle",
        default="default",
        help="Built-in puzzle to solve (see --list)",
    )
    parser.add_argument("--rows", help="Row clues as clue text")
    parser.add_argument("--columns", help="Column clues as clue text")
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=None,
        help="Delay per animated character in milliseconds",
    )
    parser.add_argument(
        "--passes",
        type=int,
        default=1,
        help="Maximum number of deductive passes (default: 1)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List built-in puzzles and exit",
    )
    parser.add_argument(
        "--picture",
        action="store_true",
        help="Print a plain-text picture of the result",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--log-file", help="Write logs to this file instead of stderr")
    return parser


def load_puzzle(parser: argparse.ArgumentParser, args: argparse.Namespace) -> PuzzleDefinition:
    """Resolve the puzzle from the command line, exiting on invalid input."""
    if (args.rows is None) != (args.columns is None):
        parser.error("--rows and --columns must be given together")

    try:
        if args.rows is not None:
            return PuzzleDefinition(
                rows=parse_clue_text(args.rows),
                columns=parse_clue_text(args.columns),
            )
        return get_puzzle(args.puzzle)
    except KeyError as e:
        parser.error(str(e.args[0]))
    except (ValueError, ValidationError) as e:
        parser.error(f"invalid clues: {e}")


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code: 0 when solved or partially solved, 1 on contradiction
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    if args.list:
        for name in list_puzzles():
            puzzle = get_puzzle(name)
            console.print(f"  {name} [{THEME['muted']}]{puzzle.size}[/]")
        return 0

    if args.passes < 1:
        parser.error("--passes must be at least 1")
    if args.delay is not None and args.delay < 0:
        parser.error("--delay must not be negative")

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    puzzle = load_puzzle(parser, args)
    timing = create_custom_timing(delay_ms=args.delay)

    report: SolveReport = solve_puzzle(puzzle, timing=timing, passes=args.passes)
    print_solve_report(console, report, show_picture=args.picture)
    return 1 if report.is_contradiction else 0


def cli() -> None:
    """CLI entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        Console().print(f"\n\n  [{THEME['muted']}]Interrupted[/]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
