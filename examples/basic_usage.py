"""
Basic usage examples for the nonogram animator.
"""

from nonogram import PuzzleDefinition, solve_puzzle
from nonogram.config.timing_config import create_custom_timing
from nonogram.puzzles import get_puzzle
from nonogram.utils.logging.logging_config import setup_logging


def example_builtin_puzzle():
    """
    Example: Animate a built-in puzzle at the default speed.
    """
    report = solve_puzzle(get_puzzle("default"))
    print(f"\nStatus: {report.status.value}, unknown cells: {report.unknown}")


def example_custom_puzzle():
    """
    Example: Solve your own clues without animation delay.
    """
    puzzle = PuzzleDefinition(
        name="house",
        rows=[[1], [3], [5], [1, 1], [1, 1]],
        columns=[[1], [4], [3], [4], [1]],
    )
    report = solve_puzzle(puzzle, timing=create_custom_timing(delay_ms=0), passes=5)
    print(f"\nStatus: {report.status.value} after {report.passes} pass(es)")
    for row in report.picture:
        print(row)


def main():
    """
    Run examples.
    """
    setup_logging()
    example_builtin_puzzle()
    example_custom_puzzle()


if __name__ == "__main__":
    main()
