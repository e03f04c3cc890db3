"""
Terminal output: render surface, glyph merging, result display.
"""

from .core import Axis, ConsoleDevice, RenderSurface, TerminalDevice
from .result import print_solve_report
from .theme import ICONS, THEME

__all__ = [
    "Axis",
    "ConsoleDevice",
    "RenderSurface",
    "TerminalDevice",
    "print_solve_report",
    "ICONS",
    "THEME",
]
