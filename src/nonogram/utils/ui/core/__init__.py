"""
Core terminal rendering infrastructure.

This package centralizes terminal output. Higher-level modules draw through
RenderSurface rather than printing directly.
"""

from .glyphs import Arm, Axis, merge_glyph
from .surface import RenderSurface
from .terminal import ConsoleDevice, TerminalDevice

__all__ = ["Arm", "Axis", "merge_glyph", "RenderSurface", "ConsoleDevice", "TerminalDevice"]
