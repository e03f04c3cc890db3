"""
Utility modules organized by domain.

Submodules:
- logging: Logging configuration
- timing: Pacing of animated output
- ui: Render surface, glyph merging and result display
"""
