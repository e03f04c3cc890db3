"""
UI Theme configuration: colors and icons for result output.
"""

from typing import Dict

THEME: Dict[str, str] = {
    "text": "#e6edf3",  # Main text
    "muted": "#7d8590",  # Muted text
    "success": "#00ff88",  # Fully solved
    "warning": "#d29922",  # Partially solved
    "error": "#f85149",  # Contradiction
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "partial": "◐",
    "error": "✗",
    "bullet": "•",
}
