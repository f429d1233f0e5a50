"""Text layout subpackage.

Public API:
- layout_text: Main entry point (applies the font backend's size factor)
- get_glyphs: Pipeline entry point for already converted font sizes
- compute_font_metrics: Per-call font metrics snapshot
- MalformedLayout: Raised for invalid input or a broken line table
"""

from glyphflow.layout.engine import compute_font_metrics, get_glyphs, layout_text
from glyphflow.layout.errors import MalformedLayout

__all__ = [
    "MalformedLayout",
    "compute_font_metrics",
    "get_glyphs",
    "layout_text",
]
