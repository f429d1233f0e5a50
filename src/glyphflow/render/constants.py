"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 20.0
"""Padding around the layout rectangle in the SVG preview."""

BOUNDS_STROKE_WIDTH: float = 1.0
"""Stroke width of the layout rectangle outline."""

# ---------------------------------------------------------------------------
# Scrollbars
# ---------------------------------------------------------------------------
MIN_THUMB_LENGTH: float = 12.0
"""Scrollbar thumbs never get shorter than this, however long the content."""

# ---------------------------------------------------------------------------
# Glyph boxes
# ---------------------------------------------------------------------------
GLYPH_BOX_ASCENT_RATIO: float = 0.8
"""Height of a debug glyph box above the baseline, relative to font size."""

GLYPH_BOX_DESCENT_RATIO: float = 0.2
"""Depth of a debug glyph box below the baseline, relative to font size."""
