"""Theme and style constants for layout previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for an SVG layout preview."""

    name: str
    background_color: str
    bounds_fill: str
    bounds_stroke: str
    text_color: str
    font_family: str
    # Scrollbar settings
    scrollbar_track: str
    scrollbar_thumb: str
    scrollbar_corner_radius: float = 3.0
    # Debug glyph boxes (--glyph-boxes)
    glyph_box_stroke: str = "#ff00ff"
    glyph_box_stroke_width: float = 0.5
