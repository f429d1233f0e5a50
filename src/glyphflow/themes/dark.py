"""Dark grey preview theme."""

from glyphflow.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    bounds_fill="rgba(255, 255, 255, 0.06)",
    bounds_stroke="rgba(255, 255, 255, 0.3)",
    text_color="#e0e0e0",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    scrollbar_track="rgba(255, 255, 255, 0.08)",
    scrollbar_thumb="#8a8a8a",
    glyph_box_stroke="#ff79c6",
)
