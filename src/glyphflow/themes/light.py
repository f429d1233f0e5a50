"""Light theme with transparent background (for documentation pages)."""

from glyphflow.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    bounds_fill="#ffffff",
    bounds_stroke="#bbbbbb",
    text_color="#333333",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    scrollbar_track="#eeeeee",
    scrollbar_thumb="#a0a0a0",
    glyph_box_stroke="#d62728",
)
