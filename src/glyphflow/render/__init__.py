"""SVG previews and scrollbar geometry for laid-out text."""

from glyphflow.render.scrollbar import ScrollbarGeometry, compute_scrollbars
from glyphflow.render.style import Theme
from glyphflow.render.svg import render_svg

__all__ = ["ScrollbarGeometry", "Theme", "compute_scrollbars", "render_svg"]
