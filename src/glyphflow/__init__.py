"""glyphflow: lay out text runs as positioned glyphs inside a rectangle."""

__version__ = "0.3.0"

from glyphflow.layout import MalformedLayout, get_glyphs, layout_text

__all__ = ["MalformedLayout", "__version__", "get_glyphs", "layout_text"]
