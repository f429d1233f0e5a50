"""Text model and segmentation."""

from glyphflow.text.model import (
    LINE_BREAK,
    TAB,
    FontMetricsSnapshot,
    GlyphOffset,
    HorizontalAlign,
    InBounds,
    LayoutOverflow,
    LineBreak,
    LineBreakEntry,
    OverflowBehaviour,
    Overflowing,
    OverflowPass1,
    OverflowPass2,
    PositionedGlyph,
    Rect,
    ScrollbarReservation,
    Size,
    Tab,
    VerticalAlign,
    Word,
)
from glyphflow.text.segmenter import WordBuilder, split_text_into_words

__all__ = [
    "LINE_BREAK",
    "TAB",
    "FontMetricsSnapshot",
    "GlyphOffset",
    "HorizontalAlign",
    "InBounds",
    "LayoutOverflow",
    "LineBreak",
    "LineBreakEntry",
    "OverflowBehaviour",
    "OverflowPass1",
    "OverflowPass2",
    "Overflowing",
    "PositionedGlyph",
    "Rect",
    "ScrollbarReservation",
    "Size",
    "Tab",
    "VerticalAlign",
    "Word",
    "WordBuilder",
    "split_text_into_words",
]
