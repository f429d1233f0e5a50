"""Font metrics providers for the layout core.

Public API:
- FontMetricsProvider: capability protocol the core depends on
- FixedWidthFontMetrics: synthetic em-proportional metrics
- TrueTypeFontMetrics: fontTools-backed metrics for real font files
"""

from glyphflow.fonts.provider import (
    FixedWidthFontMetrics,
    FontMetricsProvider,
    GlyphMetrics,
    VerticalMetrics,
)
from glyphflow.fonts.truetype import TrueTypeFontMetrics

__all__ = [
    "FixedWidthFontMetrics",
    "FontMetricsProvider",
    "GlyphMetrics",
    "TrueTypeFontMetrics",
    "VerticalMetrics",
]
