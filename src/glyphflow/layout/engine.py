"""Layout coordinator: turns a text run into positioned glyphs.

Pipeline, each step consuming the previous step's output:

1. Split the text into words, tabs and line breaks
2. Compute shaping adjustments
3. Estimate overflow against the full rectangle
4. Reserve scrollbar space where needed and estimate again
5. Place glyphs left-aligned, breaking lines at the effective width
6. Apply shaping, then compute and apply justification adjustments
7. Align horizontally
8. Align vertically
9. Translate from layout space into the rectangle's space
"""

from __future__ import annotations

import logging
import math
import unicodedata

from glyphflow.fonts.provider import FontMetricsProvider
from glyphflow.layout.adjustments import (
    JustificationStrategy,
    ShapingStrategy,
    apply_adjustments,
    no_justification,
    no_shaping,
)
from glyphflow.layout.align import add_origin, align_text_horz, align_text_vert
from glyphflow.layout.constants import DEFAULT_LINE_HEIGHT, TAB_WIDTH_IN_SPACES
from glyphflow.layout.errors import MalformedLayout
from glyphflow.layout.overflow import estimate_overflow_pass_1, estimate_overflow_pass_2
from glyphflow.layout.placement import words_to_left_aligned_glyphs
from glyphflow.text.model import (
    FontMetricsSnapshot,
    HorizontalAlign,
    InBounds,
    LayoutOverflow,
    OverflowPass2,
    PositionedGlyph,
    Rect,
    ScrollbarReservation,
    VerticalAlign,
    Word,
    overflow_result,
)
from glyphflow.text.segmenter import split_text_into_words

logger = logging.getLogger(__name__)

_DEFAULT_OVERFLOW = LayoutOverflow()
_DEFAULT_SCROLLBAR = ScrollbarReservation()


def compute_font_metrics(
    font: FontMetricsProvider,
    font_size: float,
    line_height: float | None = None,
) -> FontMetricsSnapshot:
    """Resolve the handful of font metrics the layout stages need."""
    if line_height is None:
        line_height = DEFAULT_LINE_HEIGHT
    size_with_line_height = font_size * line_height
    space_width = font.glyph(" ", font_size).advance_width
    return FontMetricsSnapshot(
        space_width=space_width,
        tab_width=TAB_WIDTH_IN_SPACES * space_width,
        vertical_advance=size_with_line_height,
        top_offset=font.v_metrics(size_with_line_height).ascent,
    )


def _check_inputs(bounds: Rect, font_size: float, line_height: float | None) -> None:
    for name in ("x", "y", "width", "height"):
        value = getattr(bounds, name)
        if not math.isfinite(value):
            raise MalformedLayout(f"Bounds {name} is not finite: {value}")
    if bounds.width < 0 or bounds.height < 0:
        raise MalformedLayout(
            f"Bounds have a negative size: {bounds.width} x {bounds.height}"
        )
    if not math.isfinite(font_size) or font_size <= 0:
        raise MalformedLayout(f"Font size must be positive, got {font_size}")
    if line_height is not None and (not math.isfinite(line_height) or line_height <= 0):
        raise MalformedLayout(f"Line height must be positive, got {line_height}")


def _empty_layout(bounds: Rect) -> tuple[list[PositionedGlyph], OverflowPass2]:
    return [], OverflowPass2(
        horizontal=InBounds(bounds.width),
        vertical=InBounds(bounds.height),
    )


def get_glyphs(
    bounds: Rect,
    horiz_alignment: HorizontalAlign,
    vert_alignment: VerticalAlign,
    font: FontMetricsProvider,
    font_size: float,
    line_height: float | None,
    text: str,
    overflow: LayoutOverflow,
    scrollbar: ScrollbarReservation,
    *,
    shaping: ShapingStrategy = no_shaping,
    justification: JustificationStrategy = no_justification,
) -> tuple[list[PositionedGlyph], OverflowPass2]:
    """Lay out ``text`` inside ``bounds``.

    ``font_size`` is passed to the font provider as is; use
    ``layout_text`` to apply the backend's size conversion first.

    Returns the positioned glyphs (already including ``bounds.origin``;
    if a scrollbar is needed the text leaves room for it on the right or
    bottom) and the overflow after scrollbar reservation, which tells the
    scrollbar presentation how far the text overflows.

    Raises MalformedLayout for negative or non-finite bounds, a
    non-positive font size or line height, and broken intermediate
    state. Empty text, text without a single glyph and zero-area bounds
    give an empty layout.
    """
    _check_inputs(bounds, font_size, line_height)

    if not text or bounds.width == 0 or bounds.height == 0:
        return _empty_layout(bounds)

    font_metrics = compute_font_metrics(font, font_size, line_height)
    normalized = unicodedata.normalize("NFC", text)

    # (1) Split the text into semantic items
    words = split_text_into_words(normalized, font, font_size)
    if not any(isinstance(token, Word) for token in words):
        # Only spaces, tabs and line breaks: nothing to place
        return _empty_layout(bounds)

    # (2) Shaping corrections, independent of line breaking
    shaping_adjustments = shaping(normalized, font, font_size)

    # (3) Does the text overflow the full rectangle?
    overflow_pass_1 = estimate_overflow_pass_1(words, bounds.size, font_metrics, overflow)

    # (4) Reserve scrollbar space and measure again
    new_size, overflow_pass_2 = estimate_overflow_pass_2(
        words, bounds.size, font_metrics, overflow, scrollbar, overflow_pass_1
    )
    logger.debug(
        "%d tokens, pass 1 %s, pass 2 %s, effective size %s",
        len(words), overflow_pass_1, overflow_pass_2, new_size,
    )

    max_horizontal_width = (
        None if overflow.allows_horizontal_overflow() else new_size.width
    )

    # (5) Left-aligned layout
    glyphs, line_breaks = words_to_left_aligned_glyphs(
        words, max_horizontal_width, font_metrics
    )
    logger.debug("Placed %d glyphs on %d lines", len(glyphs), len(line_breaks))

    # (6) Shaping, then justification of the placed lines
    apply_adjustments(glyphs, shaping_adjustments)
    apply_adjustments(glyphs, justification(glyphs, line_breaks))

    # (7) Horizontal alignment (left alignment only validates the line table)
    align_text_horz(horiz_alignment, glyphs, line_breaks)

    # (8) Vertical alignment of the placed block (overflowing text stays at the top)
    block_height = (
        font_metrics.top_offset + (len(line_breaks) - 1) * font_metrics.vertical_advance
    )
    align_text_vert(vert_alignment, glyphs, overflow_result(block_height, new_size.height))

    # (9) Layout space to destination space
    add_origin(glyphs, bounds.x, bounds.y)

    return glyphs, overflow_pass_2


def layout_text(
    text: str,
    bounds: Rect,
    font: FontMetricsProvider,
    font_size: float,
    horizontal_align: HorizontalAlign = HorizontalAlign.LEFT,
    vertical_align: VerticalAlign = VerticalAlign.TOP,
    line_height: float | None = None,
    overflow: LayoutOverflow = _DEFAULT_OVERFLOW,
    scrollbar: ScrollbarReservation = _DEFAULT_SCROLLBAR,
    *,
    shaping: ShapingStrategy = no_shaping,
    justification: JustificationStrategy = no_justification,
) -> tuple[list[PositionedGlyph], OverflowPass2]:
    """Lay out ``text`` with ``font_size`` given in the caller's units.

    The font backend's ``size_factor`` converts the size before any
    metric lookup.
    """
    return get_glyphs(
        bounds,
        horizontal_align,
        vertical_align,
        font,
        font_size * font.size_factor,
        line_height,
        text,
        overflow,
        scrollbar,
        shaping=shaping,
        justification=justification,
    )
