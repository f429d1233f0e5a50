"""Overflow estimation: does the text fit the rectangle, and by how much?

Pass 1 measures the token stream against the full rectangle without
placing any glyph. Pass 2 reserves room for the scrollbars that pass 1
asked for and measures again. Reserving a scrollbar narrows the
rectangle, which can change line wrapping, so pass 2 is the result
alignment and scrollbar sizing must use.
"""

from __future__ import annotations

__all__ = ["estimate_overflow_pass_1", "estimate_overflow_pass_2", "measure_lines"]

from glyphflow.text.model import (
    FontMetricsSnapshot,
    InBounds,
    LayoutOverflow,
    LineBreak,
    OverflowPass1,
    OverflowPass2,
    ScrollbarReservation,
    SemanticToken,
    Size,
    Tab,
    Word,
    overflow_result,
)


def measure_lines(
    words: list[SemanticToken],
    max_width: float | None,
    font_metrics: FontMetricsSnapshot,
) -> tuple[int, float]:
    """Simulate greedy line wrapping without placing glyphs.

    Uses the same wrapping rule as the placer: a word that would end past
    ``max_width`` moves to a new line unless it is the first thing on its
    line. ``max_width=None`` wraps on explicit breaks only.

    Returns (number of line breaks, width of the widest line). Line width
    is measured to the end of the last word or tab, without the trailing
    inter-word space.
    """
    space_width = font_metrics.space_width
    tab_width = font_metrics.tab_width

    breaks = 0
    caret = 0.0
    line_width = 0.0
    widest = 0.0

    for token in words:
        if isinstance(token, Word):
            if (
                max_width is not None
                and caret > 0.0
                and caret + token.total_width > max_width
            ):
                widest = max(widest, line_width)
                breaks += 1
                caret = 0.0
                line_width = 0.0
            line_width = max(line_width, caret + token.total_width)
            caret += token.total_width + space_width
        elif isinstance(token, Tab):
            caret += tab_width
            line_width = max(line_width, caret)
        elif isinstance(token, LineBreak):
            widest = max(widest, line_width)
            breaks += 1
            caret = 0.0
            line_width = 0.0
        else:
            raise TypeError(f"Unknown token: {token!r}")

    return breaks, max(widest, line_width)


def estimate_overflow_pass_1(
    words: list[SemanticToken],
    rect_size: Size,
    font_metrics: FontMetricsSnapshot,
    overflow: LayoutOverflow,
) -> OverflowPass1:
    """Estimate per-axis overflow of the token stream against ``rect_size``."""
    if not words:
        return OverflowPass1(
            horizontal=InBounds(rect_size.width),
            vertical=InBounds(rect_size.height),
        )

    if overflow.allows_horizontal_overflow():
        # Lines never wrap, so only the explicit breaks add height
        breaks, widest = measure_lines(words, None, font_metrics)
        vertical_length = breaks * font_metrics.vertical_advance
    else:
        breaks, widest = measure_lines(words, rect_size.width, font_metrics)
        vertical_length = font_metrics.top_offset + breaks * font_metrics.vertical_advance

    return OverflowPass1(
        horizontal=overflow_result(widest, rect_size.width),
        vertical=overflow_result(vertical_length, rect_size.height),
    )


def estimate_overflow_pass_2(
    words: list[SemanticToken],
    rect_size: Size,
    font_metrics: FontMetricsSnapshot,
    overflow: LayoutOverflow,
    scrollbar: ScrollbarReservation,
    pass1: OverflowPass1,
) -> tuple[Size, OverflowPass2]:
    """Reserve scrollbar space where pass 1 overflowed, then measure again.

    A horizontal scrollbar sits along the bottom edge and takes height;
    a vertical one sits along the right edge and takes width. Only axes
    whose policy scrolls (auto or scroll) get a bar; clip and visible
    leave the rectangle as it is. Each reservation happens at most once.

    Returns (effective layout size, pass 2 overflow).
    """
    width = rect_size.width
    height = rect_size.height

    if pass1.horizontal.is_overflowing and overflow.scrolls_horizontally():
        height = max(0.0, height - scrollbar.thickness)
    if pass1.vertical.is_overflowing and overflow.scrolls_vertically():
        width = max(0.0, width - scrollbar.thickness)

    new_size = Size(width, height)
    recalc = estimate_overflow_pass_1(words, new_size, font_metrics, overflow)

    return new_size, OverflowPass2(
        horizontal=recalc.horizontal,
        vertical=recalc.vertical,
    )
