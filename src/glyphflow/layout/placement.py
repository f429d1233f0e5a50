"""Greedy line breaking and left-aligned glyph placement."""

from __future__ import annotations

__all__ = ["words_to_left_aligned_glyphs"]

from glyphflow.text.model import (
    FontMetricsSnapshot,
    LineBreak,
    LineBreakEntry,
    PositionedGlyph,
    SemanticToken,
    Tab,
    Word,
)


def words_to_left_aligned_glyphs(
    words: list[SemanticToken],
    max_horizontal_width: float | None,
    font_metrics: FontMetricsSnapshot,
) -> tuple[list[PositionedGlyph], list[LineBreakEntry]]:
    """Place words left to right, wrapping at ``max_horizontal_width``.

    ``max_horizontal_width=None`` means the text may overflow the
    rectangle horizontally: lines only break on explicit line breaks.

    Returns the glyphs in layout-local space (baseline of the first line
    at ``top_offset``) and the line break table: for every line, the index
    of its last glyph and the free space to its right. Without a maximum
    width, the free space is measured against the longest line.
    """
    space_width = font_metrics.space_width
    tab_width = font_metrics.tab_width
    vertical_advance = font_metrics.vertical_advance
    top_offset = font_metrics.top_offset

    glyphs: list[PositionedGlyph] = []
    # (last glyph index, caret at the end of the line)
    line_ends: list[tuple[int, float]] = []

    # X position of the "pen"
    caret = 0.0
    line_num = 0

    def break_line() -> None:
        nonlocal caret, line_num
        line_ends.append((len(glyphs) - 1, caret))
        caret = 0.0
        line_num += 1

    for word in words:
        if isinstance(word, Word):
            if (
                max_horizontal_width is not None
                and caret > 0.0
                and caret + word.total_width > max_horizontal_width
            ):
                break_line()

            baseline = line_num * vertical_advance + top_offset
            for glyph in word.glyphs:
                glyphs.append(
                    PositionedGlyph(
                        glyph.glyph_id,
                        caret + glyph.x,
                        baseline + glyph.y,
                        glyph.char,
                    )
                )
            # One space is reserved after every word
            caret += word.total_width + space_width
        elif isinstance(word, Tab):
            caret += tab_width
        elif isinstance(word, LineBreak):
            break_line()
        else:
            raise TypeError(f"Unknown token: {word!r}")

    if not glyphs:
        return glyphs, []

    # Last (possibly partial) line
    line_ends.append((len(glyphs) - 1, caret))

    if max_horizontal_width is not None:
        line_breaks = [
            LineBreakEntry(index, max(0.0, max_horizontal_width - end))
            for index, end in line_ends
        ]
    else:
        longest = max(end for _, end in line_ends)
        line_breaks = [LineBreakEntry(index, longest - end) for index, end in line_ends]

    return glyphs, line_breaks
