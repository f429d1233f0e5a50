"""
Text align

Moves left-aligned, top-aligned glyphs into place. Every line knows how
much free space it has on its right (the line break table), so center
and right alignment only shift each line by half or all of that space.
Vertical alignment does the same for the whole block with the vertical
slack of the rectangle.
"""

from __future__ import annotations

__all__ = ["add_origin", "align_text_horz", "align_text_vert", "validate_line_breaks"]

from glyphflow.layout.errors import MalformedLayout
from glyphflow.text.model import (
    HorizontalAlign,
    LineBreakEntry,
    OverflowResult,
    PositionedGlyph,
    VerticalAlign,
)

_HORIZONTAL_FACTOR = {
    HorizontalAlign.LEFT: 0.0,
    HorizontalAlign.CENTER: 0.5,
    HorizontalAlign.RIGHT: 1.0,
}

_VERTICAL_FACTOR = {
    VerticalAlign.TOP: 0.0,
    VerticalAlign.CENTER: 0.5,
    VerticalAlign.BOTTOM: 1.0,
}


def validate_line_breaks(
    glyphs: list[PositionedGlyph], line_breaks: list[LineBreakEntry]
) -> None:
    """The last line has to end with the last glyph."""
    last_index = line_breaks[-1].last_glyph_index
    if last_index != len(glyphs) - 1:
        raise MalformedLayout(
            f"Line table ends at glyph {last_index}, "
            f"but the layout has {len(glyphs)} glyphs"
        )
    previous = -1
    for entry in line_breaks:
        if entry.last_glyph_index < previous:
            raise MalformedLayout(
                f"Line table is not ordered: glyph {entry.last_glyph_index} "
                f"after glyph {previous}"
            )
        previous = entry.last_glyph_index


def align_text_horz(
    alignment: HorizontalAlign,
    glyphs: list[PositionedGlyph],
    line_breaks: list[LineBreakEntry],
) -> None:
    if not line_breaks:
        # Nothing was placed
        return

    validate_line_breaks(glyphs, line_breaks)

    factor = _HORIZONTAL_FACTOR[alignment]
    if not factor:
        return

    line = 0
    for glyph_idx, glyph in enumerate(glyphs):
        # Skips the entries of empty lines as well
        while glyph_idx > line_breaks[line].last_glyph_index:
            line += 1
        glyph.x += line_breaks[line].trailing_slack * factor


def align_text_vert(
    alignment: VerticalAlign,
    glyphs: list[PositionedGlyph],
    block_fit: OverflowResult,
) -> None:
    """Shift the whole block down by a share of its vertical slack.

    ``block_fit`` compares the height of the placed lines, first ascent
    included, with the height left for text. Overflowing text stays at
    the top, where scrolling starts.
    """
    if block_fit.is_overflowing:
        return
    shift = block_fit.amount * _VERTICAL_FACTOR[alignment]
    if not shift:
        return
    for glyph in glyphs:
        glyph.y += shift


def add_origin(glyphs: list[PositionedGlyph], x: float, y: float) -> None:
    """Translate glyphs from layout space into the rectangle's space."""
    for glyph in glyphs:
        glyph.x += x
        glyph.y += y
