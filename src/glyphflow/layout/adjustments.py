"""Glyph adjustment passes: shaping before line breaking, justification after.

Both passes compute one positional delta per glyph and leave it to
``apply_adjustments`` to move the glyphs. The default strategies compute
nothing, which leaves the layout untouched; a shaping engine or a
justification algorithm plugs in by passing another strategy to the
layout entry point.
"""

from __future__ import annotations

__all__ = [
    "GlyphDelta",
    "JustificationStrategy",
    "ShapingStrategy",
    "apply_adjustments",
    "no_justification",
    "no_shaping",
]

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from glyphflow.fonts.provider import FontMetricsProvider
from glyphflow.layout.errors import MalformedLayout
from glyphflow.text.model import LineBreakEntry, PositionedGlyph


@dataclass(frozen=True)
class GlyphDelta:
    dx: float = 0.0
    dy: float = 0.0


class ShapingStrategy(Protocol):
    def __call__(
        self, text: str, font: FontMetricsProvider, font_size: float
    ) -> list[GlyphDelta]:
        """
        Corrections from a shaping engine, one per emitted glyph.

        Spaces, tabs and line breaks emit no glyph, so they get no delta.
        An empty list leaves every glyph where it is.
        """


class JustificationStrategy(Protocol):
    def __call__(
        self, glyphs: Sequence[PositionedGlyph], line_breaks: Sequence[LineBreakEntry]
    ) -> list[GlyphDelta]:
        """
        Corrections for the placed glyphs, e.g. to stretch lines to full width
        """


def no_shaping(text: str, font: FontMetricsProvider, font_size: float) -> list[GlyphDelta]:
    return []


def no_justification(
    glyphs: Sequence[PositionedGlyph], line_breaks: Sequence[LineBreakEntry]
) -> list[GlyphDelta]:
    return []


def apply_adjustments(glyphs: list[PositionedGlyph], deltas: Sequence[GlyphDelta]) -> None:
    """Move every glyph by its delta. No deltas at all means no change."""
    if not deltas:
        return
    if len(deltas) != len(glyphs):
        raise MalformedLayout(
            f"Got {len(deltas)} glyph adjustments for {len(glyphs)} glyphs"
        )
    for glyph, delta in zip(glyphs, deltas):
        glyph.x += delta.dx
        glyph.y += delta.dy
