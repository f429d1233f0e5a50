"""Memoized layout for callers that lay out the same text every frame.

The layout core recomputes everything on each call. ``LayoutCache`` sits
in front of it and keys results on everything that can change the
output: the normalized text, the font, the size, the rectangle and the
style.
"""

from __future__ import annotations

import logging
import unicodedata
from collections import OrderedDict
from dataclasses import replace

from glyphflow.fonts.provider import FontMetricsProvider
from glyphflow.layout.adjustments import (
    JustificationStrategy,
    ShapingStrategy,
    no_justification,
    no_shaping,
)
from glyphflow.layout.engine import layout_text
from glyphflow.text.model import (
    HorizontalAlign,
    LayoutOverflow,
    OverflowPass2,
    PositionedGlyph,
    Rect,
    ScrollbarReservation,
    VerticalAlign,
)

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 128


def font_identity(font: FontMetricsProvider) -> object:
    """Providers describe themselves with ``cache_key``; otherwise use the object.

    An identity key is only safe while the font is alive, so cache
    entries hold on to the font they were computed with.
    """
    key = getattr(font, "cache_key", None)
    return key if key is not None else id(font)


class LayoutCache:
    """Least-recently-used cache of layout results."""

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        # key -> (font, glyphs, overflow)
        self._entries: OrderedDict[
            tuple, tuple[FontMetricsProvider, list[PositionedGlyph], OverflowPass2]
        ] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def layout_text(
        self,
        text: str,
        bounds: Rect,
        font: FontMetricsProvider,
        font_size: float,
        horizontal_align: HorizontalAlign = HorizontalAlign.LEFT,
        vertical_align: VerticalAlign = VerticalAlign.TOP,
        line_height: float | None = None,
        overflow: LayoutOverflow = LayoutOverflow(),
        scrollbar: ScrollbarReservation = ScrollbarReservation(),
        *,
        shaping: ShapingStrategy = no_shaping,
        justification: JustificationStrategy = no_justification,
    ) -> tuple[list[PositionedGlyph], OverflowPass2]:
        """Same as ``glyphflow.layout.layout_text``, served from the cache when possible.

        The returned glyphs are copies; mutating them does not affect
        later results.
        """
        normalized = unicodedata.normalize("NFC", text)
        key = (
            normalized,
            font_identity(font),
            font_size,
            bounds,
            horizontal_align,
            vertical_align,
            line_height,
            overflow,
            scrollbar,
            shaping,
            justification,
        )

        entry = self._entries.get(key)
        if entry is not None:
            self.hits += 1
            self._entries.move_to_end(key)
        else:
            self.misses += 1
            glyphs, overflow_pass_2 = layout_text(
                normalized,
                bounds,
                font,
                font_size,
                horizontal_align,
                vertical_align,
                line_height,
                overflow,
                scrollbar,
                shaping=shaping,
                justification=justification,
            )
            entry = (font, glyphs, overflow_pass_2)
            self._entries[key] = entry
            if len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted layout for %r", evicted[0][:40])

        _, glyphs, overflow_pass_2 = entry
        return [replace(glyph) for glyph in glyphs], overflow_pass_2
