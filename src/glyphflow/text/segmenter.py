"""Split text into semantic tokens (words, tabs, line breaks).

Words carry their glyphs positioned relative to the word's own left
edge, with pair kerning applied between neighbouring glyphs of the same
word. Nothing here knows about lines or the target rectangle.
"""

from __future__ import annotations

__all__ = ["WordBuilder", "split_text_into_words"]

from glyphflow.fonts.provider import FontMetricsProvider
from glyphflow.text.model import LINE_BREAK, TAB, GlyphOffset, SemanticToken, Word


class WordBuilder:
    """Accumulates the glyphs of one word until ``flush`` is called."""

    def __init__(self, font: FontMetricsProvider, font_size: float) -> None:
        self.font = font
        self.font_size = font_size
        self._reset()

    def _reset(self) -> None:
        self._chars: list[str] = []
        self._glyphs: list[GlyphOffset] = []
        self._caret = 0.0
        self._width = 0.0
        self._last_glyph: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self._chars

    def push(self, char: str) -> None:
        metrics = self.font.glyph(char, self.font_size)
        kerning = 0.0
        if self._last_glyph is not None:
            kerning = self.font.pair_kerning(
                self._last_glyph, metrics.glyph_id, self.font_size
            )
        self._caret += kerning
        self._glyphs.append(GlyphOffset(metrics.glyph_id, self._caret, 0.0, char))
        self._caret += metrics.advance_width
        self._width += kerning + metrics.advance_width
        self._last_glyph = metrics.glyph_id
        self._chars.append(char)

    def flush(self) -> Word:
        """Return the finished word and start a new one."""
        word = Word(
            text="".join(self._chars),
            glyphs=tuple(self._glyphs),
            total_width=self._width,
        )
        self._reset()
        return word


def split_text_into_words(
    text: str, font: FontMetricsProvider, font_size: float
) -> list[SemanticToken]:
    """Split NFC-normalized ``text`` into words, tabs and line breaks.

    Spaces only separate words. ``\\r\\n`` and a lone ``\\r`` are treated
    like ``\\n``.
    """
    tokens: list[SemanticToken] = []
    builder = WordBuilder(font, font_size)

    def end_word() -> None:
        if not builder.is_empty:
            tokens.append(builder.flush())

    previous = ""
    for char in text:
        if char == " ":
            end_word()
        elif char == "\t":
            end_word()
            tokens.append(TAB)
        elif char == "\r":
            end_word()
            tokens.append(LINE_BREAK)
        elif char == "\n":
            end_word()
            # The \r already produced the break
            if previous != "\r":
                tokens.append(LINE_BREAK)
        else:
            builder.push(char)
        previous = char

    end_word()
    return tokens
