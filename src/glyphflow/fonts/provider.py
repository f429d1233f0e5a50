"""Font metrics capability used by the layout core.

The core never talks to a rasterizer directly. It asks a
``FontMetricsProvider`` for three things: a glyph id and advance per
character, a kerning adjustment per glyph pair and the vertical metrics
at a given size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from glyphflow.layout.constants import DEFAULT_SIZE_FACTOR


@dataclass(frozen=True)
class GlyphMetrics:
    """Glyph id and horizontal advance of a character at some size."""

    glyph_id: int
    advance_width: float


@dataclass(frozen=True)
class VerticalMetrics:
    """Ascent (positive, above baseline), descent (negative) and line gap."""

    ascent: float
    descent: float
    line_gap: float

    @property
    def line_advance(self) -> float:
        return self.ascent - self.descent + self.line_gap


class FontMetricsProvider(Protocol):
    # Multiplied into the caller's font size before any lookup. Each
    # backend has its own idea of what "size" means.
    size_factor: float

    def glyph(self, char: str, size: float) -> GlyphMetrics:
        """Look up the glyph for a character, scaled to ``size``."""

    def pair_kerning(self, first: int, second: int, size: float) -> float:
        """Signed advance adjustment between two adjacent glyph ids."""

    def v_metrics(self, size: float) -> VerticalMetrics:
        """Vertical metrics scaled to ``size``."""


@dataclass
class FixedWidthFontMetrics:
    """Synthetic metrics proportional to the font size.

    All lengths are in em units (fractions of the font size). Every
    character has advance ``advance`` unless listed in ``advances``, and
    the glyph id is the character's code point. ``kerning`` maps
    character pairs to em adjustments.
    """

    advance: float = 0.5
    advances: dict[str, float] = field(default_factory=dict)
    kerning: dict[tuple[str, str], float] = field(default_factory=dict)
    ascent: float = 0.8
    descent: float = -0.2
    line_gap: float = 0.0
    size_factor: float = DEFAULT_SIZE_FACTOR

    def __post_init__(self) -> None:
        self._kerning_by_id = {
            (ord(a), ord(b)): value for (a, b), value in self.kerning.items()
        }

    @property
    def cache_key(self) -> tuple:
        return (
            "fixed",
            self.advance,
            tuple(sorted(self.advances.items())),
            tuple(sorted(self.kerning.items())),
            self.ascent,
            self.descent,
            self.line_gap,
            self.size_factor,
        )

    def glyph(self, char: str, size: float) -> GlyphMetrics:
        return GlyphMetrics(ord(char), self.advances.get(char, self.advance) * size)

    def pair_kerning(self, first: int, second: int, size: float) -> float:
        return self._kerning_by_id.get((first, second), 0.0) * size

    def v_metrics(self, size: float) -> VerticalMetrics:
        return VerticalMetrics(
            self.ascent * size, self.descent * size, self.line_gap * size
        )
