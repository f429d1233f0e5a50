"""Data model for text layout: tokens, glyphs, overflow results and style."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from glyphflow.layout.constants import (
    DEFAULT_SCROLLBAR_PADDING,
    DEFAULT_SCROLLBAR_THICKNESS,
)


class HorizontalAlign(Enum):
    """Horizontal text alignment inside the bounding rectangle."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(Enum):
    """Vertical alignment of the whole text block."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class OverflowBehaviour(Enum):
    """What happens to content that does not fit on one axis.

    - auto:    wrap lines, show a scrollbar when needed
    - scroll:  never wrap, scroll the overflowing content
    - visible: never wrap, draw past the rectangle
    - clip:    wrap lines, cut off whatever does not fit
    """

    AUTO = "auto"
    SCROLL = "scroll"
    VISIBLE = "visible"
    CLIP = "clip"

    @property
    def allows_overflow(self) -> bool:
        return self in (OverflowBehaviour.SCROLL, OverflowBehaviour.VISIBLE)

    @property
    def shows_scrollbar(self) -> bool:
        return self in (OverflowBehaviour.AUTO, OverflowBehaviour.SCROLL)


@dataclass(frozen=True)
class LayoutOverflow:
    """Per-axis overflow policy (``overflow-x`` / ``overflow-y``).

    The horizontal policy decides whether lines wrap. Each axis decides
    on its own whether overflowing content gets a scrollbar.
    """

    horizontal: OverflowBehaviour = OverflowBehaviour.AUTO
    vertical: OverflowBehaviour = OverflowBehaviour.AUTO

    def allows_horizontal_overflow(self) -> bool:
        """Lines are not wrapped at the rectangle width."""
        return self.horizontal.allows_overflow

    def scrolls_horizontally(self) -> bool:
        """Horizontal overflow gets a scrollbar along the bottom edge."""
        return self.horizontal.shows_scrollbar

    def scrolls_vertically(self) -> bool:
        """Vertical overflow gets a scrollbar along the right edge."""
        return self.vertical.shows_scrollbar


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in destination pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


# ---------------------------------------------------------------------------
# Semantic tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GlyphOffset:
    """A glyph inside a word, positioned relative to the word's left edge."""

    glyph_id: int
    x: float
    y: float
    char: str = ""


@dataclass(frozen=True)
class Word:
    """A run of characters delimited by whitespace."""

    text: str
    glyphs: tuple[GlyphOffset, ...] = ()
    # Sum of advances plus intra-word kerning
    total_width: float = 0.0


@dataclass(frozen=True)
class Tab:
    """A ``\\t`` character."""


@dataclass(frozen=True)
class LineBreak:
    """An explicit line break (``\\n``, ``\\r`` or ``\\r\\n``)."""


TAB = Tab()
LINE_BREAK = LineBreak()

SemanticToken = Union[Word, Tab, LineBreak]


# ---------------------------------------------------------------------------
# Metrics and overflow
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FontMetricsSnapshot:
    """Font metrics resolved once per layout call."""

    # Advance of the space character
    space_width: float
    # Usually TAB_WIDTH_IN_SPACES * space_width
    tab_width: float
    # font_size * line_height
    vertical_advance: float
    # Ascent reserved above the first baseline
    top_offset: float


@dataclass(frozen=True)
class Overflowing:
    """Content exceeds the bound by ``excess`` pixels."""

    excess: float

    @property
    def is_overflowing(self) -> bool:
        return True

    @property
    def amount(self) -> float:
        return self.excess


@dataclass(frozen=True)
class InBounds:
    """Content fits, leaving ``slack`` pixels until the edge."""

    slack: float

    @property
    def is_overflowing(self) -> bool:
        return False

    @property
    def amount(self) -> float:
        return self.slack


OverflowResult = Union[Overflowing, InBounds]


def overflow_result(consumed: float, bound: float) -> OverflowResult:
    """Compare the space some content consumes against the available bound."""
    if consumed > bound:
        return Overflowing(consumed - bound)
    return InBounds(bound - consumed)


@dataclass(frozen=True)
class OverflowPass1:
    """Overflow estimate against the full rectangle, before any scrollbar."""

    horizontal: OverflowResult
    vertical: OverflowResult


@dataclass(frozen=True)
class OverflowPass2:
    """Overflow after reserving scrollbar space.

    Used for alignment and by the scrollbar presentation to size the bars.
    """

    horizontal: OverflowResult
    vertical: OverflowResult


@dataclass(frozen=True)
class ScrollbarReservation:
    """Space taken by a scrollbar. Only ``thickness`` affects layout."""

    thickness: float = DEFAULT_SCROLLBAR_THICKNESS
    padding: float = DEFAULT_SCROLLBAR_PADDING


# ---------------------------------------------------------------------------
# Layout output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineBreakEntry:
    """Index of the last glyph on a line and the free space after it."""

    last_glyph_index: int
    trailing_slack: float


@dataclass
class PositionedGlyph:
    """A glyph at its final position. ``y`` is the baseline."""

    glyph_id: int
    x: float
    y: float
    char: str = ""
