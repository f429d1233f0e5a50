"""Scrollbar geometry from layout overflow.

The layout already left room for the bars it asked for; this module
works out where the tracks are and how long the thumbs should be.
"""

from __future__ import annotations

from dataclasses import dataclass

from glyphflow.render.constants import MIN_THUMB_LENGTH
from glyphflow.text.model import LayoutOverflow, OverflowPass2, Rect, ScrollbarReservation


@dataclass(frozen=True)
class ScrollbarGeometry:
    """Track and thumb rectangles of one scrollbar."""

    orientation: str  # "vertical" or "horizontal"
    track: Rect
    thumb: Rect
    max_scroll: float


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _thumb_span(
    track_length: float, visible: float, excess: float, scroll: float
) -> tuple[float, float]:
    """Return (offset along the track, length) of the thumb."""
    content = visible + excess
    length = track_length * visible / content if content > 0 else track_length
    length = min(track_length, max(length, MIN_THUMB_LENGTH))
    if excess <= 0:
        return 0.0, length
    position = _clamp(scroll, 0.0, excess)
    return (track_length - length) * position / excess, length


def compute_scrollbars(
    bounds: Rect,
    overflow: OverflowPass2,
    scrollbar: ScrollbarReservation,
    scroll_x: float = 0.0,
    scroll_y: float = 0.0,
    policy: LayoutOverflow = LayoutOverflow(),
) -> list[ScrollbarGeometry]:
    """Scrollbars for every scrolling axis that still overflows after layout.

    A vertical bar runs along the right edge, a horizontal bar along the
    bottom. When both are shown, each stops short of the shared corner.
    Clipped and visible axes never get a bar.
    """
    thickness = scrollbar.thickness
    padding = scrollbar.padding
    show_vertical = overflow.vertical.is_overflowing and policy.scrolls_vertically()
    show_horizontal = overflow.horizontal.is_overflowing and policy.scrolls_horizontally()

    bars: list[ScrollbarGeometry] = []

    if show_vertical:
        track_length = bounds.height - (thickness if show_horizontal else 0.0)
        track_length = max(0.0, track_length)
        track = Rect(bounds.right - thickness, bounds.y, thickness, track_length)
        offset, length = _thumb_span(
            track_length, track_length, overflow.vertical.amount, scroll_y
        )
        thumb = Rect(
            track.x + padding,
            track.y + offset,
            max(0.0, thickness - 2 * padding),
            length,
        )
        bars.append(ScrollbarGeometry("vertical", track, thumb, overflow.vertical.amount))

    if show_horizontal:
        track_length = bounds.width - (thickness if show_vertical else 0.0)
        track_length = max(0.0, track_length)
        track = Rect(bounds.x, bounds.bottom - thickness, track_length, thickness)
        offset, length = _thumb_span(
            track_length, track_length, overflow.horizontal.amount, scroll_x
        )
        thumb = Rect(
            track.x + offset,
            track.y + padding,
            length,
            max(0.0, thickness - 2 * padding),
        )
        bars.append(
            ScrollbarGeometry("horizontal", track, thumb, overflow.horizontal.amount)
        )

    return bars
