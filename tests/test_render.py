"""Tests for SVG rendering and scrollbar geometry."""

import xml.etree.ElementTree as ET

import pytest

from glyphflow import layout_text
from glyphflow.fonts import FixedWidthFontMetrics
from glyphflow.render.constants import MIN_THUMB_LENGTH
from glyphflow.render.scrollbar import compute_scrollbars
from glyphflow.render.svg import render_svg
from glyphflow.text.model import (
    InBounds,
    LayoutOverflow,
    OverflowBehaviour,
    Overflowing,
    OverflowPass2,
    Rect,
    ScrollbarReservation,
)
from glyphflow.themes import DARK_THEME, LIGHT_THEME

FONT = FixedWidthFontMetrics()
SCROLLBAR = ScrollbarReservation(thickness=10.0, padding=2.0)


def _render(text, bounds=Rect(0, 0, 200, 50), theme=DARK_THEME, **kwargs):
    glyphs, overflow = layout_text(text, bounds, FONT, 10.0, scrollbar=SCROLLBAR)
    return render_svg(glyphs, overflow, bounds, theme, 10.0, SCROLLBAR, **kwargs)


def test_render_produces_valid_svg():
    svg = _render("Hello World")
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_glyphs():
    svg = _render("Hello World")
    root = ET.fromstring(svg)
    chars = [el.text for el in root.iter() if el.tag.endswith("text")]
    assert "".join(chars) == "HelloWorld"


def test_render_escapes_markup_characters():
    svg = _render("a<b & c")
    ET.fromstring(svg)
    assert "&lt;" in svg
    assert "&amp;" in svg


def test_render_dark_theme_background():
    svg = _render("Hello")
    assert DARK_THEME.background_color in svg
    assert DARK_THEME.text_color in svg


def test_render_light_theme():
    svg = _render("Hello", theme=LIGHT_THEME)
    assert LIGHT_THEME.text_color in svg
    assert DARK_THEME.background_color not in svg


def test_render_ends_with_newline():
    assert _render("Hello").endswith("\n")


def test_render_scrollbar_only_when_overflowing():
    assert DARK_THEME.scrollbar_thumb not in _render("Hello")
    svg = _render("Hello World", bounds=Rect(0, 0, 40, 15))
    assert DARK_THEME.scrollbar_thumb in svg


def test_render_clipped_overflow_has_no_scrollbar():
    bounds = Rect(0, 0, 40, 15)
    policy = LayoutOverflow(vertical=OverflowBehaviour.CLIP)
    glyphs, overflow = layout_text(
        "Hello World", bounds, FONT, 10.0, overflow=policy, scrollbar=SCROLLBAR
    )
    assert overflow.vertical.is_overflowing
    svg = render_svg(
        glyphs, overflow, bounds, DARK_THEME, 10.0, SCROLLBAR, overflow_policy=policy
    )
    assert DARK_THEME.scrollbar_thumb not in svg


def test_render_clips_by_default():
    assert "clipPath" in _render("Hello")
    assert "clipPath" not in _render("Hello", clip=False)


def test_render_glyph_boxes():
    svg = _render("Hi", show_glyph_boxes=True, advances=[5.0, 5.0])
    assert svg.count(DARK_THEME.glyph_box_stroke) == 2


def test_render_empty_layout():
    svg = _render("")
    root = ET.fromstring(svg)
    assert not [el for el in root.iter() if el.tag.endswith("text")]


def test_no_scrollbars_when_in_bounds():
    overflow = OverflowPass2(InBounds(10.0), InBounds(10.0))
    assert compute_scrollbars(Rect(0, 0, 100, 50), overflow, SCROLLBAR) == []


def test_vertical_scrollbar_on_right_edge():
    overflow = OverflowPass2(InBounds(0.0), Overflowing(50.0))
    (bar,) = compute_scrollbars(Rect(0, 0, 100, 50), overflow, SCROLLBAR)
    assert bar.orientation == "vertical"
    assert bar.track == Rect(90.0, 0.0, 10.0, 50.0)
    # Half the content is visible: half-length thumb, inset by the padding
    assert bar.thumb == Rect(92.0, 0.0, 6.0, 25.0)
    assert bar.max_scroll == 50.0


def test_thumb_follows_scroll_position():
    overflow = OverflowPass2(InBounds(0.0), Overflowing(50.0))
    bounds = Rect(0, 0, 100, 50)
    (middle,) = compute_scrollbars(bounds, overflow, SCROLLBAR, scroll_y=25.0)
    assert middle.thumb.y == pytest.approx(12.5)
    (end,) = compute_scrollbars(bounds, overflow, SCROLLBAR, scroll_y=1000.0)
    assert end.thumb.y == pytest.approx(25.0)
    (start,) = compute_scrollbars(bounds, overflow, SCROLLBAR, scroll_y=-5.0)
    assert start.thumb.y == 0.0


def test_both_scrollbars_leave_corner_free():
    overflow = OverflowPass2(Overflowing(100.0), Overflowing(50.0))
    vertical, horizontal = compute_scrollbars(Rect(10, 20, 100, 50), overflow, SCROLLBAR)
    assert vertical.track == Rect(100.0, 20.0, 10.0, 40.0)
    assert horizontal.orientation == "horizontal"
    assert horizontal.track == Rect(10.0, 60.0, 90.0, 10.0)


def test_thumb_has_minimum_length():
    overflow = OverflowPass2(InBounds(0.0), Overflowing(10000.0))
    (bar,) = compute_scrollbars(Rect(0, 0, 100, 50), overflow, SCROLLBAR)
    assert bar.thumb.height == MIN_THUMB_LENGTH


def test_clipped_axis_gets_no_scrollbar():
    overflow = OverflowPass2(InBounds(0.0), Overflowing(50.0))
    policy = LayoutOverflow(vertical=OverflowBehaviour.CLIP)
    assert compute_scrollbars(Rect(0, 0, 100, 50), overflow, SCROLLBAR, policy=policy) == []


def test_visible_horizontal_axis_leaves_corner_to_vertical_bar():
    overflow = OverflowPass2(Overflowing(100.0), Overflowing(50.0))
    policy = LayoutOverflow(horizontal=OverflowBehaviour.VISIBLE)
    (bar,) = compute_scrollbars(Rect(0, 0, 100, 50), overflow, SCROLLBAR, policy=policy)
    assert bar.orientation == "vertical"
    assert bar.track == Rect(90.0, 0.0, 10.0, 50.0)
