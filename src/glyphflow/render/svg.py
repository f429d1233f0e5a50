"""SVG previews of laid-out text using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from glyphflow.render.constants import (
    BOUNDS_STROKE_WIDTH,
    CANVAS_PADDING,
    GLYPH_BOX_ASCENT_RATIO,
    GLYPH_BOX_DESCENT_RATIO,
)
from glyphflow.render.scrollbar import ScrollbarGeometry, compute_scrollbars
from glyphflow.render.style import Theme
from glyphflow.text.model import (
    LayoutOverflow,
    OverflowPass2,
    PositionedGlyph,
    Rect,
    ScrollbarReservation,
)


def render_svg(
    glyphs: list[PositionedGlyph],
    overflow: OverflowPass2,
    bounds: Rect,
    theme: Theme,
    font_size: float,
    scrollbar: ScrollbarReservation,
    *,
    clip: bool = True,
    overflow_policy: LayoutOverflow = LayoutOverflow(),
    show_glyph_boxes: bool = False,
    advances: list[float] | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render positioned glyphs, their rectangle and its scrollbars to SVG.

    ``advances`` (one per glyph) sizes the debug glyph boxes; without it
    boxes are drawn one em wide.
    """
    svg_width = bounds.right + padding * 2
    svg_height = bounds.bottom + padding * 2

    d = draw.Drawing(svg_width, svg_height)

    # Background
    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    content = draw.Group(transform=f"translate({padding},{padding})")
    d.append(content)

    # Layout rectangle
    content.append(draw.Rectangle(
        bounds.x, bounds.y, bounds.width, bounds.height,
        fill=theme.bounds_fill,
        stroke=theme.bounds_stroke,
        stroke_width=BOUNDS_STROKE_WIDTH,
    ))

    if clip:
        clip_path = draw.ClipPath()
        clip_path.append(draw.Rectangle(bounds.x, bounds.y, bounds.width, bounds.height))
        text_group = draw.Group(clip_path=clip_path)
    else:
        text_group = draw.Group()
    content.append(text_group)

    if show_glyph_boxes:
        _render_glyph_boxes(text_group, glyphs, theme, font_size, advances)
    _render_glyphs(text_group, glyphs, theme, font_size)

    for bar in compute_scrollbars(bounds, overflow, scrollbar, policy=overflow_policy):
        _render_scrollbar(content, bar, theme)

    svg = d.as_svg()
    return svg if svg.endswith("\n") else svg + "\n"


def _render_glyphs(
    group: draw.Group,
    glyphs: list[PositionedGlyph],
    theme: Theme,
    font_size: float,
) -> None:
    """One text element per glyph, anchored at its baseline."""
    for glyph in glyphs:
        if not glyph.char:
            continue
        group.append(draw.Text(
            glyph.char,
            font_size,
            glyph.x, glyph.y,
            fill=theme.text_color,
            font_family=theme.font_family,
        ))


def _render_glyph_boxes(
    group: draw.Group,
    glyphs: list[PositionedGlyph],
    theme: Theme,
    font_size: float,
    advances: list[float] | None,
) -> None:
    ascent = font_size * GLYPH_BOX_ASCENT_RATIO
    height = ascent + font_size * GLYPH_BOX_DESCENT_RATIO
    for i, glyph in enumerate(glyphs):
        width = advances[i] if advances is not None else font_size
        group.append(draw.Rectangle(
            glyph.x, glyph.y - ascent, width, height,
            fill="none",
            stroke=theme.glyph_box_stroke,
            stroke_width=theme.glyph_box_stroke_width,
        ))


def _render_scrollbar(
    group: draw.Group,
    bar: ScrollbarGeometry,
    theme: Theme,
) -> None:
    track, thumb = bar.track, bar.thumb
    group.append(draw.Rectangle(
        track.x, track.y, track.width, track.height,
        fill=theme.scrollbar_track,
    ))
    group.append(draw.Rectangle(
        thumb.x, thumb.y, thumb.width, thumb.height,
        rx=theme.scrollbar_corner_radius, ry=theme.scrollbar_corner_radius,
        fill=theme.scrollbar_thumb,
    ))
