"""CLI for glyphflow."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from glyphflow import __version__
from glyphflow.fonts import FixedWidthFontMetrics, FontMetricsProvider, TrueTypeFontMetrics
from glyphflow.layout import MalformedLayout, compute_font_metrics, layout_text
from glyphflow.layout.constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_SCROLLBAR_PADDING,
    DEFAULT_SCROLLBAR_THICKNESS,
)
from glyphflow.render import render_svg
from glyphflow.text.model import (
    HorizontalAlign,
    LayoutOverflow,
    OverflowBehaviour,
    OverflowPass2,
    PositionedGlyph,
    Rect,
    ScrollbarReservation,
    VerticalAlign,
)
from glyphflow.themes import THEMES

_OVERFLOW_CHOICES = [b.value for b in OverflowBehaviour]


def _font_options(func):
    func = click.option("--line-height", type=float, default=None,
                        help="Line height factor (default: 1.0)")(func)
    func = click.option("--font-size", type=float, default=DEFAULT_FONT_SIZE,
                        help=f"Font size in pixels (default: {DEFAULT_FONT_SIZE:g})")(func)
    func = click.option("--font", "font_path",
                        type=click.Path(exists=True, dir_okay=False, path_type=Path),
                        default=None,
                        help="TrueType/OpenType font file. Defaults to synthetic "
                             "fixed-width metrics")(func)
    return func


def _layout_options(func):
    func = click.option("--scrollbar-thickness", type=float,
                        default=DEFAULT_SCROLLBAR_THICKNESS,
                        help="Space reserved for a scrollbar in pixels "
                             f"(default: {DEFAULT_SCROLLBAR_THICKNESS:g})")(func)
    func = click.option("--overflow-y", type=click.Choice(_OVERFLOW_CHOICES),
                        default="auto",
                        help="Vertical overflow policy; clip and visible "
                             "reserve no scrollbar (default: auto)")(func)
    func = click.option("--overflow-x", type=click.Choice(_OVERFLOW_CHOICES),
                        default="auto",
                        help="Horizontal overflow policy; scroll and visible "
                             "disable line wrapping (default: auto)")(func)
    func = click.option("--valign", type=click.Choice([a.value for a in VerticalAlign]),
                        default="top", help="Vertical alignment (default: top)")(func)
    func = click.option("--align", type=click.Choice([a.value for a in HorizontalAlign]),
                        default="left", help="Horizontal alignment (default: left)")(func)
    func = click.option("--y", "origin_y", type=float, default=0.0,
                        help="Rectangle top edge (default: 0)")(func)
    func = click.option("--x", "origin_x", type=float, default=0.0,
                        help="Rectangle left edge (default: 0)")(func)
    func = click.option("--height", type=float, default=200.0,
                        help="Rectangle height in pixels (default: 200)")(func)
    func = click.option("--width", type=float, default=300.0,
                        help="Rectangle width in pixels (default: 300)")(func)
    return _font_options(func)


def _load_font(font_path: Path | None) -> FontMetricsProvider:
    if font_path is None:
        return FixedWidthFontMetrics()
    try:
        return TrueTypeFontMetrics(font_path)
    except Exception as e:
        click.echo(f"Could not load font {font_path}: {e}", err=True)
        raise SystemExit(1)


def _overflow_policy(overflow_x: str, overflow_y: str) -> LayoutOverflow:
    return LayoutOverflow(OverflowBehaviour(overflow_x), OverflowBehaviour(overflow_y))


def _run_layout(
    input_file: Path,
    font: FontMetricsProvider,
    bounds: Rect,
    font_size: float,
    line_height: float | None,
    align: str,
    valign: str,
    overflow_x: str,
    overflow_y: str,
    scrollbar: ScrollbarReservation,
) -> tuple[list[PositionedGlyph], OverflowPass2]:
    text = input_file.read_text(encoding="utf-8")
    overflow = _overflow_policy(overflow_x, overflow_y)
    try:
        return layout_text(
            text,
            bounds,
            font,
            font_size,
            horizontal_align=HorizontalAlign(align),
            vertical_align=VerticalAlign(valign),
            line_height=line_height,
            overflow=overflow,
            scrollbar=scrollbar,
        )
    except MalformedLayout as e:
        click.echo(f"Layout error: {e}", err=True)
        raise SystemExit(1)


def _describe(result) -> str:
    kind = "overflowing by" if result.is_overflowing else "in bounds, slack"
    return f"{kind} {result.amount:.2f}px"


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """glyphflow: Lay out text as positioned glyphs inside a rectangle."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@_layout_options
@click.option("--json", "as_json", is_flag=True, help="Print glyphs and overflow as JSON.")
def layout(
    input_file: Path,
    width: float,
    height: float,
    origin_x: float,
    origin_y: float,
    align: str,
    valign: str,
    overflow_x: str,
    overflow_y: str,
    scrollbar_thickness: float,
    font_path: Path | None,
    font_size: float,
    line_height: float | None,
    as_json: bool,
) -> None:
    """Lay out a UTF-8 text file and report glyph positions and overflow."""
    font = _load_font(font_path)
    bounds = Rect(origin_x, origin_y, width, height)
    scrollbar = ScrollbarReservation(scrollbar_thickness, DEFAULT_SCROLLBAR_PADDING)
    glyphs, overflow = _run_layout(
        input_file, font, bounds, font_size, line_height,
        align, valign, overflow_x, overflow_y, scrollbar,
    )

    if as_json:
        doc = {
            "bounds": {"x": bounds.x, "y": bounds.y,
                       "width": bounds.width, "height": bounds.height},
            "overflow": {
                axis: {"overflowing": result.is_overflowing, "amount": result.amount}
                for axis, result in (("horizontal", overflow.horizontal),
                                     ("vertical", overflow.vertical))
            },
            "glyphs": [
                {"id": g.glyph_id, "char": g.char, "x": g.x, "y": g.y} for g in glyphs
            ],
        }
        click.echo(json.dumps(doc, indent=2, ensure_ascii=False))
        return

    click.echo(f"Glyphs: {len(glyphs)}")
    click.echo(f"Horizontal: {_describe(overflow.horizontal)}")
    click.echo(f"Vertical: {_describe(overflow.vertical)}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@_layout_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--glyph-boxes", is_flag=True, help="Outline every glyph's advance box.")
@click.option("--no-clip", is_flag=True, help="Draw text outside the rectangle too.")
def render(
    input_file: Path,
    width: float,
    height: float,
    origin_x: float,
    origin_y: float,
    align: str,
    valign: str,
    overflow_x: str,
    overflow_y: str,
    scrollbar_thickness: float,
    font_path: Path | None,
    font_size: float,
    line_height: float | None,
    output: Path | None,
    theme: str,
    glyph_boxes: bool,
    no_clip: bool,
) -> None:
    """Lay out a UTF-8 text file and render an SVG preview."""
    font = _load_font(font_path)
    bounds = Rect(origin_x, origin_y, width, height)
    scrollbar = ScrollbarReservation(scrollbar_thickness, DEFAULT_SCROLLBAR_PADDING)
    glyphs, overflow = _run_layout(
        input_file, font, bounds, font_size, line_height,
        align, valign, overflow_x, overflow_y, scrollbar,
    )

    scaled_size = font_size * font.size_factor
    advances = None
    if glyph_boxes:
        advances = [font.glyph(g.char, scaled_size).advance_width for g in glyphs]

    svg = render_svg(
        glyphs, overflow, bounds, THEMES[theme], scaled_size, scrollbar,
        clip=not no_clip,
        overflow_policy=_overflow_policy(overflow_x, overflow_y),
        show_glyph_boxes=glyph_boxes,
        advances=advances,
    )

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg, encoding="utf-8")
    click.echo(f"Rendered {len(glyphs)} glyphs -> {output}")


@cli.command()
@_font_options
def metrics(font_path: Path | None, font_size: float, line_height: float | None) -> None:
    """Show the font metrics the layout uses at a given size."""
    font = _load_font(font_path)
    snapshot = compute_font_metrics(font, font_size * font.size_factor, line_height)
    click.echo(f"Font: {font_path.name if font_path else '(fixed-width)'}")
    click.echo(f"Space width: {snapshot.space_width:.2f}")
    click.echo(f"Tab width: {snapshot.tab_width:.2f}")
    click.echo(f"Vertical advance: {snapshot.vertical_advance:.2f}")
    click.echo(f"Top offset: {snapshot.top_offset:.2f}")
