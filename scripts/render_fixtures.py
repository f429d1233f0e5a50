#!/usr/bin/env python3
"""Batch render all text fixtures to SVG under a few rectangle presets.

Outputs go to /tmp/glyphflow_fixture_renders/.

Usage:
    python scripts/render_fixtures.py [--font FONT.ttf] [--glyph-boxes]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from glyphflow.fonts import FixedWidthFontMetrics, TrueTypeFontMetrics  # noqa: E402
from glyphflow.layout import MalformedLayout, layout_text  # noqa: E402
from glyphflow.render import render_svg  # noqa: E402
from glyphflow.text.model import (  # noqa: E402
    HorizontalAlign,
    LayoutOverflow,
    OverflowBehaviour,
    Rect,
    ScrollbarReservation,
    VerticalAlign,
)
from glyphflow.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/glyphflow_fixture_renders")
TEXTS_DIR = project_root / "tests" / "fixtures" / "texts"

FIXTURE_FILES = sorted(TEXTS_DIR.glob("*.txt"))
FONT_SIZE = 14.0
SCROLLBAR = ScrollbarReservation()

PRESETS = {
    "wide": (Rect(0, 0, 480, 160), HorizontalAlign.LEFT, VerticalAlign.TOP, LayoutOverflow()),
    "narrow": (Rect(0, 0, 140, 120), HorizontalAlign.CENTER, VerticalAlign.CENTER, LayoutOverflow()),
    "scroll": (
        Rect(0, 0, 200, 80),
        HorizontalAlign.RIGHT,
        VerticalAlign.BOTTOM,
        LayoutOverflow(OverflowBehaviour.SCROLL, OverflowBehaviour.SCROLL),
    ),
}


def render_file(
    txt_path: Path, font, output_dir: Path, *, glyph_boxes: bool = False
) -> tuple[str, list[str]]:
    """Lay out and render a .txt file under every preset.

    Returns (name, list_of_issues).
    """
    name = txt_path.stem
    issues: list[str] = []
    text = txt_path.read_text(encoding="utf-8")
    size = FONT_SIZE * font.size_factor

    for preset, (bounds, align, valign, overflow_policy) in PRESETS.items():
        try:
            glyphs, overflow = layout_text(
                text,
                bounds,
                font,
                FONT_SIZE,
                horizontal_align=align,
                vertical_align=valign,
                overflow=overflow_policy,
                scrollbar=SCROLLBAR,
            )
        except MalformedLayout as e:
            issues.append(f"{preset}: LAYOUT ERROR: {e}")
            continue

        advances = None
        if glyph_boxes:
            advances = [font.glyph(g.char, size).advance_width for g in glyphs]
        svg_str = render_svg(
            glyphs, overflow, bounds, THEMES["dark"], size, SCROLLBAR,
            overflow_policy=overflow_policy,
            show_glyph_boxes=glyph_boxes,
            advances=advances,
        )
        (output_dir / f"{name}_{preset}.svg").write_text(svg_str, encoding="utf-8")

        for axis, result in (("x", overflow.horizontal), ("y", overflow.vertical)):
            if result.is_overflowing:
                issues.append(f"{preset}: overflows {axis} by {result.amount:.1f}px")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render text fixtures")
    parser.add_argument("--font", type=Path, default=None, help="TrueType/OpenType font file")
    parser.add_argument("--glyph-boxes", action="store_true", help="Outline glyph advance boxes")
    args = parser.parse_args()

    font = TrueTypeFontMetrics(args.font) if args.font else FixedWidthFontMetrics()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Rendering {len(FIXTURE_FILES)} files x {len(PRESETS)} presets to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in FIXTURE_FILES)
    any_errors = False

    for txt_path in FIXTURE_FILES:
        name, issues = render_file(txt_path, font, OUTPUT_DIR, glyph_boxes=args.glyph_boxes)
        status = "OK" if not issues else "OVERFLOW"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
