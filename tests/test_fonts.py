"""Tests for the font metrics providers."""

import logging

import pytest

from font_factory import build_font, write_font
from glyphflow import layout_text
from glyphflow.fonts import FixedWidthFontMetrics, TrueTypeFontMetrics
from glyphflow.text.model import Rect
from glyphflow.text.segmenter import split_text_into_words

A, V, E = 2, 3, 4


def test_fixed_width_scales_with_size():
    font = FixedWidthFontMetrics(advances={"i": 0.25})
    assert font.glyph("x", 10.0).advance_width == 5.0
    assert font.glyph("i", 20.0).advance_width == 5.0
    assert font.glyph("x", 10.0).glyph_id == ord("x")


def test_fixed_width_vertical_metrics():
    metrics = FixedWidthFontMetrics().v_metrics(10.0)
    assert (metrics.ascent, metrics.descent, metrics.line_gap) == (8.0, -2.0, 0.0)
    assert metrics.line_advance == 10.0


def test_fixed_width_kerning_by_glyph_id():
    font = FixedWidthFontMetrics(kerning={("A", "V"): -0.1})
    assert font.pair_kerning(ord("A"), ord("V"), 10.0) == pytest.approx(-1.0)
    assert font.pair_kerning(ord("V"), ord("A"), 10.0) == 0.0


def test_fixed_width_cache_key_tracks_configuration():
    assert FixedWidthFontMetrics().cache_key == FixedWidthFontMetrics().cache_key
    assert FixedWidthFontMetrics().cache_key != FixedWidthFontMetrics(advance=0.6).cache_key


def test_truetype_glyph_metrics():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    glyph = font.glyph("A", 10.0)
    assert glyph.glyph_id == A
    assert glyph.advance_width == pytest.approx(6.0)
    assert font.glyph(" ", 10.0).advance_width == pytest.approx(2.5)


def test_truetype_unmapped_character_is_notdef():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    glyph = font.glyph("Z", 10.0)
    assert glyph.glyph_id == 0
    assert glyph.advance_width == pytest.approx(5.0)


def test_truetype_vertical_metrics():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    metrics = font.v_metrics(10.0)
    assert metrics.ascent == pytest.approx(8.0)
    assert metrics.descent == pytest.approx(-2.0)
    assert metrics.line_gap == pytest.approx(0.0)


def test_truetype_legacy_kern_table():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    assert font.pair_kerning(A, V, 10.0) == pytest.approx(-0.8)
    assert font.pair_kerning(V, A, 10.0) == 0.0


def test_truetype_gpos_glyph_pairs():
    font = TrueTypeFontMetrics(
        build_font(features="languagesystem DFLT dflt; feature kern { pos A V -50; } kern;")
    )
    assert font.pair_kerning(A, V, 10.0) == pytest.approx(-0.5)
    assert font.pair_kerning(A, E, 10.0) == 0.0


def test_truetype_gpos_class_pairs():
    font = TrueTypeFontMetrics(
        build_font(
            features="languagesystem DFLT dflt; "
            "feature kern { pos [A] [V e] -30; } kern;"
        )
    )
    assert font.pair_kerning(A, V, 10.0) == pytest.approx(-0.3)
    assert font.pair_kerning(A, E, 10.0) == pytest.approx(-0.3)
    assert font.pair_kerning(V, A, 10.0) == 0.0


def test_truetype_kerning_feeds_segmenter():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    (word,) = split_text_into_words("AV", font, 10.0)
    assert word.glyphs[1].x == pytest.approx(6.0 - 0.8)
    assert word.total_width == pytest.approx(12.0 - 0.8)


def test_truetype_without_kerning_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="glyphflow.fonts.truetype"):
        font = TrueTypeFontMetrics(build_font())
    assert "no usable kerning data" in caplog.text
    assert font.pair_kerning(A, V, 10.0) == 0.0


def test_truetype_from_path(tmp_path):
    path = tmp_path / "tiny.ttf"
    write_font(path, kern_pairs={("A", "V"): -80})
    font = TrueTypeFontMetrics(path, size_factor=0.75)
    assert font.name == "tiny.ttf"
    assert font.cache_key == ("truetype", str(path), 0.75)
    assert font.glyph("e", 10.0).glyph_id == E


def test_truetype_in_memory_name():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    assert font.name == "Glyphflow Test Regular"


def test_truetype_layout_end_to_end():
    font = TrueTypeFontMetrics(build_font(kern_pairs={("A", "V"): -80}))
    glyphs, overflow = layout_text("AV \u00e9", Rect(0, 0, 100, 50), font, 10.0)
    assert [g.glyph_id for g in glyphs] == [A, V, 5]
    # AV: 12 - 0.8, then a 2.5px space
    assert glyphs[2].x == pytest.approx(11.2 + 2.5)
    assert glyphs[0].y == pytest.approx(8.0)
    assert not overflow.vertical.is_overflowing
