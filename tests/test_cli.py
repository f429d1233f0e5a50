"""Tests for the CLI entry points."""

import json

from click.testing import CliRunner

from font_factory import write_font
from glyphflow import __version__
from glyphflow.cli import cli


def _text_file(tmp_path, text="Hello World", name="sample.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_layout_summary(tmp_path):
    """layout command prints glyph count and overflow per axis."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ["layout", str(_text_file(tmp_path)), "--font-size", "10"]
    )
    assert result.exit_code == 0, result.output
    assert "Glyphs: 10" in result.output
    assert "Horizontal: in bounds" in result.output
    assert "Vertical: in bounds" in result.output


def test_layout_reports_overflow(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path)), "--font-size", "10",
         "--width", "40", "--height", "15"],
    )
    assert result.exit_code == 0, result.output
    assert "Vertical: overflowing by 3.00px" in result.output
    assert "Horizontal: in bounds, slack 5.00px" in result.output


def test_layout_clipped_overflow_keeps_full_width(tmp_path):
    """--overflow-y clip reserves no scrollbar width."""
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path)), "--font-size", "10",
         "--width", "40", "--height", "15", "--overflow-y", "clip"],
    )
    assert result.exit_code == 0, result.output
    assert "Vertical: overflowing by 3.00px" in result.output
    assert "Horizontal: in bounds, slack 15.00px" in result.output


def test_layout_json(tmp_path):
    """--json prints bounds, overflow and every glyph."""
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path, "Hi")), "--font-size", "10",
         "--x", "5", "--json"],
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["bounds"]["x"] == 5.0
    assert [g["char"] for g in doc["glyphs"]] == ["H", "i"]
    assert doc["glyphs"][0]["x"] == 5.0
    assert doc["overflow"]["vertical"]["overflowing"] is False


def test_layout_alignment_options(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path, "Hi")), "--font-size", "10",
         "--width", "100", "--align", "right", "--json"],
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["glyphs"][0]["x"] == 85.0


def test_layout_scroll_overflow_keeps_one_line(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path)), "--font-size", "10",
         "--width", "40", "--overflow-x", "scroll", "--json"],
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert {g["y"] for g in doc["glyphs"]} == {8.0}
    assert doc["overflow"]["horizontal"]["overflowing"] is True


def test_layout_negative_width_fails(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["layout", str(_text_file(tmp_path)), "--width", "-10"]
    )
    assert result.exit_code == 1
    assert "Layout error" in result.output


def test_layout_missing_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["layout", "does-not-exist.txt"])
    assert result.exit_code != 0


def test_layout_with_font_file(tmp_path):
    font = tmp_path / "tiny.ttf"
    write_font(font, kern_pairs={("A", "V"): -80})
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["layout", str(_text_file(tmp_path, "AV")), "--font", str(font),
         "--font-size", "10", "--json"],
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert [g["id"] for g in doc["glyphs"]] == [2, 3]
    assert abs(doc["glyphs"][1]["x"] - 5.2) < 1e-9


def test_layout_garbage_font_fails(tmp_path):
    garbage = tmp_path / "broken.ttf"
    garbage.write_bytes(b"not a font at all")
    runner = CliRunner()
    result = runner.invoke(
        cli, ["layout", str(_text_file(tmp_path)), "--font", str(garbage)]
    )
    assert result.exit_code == 1
    assert "Could not load font" in result.output


def test_render_produces_svg(tmp_path):
    """render command writes an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(_text_file(tmp_path)), "-o", str(out), "--theme", "light"]
    )
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()
    assert "Rendered 10 glyphs" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(_text_file(tmp_path)), "--glyph-boxes"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "sample.svg").exists()


def test_metrics_default_font():
    runner = CliRunner()
    result = runner.invoke(cli, ["metrics", "--font-size", "10"])
    assert result.exit_code == 0, result.output
    assert "Font: (fixed-width)" in result.output
    assert "Space width: 5.00" in result.output
    assert "Tab width: 20.00" in result.output
    assert "Vertical advance: 10.00" in result.output
    assert "Top offset: 8.00" in result.output


def test_metrics_line_height(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["metrics", "--font-size", "10", "--line-height", "1.5"])
    assert result.exit_code == 0, result.output
    assert "Vertical advance: 15.00" in result.output
    assert "Top offset: 12.00" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
