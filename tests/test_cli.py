"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from boxgrid import __version__
from boxgrid.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
DIAGRAM_TXT = EXAMPLES_DIR / "diagram.txt"
GROUPS_TXT = EXAMPLES_DIR / "groups.txt"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(DIAGRAM_TXT), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert "In Progress" in content


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    txt = tmp_path / "test.txt"
    txt.write_text(GROUPS_TXT.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(txt)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_debug_json(tmp_path):
    """render --debug writes routing diagnostics."""
    txt = tmp_path / "flow.txt"
    txt.write_text("a: 1,1: A\nb: 1,3: B\n---\na -> b\n")
    debug = tmp_path / "debug.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(txt), "-o", str(tmp_path / "o.svg"), "--debug", str(debug)]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(debug.read_text())
    assert data["arrows"][0]["routingStrategy"] == "straight_vertical"


def test_render_stretch(tmp_path):
    """--stretch narrows the canvas."""
    txt = tmp_path / "one.txt"
    txt.write_text("a: 1,1: A\n")
    runner = CliRunner()
    runner.invoke(cli, ["render", str(txt), "-o", str(tmp_path / "a.svg")])
    runner.invoke(cli, ["render", str(txt), "-o", str(tmp_path / "b.svg"),
                        "--stretch", "0.5"])
    assert 'width="360"' in (tmp_path / "a.svg").read_text()
    assert 'width="360"' not in (tmp_path / "b.svg").read_text()


def test_render_font_flag_overrides_frontmatter(tmp_path):
    """--font wins over the font: front matter key."""
    font = tmp_path / "Cli.woff2"
    font.write_bytes(b"font")
    txt = tmp_path / "f.txt"
    txt.write_text("---\nfont: missing.woff2\n---\na: 1,1: A\n")
    out = tmp_path / "f.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(txt), "-o", str(out), "--font", str(font)])
    assert result.exit_code == 0, result.output
    assert "'Cli'" in out.read_text()


def test_render_missing_font(tmp_path):
    """A font that cannot be read is reported."""
    txt = tmp_path / "f.txt"
    txt.write_text("---\nfont: missing.woff2\n---\na: 1,1: A\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(txt), "-o", str(tmp_path / "f.svg")])
    assert result.exit_code == 1
    assert "Error loading font" in result.output


def test_render_parse_error(tmp_path):
    """render reports parse errors and exits non-zero."""
    bad = tmp_path / "bad.txt"
    bad.write_text("a: +1,+1: A\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert not (tmp_path / "bad.svg").exists()


def test_render_reports_skipped_arrows(tmp_path):
    txt = tmp_path / "s.txt"
    txt.write_text("a: 1,1: A\nb: 3,1: B\nc: 5,1: C\n---\na -> c\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(txt), "-o", str(tmp_path / "s.svg")])
    assert result.exit_code == 0
    assert "could not be routed" in result.output


def test_validate_success():
    """validate command succeeds on valid input."""
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(GROUPS_TXT)])
    assert result.exit_code == 0
    assert "Valid: 6 boxes, 2 arrows, 1 groups" in result.output


def test_validate_bad_file(tmp_path):
    """validate command reports parse errors."""
    bad = tmp_path / "bad.txt"
    bad.write_text("a: 1,1: A\n---\nnot an arrow\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "invalid arrow definition" in result.output


def test_info_output():
    """info command prints diagram metadata."""
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(DIAGRAM_TXT)])
    assert result.exit_code == 0
    assert "X label: Time" in result.output
    assert "Boxes: 10" in result.output
    assert "Arrows:" in result.output
    assert "Legend: 2 entries" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_all_examples_validate():
    """Every shipped example parses."""
    runner = CliRunner()
    for path in sorted(EXAMPLES_DIR.glob("*.txt")):
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0, f"{path.name}: {result.output}"
