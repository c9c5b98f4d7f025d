"""End-to-end tests for the freehand command line."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from freehand import __version__, get_stroke
from freehand.cli.app import app

runner = CliRunner()

WAVE = [[x * 4.0, (x % 6) * 3.0, 0.4 + (x % 3) * 0.1] for x in range(40)]


@pytest.fixture
def strokes_file(tmp_path: Path) -> Path:
    """A strokes file with two named strokes and shared options."""
    path = tmp_path / "sig.json"
    path.write_text(
        json.dumps(
            {
                "options": {"size": 10},
                "strokes": [
                    {"name": "first", "points": WAVE},
                    {"name": "second", "points": WAVE[:10], "options": {"thinning": 0}},
                ],
            }
        )
    )
    return path


@pytest.fixture
def bare_file(tmp_path: Path) -> Path:
    """A strokes file holding one bare point list."""
    path = tmp_path / "wave.json"
    path.write_text(json.dumps(WAVE))
    return path


def _as_lists(outline):
    return [[x, y] for x, y in outline]


class TestRender:
    """Tests for successful renders."""

    def test_svg_default_output_path(self, strokes_file):
        """Test an SVG is written next to the input by default."""
        result = runner.invoke(app, [str(strokes_file)])

        assert result.exit_code == 0, result.output
        output = strokes_file.parent / "sig-stroke.svg"
        svg = output.read_text()
        assert 'id="stroke-1"' in svg
        assert 'id="stroke-2"' in svg

    def test_json_output(self, strokes_file, tmp_path):
        """Test JSON output honours file and stroke options."""
        out = tmp_path / "out.json"
        result = runner.invoke(app, [str(strokes_file), "-f", "json", "-o", str(out)])

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert [item["name"] for item in data] == ["first", "second"]
        assert data[0]["outline"] == _as_lists(get_stroke(WAVE, {"size": 10}))
        assert data[1]["outline"] == _as_lists(get_stroke(WAVE[:10], {"size": 10, "thinning": 0}))

    def test_cli_options_win(self, strokes_file, tmp_path):
        """Test command-line options override the file's options."""
        out = tmp_path / "out.json"
        result = runner.invoke(
            app,
            [str(strokes_file), "-f", "json", "-o", str(out), "--size", "6", "--thinning", "0.9"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert data[1]["outline"] == _as_lists(get_stroke(WAVE[:10], {"size": 6, "thinning": 0.9}))

    def test_cap_and_taper_flags(self, bare_file, tmp_path):
        """Test cap, taper and completion flags reach the outline."""
        out = tmp_path / "out.json"
        result = runner.invoke(
            app,
            [
                str(bare_file),
                "-f", "json",
                "-o", str(out),
                "--flat-start",
                "--taper-end", "30",
                "--taper-end-easing", "easeInSine",
                "--no-simulate-pressure",
                "--last",
            ],
        )

        assert result.exit_code == 0, result.output
        expected = get_stroke(
            WAVE,
            {
                "start": {"cap": False},
                "end": {"taper": 30, "easing": "easeInSine"},
                "simulate_pressure": False,
                "last": True,
            },
        )
        assert json.loads(out.read_text())[0]["outline"] == _as_lists(expected)

    def test_path_to_stdout(self, bare_file):
        """Test path data can be written to stdout."""
        result = runner.invoke(app, [str(bare_file), "-f", "path", "-o", "-", "-q", "-p", "1"])

        assert result.exit_code == 0, result.output
        lines = [line for line in result.stdout.splitlines() if line.startswith("M")]
        assert len(lines) == 1
        assert lines[0].endswith(" Z")

    def test_empty_file(self, tmp_path):
        """Test a file without strokes exits cleanly without output."""
        path = tmp_path / "empty.json"
        path.write_text("[]")

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0, result.output
        assert not (tmp_path / "empty-stroke.svg").exists()

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestErrors:
    """Tests for failing invocations."""

    def test_missing_input(self, tmp_path):
        """Test a missing input file fails."""
        result = runner.invoke(app, [str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_directory_input(self, tmp_path):
        """Test a directory is not accepted as input."""
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1

    def test_invalid_format(self, bare_file):
        """Test unknown output formats are rejected."""
        result = runner.invoke(app, [str(bare_file), "-f", "png"])
        assert result.exit_code == 1
        assert not (bare_file.parent / "wave-stroke.svg").exists()

    def test_unknown_easing(self, bare_file):
        """Test unknown easing names are rejected before rendering."""
        result = runner.invoke(app, [str(bare_file), "--easing", "wobble"])
        assert result.exit_code == 1
        assert not (bare_file.parent / "wave-stroke.svg").exists()

    def test_verbose_and_quiet(self, bare_file):
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(bare_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_malformed_file(self, tmp_path):
        """Test unreadable strokes files fail."""
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1

    def test_bad_stroke_still_writes_others(self, tmp_path):
        """Test one failing stroke sets the exit code but the rest are written."""
        path = tmp_path / "mixed.json"
        path.write_text(
            json.dumps(
                {
                    "strokes": [
                        {"name": "good", "points": WAVE},
                        {"name": "bad", "points": WAVE, "options": {"easing": "wobble"}},
                    ]
                }
            )
        )
        out = tmp_path / "out.json"

        result = runner.invoke(app, [str(path), "-f", "json", "-o", str(out)])

        assert result.exit_code == 1
        assert [item["name"] for item in json.loads(out.read_text())] == ["good"]
