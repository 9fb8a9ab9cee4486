"""Integration tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from polyconv import __version__
from polyconv.cli.app import EXIT_INVALID, app
from polyconv.domain import MultiPolygon
from polyconv.io import parse_wkt

SQUARE_WITH_HOLE_WKT = "POLYGON((0 0,0 10,10 10,10 0,0 0),(3 3,6 3,6 6,3 6,3 3))"
BOWTIE_WKT = "POLYGON((1 1,4 4,4 1,1 4,1 1))"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestConversionCommands:
    """Tests for svg-to-wkt and wkt-to-svg."""

    def test_wkt_to_svg(self, runner):
        result = runner.invoke(app, ["wkt-to-svg", SQUARE_WITH_HOLE_WKT])
        assert result.exit_code == 0
        assert '<path d="M0 0L0 10L10 10L10 0L0 0M3 3L6 3L6 6L3 6L3 3"/>' in result.stdout

    def test_wkt_to_svg_path(self, runner):
        result = runner.invoke(app, ["wkt-to-svg", "--path", "POLYGON((0 0,10 0,10 10,0 0))"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "M0 0L10 10L10 0L0 0"

    def test_svg_to_wkt(self, runner):
        result = runner.invoke(app, ["svg-to-wkt", '<rect width="2" height="2"/>'])
        assert result.exit_code == 0
        assert parse_wkt(result.stdout.strip()).exterior.to_list() == [
            (0, 0),
            (0, 2),
            (2, 2),
            (2, 0),
            (0, 0),
        ]

    def test_path_from_stdin(self, runner):
        result = runner.invoke(app, ["svg-to-wkt", "--path", "-"], input="M0 0L10 0L10 10Z")
        assert result.exit_code == 0
        assert "POLYGON" in result.stdout

    def test_curves_rejected_by_default(self, runner):
        result = runner.invoke(app, ["svg-to-wkt", "--path", "M0 0L10 0Q5 5 0 10Z"])
        assert result.exit_code == 1

    def test_skip_curves(self, runner):
        result = runner.invoke(
            app, ["--skip-curves", "svg-to-wkt", "--path", "M0 0L10 0Q5 5 0 10L10 10Z"]
        )
        assert result.exit_code == 0
        assert "POLYGON" in result.stdout

    def test_parse_error_exit_code(self, runner):
        result = runner.invoke(app, ["wkt-to-svg", "POLYGON(("])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_polygon(self, runner):
        result = runner.invoke(app, ["validate", SQUARE_WITH_HOLE_WKT])
        assert result.exit_code == 0
        assert "Valid" in result.stdout

    def test_invalid_polygon(self, runner):
        result = runner.invoke(app, ["validate", BOWTIE_WKT])
        assert result.exit_code == EXIT_INVALID
        assert "Invalid" in result.stdout
        assert "Self intersections" in result.stdout

    def test_json_report(self, runner):
        result = runner.invoke(app, ["validate", "--json", BOWTIE_WKT])
        assert result.exit_code == EXIT_INVALID
        report = json.loads(result.stdout)
        assert report["valid"] is False
        assert report["self_intersections"] == [[2.5, 2.5]]

    def test_path_format(self, runner):
        result = runner.invoke(app, ["validate", "-f", "path", "M0 0L10 0L10 10L0 10Z"])
        assert result.exit_code == 0

    def test_svg_format(self, runner):
        result = runner.invoke(app, ["validate", "-f", "svg", '<polygon points="1,1 4,4 4,1 1,4"/>'])
        assert result.exit_code == EXIT_INVALID

    def test_line_string_not_polygonal(self, runner):
        result = runner.invoke(app, ["validate", "LINESTRING(0 0,1 1)"])
        assert result.exit_code == 1

    def test_segment_limit(self, runner):
        result = runner.invoke(app, ["--max-segments", "2", "validate", SQUARE_WITH_HOLE_WKT])
        assert result.exit_code == 1


class TestBooleanCommand:
    """Tests for the boolean command."""

    def test_union(self, runner):
        result = runner.invoke(
            app,
            [
                "boolean",
                "union",
                "POLYGON((0 0,10 0,10 10,0 10,0 0))",
                "POLYGON((5 0,15 0,15 10,5 10,5 0))",
            ],
        )
        assert result.exit_code == 0
        assert result.stdout.startswith("MULTIPOLYGON")

    def test_path_format(self, runner):
        result = runner.invoke(
            app,
            [
                "boolean",
                "intersection",
                "--format",
                "path",
                "M0 0L10 0L10 10L0 10Z",
                "M5 5L15 5L15 15L5 15Z",
            ],
        )
        assert result.exit_code == 0
        assert result.stdout.startswith("M")

    def test_invalid_input(self, runner):
        result = runner.invoke(app, ["boolean", "union", BOWTIE_WKT, SQUARE_WITH_HOLE_WKT])
        assert result.exit_code == 1

    def test_unknown_operation(self, runner):
        result = runner.invoke(app, ["boolean", "xor", BOWTIE_WKT, BOWTIE_WKT])
        assert result.exit_code != 0


class TestRepairCommand:
    """Tests for the repair command."""

    def test_bowtie(self, runner):
        result = runner.invoke(app, ["repair", BOWTIE_WKT])
        assert result.exit_code == 0
        repaired = parse_wkt(result.stdout.strip())
        assert isinstance(repaired, MultiPolygon)
        assert len(repaired) == 2

    def test_garbage(self, runner):
        result = runner.invoke(app, ["repair", "POLYGON(("])
        assert result.exit_code == 1

    def test_line_string(self, runner):
        result = runner.invoke(app, ["repair", "LINESTRING(0 0,1 1)"])
        assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
