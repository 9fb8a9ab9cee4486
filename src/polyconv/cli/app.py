"""CLI application entry point for polyconv.

This module provides the main CLI interface using Typer.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from polyconv import __version__
from polyconv.cli.output import console, print_error, print_report, print_result
from polyconv.config import LoggingConfig, PathConfig, PolyconvSettings, ValidationConfig
from polyconv.core.boolean import BooleanOperation
from polyconv.core.path import UnsupportedCommandPolicy
from polyconv.core.pipeline import GeometryPipeline
from polyconv.domain import geometry_type_name
from polyconv.exceptions import ParseError, PolyconvError
from polyconv.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyconv",
    help="Convert and validate polygons between SVG and WKT.",
    add_completion=False,
    no_args_is_help=True,
)

EXIT_INVALID = 2


class InputFormat(str, Enum):
    """Notation of a command-line geometry argument."""

    SVG = "svg"
    PATH = "path"
    WKT = "wkt"


class _State:
    settings = PolyconvSettings()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyconv[/bold blue] v{__version__}")
        raise typer.Exit()


def _read_input(value: str) -> str:
    """Return the argument, or standard input when it is "-"."""
    if value == "-":
        return typer.get_text_stream("stdin").read()
    return value


def _pipeline() -> GeometryPipeline:
    return GeometryPipeline(_State.settings)


def _fail(error: PolyconvError) -> None:
    if isinstance(error, ParseError):
        print_error("Could not parse input", details=error.reason)
    else:
        print_error(str(error))
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    skip_curves: Annotated[
        bool,
        typer.Option(
            "--skip-curves",
            help="Drop curve/arc path commands instead of rejecting the path",
        ),
    ] = False,
    max_segments: Annotated[
        int,
        typer.Option(
            "--max-segments",
            help="Largest segment count accepted for validation",
            min=1,
        ),
    ] = 100_000,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert and validate polygons between SVG and WKT."""
    _State.settings = PolyconvSettings(
        path=PathConfig(
            unsupported_commands=(
                UnsupportedCommandPolicy.SKIP if skip_curves else UnsupportedCommandPolicy.ERROR
            ),
        ),
        validation=ValidationConfig(max_segments=max_segments),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    if log_file is not None or log_level.upper() != "WARNING":
        configure_logging(
            log_file=_State.settings.logging.log_file,
            console_level=_State.settings.logging.log_level,
            file_level=_State.settings.logging.file_log_level,
        )


@app.command("svg-to-wkt")
def svg_to_wkt(
    svg: Annotated[str, typer.Argument(help="SVG markup, or path data with --path ('-' for stdin)")],
    path: Annotated[bool, typer.Option("--path", help="Input is bare path data")] = False,
) -> None:
    """Convert SVG shapes into WKT."""
    pipeline = _pipeline()
    text = _read_input(svg)
    try:
        result = pipeline.svg_path_to_wkt(text) if path else pipeline.svg_to_wkt(text)
    except PolyconvError as e:
        _fail(e)
    print_result(result)


@app.command("wkt-to-svg")
def wkt_to_svg(
    wkt: Annotated[str, typer.Argument(help="WKT literal ('-' for stdin)")],
    path: Annotated[bool, typer.Option("--path", help="Emit bare path data")] = False,
) -> None:
    """Convert WKT into SVG elements."""
    pipeline = _pipeline()
    text = _read_input(wkt)
    try:
        result = pipeline.wkt_to_svg_path(text) if path else pipeline.wkt_to_svg(text)
    except PolyconvError as e:
        _fail(e)
    print_result(result)


@app.command()
def validate(
    geometry: Annotated[str, typer.Argument(help="Geometry text ('-' for stdin)")],
    input_format: Annotated[
        InputFormat,
        typer.Option("--format", "-f", help="Input notation"),
    ] = InputFormat.WKT,
    as_json: Annotated[bool, typer.Option("--json", help="Print the report as JSON")] = False,
) -> None:
    """Check polygon validity and print a detailed report.

    Exits with code 2 when the polygon is invalid.
    """
    pipeline = _pipeline()
    text = _read_input(geometry)
    try:
        if input_format == InputFormat.PATH:
            result = pipeline.ingest_path(text, validate=True)
        elif input_format == InputFormat.SVG:
            result = pipeline.ingest_svg(text, validate=True)
        else:
            result = pipeline.ingest_wkt(text, validate=True)
    except PolyconvError as e:
        _fail(e)

    type_name = geometry_type_name(result.geometry)
    if result.report is None:
        print_error(f"{type_name} is not a polygonal geometry")
        raise typer.Exit(code=1)

    if as_json:
        print_result(json.dumps(result.report.to_dict(), indent=2))
    else:
        print_report(result.report, type_name)

    if not result.report.valid:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def boolean(
    operation: Annotated[BooleanOperation, typer.Argument(help="Set operation")],
    first: Annotated[str, typer.Argument(help="First geometry")],
    second: Annotated[str, typer.Argument(help="Second geometry")],
    input_format: Annotated[
        InputFormat,
        typer.Option("--format", "-f", help="Notation of both inputs and the output"),
    ] = InputFormat.WKT,
) -> None:
    """Apply a boolean set operation to two polygons."""
    pipeline = _pipeline()
    try:
        if input_format == InputFormat.PATH:
            result = pipeline.svg_path_boolean(first, second, operation)
        elif input_format == InputFormat.SVG:
            result = pipeline.svg_boolean(first, second, operation)
        else:
            result = pipeline.wkt_boolean(first, second, operation)
    except PolyconvError as e:
        _fail(e)
    print_result(result)


@app.command()
def repair(
    wkt: Annotated[str, typer.Argument(help="WKT polygon or multipolygon ('-' for stdin)")],
) -> None:
    """Rebuild an invalid polygon into a valid one and print it as WKT."""
    pipeline = _pipeline()
    text = _read_input(wkt)
    try:
        result = pipeline.repair_wkt(text)
    except PolyconvError as e:
        _fail(e)
    print_result(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
