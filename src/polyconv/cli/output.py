"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables for validity reports and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyconv.domain import Coordinate, ValidationReport

console = Console()
error_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_result(text: str) -> None:
    """Print a conversion result without markup interpretation.

    Args:
        text: Converted geometry text
    """
    console.print(Text(text), soft_wrap=True)


def _coord(c: Coordinate) -> str:
    return f"({c.x:g}, {c.y:g})"


def print_report(report: ValidationReport, geometry_type: str) -> None:
    """Print a validity report as a verdict plus a findings table.

    Args:
        report: Detailed validity report
        geometry_type: Name of the checked geometry type
    """
    if report.valid:
        console.print(f"[bold green]{SYM_OK} Valid[/bold green] {geometry_type}")
        return

    console.print(
        f"[bold red]{SYM_ERR} Invalid[/bold red] {geometry_type} "
        f"{SYM_DOT} {report.finding_count()} findings"
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Finding")
    table.add_column("Count", justify="right")
    table.add_column("Locations")

    rows = [
        ("Rings with < 3 points", report.rings_with_less_than_three_points, None),
        ("Non-finite values", report.unsupported_floating_point_values, str),
        ("Open rings", report.open_rings, None),
        ("Repeated points", report.repeated_points, _coord),
        ("Self intersections", report.self_intersections, _coord),
        ("Ring crosses other ring", report.ring_intersects_other_ring, _coord),
        ("Point touches line", report.point_touching_line, _coord),
    ]
    for label, items, fmt in rows:
        if not items:
            continue
        locations = ", ".join(fmt(i) for i in items[:5]) if fmt else ""
        if fmt and len(items) > 5:
            locations += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(items) - 5} more)"
        table.add_row(label, str(len(items)), locations)

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(Text.assemble((f"{SYM_ERR} Error: ", "bold red"), message))
    if details:
        error_console.print(Text(f"  {details}"))
