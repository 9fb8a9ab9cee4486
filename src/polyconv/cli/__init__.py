"""Command-line interface for polyconv.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG to WKT and WKT to SVG conversion
- Detailed validity reports (table or JSON)
- Boolean operations on WKT, SVG or path data
"""

from polyconv.cli.app import cli, main

__all__ = ["cli", "main"]
