"""Polyconv - Convert and validate polygons between SVG and WKT.

Polyconv reads shapes written as WKT literals or as a restricted set of SVG
elements (path, polygon, polyline, rect, line), normalizes polygon ring
winding, certifies polygon validity with a detailed report, and runs polygon
boolean operations.

Example:
    $ polyconv svg-to-wkt '<path d="M0 0L10 0L10 10L0 10Z"/>'

This prints POLYGON ((0 0, 0 10, 10 10, 10 0, 0 0)).
"""

__version__ = "0.1.0"
__author__ = "Polyconv contributors"

__all__ = ["__author__", "__version__"]
