"""Text I/O layer for polyconv.

This module reads and writes the two textual notations and maps them onto
the domain models:

- SVG markup restricted to path, polygon, polyline, rect and line elements
  (read with xml.etree, written as path/polyline elements)
- WKT literals (read and written through shapely)

Key functions:
- read_svg / read_svg_single: Markup to geometry
- to_svg / to_svg_path: Geometry to markup or bare path data
- parse_wkt / to_wkt: WKT to geometry and back
"""

from polyconv.io.svg_reader import read_svg, read_svg_single
from polyconv.io.svg_writer import to_svg, to_svg_path
from polyconv.io.wkt import from_shapely, parse_wkt, polygonal_parts, to_shapely, to_wkt

__all__ = [
    "from_shapely",
    "parse_wkt",
    "polygonal_parts",
    "read_svg",
    "read_svg_single",
    "to_shapely",
    "to_svg",
    "to_svg_path",
    "to_wkt",
]
