"""Domain models for polyconv.

This module contains the value types representing coordinates, rings,
polygons and validity reports. All models are:

- Immutable (frozen dataclasses)
- Compared structurally, with no identity
- Independent of the shapely and XML implementation details

Key classes:
- Coordinate: A 2D position
- Ring: A closed coordinate sequence
- Polygon: Exterior ring plus holes
- ValidationReport: Classified validity findings
"""

from polyconv.domain.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    Ring,
    WindingOrder,
    geometry_type_name,
)
from polyconv.domain.report import ValidationReport

__all__: list[str] = [
    # Enums
    "WindingOrder",
    # Core types
    "Coordinate",
    "Ring",
    "LineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "ValidationReport",
    "geometry_type_name",
]
