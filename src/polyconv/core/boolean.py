"""Polygon boolean set operations.

Clipping itself is delegated to shapely. This module guarantees what the
clipping engine is given: polygonal inputs with normalized winding that have
passed the fail-fast validity check. Results are gathered into a normalized
MultiPolygon.
"""

from enum import Enum

from shapely.errors import ShapelyError

from polyconv.core.orientation import normalize
from polyconv.core.validator import validate_geometry
from polyconv.domain import Geometry, MultiPolygon, Polygon, geometry_type_name
from polyconv.exceptions import (
    BooleanOperationError,
    InvalidGeometryError,
    UnsupportedShapeError,
)
from polyconv.io.wkt import polygonal_parts, to_shapely


class BooleanOperation(str, Enum):
    """Boolean set operation selector."""

    UNION = "union"
    DIFFERENCE = "difference"
    INTERSECTION = "intersection"
    SYMMETRIC_DIFFERENCE = "symmetric_difference"


def _require_polygonal(geometry: Geometry, operation: BooleanOperation) -> None:
    if not isinstance(geometry, (Polygon, MultiPolygon)):
        raise UnsupportedShapeError(geometry_type_name(geometry), f"boolean {operation.value}")


def polygon_boolean(
    first: Geometry,
    second: Geometry,
    operation: BooleanOperation,
    check_validity: bool = True,
) -> MultiPolygon:
    """Apply a boolean set operation to two polygonal geometries.

    Args:
        first: Polygon or MultiPolygon
        second: Polygon or MultiPolygon
        operation: Operation to apply (first OP second)
        check_validity: Refuse inputs that fail the validity check

    Returns:
        Normalized MultiPolygon, empty when the result has no area

    Raises:
        UnsupportedShapeError: If an input is not polygonal
        InvalidGeometryError: If check_validity is set and an input is invalid
        BooleanOperationError: If the clipping engine fails
    """
    _require_polygonal(first, operation)
    _require_polygonal(second, operation)

    first = normalize(first)
    second = normalize(second)

    if check_validity:
        for role, geometry in (("first", first), ("second", second)):
            report = validate_geometry(geometry)
            if not report.valid:
                raise InvalidGeometryError(report, role=role)

    a = to_shapely(first)
    b = to_shapely(second)
    try:
        if operation == BooleanOperation.UNION:
            result = a.union(b)
        elif operation == BooleanOperation.DIFFERENCE:
            result = a.difference(b)
        elif operation == BooleanOperation.INTERSECTION:
            result = a.intersection(b)
        else:
            result = a.symmetric_difference(b)
    except ShapelyError as e:
        raise BooleanOperationError(operation.value, str(e)) from e

    return normalize(MultiPolygon(tuple(polygonal_parts(result))))
