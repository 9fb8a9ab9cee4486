"""Polygon repair.

Invalid polygons (self-crossing rings, holes poking out of their exterior,
collapsed rings) are rebuilt with shapely's make_valid. Only the polygonal
part of the result is kept; lines and points that collapse out of the input
are dropped.
"""

from shapely.errors import ShapelyError
from shapely.validation import make_valid

from polyconv.core.orientation import normalize
from polyconv.domain import Geometry, MultiPolygon, Polygon, geometry_type_name
from polyconv.exceptions import RepairError, UnsupportedShapeError
from polyconv.io.wkt import polygonal_parts, to_shapely


def repair_geometry(geometry: Geometry) -> Polygon | MultiPolygon:
    """Rebuild a polygonal geometry so that it is valid.

    A result with one polygon is returned as a Polygon, several as a
    MultiPolygon. Winding is normalized.

    Raises:
        UnsupportedShapeError: If the geometry is not polygonal
        SerializationError: If the rings cannot be handed to shapely at all
        RepairError: If nothing with area is left
    """
    if not isinstance(geometry, (Polygon, MultiPolygon)):
        raise UnsupportedShapeError(geometry_type_name(geometry), "repair")

    shape = to_shapely(geometry)
    try:
        fixed = make_valid(shape)
    except ShapelyError as e:
        raise RepairError(geometry_type_name(geometry), str(e)) from e

    parts = polygonal_parts(fixed)
    if not parts:
        raise RepairError(geometry_type_name(geometry), "no area left after repair")
    if len(parts) == 1:
        return normalize(parts[0])
    return normalize(MultiPolygon(tuple(parts)))
