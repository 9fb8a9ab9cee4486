"""WKT reading and writing through shapely.

shapely's WKT reader and writer are used as they are; this module only maps
between shapely geometries and the domain value types.
"""

from shapely import geometry as sg
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from polyconv.domain import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    Ring,
    geometry_type_name,
)
from polyconv.exceptions import ParseError, SerializationError, UnsupportedShapeError


def _coords(sequence) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(float(c[0]), float(c[1])) for c in sequence)


def from_shapely(shape: BaseGeometry, source: str = "") -> Geometry:
    """Map a shapely geometry onto domain types.

    Args:
        shape: Geometry produced by shapely
        source: Original text, used in error messages

    Raises:
        ParseError: If the geometry is empty
        UnsupportedShapeError: If the geometry is point-based
    """
    if shape.is_empty:
        raise ParseError(source, f"{shape.geom_type} is empty")

    kind = shape.geom_type
    if kind == "Polygon":
        return Polygon(
            exterior=Ring(_coords(shape.exterior.coords)),
            interiors=tuple(Ring(_coords(ring.coords)) for ring in shape.interiors),
        )
    if kind == "MultiPolygon":
        return MultiPolygon(tuple(from_shapely(p, source) for p in shape.geoms))
    if kind in ("LineString", "LinearRing"):
        return LineString(_coords(shape.coords))
    if kind in ("MultiLineString", "GeometryCollection"):
        return GeometryCollection(
            tuple(from_shapely(g, source) for g in shape.geoms if not g.is_empty)
        )
    raise UnsupportedShapeError(kind, "WKT conversion")


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Map a domain geometry onto shapely.

    Raises:
        SerializationError: If shapely rejects the coordinates (for example a
            ring with fewer than four points)
    """
    try:
        if isinstance(geometry, Polygon):
            return sg.Polygon(
                geometry.exterior.to_list(),
                [ring.to_list() for ring in geometry.interiors],
            )
        if isinstance(geometry, MultiPolygon):
            return sg.MultiPolygon([to_shapely(p) for p in geometry.polygons])
        if isinstance(geometry, LineString):
            return sg.LineString(geometry.to_list())
        if isinstance(geometry, GeometryCollection):
            return sg.GeometryCollection([to_shapely(g) for g in geometry.geometries])
    except (ValueError, ShapelyError) as e:
        raise SerializationError(geometry_type_name(geometry), str(e)) from e
    raise TypeError(f"Cannot convert {type(geometry).__name__} to shapely")


def parse_wkt(text: str) -> Geometry:
    """Parse a WKT literal into domain geometry.

    Raises:
        ParseError: If the text is not valid WKT or describes an empty geometry
        UnsupportedShapeError: If the text describes points
    """
    if not text or not text.strip():
        raise ParseError(text, "WKT input is empty")
    try:
        shape = shapely_wkt.loads(text)
    except (ShapelyError, ValueError, TypeError) as e:
        raise ParseError(text, f"invalid WKT: {e}") from e
    return from_shapely(shape, text)


def to_wkt(geometry: Geometry) -> str:
    """Write a domain geometry as WKT.

    Examples:
        >>> to_wkt(Polygon(Ring.from_points([(0, 0), (0, 1), (1, 1), (0, 0)])))
        'POLYGON ((0 0, 0 1, 1 1, 0 0))'
    """
    return shapely_wkt.dumps(to_shapely(geometry), trim=True)


def polygonal_parts(shape: BaseGeometry) -> list[Polygon]:
    """Collect the polygons of a shapely result, dropping lines and points."""
    if shape.is_empty:
        return []
    kind = shape.geom_type
    if kind == "Polygon":
        return [from_shapely(shape)]
    if kind in ("MultiPolygon", "GeometryCollection"):
        return [p for part in shape.geoms for p in polygonal_parts(part)]
    return []
