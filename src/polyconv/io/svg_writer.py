"""SVG markup writer.

Polygons become <path> elements with one "M...L..." subpath per ring,
line strings become <polyline> elements. Containers are written member by
member, one element per line.
"""

from polyconv.domain import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    Ring,
)


def format_number(value: float) -> str:
    """Shortest text for a coordinate value ("10" rather than "10.0")."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _coord(c: Coordinate) -> str:
    return f"{format_number(c.x)} {format_number(c.y)}"


def _ring_d(ring: Ring) -> str:
    return "L".join(_coord(c) for c in ring.coords)


def polygon_path_data(polygon: Polygon) -> str:
    """Path data for a polygon, exterior first ("M0 0L10 0...M3 3L...")."""
    if not polygon.exterior.coords:
        return ""
    return "M" + "M".join(_ring_d(ring) for ring in polygon.rings() if ring.coords)


def _path_data_parts(geometry: Geometry) -> list[str]:
    if isinstance(geometry, Polygon):
        data = polygon_path_data(geometry)
        return [data] if data else []
    if isinstance(geometry, MultiPolygon):
        return [d for p in geometry.polygons for d in _path_data_parts(p)]
    if isinstance(geometry, GeometryCollection):
        return [d for g in geometry.geometries for d in _path_data_parts(g)]
    if isinstance(geometry, LineString):
        if not geometry.coords:
            return []
        return ["M" + "L".join(_coord(c) for c in geometry.coords)]
    raise TypeError(f"Cannot write {type(geometry).__name__} as SVG")


def _elements(geometry: Geometry) -> list[str]:
    if isinstance(geometry, Polygon):
        data = polygon_path_data(geometry)
        return [f'<path d="{data}"/>'] if data else []
    if isinstance(geometry, MultiPolygon):
        return [e for p in geometry.polygons for e in _elements(p)]
    if isinstance(geometry, GeometryCollection):
        return [e for g in geometry.geometries for e in _elements(g)]
    if isinstance(geometry, LineString):
        if not geometry.coords:
            return []
        points = " ".join(
            f"{format_number(c.x)},{format_number(c.y)}" for c in geometry.coords
        )
        return [f'<polyline points="{points}"/>']
    raise TypeError(f"Cannot write {type(geometry).__name__} as SVG")


def to_svg(geometry: Geometry) -> str:
    """Write a geometry as SVG elements, one per line.

    Examples:
        >>> to_svg(Polygon(Ring.from_points([(0, 0), (0, 10), (10, 10), (0, 0)])))
        '<path d="M0 0L0 10L10 10L0 0"/>'
    """
    return "\n".join(_elements(geometry))


def to_svg_path(geometry: Geometry) -> str:
    """Write a geometry as bare path data, one "d" string per line."""
    return "\n".join(_path_data_parts(geometry))
