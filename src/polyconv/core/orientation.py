"""Ring orientation and winding normalization.

This module provides:
- Signed area calculation (shoelace formula)
- Winding order detection
- Winding normalization of polygons and their containers

Polygons handed to the clipping engine must have a clockwise exterior ring and
counter-clockwise interior rings. Orientation is measured in a y-up Cartesian
frame, independent of any screen axis convention.

All functions are pure and return new values.
"""

from collections.abc import Sequence
from functools import singledispatch

from polyconv.domain import (
    Coordinate,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    Ring,
    WindingOrder,
)


def signed_area(coords: Sequence[Coordinate]) -> float:
    """Calculate signed area of a ring using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    A closing duplicate point contributes nothing, so closed and open forms
    of the same ring give the same result.

    Args:
        coords: Coordinates forming the ring boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate rings.

    Examples:
        >>> square = [Coordinate(0, 0), Coordinate(1, 0), Coordinate(1, 1), Coordinate(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(coords)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += coords[i].x * coords[j].y
        area -= coords[j].x * coords[i].y

    return area / 2.0


def winding_order(ring: Ring) -> WindingOrder | None:
    """Return the orientation of a ring.

    Args:
        ring: Ring to inspect

    Returns:
        CLOCKWISE or COUNTER_CLOCKWISE, or None when the ring encloses no
        area (or its area is not a number)
    """
    area = signed_area(ring.coords)
    if area < 0:
        return WindingOrder.CLOCKWISE
    if area > 0:
        return WindingOrder.COUNTER_CLOCKWISE
    return None


def orient_ring(ring: Ring, target: WindingOrder) -> Ring:
    """Return the ring wound in the target direction.

    The ring is reversed only when its orientation is known and differs from
    the target; degenerate rings are returned unchanged.
    """
    order = winding_order(ring)
    if order is None or order == target:
        return ring
    return ring.reversed()


@singledispatch
def normalize(geometry):
    """Return a geometry whose polygons follow the winding convention.

    Exterior rings become clockwise and interior rings counter-clockwise.
    Containers are normalized member by member; geometries without rings pass
    through untouched. Normalizing twice gives the same result as once.

    Args:
        geometry: Polygon, MultiPolygon, GeometryCollection or LineString

    Returns:
        A structurally equal geometry with normalized ring order

    Raises:
        TypeError: If the value is not a supported geometry
    """
    raise TypeError(f"Cannot normalize {type(geometry).__name__}")


@normalize.register
def _(geometry: Polygon) -> Polygon:
    return Polygon(
        exterior=orient_ring(geometry.exterior, WindingOrder.CLOCKWISE),
        interiors=tuple(
            orient_ring(ring, WindingOrder.COUNTER_CLOCKWISE) for ring in geometry.interiors
        ),
    )


@normalize.register
def _(geometry: MultiPolygon) -> MultiPolygon:
    return MultiPolygon(tuple(normalize(p) for p in geometry.polygons))


@normalize.register
def _(geometry: GeometryCollection) -> GeometryCollection:
    return GeometryCollection(tuple(normalize(g) for g in geometry.geometries))


@normalize.register
def _(geometry: LineString) -> LineString:
    return geometry
