"""Core geometric value types.

This module defines the shapes passed between readers, the normalizer, the
validity checker and the writers:
- Coordinate: A 2D position
- Ring: An ordered, semantically closed sequence of coordinates
- LineString: An open sequence of coordinates
- Polygon: One exterior ring plus interior rings (holes)
- MultiPolygon / GeometryCollection: Containers
- WindingOrder: Enum for ring orientation

All types are frozen and compare structurally. Rings are never closed
automatically; closure is checked by the validator.
"""

import math
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union


class WindingOrder(Enum):
    """Rotational direction of a ring in a y-up Cartesian frame.

    Polygons handed to the clipping engine use:
    - Exterior rings wind clockwise
    - Interior rings (holes) wind counter-clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A position in 2D space.

    Non-finite values are accepted; they are reported by the validity
    checker rather than rejected here.

    Attributes:
        x: X value
        y: Y value
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def is_finite(self) -> bool:
        """Check that neither component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def bit_key(self) -> bytes:
        """Return the IEEE-754 bit pattern of both components.

        Two coordinates with equal keys are identical bit for bit: 0.0 and
        -0.0 differ, a NaN matches the same NaN.
        """
        return struct.pack("<dd", float(self.x), float(self.y))

    def same_bits(self, other: "Coordinate") -> bool:
        """Exact bit-pattern equality with another coordinate."""
        return self.bit_key() == other.bit_key()


def _as_coordinates(points: Iterable[Any]) -> tuple[Coordinate, ...]:
    coords = []
    for point in points:
        if isinstance(point, Coordinate):
            coords.append(point)
        else:
            x, y = point
            coords.append(Coordinate(float(x), float(y)))
    return tuple(coords)


@dataclass(frozen=True, slots=True)
class Ring:
    """An ordered sequence of coordinates bounding a region.

    The first and last coordinate are expected to be equal, but this is a
    checked property, not one the type enforces.

    Attributes:
        coords: Coordinates in drawing order
    """

    coords: tuple[Coordinate, ...] = field(default=())

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "Ring":
        """Build a ring from coordinates or (x, y) pairs."""
        return cls(_as_coordinates(points))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def is_closed(self) -> bool:
        """First and last coordinate share the same bit pattern."""
        if not self.coords:
            return False
        return self.coords[0].same_bits(self.coords[-1])

    def open_length(self) -> int:
        """Number of points not counting the closing duplicate."""
        n = len(self.coords)
        if n > 1 and self.is_closed():
            return n - 1
        return n

    def reversed(self) -> "Ring":
        """Return a ring with the point order reversed."""
        return Ring(tuple(reversed(self.coords)))

    def segments(self) -> Iterator[tuple[Coordinate, Coordinate]]:
        """Yield consecutive (start, end) coordinate pairs."""
        for i in range(1, len(self.coords)):
            yield self.coords[i - 1], self.coords[i]

    def to_list(self) -> list[tuple[float, float]]:
        return [c.to_tuple() for c in self.coords]


@dataclass(frozen=True, slots=True)
class LineString:
    """An open sequence of coordinates (SVG polyline/line)."""

    coords: tuple[Coordinate, ...] = field(default=())

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "LineString":
        """Build a line string from coordinates or (x, y) pairs."""
        return cls(_as_coordinates(points))

    def __len__(self) -> int:
        return len(self.coords)

    def to_list(self) -> list[tuple[float, float]]:
        return [c.to_tuple() for c in self.coords]


@dataclass(frozen=True, slots=True)
class Polygon:
    """One exterior ring plus zero or more interior rings.

    Holes are not required to lie inside the exterior; that is a validation
    concern, not a construction invariant.

    Attributes:
        exterior: Outer boundary
        interiors: Hole boundaries in declaration order
    """

    exterior: Ring
    interiors: tuple[Ring, ...] = field(default=())

    @classmethod
    def from_rings(cls, rings: Iterable[Ring]) -> "Polygon":
        """Build a polygon treating the first ring as the exterior."""
        ring_list = list(rings)
        if not ring_list:
            raise ValueError("A polygon needs at least one ring")
        return cls(exterior=ring_list[0], interiors=tuple(ring_list[1:]))

    def rings(self) -> Iterator[Ring]:
        """Yield the exterior ring then each interior ring."""
        yield self.exterior
        yield from self.interiors

    def segment_count(self) -> int:
        return sum(max(len(ring) - 1, 0) for ring in self.rings())


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """An ordered collection of polygons."""

    polygons: tuple[Polygon, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def segment_count(self) -> int:
        return sum(p.segment_count() for p in self.polygons)


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """An ordered collection of heterogeneous geometries."""

    geometries: tuple["Geometry", ...] = field(default=())

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator["Geometry"]:
        return iter(self.geometries)


Geometry = Union[LineString, Polygon, MultiPolygon, GeometryCollection]


def geometry_type_name(geometry: Geometry) -> str:
    """Return the OGC type name of a geometry ("Polygon", "LineString", ...)."""
    return type(geometry).__name__
