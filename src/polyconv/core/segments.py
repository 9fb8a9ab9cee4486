"""Line segment predicates for the validity checker.

Crossing and touching tests are evaluated with exact rational arithmetic
(fractions.Fraction converts a float without rounding), so a point is "on" a
segment only when it lies there exactly. No epsilon is involved anywhere.
"""

import sys
from dataclasses import dataclass
from fractions import Fraction

from polyconv.domain import Coordinate


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight segment between two coordinates."""

    start: Coordinate
    end: Coordinate

    def is_finite(self) -> bool:
        return self.start.is_finite() and self.end.is_finite()

    def shares_endpoint(self, other: "Segment") -> bool:
        """Any endpoint of this segment matches an endpoint of the other bit for bit."""
        return (
            self.start.same_bits(other.start)
            or self.start.same_bits(other.end)
            or self.end.same_bits(other.start)
            or self.end.same_bits(other.end)
        )


def orientation(a: Coordinate, b: Coordinate, c: Coordinate) -> int:
    """Exact sign of the turn a -> b -> c.

    Returns:
        1 for a left (counter-clockwise) turn, -1 for a right turn, 0 when the
        three points are collinear
    """
    ax, ay = Fraction(a.x), Fraction(a.y)
    cross = (Fraction(b.x) - ax) * (Fraction(c.y) - ay) - (Fraction(b.y) - ay) * (
        Fraction(c.x) - ax
    )
    if cross > 0:
        return 1
    if cross < 0:
        return -1
    return 0


def point_on_segment(point: Coordinate, segment: Segment, include_endpoints: bool = True) -> bool:
    """Check whether a point lies exactly on a segment.

    Args:
        point: Point to test
        segment: Segment to test against
        include_endpoints: When False, the segment's own endpoints do not count

    Returns:
        True if the point lies on the closed (or open) segment
    """
    if orientation(segment.start, segment.end, point) != 0:
        return False
    if not (
        min(segment.start.x, segment.end.x) <= point.x <= max(segment.start.x, segment.end.x)
        and min(segment.start.y, segment.end.y) <= point.y <= max(segment.start.y, segment.end.y)
    ):
        return False
    if include_endpoints:
        return True
    return not (point.same_bits(segment.start) or point.same_bits(segment.end))


def segments_cross(first: Segment, second: Segment) -> bool:
    """Check whether two segments cross at a single interior point.

    Touching at an endpoint and collinear overlap are not crossings.
    """
    o1 = orientation(first.start, first.end, second.start)
    o2 = orientation(first.start, first.end, second.end)
    o3 = orientation(second.start, second.end, first.start)
    o4 = orientation(second.start, second.end, first.end)
    return o1 * o2 < 0 and o3 * o4 < 0


def intersection_point(first: Segment, second: Segment) -> Coordinate | None:
    """Intersection of the infinite lines through two segments.

    Each line is written as a*x + b*y = c and the 2x2 system is solved with
    the determinant a1*b2 - a2*b1.

    Returns:
        The intersection coordinate, or None when the determinant is zero,
        subnormal or not finite (parallel or numerically degenerate lines)

    Examples:
        >>> bowtie_a = Segment(Coordinate(4.0, 1.0), Coordinate(1.0, 4.0))
        >>> bowtie_b = Segment(Coordinate(4.0, 4.0), Coordinate(1.0, 1.0))
        >>> intersection_point(bowtie_a, bowtie_b)
        Coordinate(x=2.5, y=2.5)
    """
    a1 = first.end.y - first.start.y
    b1 = first.start.x - first.end.x
    c1 = a1 * first.start.x + b1 * first.start.y

    a2 = second.end.y - second.start.y
    b2 = second.start.x - second.end.x
    c2 = a2 * second.start.x + b2 * second.start.y

    determinant = a1 * b2 - a2 * b1
    if not (abs(determinant) >= sys.float_info.min and abs(determinant) != float("inf")):
        return None

    x = (b2 * c1 - b1 * c2) / determinant
    y = (a1 * c2 - a2 * c1) / determinant
    return Coordinate(x, y)
