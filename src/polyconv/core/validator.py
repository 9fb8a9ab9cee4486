"""OGC-style polygon validity checking.

A polygon is valid when every ring:
- has at least three distinct points before closing
- holds only finite coordinate values
- is closed (first and last coordinate identical)
- has no two consecutive identical points
and no segment crosses another segment, nor does any vertex lie on a segment
it is not an endpoint of.

Coordinate equality is exact bit-pattern equality throughout. There is no
tolerance: 1.0 and 1.0000000001 are different points, and so are 0.0 and
-0.0.

Two modes share one walk over the rings:
- Fail-fast (is_valid): stops at the first violation, reports only the verdict
- Detailed (validate_detailed): collects every violation by category

Cost is quadratic in the total number of segments of a polygon.
"""

import logging
import math

from polyconv.core.segments import (
    Segment,
    intersection_point,
    point_on_segment,
    segments_cross,
)
from polyconv.domain import (
    Coordinate,
    Geometry,
    MultiPolygon,
    Polygon,
    Ring,
    ValidationReport,
    geometry_type_name,
)
from polyconv.exceptions import UnsupportedShapeError

logger = logging.getLogger(__name__)


class _Findings:
    """Mutable accumulator behind a ValidationReport."""

    def __init__(self, fail_fast: bool) -> None:
        self.fail_fast = fail_fast
        self.valid = True
        self.short_rings: list[Ring] = []
        self.non_finite: list[float] = []
        self.open_rings: list[Ring] = []
        self.repeated: list[Coordinate] = []
        self.self_intersections: list[Coordinate] = []
        self.ring_crossings: list[Coordinate] = []
        self.touching: list[Coordinate] = []

    def add(self, bucket: list, item: object) -> bool:
        """Record a violation.

        Returns:
            True when the walk should stop (fail-fast mode)
        """
        self.valid = False
        if self.fail_fast:
            return True
        bucket.append(item)
        return False

    def report(self) -> ValidationReport:
        return ValidationReport(
            valid=self.valid,
            rings_with_less_than_three_points=tuple(self.short_rings),
            unsupported_floating_point_values=tuple(self.non_finite),
            open_rings=tuple(self.open_rings),
            repeated_points=tuple(self.repeated),
            self_intersections=tuple(self.self_intersections),
            ring_intersects_other_ring=tuple(self.ring_crossings),
            point_touching_line=tuple(self.touching),
        )


def _check_ring_structure(ring: Ring, findings: _Findings) -> bool:
    """Point count, closure, finiteness and repeated points of one ring."""
    distinct = {coord.bit_key() for coord in ring.coords[: ring.open_length()]}
    if len(distinct) < 3:
        if findings.add(findings.short_rings, ring):
            return True

    if not ring.coords:
        return False

    if not ring.is_closed():
        if findings.add(findings.open_rings, ring):
            return True

    # The closing duplicate would report the first point twice
    for coord in ring.coords[: ring.open_length()]:
        for value in (coord.x, coord.y):
            if not math.isfinite(value):
                if findings.add(findings.non_finite, value):
                    return True

    for previous, point in ring.segments():
        if previous.same_bits(point):
            if findings.add(findings.repeated, point):
                return True

    return False


def _check_ring_segments(
    ring: Ring,
    ring_id: int,
    placed: list[tuple[int, Segment]],
    findings: _Findings,
) -> bool:
    """Test each segment of a ring against every segment placed before it.

    Segments are stored with the id of the ring they belong to, which decides
    between self-intersection and ring-vs-ring intersection.
    """
    for start, end in ring.segments():
        segment = Segment(start, end)
        if start.same_bits(end) or not segment.is_finite():
            continue

        for other_ring_id, other in placed:
            if other.shares_endpoint(segment):
                continue

            if segments_cross(other, segment):
                location = intersection_point(other, segment)
                if location is None:
                    logger.debug("Crossing segments without a normal determinant at %s", start)
                    location = start
                bucket = (
                    findings.self_intersections
                    if other_ring_id == ring_id
                    else findings.ring_crossings
                )
                if findings.add(bucket, location):
                    return True
            elif point_on_segment(segment.start, other):
                if findings.add(findings.touching, segment.start):
                    return True
            elif point_on_segment(other.start, segment, include_endpoints=False):
                if findings.add(findings.touching, other.start):
                    return True

        placed.append((ring_id, segment))

    return False


def _check_polygon(polygon: Polygon, fail_fast: bool) -> ValidationReport:
    findings = _Findings(fail_fast)
    placed: list[tuple[int, Segment]] = []

    for ring_id, ring in enumerate(polygon.rings()):
        if _check_ring_structure(ring, findings):
            break
        if _check_ring_segments(ring, ring_id, placed, findings):
            break

    return findings.report()


def is_valid(polygon: Polygon) -> bool:
    """Fail-fast validity check.

    Args:
        polygon: Polygon to check

    Returns:
        True if the polygon is simple and well formed
    """
    return _check_polygon(polygon, fail_fast=True).valid


def validate_detailed(polygon: Polygon) -> ValidationReport:
    """Collect every validity violation of a polygon.

    Args:
        polygon: Polygon to check

    Returns:
        Report with the overall verdict and all findings by category
    """
    report = _check_polygon(polygon, fail_fast=False)
    if not report.valid:
        logger.debug("Polygon invalid with %d findings", report.finding_count())
    return report


def _polygons_of(geometry: Geometry, operation: str) -> tuple[Polygon, ...]:
    if isinstance(geometry, Polygon):
        return (geometry,)
    if isinstance(geometry, MultiPolygon):
        return geometry.polygons
    raise UnsupportedShapeError(geometry_type_name(geometry), operation)


def is_valid_geometry(geometry: Geometry) -> bool:
    """Fail-fast check of a Polygon or of every member of a MultiPolygon.

    Raises:
        UnsupportedShapeError: If the geometry is not polygonal
    """
    return all(is_valid(p) for p in _polygons_of(geometry, "polygon validation"))


def validate_geometry(geometry: Geometry) -> ValidationReport:
    """Detailed check of a Polygon or MultiPolygon.

    Findings of MultiPolygon members are concatenated in member order. Members
    are checked independently of each other.

    Raises:
        UnsupportedShapeError: If the geometry is not polygonal
    """
    reports = [validate_detailed(p) for p in _polygons_of(geometry, "polygon validation")]
    if len(reports) == 1:
        return reports[0]

    def joined(name: str) -> tuple:
        return tuple(item for report in reports for item in getattr(report, name))

    return ValidationReport(
        valid=all(r.valid for r in reports),
        rings_with_less_than_three_points=joined("rings_with_less_than_three_points"),
        unsupported_floating_point_values=joined("unsupported_floating_point_values"),
        open_rings=joined("open_rings"),
        repeated_points=joined("repeated_points"),
        self_intersections=joined("self_intersections"),
        ring_intersects_other_ring=joined("ring_intersects_other_ring"),
        point_touching_line=joined("point_touching_line"),
    )
