"""Unit tests for polygon validity checking.

Covers both checker modes:
- is_valid: fail-fast verdict
- validate_detailed: every finding by category
"""

import math

import pytest

from polyconv.core.validator import (
    is_valid,
    is_valid_geometry,
    validate_detailed,
    validate_geometry,
)
from polyconv.domain import Coordinate, LineString, MultiPolygon, Polygon, Ring
from polyconv.exceptions import UnsupportedShapeError

SQUARE = Ring.from_points([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])
HOLE = Ring.from_points([(3, 3), (6, 3), (6, 6), (3, 6), (3, 3)])
BOWTIE = Ring.from_points([(1, 1), (4, 4), (4, 1), (1, 4), (1, 1)])


def coords(items):
    return [c.to_tuple() for c in items]


class TestValidPolygons:
    """Polygons that must pass."""

    def test_square(self):
        assert is_valid(Polygon(SQUARE))
        report = validate_detailed(Polygon(SQUARE))
        assert report.valid
        assert report.finding_count() == 0

    def test_square_with_hole(self):
        assert is_valid(Polygon(SQUARE, (HOLE,)))

    def test_winding_is_not_checked(self):
        """Validity does not depend on ring orientation."""
        assert is_valid(Polygon(SQUARE.reversed(), (HOLE.reversed(),)))


class TestRingStructure:
    """Tests for point count, closure, finiteness and repeats."""

    def test_too_few_points(self):
        ring = Ring.from_points([(0, 0), (1, 1), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert not report.valid
        assert report.has_less_than_three_points
        assert report.rings_with_less_than_three_points == (ring,)

    def test_duplicates_do_not_count_towards_three(self):
        """A sliver padded with a repeated vertex is still too short."""
        ring = Ring.from_points([(0, 0), (1, 1), (1, 1), (0, 0)])
        assert not is_valid(Polygon(ring))
        report = validate_detailed(Polygon(ring))
        assert report.has_less_than_three_points
        assert report.rings_with_less_than_three_points == (ring,)
        assert report.repeated_points == (Coordinate(1, 1),)
        assert report.open_rings == ()

    def test_empty_ring(self):
        report = validate_detailed(Polygon(Ring()))
        assert not report.valid
        assert report.rings_with_less_than_three_points == (Ring(),)
        assert report.open_rings == ()

    def test_open_ring(self):
        ring = Ring.from_points([(0, 0), (0, 10), (10, 10), (10, 0)])
        report = validate_detailed(Polygon(ring))
        assert not report.valid
        assert report.open_rings == (ring,)
        assert report.self_intersections == ()

    def test_signed_zero_does_not_close(self):
        """-0.0 and 0.0 are different bit patterns."""
        ring = Ring.from_points([(0.0, 0.0), (0, 10), (10, 10), (10, 0), (-0.0, 0.0)])
        report = validate_detailed(Polygon(ring))
        assert report.open_rings == (ring,)

    def test_nearly_closed_is_open(self):
        ring = Ring.from_points([(0, 0), (0, 10), (10, 10), (10, 0), (1e-12, 0)])
        assert not is_valid(Polygon(ring))

    def test_non_finite_values(self):
        ring = Ring.from_points([(0, 0), (0, math.nan), (10, 10), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert not report.valid
        assert len(report.unsupported_floating_point_values) == 1
        assert math.isnan(report.unsupported_floating_point_values[0])

    def test_infinite_values(self):
        ring = Ring.from_points([(0, 0), (math.inf, 5), (10, -math.inf), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert report.unsupported_floating_point_values == (math.inf, -math.inf)

    def test_repeated_point(self):
        ring = Ring.from_points([(0, 0), (0, 10), (0, 10), (10, 10), (10, 0), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert not report.valid
        assert coords(report.repeated_points) == [(0, 10)]
        assert report.finding_count() == 1


class TestIntersections:
    """Tests for crossing and touching segments."""

    def test_bowtie(self):
        """A figure eight crosses itself once at its center."""
        report = validate_detailed(Polygon(BOWTIE))
        assert not report.valid
        assert coords(report.self_intersections) == [(2.5, 2.5)]
        assert report.ring_intersects_other_ring == ()

    def test_z_shaped_bowtie(self):
        """Only the diagonals cross; the parallel edges never meet."""
        ring = Ring.from_points([(1, 1), (4, 1), (1, 4), (4, 4), (1, 1)])
        assert not is_valid(Polygon(ring))
        report = validate_detailed(Polygon(ring))
        assert report.self_intersections == (Coordinate(2.5, 2.5),)
        assert report.finding_count() == 1

    def test_hole_crossing_exterior(self):
        hole = Ring.from_points([(5, 5), (15, 5), (15, 8), (5, 8), (5, 5)])
        report = validate_detailed(Polygon(SQUARE, (hole,)))
        assert coords(report.ring_intersects_other_ring) == [(10, 5), (10, 8)]
        assert report.self_intersections == ()

    def test_hole_vertex_touching_exterior(self):
        hole = Ring.from_points([(0, 5), (5, 3), (5, 7), (0, 5)])
        report = validate_detailed(Polygon(SQUARE, (hole,)))
        assert not report.valid
        assert coords(report.point_touching_line) == [(0, 5)]
        assert report.ring_intersects_other_ring == ()

    def test_vertex_on_later_segment(self):
        """An earlier vertex strictly inside a later segment is touching."""
        ring = Ring.from_points([(0, 0), (4, 0), (4, 4), (6, 2), (2, -2), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert coords(report.point_touching_line) == [(4, 0)]
        assert report.self_intersections == ()

    def test_collinear_overlap_is_not_an_intersection(self):
        ring = Ring.from_points([(0, 0), (10, 0), (10, 10), (10, 5), (0, 0)])
        report = validate_detailed(Polygon(ring))
        assert report.self_intersections == ()
        assert report.ring_intersects_other_ring == ()

    def test_every_category_at_once(self):
        """Crossings within and between rings plus a touching vertex."""
        exterior = Ring.from_points([(0, 0), (0, 200), (200, 0), (200, 200), (0, 0)])
        interior = Ring.from_points([(10, 20), (50, 20), (20, 50), (50, 50), (10, 20)])
        report = validate_detailed(Polygon(exterior, (interior,)))

        assert not report.valid
        assert report.rings_with_less_than_three_points == ()
        assert report.open_rings == ()
        assert report.repeated_points == ()

        assert len(report.self_intersections) == 2
        assert report.self_intersections[0] == Coordinate(100, 100)
        assert report.self_intersections[1].x == pytest.approx(32.857142857142854)
        assert report.self_intersections[1].y == pytest.approx(37.142857142857146)
        assert coords(report.ring_intersects_other_ring) == [(20, 20), (35, 35)]
        assert coords(report.point_touching_line) == [(50, 50)]


class TestModes:
    """Fail-fast and detailed modes agree."""

    @pytest.mark.parametrize(
        "polygon",
        [
            Polygon(SQUARE),
            Polygon(SQUARE, (HOLE,)),
            Polygon(BOWTIE),
            Polygon(Ring.from_points([(0, 0), (1, 1), (0, 0)])),
            Polygon(Ring.from_points([(0, 0), (1, 1), (1, 1), (0, 0)])),
            Polygon(Ring.from_points([(0, 0), (0, 10), (10, 10), (10, 0)])),
        ],
    )
    def test_verdicts_agree(self, polygon):
        assert is_valid(polygon) == validate_detailed(polygon).valid


class TestGeometryDispatch:
    """Tests for the Polygon/MultiPolygon entry points."""

    def test_multipolygon_members_checked_independently(self):
        """Overlapping members are not compared against each other."""
        overlapping = Ring.from_points([(5, 5), (5, 15), (15, 15), (15, 5), (5, 5)])
        multi = MultiPolygon((Polygon(SQUARE), Polygon(overlapping)))
        assert is_valid_geometry(multi)
        assert validate_geometry(multi).valid

    def test_multipolygon_findings_concatenated(self):
        multi = MultiPolygon((Polygon(BOWTIE), Polygon(SQUARE), Polygon(BOWTIE)))
        report = validate_geometry(multi)
        assert not report.valid
        assert coords(report.self_intersections) == [(2.5, 2.5), (2.5, 2.5)]
        assert not is_valid_geometry(multi)

    def test_line_string_rejected(self):
        with pytest.raises(UnsupportedShapeError):
            validate_geometry(LineString.from_points([(0, 0), (1, 1)]))
        with pytest.raises(UnsupportedShapeError):
            is_valid_geometry(LineString.from_points([(0, 0), (1, 1)]))
