"""Unit tests for polygon repair."""

import pytest

from polyconv.core.orientation import normalize, winding_order
from polyconv.core.repair import repair_geometry
from polyconv.core.validator import is_valid, is_valid_geometry
from polyconv.domain import LineString, MultiPolygon, Polygon, Ring, WindingOrder
from polyconv.exceptions import RepairError, UnsupportedShapeError
from polyconv.io import to_shapely

SQUARE = Polygon(Ring.from_points([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]))
BOWTIE = Polygon(Ring.from_points([(1, 1), (4, 4), (4, 1), (1, 4), (1, 1)]))


class TestRepair:
    """Tests for repair_geometry."""

    def test_bowtie_splits_into_two_triangles(self):
        """A figure eight becomes its two lobes."""
        result = repair_geometry(BOWTIE)
        assert isinstance(result, MultiPolygon)
        assert len(result) == 2
        assert to_shapely(result).area == pytest.approx(4.5)
        assert all(is_valid(p) for p in result)

    def test_repaired_geometry_is_normalized(self):
        result = repair_geometry(BOWTIE)
        assert all(winding_order(p.exterior) == WindingOrder.CLOCKWISE for p in result)

    def test_valid_polygon_is_kept(self):
        """A valid polygon comes back as the same Polygon."""
        result = repair_geometry(SQUARE)
        assert result == normalize(SQUARE)

    def test_multipolygon_input(self):
        result = repair_geometry(MultiPolygon((SQUARE, BOWTIE)))
        assert is_valid_geometry(result)

    def test_collapsed_polygon(self):
        """A polygon with no area cannot be repaired."""
        flat = Polygon(Ring.from_points([(0, 0), (1, 1), (2, 2), (0, 0)]))
        with pytest.raises(RepairError, match="no area"):
            repair_geometry(flat)

    def test_line_string_rejected(self):
        with pytest.raises(UnsupportedShapeError):
            repair_geometry(LineString.from_points([(0, 0), (1, 1)]))
