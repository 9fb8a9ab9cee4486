"""Validity report returned by the polygon checker.

Findings are data, not errors: an invalid polygon is an expected outcome and
is described here category by category.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from polyconv.domain.geometry import Coordinate, Ring


@dataclass(frozen=True)
class ValidationReport:
    """OGC-style validity findings for one polygon.

    Attributes:
        valid: Overall verdict
        rings_with_less_than_three_points: Rings with fewer than three points
            before closing
        unsupported_floating_point_values: NaN or infinite components met
        open_rings: Rings whose first and last coordinate differ
        repeated_points: Coordinates repeated by the next point in a ring
        self_intersections: Where a ring crosses itself
        ring_intersects_other_ring: Where a ring crosses an earlier ring
        point_touching_line: Vertices lying on a segment they are not an
            endpoint of
    """

    valid: bool = True
    rings_with_less_than_three_points: tuple[Ring, ...] = field(default=())
    unsupported_floating_point_values: tuple[float, ...] = field(default=())
    open_rings: tuple[Ring, ...] = field(default=())
    repeated_points: tuple[Coordinate, ...] = field(default=())
    self_intersections: tuple[Coordinate, ...] = field(default=())
    ring_intersects_other_ring: tuple[Coordinate, ...] = field(default=())
    point_touching_line: tuple[Coordinate, ...] = field(default=())

    @property
    def has_less_than_three_points(self) -> bool:
        return bool(self.rings_with_less_than_three_points)

    def finding_count(self) -> int:
        """Total number of individual findings across all categories."""
        return (
            len(self.rings_with_less_than_three_points)
            + len(self.unsupported_floating_point_values)
            + len(self.open_rings)
            + len(self.repeated_points)
            + len(self.self_intersections)
            + len(self.ring_intersects_other_ring)
            + len(self.point_touching_line)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary.

        Non-finite floats are written as strings ("nan", "inf", "-inf").
        """

        def num(value: float) -> float | str:
            return value if math.isfinite(value) else str(value)

        def coord(c: Coordinate) -> list[float | str]:
            return [num(c.x), num(c.y)]

        def ring(r: Ring) -> list[list[float | str]]:
            return [coord(c) for c in r.coords]

        return {
            "valid": self.valid,
            "has_less_than_three_points": self.has_less_than_three_points,
            "rings_with_less_than_three_points": [
                ring(r) for r in self.rings_with_less_than_three_points
            ],
            "unsupported_floating_point_values": [
                num(v) for v in self.unsupported_floating_point_values
            ],
            "open_rings": [ring(r) for r in self.open_rings],
            "repeated_points": [coord(c) for c in self.repeated_points],
            "self_intersections": [coord(c) for c in self.self_intersections],
            "ring_intersects_other_ring": [coord(c) for c in self.ring_intersects_other_ring],
            "point_touching_line": [coord(c) for c in self.point_touching_line],
        }
