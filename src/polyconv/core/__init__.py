"""Core geometry algorithms for polyconv.

This module contains the pure algorithms of the ingestion pipeline:

- SVG path interpretation (path data to rings)
- Winding normalization (signed area, orientation)
- Segment predicates (exact crossing and touching tests)
- Polygon validity checking (fail-fast and detailed)

All functions are:
- Stateless and free of I/O
- Safe to call from several threads at once

The orchestration (core.pipeline), boolean operations (core.boolean) and
repair (core.repair) sit on top of the I/O layer and are imported from their
modules directly.

Key functions:
- interpret_path: Interpret path data into rings
- normalize: Enforce exterior-clockwise, interior-counter-clockwise winding
- is_valid: Fail-fast polygon validity
- validate_detailed: Full validity report
"""

from polyconv.core.orientation import normalize, orient_ring, signed_area, winding_order
from polyconv.core.path import (
    UnsupportedCommandPolicy,
    interpret_path,
    parse_coordinate_pairs,
    path_to_multi_polygon,
    path_to_polygon,
)
from polyconv.core.segments import (
    Segment,
    intersection_point,
    orientation,
    point_on_segment,
    segments_cross,
)
from polyconv.core.validator import (
    is_valid,
    is_valid_geometry,
    validate_detailed,
    validate_geometry,
)

__all__ = [
    # Path interpretation
    "UnsupportedCommandPolicy",
    "interpret_path",
    "parse_coordinate_pairs",
    "path_to_multi_polygon",
    "path_to_polygon",
    # Orientation
    "normalize",
    "orient_ring",
    "signed_area",
    "winding_order",
    # Segments
    "Segment",
    "intersection_point",
    "orientation",
    "point_on_segment",
    "segments_cross",
    # Validation
    "is_valid",
    "is_valid_geometry",
    "validate_detailed",
    "validate_geometry",
]
