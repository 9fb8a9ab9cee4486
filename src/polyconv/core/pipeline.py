"""Ingest orchestration for SVG and WKT text.

This module sequences the pipeline stages:
1. Read text into rings and geometry (path interpreter, SVG reader, WKT reader)
2. Normalize ring winding (and fold several polygonal SVG shapes into one
   MultiPolygon)
3. Optionally validate polygons

Any geometry leaving the pipeline has normalized winding and, when asked
for, a validity report. Malformed input stops the pipeline with a
ParseError; validity findings are returned as data.

Key components:
- IngestResult: Normalized geometry plus optional report
- GeometryPipeline: Orchestrator with conversion and boolean helpers
"""

from collections.abc import Callable
from dataclasses import dataclass

from polyconv.config import PolyconvSettings, get_default_settings
from polyconv.core.boolean import BooleanOperation, polygon_boolean
from polyconv.core.orientation import normalize
from polyconv.core.path import path_to_multi_polygon, path_to_polygon
from polyconv.core.repair import repair_geometry
from polyconv.core.validator import is_valid_geometry, validate_geometry
from polyconv.domain import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    ValidationReport,
    geometry_type_name,
)
from polyconv.exceptions import InputTooLargeError, ParseError, PolyconvError
from polyconv.io import parse_wkt, read_svg, to_svg, to_svg_path, to_wkt
from polyconv.utils import PipelineLogger, get_logger


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one pass through the pipeline.

    Attributes:
        geometry: Winding-normalized geometry
        report: Validity report, None when validation was not requested or the
            geometry is not polygonal
    """

    geometry: Geometry
    report: ValidationReport | None = None

    @property
    def valid(self) -> bool | None:
        return None if self.report is None else self.report.valid


def _ring_count(geometry: Geometry) -> int:
    if isinstance(geometry, Polygon):
        return 1 + len(geometry.interiors)
    if isinstance(geometry, MultiPolygon):
        return sum(_ring_count(p) for p in geometry.polygons)
    if isinstance(geometry, GeometryCollection):
        return sum(_ring_count(g) for g in geometry.geometries)
    return 0


def _segment_count(geometry: Geometry) -> int:
    if isinstance(geometry, (Polygon, MultiPolygon)):
        return geometry.segment_count()
    return 0


def _unwrap(collection: GeometryCollection) -> Geometry:
    """Collapse a collection read from markup into its natural geometry.

    One member stands for itself. Several members that are all polygonal
    fold into one MultiPolygon, in document order. Anything mixed stays a
    collection.
    """
    if len(collection) == 1:
        return collection.geometries[0]
    members = collection.geometries
    if members and all(isinstance(g, (Polygon, MultiPolygon)) for g in members):
        polygons: list[Polygon] = []
        for member in members:
            if isinstance(member, MultiPolygon):
                polygons.extend(member.polygons)
            else:
                polygons.append(member)
        return MultiPolygon(tuple(polygons))
    return collection


class GeometryPipeline:
    """Orchestrates parsing, normalization and validation.

    Example:
        pipeline = GeometryPipeline()
        result = pipeline.ingest_path("M0 0L10 0L10 10L0 10Z", validate=True)
        print(result.valid)
        print(pipeline.svg_to_wkt('<rect width="2" height="2"/>'))
    """

    def __init__(self, settings: PolyconvSettings | None = None) -> None:
        """Initialize the pipeline.

        Args:
            settings: Polyconv settings (defaults when None)
        """
        self.settings = settings or get_default_settings()
        self.logger = get_logger("polyconv.pipeline")
        self.pipeline_logger = PipelineLogger(self.logger)

    # -- ingestion -----------------------------------------------------------

    def _finish(self, geometry: Geometry, source: str, validate: bool) -> IngestResult:
        normalized = normalize(geometry)
        self.pipeline_logger.log_ingested(
            source, geometry_type_name(normalized), _ring_count(normalized)
        )

        if not validate or not isinstance(normalized, (Polygon, MultiPolygon)):
            return IngestResult(geometry=normalized)

        self.check_size(normalized)
        report = validate_geometry(normalized)
        self.pipeline_logger.log_validated(
            geometry_type_name(normalized), report.valid, report.finding_count()
        )
        return IngestResult(geometry=normalized, report=report)

    def check_size(self, geometry: Geometry) -> None:
        """Enforce the validation segment limit.

        Raises:
            InputTooLargeError: If the geometry has more segments than allowed
        """
        count = _segment_count(geometry)
        limit = self.settings.validation.max_segments
        if count > limit:
            raise InputTooLargeError(count, limit)

    def ingest_path(self, d: str, validate: bool = False) -> IngestResult:
        """Run SVG path data through the pipeline.

        Args:
            d: Path "d" attribute contents
            validate: Produce a detailed validity report

        Returns:
            IngestResult holding a normalized Polygon

        Raises:
            ParseError: If the path data is malformed
            InputTooLargeError: If validation is requested on an oversized polygon
        """
        try:
            polygon = path_to_polygon(d, self.settings.path.unsupported_commands)
        except ParseError as e:
            self.pipeline_logger.log_parse_error("path", e)
            raise
        return self._finish(polygon, "path", validate)

    def ingest_path_multi(self, d: str, validate: bool = False) -> IngestResult:
        """Run SVG path data through the pipeline as a MultiPolygon.

        Each subpath becomes a member polygon with no holes.
        """
        try:
            multi = path_to_multi_polygon(d, self.settings.path.unsupported_commands)
        except ParseError as e:
            self.pipeline_logger.log_parse_error("path", e)
            raise
        return self._finish(multi, "path", validate)

    def ingest_svg(self, markup: str, validate: bool = False) -> IngestResult:
        """Run SVG markup through the pipeline.

        A single shape element yields that geometry. Several polygonal
        shapes fold into a MultiPolygon, which is validated like any other;
        a mix of polygons and lines yields an unvalidated GeometryCollection.
        """
        try:
            collection = read_svg(markup, self.settings.path.unsupported_commands)
        except ParseError as e:
            self.pipeline_logger.log_parse_error("svg", e)
            raise
        return self._finish(_unwrap(collection), "svg", validate)

    def ingest_wkt(self, text: str, validate: bool = False) -> IngestResult:
        """Run a WKT literal through the pipeline."""
        try:
            geometry = parse_wkt(text)
        except ParseError as e:
            self.pipeline_logger.log_parse_error("wkt", e)
            raise
        return self._finish(geometry, "wkt", validate)

    # -- conversions ---------------------------------------------------------

    def svg_to_wkt(self, markup: str) -> str:
        """Convert SVG markup into WKT.

        Raises:
            ParseError: If the markup cannot be read
        """
        return to_wkt(self.ingest_svg(markup).geometry)

    def svg_path_to_wkt(self, d: str) -> str:
        """Convert bare SVG path data into WKT."""
        return to_wkt(self.ingest_path(d).geometry)

    def wkt_to_svg(self, text: str) -> str:
        """Convert WKT into SVG elements."""
        return to_svg(self.ingest_wkt(text).geometry)

    def wkt_to_svg_path(self, text: str) -> str:
        """Convert WKT into bare SVG path data."""
        return to_svg_path(self.ingest_wkt(text).geometry)

    # -- validity queries ----------------------------------------------------

    def svg_is_valid(self, markup: str) -> bool:
        """Whether every shape in the markup is a usable geometry.

        Polygonal shapes must pass the validity check; line strings need at
        least two points. Markup that cannot be checked (unreadable, or over
        the segment limit) is simply not valid.
        """
        try:
            return self._all_valid(self.ingest_svg(markup).geometry)
        except PolyconvError:
            return False

    def svg_path_is_valid(self, d: str) -> bool:
        """Whether path data describes a valid polygon."""
        try:
            return self._all_valid(self.ingest_path(d).geometry)
        except PolyconvError:
            return False

    def _all_valid(self, geometry: Geometry) -> bool:
        if isinstance(geometry, GeometryCollection):
            return all(self._all_valid(g) for g in geometry.geometries)
        if isinstance(geometry, LineString):
            return len(geometry) >= 2
        self.check_size(geometry)
        return is_valid_geometry(geometry)

    def validate_svg_polygon(self, markup: str) -> bool:
        """Whether markup holds exactly one polygonal shape and it is a valid Polygon."""
        return self._is_valid_kind(lambda: self.ingest_svg(markup), Polygon)

    def validate_svg_multi_polygon(self, markup: str) -> bool:
        """Whether markup folds into a valid MultiPolygon.

        Several polygonal shapes fold into one MultiPolygon; a lone polygon
        does not count.
        """
        return self._is_valid_kind(lambda: self.ingest_svg(markup), MultiPolygon)

    def validate_svg_path_polygon(self, d: str) -> bool:
        """Whether path data is a valid Polygon (first subpath exterior, rest holes)."""
        return self._is_valid_kind(lambda: self.ingest_path(d), Polygon)

    def validate_svg_path_multi_polygon(self, d: str) -> bool:
        """Whether path data is a valid MultiPolygon, one member per subpath."""
        return self._is_valid_kind(lambda: self.ingest_path_multi(d), MultiPolygon)

    def _is_valid_kind(self, ingest: Callable[[], IngestResult], kind: type) -> bool:
        try:
            result = ingest()
        except PolyconvError:
            return False
        if not isinstance(result.geometry, kind):
            return False
        try:
            self.check_size(result.geometry)
        except InputTooLargeError:
            return False
        return is_valid_geometry(result.geometry)

    def svg_geometry_type(self, markup: str) -> str:
        """Geometry type recognized in the markup, or "None" if unreadable."""
        try:
            return geometry_type_name(self.ingest_svg(markup).geometry)
        except PolyconvError:
            return "None"

    def svg_path_geometry_type(self, d: str) -> str:
        """Geometry type of bare path data ("Polygon"), or "None" if unreadable."""
        try:
            return geometry_type_name(self.ingest_path(d).geometry)
        except PolyconvError:
            return "None"

    def validate_wkt(self, text: str) -> IngestResult:
        """Parse WKT and produce a detailed report for polygonal input."""
        return self.ingest_wkt(text, validate=True)

    # -- repair --------------------------------------------------------------

    def repair(self, geometry: Geometry) -> Polygon | MultiPolygon:
        """Rebuild an already ingested polygonal geometry so that it is valid.

        Raises:
            UnsupportedShapeError: If the geometry is not polygonal
            RepairError: If nothing with area is left
        """
        repaired = repair_geometry(geometry)
        self.pipeline_logger.log_repaired(
            geometry_type_name(geometry), geometry_type_name(repaired)
        )
        return repaired

    def repair_wkt(self, text: str) -> str:
        """Repair a WKT polygon or multipolygon, returning WKT.

        Raises:
            ParseError: If the text is not WKT
            UnsupportedShapeError: If the geometry is not polygonal
            RepairError: If nothing with area is left
        """
        return to_wkt(self.repair(self.ingest_wkt(text).geometry))

    # -- boolean operations --------------------------------------------------

    def boolean(self, first: Geometry, second: Geometry, operation: BooleanOperation) -> MultiPolygon:
        """Apply a boolean operation to two already ingested geometries."""
        for geometry in (first, second):
            if isinstance(geometry, (Polygon, MultiPolygon)):
                self.check_size(geometry)
        result = polygon_boolean(
            first,
            second,
            operation,
            check_validity=self.settings.validation.check_boolean_inputs,
        )
        self.pipeline_logger.log_boolean(operation.value, len(result))
        return result

    def wkt_boolean(self, first: str, second: str, operation: BooleanOperation) -> str:
        """Boolean operation on two WKT literals, returning WKT."""
        result = self.boolean(
            self.ingest_wkt(first).geometry, self.ingest_wkt(second).geometry, operation
        )
        return to_wkt(result)

    def svg_boolean(self, first: str, second: str, operation: BooleanOperation) -> str:
        """Boolean operation on two SVG shapes, returning SVG elements."""
        result = self.boolean(
            self.ingest_svg(first).geometry, self.ingest_svg(second).geometry, operation
        )
        return to_svg(result)

    def svg_path_boolean(self, first: str, second: str, operation: BooleanOperation) -> str:
        """Boolean operation on two path data strings, returning path data."""
        result = self.boolean(
            self.ingest_path(first).geometry, self.ingest_path(second).geometry, operation
        )
        return to_svg_path(result)

    @property
    def stats(self):
        """Pipeline statistics gathered so far."""
        return self.pipeline_logger.stats
