"""Exception hierarchy for Polyconv."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polyconv.domain.report import ValidationReport

_MAX_TEXT_IN_MESSAGE = 80


def _excerpt(text: str) -> str:
    if len(text) <= _MAX_TEXT_IN_MESSAGE:
        return text
    return text[: _MAX_TEXT_IN_MESSAGE - 3] + "..."


class PolyconvError(Exception):
    """Base exception for all Polyconv errors."""

    pass


class ParseError(PolyconvError):
    """Input text could not be turned into geometry.

    Raised for malformed coordinate tokens, empty or garbled path data or WKT,
    and unsupported SVG elements. The offending text is kept on the exception.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse '{_excerpt(text)}': {reason}")


class UnsupportedShapeError(PolyconvError):
    """Geometry type is outside the family an operation accepts."""

    def __init__(self, shape_type: str, operation: str) -> None:
        self.shape_type = shape_type
        self.operation = operation
        super().__init__(f"Geometry type '{shape_type}' is not supported by {operation}")


class InvalidGeometryError(PolyconvError):
    """A geometry failed validation where a valid one is required."""

    def __init__(self, report: "ValidationReport", role: str = "input") -> None:
        self.report = report
        self.role = role
        super().__init__(f"The {role} geometry is not a valid polygon")


class InputTooLargeError(PolyconvError):
    """Geometry exceeds the configured segment limit for validation."""

    def __init__(self, segment_count: int, limit: int) -> None:
        self.segment_count = segment_count
        self.limit = limit
        super().__init__(
            f"Geometry has {segment_count} segments, validation limit is {limit}"
        )


class BooleanOperationError(PolyconvError):
    """The clipping engine failed to produce a result."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Boolean {operation} failed: {reason}")


class SerializationError(PolyconvError):
    """A geometry could not be written in the requested notation."""

    def __init__(self, shape_type: str, reason: str) -> None:
        self.shape_type = shape_type
        self.reason = reason
        super().__init__(f"Could not write {shape_type}: {reason}")


class RepairError(PolyconvError):
    """A geometry could not be turned into a valid polygonal one."""

    def __init__(self, shape_type: str, reason: str) -> None:
        self.shape_type = shape_type
        self.reason = reason
        super().__init__(f"Could not repair {shape_type}: {reason}")
