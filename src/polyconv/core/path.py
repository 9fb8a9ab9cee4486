"""SVG path data interpreter.

Turns the mini-language of a path element's "d" attribute into rings. Only
straight-line commands produce geometry:

- M/m  moveto: starts a new ring
- L/l  lineto
- H/h  horizontal lineto
- V/v  vertical lineto
- Z/z  closepath: repeats the ring's first point

Upper-case commands are absolute, lower-case ones relative to the current
point. Curve and arc commands (C S Q T A) are not interpreted; what happens to
them is chosen with UnsupportedCommandPolicy.

Lexing (number grammar, flags, implicit command repetition) is done by
svgelements' SVGLexicalParser, which reports each command to a builder.
The builder here keeps the current point and assembles rings.

The first ring found is taken as the polygon exterior and every later ring
as a hole. Nesting is not checked geometrically; callers supplying path data
are expected to draw the outer boundary first.
"""

import logging
import re
from enum import Enum

from svgelements import SVGLexicalParser

from polyconv.domain import Coordinate, MultiPolygon, Polygon, Ring
from polyconv.exceptions import ParseError

logger = logging.getLogger(__name__)

ORIGIN = Coordinate(0.0, 0.0)

# Characters outside the path grammar, rejected before lexing with their offset
_INVALID_CHARACTER_RE = re.compile(r"(?<![\d.])[eE]|[^MmLlHhVvZzCcSsQqTtAaEe0-9\s,.+-]")
_INVALID_POINTS_CHARACTER_RE = re.compile(r"(?<![\d.])[eE]|[^Ee0-9\s,.+-]")


class UnsupportedCommandPolicy(str, Enum):
    """What to do with path commands that are not straight lines."""

    ERROR = "error"
    SKIP = "skip"


class _RingBuilder:
    """Receives commands from SVGLexicalParser and builds rings from them."""

    def __init__(self, d: str, on_unsupported: UnsupportedCommandPolicy):
        self.d = d
        self.on_unsupported = on_unsupported
        self.rings: list[list[Coordinate]] = []
        self.cursor: Coordinate | None = None

    def start(self):
        pass

    def end(self):
        pass

    def _base(self, relative: bool) -> Coordinate:
        if relative and self.cursor is not None:
            return self.cursor
        return ORIGIN

    def _pair(self, command: str, point) -> tuple[float, float]:
        if point is None or point[0] is None or point[1] is None:
            raise ParseError(self.d, f"command '{command}' is missing a coordinate")
        return float(point[0]), float(point[1])

    def _value(self, command: str, value) -> float:
        if value is None:
            raise ParseError(self.d, f"command '{command}' is missing a value")
        return float(value)

    def _active(self, command: str) -> list[Coordinate]:
        if not self.rings:
            raise ParseError(self.d, f"command '{command}' appears before any moveto")
        return self.rings[-1]

    def _append(self, command: str, point: Coordinate):
        self._active(command).append(point)
        self.cursor = point

    def move(self, *points, relative=False):
        command = "m" if relative else "M"
        if not points:
            raise ParseError(self.d, f"command '{command}' is missing a coordinate")
        x, y = self._pair(command, points[0])
        base = self._base(relative)
        point = Coordinate(base.x + x, base.y + y)
        self.rings.append([point])
        self.cursor = point
        if len(points) > 1:
            self.line(*points[1:], relative=relative)

    def line(self, *points, relative=False):
        command = "l" if relative else "L"
        for point in points:
            x, y = self._pair(command, point)
            base = self._base(relative)
            self._append(command, Coordinate(base.x + x, base.y + y))

    def horizontal(self, *values, relative=False):
        command = "h" if relative else "H"
        for value in values:
            x = self._value(command, value)
            y = self.cursor.y if self.cursor is not None else 0.0
            self._append(command, Coordinate(self._base(relative).x + x, y))

    def vertical(self, *values, relative=False):
        command = "v" if relative else "V"
        for value in values:
            y = self._value(command, value)
            x = self.cursor.x if self.cursor is not None else 0.0
            self._append(command, Coordinate(x, self._base(relative).y + y))

    def closed(self, relative=False):
        command = "z" if relative else "Z"
        self._append(command, self._active(command)[0])

    def _unsupported(self, command: str, relative: bool):
        name = command.lower() if relative else command
        if self.on_unsupported == UnsupportedCommandPolicy.ERROR:
            raise ParseError(self.d, f"unsupported path command '{name}'")
        logger.warning("Skipping unsupported path command %r", name)
        self.cursor = None

    def cubic(self, *args, relative=False):
        self._unsupported("C", relative)

    def smooth_cubic(self, *args, relative=False):
        self._unsupported("S", relative)

    def quad(self, *args, relative=False):
        self._unsupported("Q", relative)

    def smooth_quad(self, *args, relative=False):
        self._unsupported("T", relative)

    def arc(self, *args, relative=False):
        self._unsupported("A", relative)


def _lex(d: str, builder: _RingBuilder):
    try:
        SVGLexicalParser().parse(builder, d)
    except (ValueError, IndexError, TypeError) as e:
        raise ParseError(d, f"malformed path data ({e})") from e


def interpret_path(
    d: str,
    on_unsupported: UnsupportedCommandPolicy = UnsupportedCommandPolicy.ERROR,
) -> list[Ring]:
    """Interpret SVG path data into rings.

    Args:
        d: Contents of a path "d" attribute
        on_unsupported: ERROR raises on curve/arc commands; SKIP drops them,
            resets the current point and emits no geometry for them

    Returns:
        Rings in the order their movetos appear

    Raises:
        ParseError: If the data is empty, malformed, draws before any moveto,
            uses an unsupported command under the ERROR policy, or produces
            no ring

    Examples:
        >>> rings = interpret_path("M0 0L10 0L10 10Z")
        >>> [c.to_tuple() for c in rings[0].coords]
        [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0)]
    """
    if not d or not d.strip():
        raise ParseError(d, "path data is empty")

    invalid = _INVALID_CHARACTER_RE.search(d)
    if invalid:
        raise ParseError(
            d, f"unexpected character {invalid.group()!r} at offset {invalid.start()}"
        )

    builder = _RingBuilder(d, on_unsupported)
    _lex(d, builder)

    if not builder.rings:
        raise ParseError(d, "path data contains no drawable ring")

    return [Ring(tuple(coords)) for coords in builder.rings]


def parse_coordinate_pairs(text: str) -> list[Coordinate]:
    """Read a list of "x,y" pairs with the path number grammar.

    Used for points attributes; separators may be commas, whitespace or the
    sign of the next number.

    Raises:
        ParseError: If the text holds no pair, an unpaired value, or anything
            other than numbers and separators
    """
    if not text or not text.strip():
        raise ParseError(text, "no coordinates given")

    invalid = _INVALID_POINTS_CHARACTER_RE.search(text)
    if invalid:
        raise ParseError(
            text, f"unexpected character {invalid.group()!r} at offset {invalid.start()}"
        )

    builder = _RingBuilder(text, UnsupportedCommandPolicy.ERROR)
    _lex("M" + text, builder)
    if not builder.rings:
        raise ParseError(text, "no coordinates given")
    return builder.rings[0]


def path_to_polygon(
    d: str,
    on_unsupported: UnsupportedCommandPolicy = UnsupportedCommandPolicy.ERROR,
) -> Polygon:
    """Interpret path data as a polygon, first ring exterior, others holes.

    The polygon is returned as drawn; winding is not normalized here.
    """
    return Polygon.from_rings(interpret_path(d, on_unsupported))


def path_to_multi_polygon(
    d: str,
    on_unsupported: UnsupportedCommandPolicy = UnsupportedCommandPolicy.ERROR,
) -> MultiPolygon:
    """Interpret path data as a multipolygon with one member per subpath."""
    return MultiPolygon(
        tuple(Polygon(ring) for ring in interpret_path(d, on_unsupported))
    )
