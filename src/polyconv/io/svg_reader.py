"""SVG markup reader.

Converts the supported SVG shape elements into domain geometry:

- <path d="...">            -> Polygon (first subpath exterior, others holes)
- <polygon points="...">    -> Polygon (closed)
- <rect x y width height>   -> Polygon (closed)
- <polyline points="...">   -> LineString
- <line x1 y1 x2 y2>        -> LineString with two points

Markup may be a single element, several sibling elements, or a full <svg>
document. Grouping and descriptive elements are walked through; any other
element is rejected.
"""

import re
import xml.etree.ElementTree as ET

from polyconv.core.path import (
    UnsupportedCommandPolicy,
    parse_coordinate_pairs,
    path_to_polygon,
)
from polyconv.domain import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    Polygon,
    Ring,
)
from polyconv.exceptions import ParseError

_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_WRAPPER_TAG = "polyconv-fragment"

SUPPORTED_ELEMENTS = frozenset({"path", "polygon", "polyline", "rect", "line"})
PASS_THROUGH_ELEMENTS = frozenset(
    {_WRAPPER_TAG, "svg", "g", "title", "desc", "defs", "metadata", "style"}
)


def _local_name(tag: str) -> str:
    """Strip an XML namespace from a tag name."""
    return tag.rsplit("}", 1)[-1]


def _parse_number(markup: str, element: str, name: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as e:
        raise ParseError(markup, f"attribute '{name}' of <{element}> is not a number: {value!r}") from e


def parse_points(markup: str, element: str, points: str) -> list[Coordinate]:
    """Parse a points attribute ("x1,y1 x2,y2 ..." with any separators).

    Raises:
        ParseError: If a value is not a number, a value is unpaired, or nothing is given
    """
    if not points.strip():
        raise ParseError(markup, f"<{element}> has no points")
    try:
        return parse_coordinate_pairs(points)
    except ParseError as e:
        raise ParseError(markup, f"<{element}> points are malformed: {e.reason}") from e


def _required(markup: str, element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise ParseError(markup, f"<{_local_name(element.tag)}> is missing attribute '{name}'")
    return value


def _path(markup: str, element: ET.Element, policy: UnsupportedCommandPolicy) -> Polygon:
    return path_to_polygon(_required(markup, element, "d"), policy)


def _polygon(markup: str, element: ET.Element) -> Polygon:
    coords = parse_points(markup, "polygon", _required(markup, element, "points"))
    if not coords[0].same_bits(coords[-1]):
        coords.append(coords[0])
    return Polygon(Ring(tuple(coords)))


def _rect(markup: str, element: ET.Element) -> Polygon:
    x = _parse_number(markup, "rect", "x", element.get("x", "0"))
    y = _parse_number(markup, "rect", "y", element.get("y", "0"))
    width = _parse_number(markup, "rect", "width", _required(markup, element, "width"))
    height = _parse_number(markup, "rect", "height", _required(markup, element, "height"))
    if width < 0 or height < 0:
        raise ParseError(markup, "<rect> width and height must not be negative")

    max_x = x + width
    max_y = y + height
    return Polygon(
        Ring.from_points([(x, y), (max_x, y), (max_x, max_y), (x, max_y), (x, y)])
    )


def _polyline(markup: str, element: ET.Element) -> LineString:
    return LineString(tuple(parse_points(markup, "polyline", _required(markup, element, "points"))))


def _line(markup: str, element: ET.Element) -> LineString:
    values = [
        _parse_number(markup, "line", name, _required(markup, element, name))
        for name in ("x1", "y1", "x2", "y2")
    ]
    return LineString.from_points([(values[0], values[1]), (values[2], values[3])])


def read_svg(
    markup: str,
    on_unsupported: UnsupportedCommandPolicy = UnsupportedCommandPolicy.ERROR,
) -> GeometryCollection:
    """Read every supported shape element from SVG markup.

    Args:
        markup: SVG text (single element, fragment, or full document)
        on_unsupported: Policy for curve/arc commands in path data

    Returns:
        Geometries in document order, not winding-normalized

    Raises:
        ParseError: If the markup is not well-formed XML, holds an unsupported
            element, an element is missing data, or no shape is found
    """
    if not markup or not markup.strip():
        raise ParseError(markup, "SVG input is empty")

    body = _DOCTYPE_RE.sub("", _XML_DECLARATION_RE.sub("", markup, count=1))
    try:
        root = ET.fromstring(f"<{_WRAPPER_TAG}>{body}</{_WRAPPER_TAG}>")
    except ET.ParseError as e:
        raise ParseError(markup, f"SVG input is not well-formed: {e}") from e

    geometries: list[Geometry] = []
    for element in root.iter():
        name = _local_name(element.tag)
        if name in PASS_THROUGH_ELEMENTS:
            continue
        if name == "path":
            geometries.append(_path(markup, element, on_unsupported))
        elif name == "polygon":
            geometries.append(_polygon(markup, element))
        elif name == "rect":
            geometries.append(_rect(markup, element))
        elif name == "polyline":
            geometries.append(_polyline(markup, element))
        elif name == "line":
            geometries.append(_line(markup, element))
        else:
            raise ParseError(markup, f"unsupported SVG element <{name}>")

    if not geometries:
        raise ParseError(markup, "no supported SVG element found")

    return GeometryCollection(tuple(geometries))


def read_svg_single(
    markup: str,
    on_unsupported: UnsupportedCommandPolicy = UnsupportedCommandPolicy.ERROR,
) -> Geometry:
    """Read markup that must hold exactly one shape element.

    Raises:
        ParseError: If zero or several shapes are present
    """
    collection = read_svg(markup, on_unsupported)
    if len(collection) != 1:
        raise ParseError(markup, f"expected one SVG shape, found {len(collection)}")
    return collection.geometries[0]
