"""Serialization of geometries to KML markup."""

from typing import Iterable

from jinja2 import Environment, PackageLoader

from geokml.config import validate_namespace
from geokml.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)
from geokml.kml.dispatch import GeometryKind, kind_of

KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

# Set up Jinja2 template environment
_template_env = Environment(
    loader=PackageLoader("geokml.kml", "templates"),
    autoescape=False,  # Geometry markup is pre-rendered, text is escaped in the template
    trim_blocks=True,
    lstrip_blocks=True,
)


def geometry_to_kml(geometry: Geometry, namespace: str | None = None) -> str:
    """Serialize a geometry to a KML fragment.

    Args:
        geometry: Geometry to serialize.
        namespace: Optional prefix applied to every emitted tag, including
            the tags of nested components.

    Returns:
        KML markup for the geometry.

    Raises:
        ValueError: If the namespace is empty or contains a colon.

    Example:
        >>> geometry_to_kml(Point(), namespace="gx")
        '<gx:Point></gx:Point>'
    """
    validate_namespace(namespace)
    prefix = f"{namespace}:" if namespace is not None else ""
    return _serialize(geometry, prefix)


def _serialize(geometry: Geometry, prefix: str) -> str:
    match kind_of(geometry):
        case GeometryKind.POINT:
            return _point_to_kml(geometry, prefix)
        case GeometryKind.LINESTRING:
            return _linestring_to_kml(geometry, prefix)
        case GeometryKind.POLYGON:
            return _polygon_to_kml(geometry, prefix)
        case (
            GeometryKind.MULTIPOINT
            | GeometryKind.MULTILINESTRING
            | GeometryKind.MULTIPOLYGON
            | GeometryKind.COLLECTION
        ):
            return _collection_to_kml(geometry, prefix)


def _point_to_kml(point: Point, prefix: str) -> str:
    out = f"<{prefix}Point>"
    if not point.is_empty:
        out += f"<{prefix}coordinates>{_format_xy(point)}</{prefix}coordinates>"
    return out + f"</{prefix}Point>"


def _linestring_to_kml(linestring: LineString, prefix: str, tag: str = "LineString") -> str:
    out = f"<{prefix}{tag}>"
    if not linestring.is_empty:
        coordinates = " ".join(_format_xy(point) for point in linestring.points)
        out += f"<{prefix}coordinates>{coordinates}</{prefix}coordinates>"
    return out + f"</{prefix}{tag}>"


def _polygon_to_kml(polygon: Polygon, prefix: str) -> str:
    out = ""
    if polygon.rings:
        exterior = _linestring_to_kml(polygon.rings[0], prefix, tag="LinearRing")
        out = f"<{prefix}outerBoundaryIs>{exterior}</{prefix}outerBoundaryIs>"
        for ring in polygon.interiors:
            out += f"<{prefix}innerBoundaryIs>{_linestring_to_kml(ring, prefix)}</{prefix}innerBoundaryIs>"
    return f"<{prefix}Polygon>{out}</{prefix}Polygon>"


def _collection_to_kml(collection: GeometryCollection, prefix: str) -> str:
    out = "".join(_serialize(component, prefix) for component in collection.geometries)
    return f"<{prefix}MultiGeometry>{out}</{prefix}MultiGeometry>"


def _format_xy(point: Point) -> str:
    return f"{_format_number(point.x)},{_format_number(point.y)}"


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_document(geometries: Iterable[Geometry], namespace_uri: str = KML_NAMESPACE) -> str:
    """Render geometries as a complete KML document.

    Each geometry becomes one Placemark; its ``name`` and ``description``
    properties become the placemark's fields.

    Args:
        geometries: Geometries to include, in order.
        namespace_uri: Default XML namespace of the document.

    Returns:
        KML document as a string.
    """
    placemarks = [
        {
            "name": geometry.properties.get("name"),
            "description": geometry.properties.get("description"),
            "geometry": geometry_to_kml(geometry),
        }
        for geometry in geometries
    ]
    template = _template_env.get_template("document.kml.j2")
    return template.render(namespace_uri=namespace_uri, placemarks=placemarks)
