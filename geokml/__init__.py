"""
Bidirectional converter between KML markup and geometry values.

Example Usage:
    >>> import geokml
    >>> geometry = geokml.read(
    ...     "<Placemark><name>A</name><Point><coordinates>1,2</coordinates></Point></Placemark>"
    ... )
    >>> geometry.x, geometry.y, geometry.properties
    (1.0, 2.0, {'name': 'A'})
    >>> geokml.write(geokml.Point(), namespace="gx")
    '<gx:Point></gx:Point>'
"""

from geokml.config import KmlConfig
from geokml.errors import KmlError, MalformedDocument, MalformedPolygon
from geokml.geometry import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    geometry_reduce,
)
from geokml.kml import KmlAdapter

__version__ = "0.1.0"

_default_adapter = KmlAdapter()


def read(text: str) -> Geometry:
    """Read KML text into a geometry with the default configuration."""
    return _default_adapter.read(text)


def write(geometry: Geometry, namespace: str | None = None) -> str:
    """Serialize a geometry to KML with an optional tag prefix."""
    return _default_adapter.write(geometry, namespace)


__all__ = [
    "Geometry",
    "GeometryCollection",
    "GeometryType",
    "KmlAdapter",
    "KmlConfig",
    "KmlError",
    "LineString",
    "MalformedDocument",
    "MalformedPolygon",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "geometry_reduce",
    "read",
    "write",
]
