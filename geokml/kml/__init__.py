"""KML reading and writing."""

from geokml.kml.adapter import KmlAdapter
from geokml.kml.dispatch import GeometryKind, kind_for_tag, kind_of
from geokml.kml.parser import KmlParser
from geokml.kml.serializer import KML_NAMESPACE, geometry_to_kml, render_document

__all__ = [
    "GeometryKind",
    "KML_NAMESPACE",
    "KmlAdapter",
    "KmlParser",
    "geometry_to_kml",
    "kind_for_tag",
    "kind_of",
    "render_document",
]
