"""Mapping between KML tag names and geometry kinds."""

from enum import Enum

from geokml.geometry import Geometry, GeometryType


class GeometryKind(Enum):
    POINT = "point"
    LINESTRING = "linestring"
    POLYGON = "polygon"
    MULTIPOINT = "multipoint"
    MULTILINESTRING = "multilinestring"
    MULTIPOLYGON = "multipolygon"
    COLLECTION = "geometrycollection"


# Keys are lower-cased local tag names.
TAG_KINDS: dict[str, GeometryKind] = {
    "point": GeometryKind.POINT,
    "linestring": GeometryKind.LINESTRING,
    "polygon": GeometryKind.POLYGON,
    "multipoint": GeometryKind.MULTIPOINT,
    "multilinestring": GeometryKind.MULTILINESTRING,
    "multipolygon": GeometryKind.MULTIPOLYGON,
    "geometrycollection": GeometryKind.COLLECTION,
    "multigeometry": GeometryKind.COLLECTION,
}

_TYPE_KINDS: dict[GeometryType, GeometryKind] = {
    GeometryType.POINT: GeometryKind.POINT,
    GeometryType.LINESTRING: GeometryKind.LINESTRING,
    GeometryType.POLYGON: GeometryKind.POLYGON,
    GeometryType.MULTIPOINT: GeometryKind.MULTIPOINT,
    GeometryType.MULTILINESTRING: GeometryKind.MULTILINESTRING,
    GeometryType.MULTIPOLYGON: GeometryKind.MULTIPOLYGON,
    GeometryType.GEOMETRYCOLLECTION: GeometryKind.COLLECTION,
}


def kind_for_tag(tag: str) -> GeometryKind | None:
    """Return the geometry kind for a normalized tag, or None if it is not geometry."""
    return TAG_KINDS.get(tag)


def kind_of(geometry: Geometry) -> GeometryKind:
    """Return the geometry kind of a geometry value.

    Raises:
        TypeError: If the value is not one of the known geometry variants.
    """
    kind = _TYPE_KINDS.get(getattr(geometry, "geometry_type", None))
    if kind is None:
        raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
    return kind
