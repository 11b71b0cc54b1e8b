"""Immutable geometry model shared by the format adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Iterable, Mapping


class GeometryType(Enum):
    """Geometry variants, valued by their OGC type names."""

    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"


@dataclass(frozen=True)
class Geometry(ABC):
    """Base class for all geometry variants.

    Attributes:
        properties: Scalar properties attached by the adapter that produced
            the geometry (e.g. ``name``, ``description``).
    """

    geometry_type: ClassVar[GeometryType]

    properties: dict[str, str] = field(default_factory=dict, hash=False, kw_only=True)

    @property
    @abstractmethod
    def components(self) -> tuple[Any, ...]:
        """Direct child values of this geometry."""

    @property
    def is_empty(self) -> bool:
        return not self.components

    def with_properties(self, properties: Mapping[str, str]) -> Geometry:
        """Return a copy of this geometry carrying ``properties``.

        Existing properties are kept unless overridden.
        """
        return replace(self, properties={**self.properties, **properties})

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": self.geometry_type.value, "coordinates": self._coordinates()}

    @abstractmethod
    def _coordinates(self) -> Any:
        """Nested coordinate tuples in GeoJSON order."""


@dataclass(frozen=True)
class Point(Geometry):
    """A single position; ``x`` and ``y`` both ``None`` for an empty point.

    Attributes:
        x: Easting or longitude.
        y: Northing or latitude.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    x: float | None = None
    y: float | None = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ValueError("Point requires both x and y, or neither")
        if self.x is not None:
            object.__setattr__(self, "x", float(self.x))
            object.__setattr__(self, "y", float(self.y))

    @property
    def components(self) -> tuple[float, ...]:
        if self.x is None:
            return ()
        return (self.x, self.y)

    def _coordinates(self) -> tuple[float, ...]:
        return self.components


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered sequence of points.

    Attributes:
        points: Vertices in drawing order.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING

    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    @property
    def components(self) -> tuple[Point, ...]:
        return self.points

    def _coordinates(self) -> tuple[tuple[float, ...], ...]:
        return tuple(point.components for point in self.points)


@dataclass(frozen=True)
class Polygon(Geometry):
    """A polygon made of an outer ring followed by zero or more holes.

    Attributes:
        rings: Rings with the outer boundary first. Empty for an empty polygon.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    rings: tuple[LineString, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rings", tuple(self.rings))

    @property
    def components(self) -> tuple[LineString, ...]:
        return self.rings

    @property
    def exterior(self) -> LineString | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LineString, ...]:
        return self.rings[1:]

    def _coordinates(self) -> tuple[tuple[tuple[float, ...], ...], ...]:
        return tuple(ring._coordinates() for ring in self.rings)


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """An ordered sequence of geometries of any kind.

    Attributes:
        geometries: Component geometries in document order.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION
    component_type: ClassVar[type[Geometry]] = Geometry

    geometries: tuple[Geometry, ...] = ()

    def __post_init__(self) -> None:
        geometries = tuple(self.geometries)
        for geometry in geometries:
            if not isinstance(geometry, self.component_type):
                raise TypeError(
                    f"{type(self).__name__} cannot contain {type(geometry).__name__}"
                )
        object.__setattr__(self, "geometries", geometries)

    @property
    def components(self) -> tuple[Geometry, ...]:
        return self.geometries

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        if self.geometry_type is GeometryType.GEOMETRYCOLLECTION:
            return {
                "type": self.geometry_type.value,
                "geometries": [geometry.__geo_interface__ for geometry in self.geometries],
            }
        return super().__geo_interface__

    def _coordinates(self) -> tuple[Any, ...]:
        return tuple(geometry._coordinates() for geometry in self.geometries)


@dataclass(frozen=True)
class MultiPoint(GeometryCollection):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT
    component_type: ClassVar[type[Geometry]] = Point


@dataclass(frozen=True)
class MultiLineString(GeometryCollection):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING
    component_type: ClassVar[type[Geometry]] = LineString


@dataclass(frozen=True)
class MultiPolygon(GeometryCollection):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON
    component_type: ClassVar[type[Geometry]] = Polygon


def geometry_reduce(geometries: Iterable[Geometry]) -> Geometry:
    """Reduce a list of geometries to a single geometry.

    Args:
        geometries: Geometries in document order.

    Returns:
        The only geometry when there is exactly one, otherwise a
        GeometryCollection of all of them (empty when none were given).
    """
    geometries = tuple(geometries)
    if len(geometries) == 1:
        return geometries[0]
    return GeometryCollection(geometries)
