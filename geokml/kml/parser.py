"""Recursive-descent parser from KML element trees to geometries."""

import logging
import xml.etree.ElementTree as ET

from geokml.config import KmlConfig
from geokml.errors import MalformedDocument, MalformedPolygon
from geokml.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    geometry_reduce,
)
from geokml.kml.coordinates import extract_coordinates
from geokml.kml.dispatch import GeometryKind, kind_for_tag
from geokml.kml.loader import child_elements, load_tree, local_name
from geokml.kml.properties import accumulate_properties

logger = logging.getLogger(__name__)

_MULTI_TYPES: dict[GeometryKind, type[GeometryCollection]] = {
    GeometryKind.MULTIPOINT: MultiPoint,
    GeometryKind.MULTILINESTRING: MultiLineString,
    GeometryKind.MULTIPOLYGON: MultiPolygon,
    GeometryKind.COLLECTION: GeometryCollection,
}


class KmlParser:
    """Build geometries from KML documents.

    Args:
        config: Adapter configuration (recognized properties, nesting limit).

    Example:
        >>> parser = KmlParser()
        >>> parser.parse("<Point><coordinates>1,2</coordinates></Point>")
        Point(properties={}, x=1.0, y=2.0)
    """

    def __init__(self, config: KmlConfig | None = None):
        self.config = config if config is not None else KmlConfig()

    def parse(self, text: str) -> Geometry:
        """Parse KML text into a single geometry.

        Args:
            text: KML document text.

        Returns:
            The only geometry found, a GeometryCollection when several
            were found, or an empty GeometryCollection when there were none.

        Raises:
            MalformedDocument: If the text is not well-formed, holds
                non-numeric coordinates or nests too deeply.
            MalformedPolygon: If a polygon's outer boundary is not exactly one ring.
        """
        return geometry_reduce(self.parse_all(text))

    def parse_all(self, text: str) -> list[Geometry]:
        """Parse KML text into its top-level geometries, without reducing them.

        Args:
            text: KML document text.

        Returns:
            One geometry per geometry element of each placemark, in document
            order, or the root geometry when the document has no placemark.

        Raises:
            MalformedDocument: If the text cannot be read as KML.
            MalformedPolygon: If a polygon's outer boundary is not exactly one ring.
        """
        geometries = self.parse_tree(load_tree(text))
        if not geometries:
            logger.warning("KML document contains no recognized geometry")
        return geometries

    def parse_tree(self, root: ET.Element) -> list[Geometry]:
        """Parse every top-level geometry of a loaded document, in document order."""
        placemarks = [element for element in root.iter() if local_name(element) == "placemark"]
        if not placemarks:
            # No placemark: try to read the root element itself as geometry
            kind = kind_for_tag(local_name(root))
            if kind is None:
                return []
            return [self.parse_geometry(root, kind)]

        geometries: list[Geometry] = []
        for placemark in placemarks:
            for child, properties in accumulate_properties(placemark, self.config.property_names):
                kind = kind_for_tag(local_name(child))
                if kind is None:
                    continue
                geometry = self.parse_geometry(child, kind)
                if properties:
                    geometry = geometry.with_properties(properties)
                geometries.append(geometry)
        logger.debug(f"Parsed {len(geometries)} geometries from {len(placemarks)} placemarks")
        return geometries

    def parse_geometry(self, element: ET.Element, kind: GeometryKind, depth: int = 1) -> Geometry:
        """Parse one geometry element of a known kind."""
        if depth > self.config.max_depth:
            raise MalformedDocument(
                f"Geometry nesting exceeds maximum depth of {self.config.max_depth}"
            )

        match kind:
            case GeometryKind.POINT:
                return self.parse_point(element)
            case GeometryKind.LINESTRING:
                return self.parse_linestring(element)
            case GeometryKind.POLYGON:
                return self.parse_polygon(element)
            case (
                GeometryKind.MULTIPOINT
                | GeometryKind.MULTILINESTRING
                | GeometryKind.MULTIPOLYGON
                | GeometryKind.COLLECTION
            ):
                return self.parse_collection(element, _MULTI_TYPES[kind], depth)

    def parse_point(self, element: ET.Element) -> Point:
        coordinates = extract_coordinates(element)
        if not coordinates:
            return Point()
        if len(coordinates) > 1:
            logger.debug(f"Point has {len(coordinates)} coordinate sets, using the first")
        x, y = _to_xy(coordinates[0])
        return Point(x, y)

    def parse_linestring(self, element: ET.Element) -> LineString:
        return LineString(tuple(Point(*_to_xy(components)) for components in extract_coordinates(element)))

    def parse_polygon(self, element: ET.Element) -> Polygon:
        """Parse a polygon from its outer and inner boundary rings.

        A polygon without ``outerBoundaryIs`` is empty. Inner boundaries
        accept ``LinearRing`` as well as the ``LineString`` form written by
        the serializer.

        Raises:
            MalformedPolygon: If the outer boundary does not hold exactly one ring.
        """
        outer_boundaries = child_elements(element, "outerboundaryis")
        if not outer_boundaries:
            return Polygon()

        outer_rings = child_elements(outer_boundaries[0], "linearring")
        if len(outer_rings) != 1:
            raise MalformedPolygon(
                f"Polygon outer boundary must contain exactly one LinearRing, found {len(outer_rings)}"
            )

        rings = [self.parse_linestring(outer_rings[0])]
        for inner_boundary in child_elements(element, "innerboundaryis"):
            for ring in inner_boundary:
                if local_name(ring) in ("linearring", "linestring"):
                    rings.append(self.parse_linestring(ring))
        return Polygon(tuple(rings))

    def parse_collection(
        self,
        element: ET.Element,
        collection_type: type[GeometryCollection] = GeometryCollection,
        depth: int = 1,
    ) -> GeometryCollection:
        """Parse the geometry children of a collection element.

        Bare ``LinearRing`` children are read as line strings. Children that
        are not geometry, or not of the collection's component type, are skipped.
        """
        components = []
        for child in element:
            tag = local_name(child)
            if tag == "linearring":
                tag = "linestring"
            kind = kind_for_tag(tag)
            if kind is None:
                continue
            component = self.parse_geometry(child, kind, depth + 1)
            if not isinstance(component, collection_type.component_type):
                logger.debug(
                    f"Skipping {component.geometry_type.value} inside {collection_type.__name__}"
                )
                continue
            components.append(component)
        return collection_type(tuple(components))


def _to_xy(components: list[str]) -> tuple[float, float]:
    try:
        return float(components[0]), float(components[1])
    except ValueError as e:
        raise MalformedDocument(f"Invalid coordinate {','.join(components)!r}") from e
