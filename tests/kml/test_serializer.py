"""Unit tests for geokml.kml.serializer module."""

import xml.etree.ElementTree as ET

import pytest

from geokml.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geokml.kml import KML_NAMESPACE, geometry_to_kml, render_document


def _line(*coords: tuple[float, float]) -> LineString:
    return LineString(tuple(Point(x, y) for x, y in coords))


class TestGeometryToKml:
    """Tests for geometry_to_kml without a namespace."""

    @pytest.mark.parametrize(
        "geometry,expected",
        [
            (Point(1, 2), "<Point><coordinates>1,2</coordinates></Point>"),
            (Point(-0.23, 39.64), "<Point><coordinates>-0.23,39.64</coordinates></Point>"),
            (Point(), "<Point></Point>"),
            (
                _line((0, 0), (1.5, 1), (2, 0)),
                "<LineString><coordinates>0,0 1.5,1 2,0</coordinates></LineString>",
            ),
            (LineString(), "<LineString></LineString>"),
            (Polygon(), "<Polygon></Polygon>"),
            (GeometryCollection(), "<MultiGeometry></MultiGeometry>"),
        ],
        ids=["point", "decimal-point", "empty-point", "linestring", "empty-linestring", "empty-polygon", "empty-collection"],
    )
    def test_simple(self, geometry: Geometry, expected: str) -> None:
        assert geometry_to_kml(geometry) == expected

    def test_polygon_with_hole(self) -> None:
        polygon = Polygon(
            [_line((0, 0), (4, 0), (4, 4), (0, 0)), _line((1, 1), (2, 1), (2, 2), (1, 1))]
        )

        assert geometry_to_kml(polygon) == (
            "<Polygon>"
            "<outerBoundaryIs><LinearRing><coordinates>0,0 4,0 4,4 0,0</coordinates></LinearRing></outerBoundaryIs>"
            "<innerBoundaryIs><LineString><coordinates>1,1 2,1 2,2 1,1</coordinates></LineString></innerBoundaryIs>"
            "</Polygon>"
        )

    @pytest.mark.parametrize(
        "collection",
        [
            MultiPoint([Point(1, 2), Point(3, 4)]),
            GeometryCollection([Point(1, 2), Point(3, 4)]),
        ],
        ids=["multipoint", "collection"],
    )
    def test_collections_use_multigeometry(self, collection: Geometry) -> None:
        assert geometry_to_kml(collection) == (
            "<MultiGeometry>"
            "<Point><coordinates>1,2</coordinates></Point>"
            "<Point><coordinates>3,4</coordinates></Point>"
            "</MultiGeometry>"
        )

    def test_full_precision(self) -> None:
        point = Point(0.1 + 0.2, 1e-7)

        assert geometry_to_kml(point) == "<Point><coordinates>0.30000000000000004,1e-07</coordinates></Point>"

    def test_unknown_geometry_type(self) -> None:
        class Circle(Geometry):
            @property
            def components(self) -> tuple:
                return ()

            def _coordinates(self) -> tuple:
                return ()

        with pytest.raises(TypeError):
            geometry_to_kml(Circle())


class TestNamespacePrefix:
    """Tests for the tag prefix on every emitted element."""

    def test_empty_point(self) -> None:
        assert geometry_to_kml(Point(), namespace="gx") == "<gx:Point></gx:Point>"

    def test_collection_prefixes_nested_tags(self) -> None:
        collection = GeometryCollection([Point(1, 2), Point(3, 4)])

        assert geometry_to_kml(collection, namespace="gx") == (
            "<gx:MultiGeometry>"
            "<gx:Point><gx:coordinates>1,2</gx:coordinates></gx:Point>"
            "<gx:Point><gx:coordinates>3,4</gx:coordinates></gx:Point>"
            "</gx:MultiGeometry>"
        )

    def test_every_tag_is_prefixed(self) -> None:
        """Test deeply nested output carries the prefix on every tag."""
        geometry = GeometryCollection(
            [
                MultiPolygon(
                    [Polygon([_line((0, 0), (1, 0), (0, 0)), _line((0.1, 0.1), (0.2, 0.1), (0.1, 0.1))])]
                ),
                _line((0, 0), (1, 1)),
            ]
        )

        kml = geometry_to_kml(geometry, namespace="gx")
        wrapped = ET.fromstring(f'<root xmlns:gx="urn:test">{kml}</root>')

        tags = [element.tag for element in wrapped.iter()][1:]
        assert tags
        assert all(tag.startswith("{urn:test}") for tag in tags)

    def test_no_namespace(self) -> None:
        assert geometry_to_kml(Point(), namespace=None) == "<Point></Point>"

    @pytest.mark.parametrize("namespace", ["", "gx:", "a:b"], ids=["empty", "trailing-colon", "inner-colon"])
    def test_invalid_namespace(self, namespace: str) -> None:
        with pytest.raises(ValueError, match="Invalid namespace prefix"):
            geometry_to_kml(Point(1, 2), namespace=namespace)


class TestRenderDocument:
    """Tests for full document rendering."""

    def test_document_structure(self) -> None:
        content = render_document(
            [
                Point(1, 2, properties={"name": "A", "description": "first"}),
                _line((0, 0), (1, 1)),
            ]
        )

        root = ET.fromstring(content)
        ns = {"kml": KML_NAMESPACE}
        placemarks = root.findall("kml:Document/kml:Placemark", ns)

        assert len(placemarks) == 2
        assert placemarks[0].findtext("kml:name", namespaces=ns) == "A"
        assert placemarks[0].findtext("kml:description", namespaces=ns) == "first"
        assert placemarks[0].find("kml:Point/kml:coordinates", ns).text == "1,2"
        assert placemarks[1].find("kml:name", ns) is None
        assert placemarks[1].find("kml:LineString", ns) is not None

    def test_escapes_text(self) -> None:
        content = render_document([Point(1, 2, properties={"name": "Fish & <Chips>"})])

        assert "Fish &amp; &lt;Chips&gt;" in content
        ET.fromstring(content)

    def test_empty_document(self) -> None:
        root = ET.fromstring(render_document([]))

        assert root.find(f"{{{KML_NAMESPACE}}}Document") is not None
