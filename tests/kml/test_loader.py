"""Unit tests for geokml.kml.loader module."""

import xml.etree.ElementTree as ET

import pytest

from geokml.errors import KmlError, MalformedDocument
from geokml.kml.loader import child_elements, element_text, load_tree, local_name, normalize_text


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_lowercases_tags_and_attributes(self) -> None:
        text = '<Placemark ID="P1"><Name>Alpha</Name></Placemark>'

        assert normalize_text(text) == '<placemark id="p1"><name>Alpha</name></placemark>'

    def test_keeps_text_case(self) -> None:
        assert normalize_text("<name>Main Street</name>") == "<name>Main Street</name>"

    @pytest.mark.parametrize(
        "text",
        [
            "<description><![CDATA[<b>bold</b>]]></description>",
            "<description><![cdata[<b>bold</b>]]></description>",
            "<description><![CDATA[line one\nline two]]></description>",
        ],
        ids=["upper", "lower", "multiline"],
    )
    def test_strips_cdata(self, text: str) -> None:
        assert normalize_text(text) == "<description></description>"

    def test_strips_surrounding_whitespace(self) -> None:
        assert normalize_text('\n   <?xml version="1.0"?><kml/>  \n') == '<?xml version="1.0"?><kml/>'


class TestLoadTree:
    """Tests for load_tree."""

    def test_parses_mixed_case_tags(self) -> None:
        """Test closing tags may differ in case from opening tags."""
        root = load_tree("<Point><coordinates>1,2</COORDINATES></point>")

        assert root.tag == "point"
        assert root[0].tag == "coordinates"

    @pytest.mark.parametrize(
        "text",
        ["", "not xml at all", "<point><coordinates>1,2</point>", "<a:point>1</a:point>"],
        ids=["empty", "plain-text", "unclosed", "unbound-prefix"],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedDocument):
            load_tree(text)

    def test_malformed_carries_text(self) -> None:
        with pytest.raises(MalformedDocument) as exc_info:
            load_tree("<Point><coordinates>")

        assert exc_info.value.text == "<point><coordinates>"
        assert "<point><coordinates>" in str(exc_info.value)
        assert isinstance(exc_info.value, KmlError)


class TestElementHelpers:
    """Tests for local_name, child_elements and element_text."""

    def test_local_name_strips_namespace(self) -> None:
        root = ET.fromstring('<kml xmlns="http://www.opengis.net/kml/2.2"><document/></kml>')

        assert local_name(root) == "kml"
        assert local_name(root[0]) == "document"

    def test_child_elements_only_direct_children(self) -> None:
        root = ET.fromstring("<a><b>1</b><c><b>2</b></c><b>3</b></a>")

        assert [element_text(b) for b in child_elements(root, "b")] == ["1", "3"]

    def test_element_text_includes_descendants(self) -> None:
        root = ET.fromstring("<description>Hello <b>big</b> world</description>")

        assert element_text(root) == "Hello big world"
