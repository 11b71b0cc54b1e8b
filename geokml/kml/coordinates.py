"""Coordinate extraction from KML ``<coordinates>`` elements."""

import re
import xml.etree.ElementTree as ET

from geokml.kml.loader import child_elements, element_text

_LINE_BREAKS_RE = re.compile(r"[\r\n]+")


def extract_coordinates(element: ET.Element) -> list[list[str]]:
    """Split the coordinates of a geometry element into coordinate sets.

    Only the first direct ``coordinates`` child is read. Tuples are separated
    by spaces or line breaks and their components by commas; tuples with
    fewer than two components are dropped.

    Args:
        element: Geometry element (e.g. ``point``, ``linestring``, ``linearring``).

    Returns:
        Coordinate sets in document order, each a list of at least two
        component strings (``x``, ``y`` and optionally ``z``).

    Example:
        >>> extract_coordinates(ET.fromstring("<point><coordinates>1,2,0</coordinates></point>"))
        [['1', '2', '0']]
    """
    coord_elements = child_elements(element, "coordinates")
    if not coord_elements:
        return []

    text = _LINE_BREAKS_RE.sub(" ", element_text(coord_elements[0]))
    coordinates = []
    for set_string in text.split(" "):
        set_string = set_string.strip()
        if not set_string:
            continue
        components = set_string.split(",")
        if len(components) >= 2:
            coordinates.append(components)
    return coordinates
