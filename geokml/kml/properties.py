"""Scalar property extraction from KML placemarks."""

import xml.etree.ElementTree as ET
from typing import Iterable, Iterator

from geokml.config import DEFAULT_PROPERTY_NAMES
from geokml.kml.loader import element_text, local_name


def accumulate_properties(
    container: ET.Element, names: Iterable[str] = DEFAULT_PROPERTY_NAMES
) -> Iterator[tuple[ET.Element, dict[str, str]]]:
    """Walk a placemark's direct children, collecting recognized scalar fields.

    Each child is yielded with a copy of the fields seen so far, including the
    child itself when it is one of them. Fields that appear after a geometry
    therefore do not apply to it.

    Args:
        container: Placemark element.
        names: Normalized tag names to collect.

    Yields:
        Tuples of (child element, properties collected up to that child).
        A repeated tag keeps its latest value.
    """
    names = frozenset(names)
    properties: dict[str, str] = {}
    for child in container:
        tag = local_name(child)
        if tag in names:
            properties[tag] = element_text(child)
        yield child, dict(properties)
