"""Text normalization and XML loading for KML documents."""

import logging
import re
import xml.etree.ElementTree as ET

from geokml.errors import MalformedDocument

logger = logging.getLogger(__name__)

_CDATA_RE = re.compile(r"<!\[cdata\[.*?\]\]>", re.IGNORECASE | re.DOTALL)
_MARKUP_RE = re.compile(r"<[^<>]+>")


def normalize_text(text: str) -> str:
    """Prepare raw KML text for parsing.

    Removes CDATA sections and lower-cases every markup token so tag and
    attribute names are matched case-insensitively. Character data outside
    markup keeps its case.

    Args:
        text: Raw KML document text.

    Returns:
        Normalized text.
    """
    text = _CDATA_RE.sub("", text.strip())
    return _MARKUP_RE.sub(lambda match: match.group(0).lower(), text)


def load_tree(text: str) -> ET.Element:
    """Normalize and parse KML text into an element tree.

    Args:
        text: Raw KML document text.

    Returns:
        Root element of the parsed document.

    Raises:
        MalformedDocument: If the text is not well-formed XML.
    """
    normalized = normalize_text(text)
    try:
        root = ET.fromstring(normalized)
    except ET.ParseError as e:
        raise MalformedDocument(f"Invalid KML ({e})", normalized) from e
    logger.debug(f"Loaded KML document with root <{local_name(root)}>")
    return root


def local_name(element: ET.Element) -> str:
    """Return the element tag without its ``{namespace}`` qualifier."""
    tag = element.tag
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def child_elements(element: ET.Element, name: str) -> list[ET.Element]:
    """Return the direct children of ``element`` whose local tag is ``name``."""
    return [child for child in element if local_name(child) == name]


def element_text(element: ET.Element) -> str:
    """Return the concatenated text content of ``element`` and its descendants."""
    return "".join(element.itertext())
