"""Exceptions raised while reading KML."""

_MAX_TEXT_IN_MESSAGE = 200


class KmlError(ValueError):
    """Base class for KML read errors."""


class MalformedDocument(KmlError):
    """The input text cannot be read as KML markup.

    Attributes:
        text: The offending document text (after normalization).
    """

    def __init__(self, message: str, text: str = ""):
        self.text = text
        if text:
            excerpt = text if len(text) <= _MAX_TEXT_IN_MESSAGE else text[:_MAX_TEXT_IN_MESSAGE] + "..."
            message = f"{message}: {excerpt}"
        super().__init__(message)


class MalformedPolygon(KmlError):
    """A polygon's outer boundary does not resolve to exactly one ring."""
