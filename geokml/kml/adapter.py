"""KML format adapter."""

from typing import Iterable

from geokml.config import KmlConfig
from geokml.geometry import Geometry
from geokml.kml.parser import KmlParser
from geokml.kml.serializer import geometry_to_kml, render_document


class KmlAdapter:
    """Read and write geometries as KML.

    Args:
        config: Adapter configuration. Defaults to KmlConfig().

    Example:
        >>> adapter = KmlAdapter()
        >>> point = adapter.read(
        ...     "<Placemark><name>A</name><Point><coordinates>1,2</coordinates></Point></Placemark>"
        ... )
        >>> point.properties
        {'name': 'A'}
        >>> adapter.write(point, namespace="gx")
        '<gx:Point><gx:coordinates>1,2</gx:coordinates></gx:Point>'
    """

    def __init__(self, config: KmlConfig | None = None):
        self.config = config if config is not None else KmlConfig()
        self._parser = KmlParser(self.config)

    def read(self, text: str) -> Geometry:
        """Read KML text into a geometry.

        Args:
            text: KML document text.

        Returns:
            Single geometry, or a GeometryCollection when the document holds
            zero or several geometries.

        Raises:
            MalformedDocument: If the text cannot be read as KML.
            MalformedPolygon: If a polygon's outer boundary is invalid.
        """
        return self._parser.parse(text)

    def read_all(self, text: str) -> list[Geometry]:
        """Read KML text into its top-level geometries, one per placemark geometry.

        Raises:
            MalformedDocument: If the text cannot be read as KML.
            MalformedPolygon: If a polygon's outer boundary is invalid.
        """
        return self._parser.parse_all(text)

    def write(self, geometry: Geometry, namespace: str | None = None) -> str:
        """Serialize a geometry to a KML fragment.

        Args:
            geometry: Geometry to serialize.
            namespace: Tag prefix for this call. Defaults to the configured namespace.

        Returns:
            KML markup string.

        Raises:
            ValueError: If the namespace is empty or contains a colon.
        """
        if namespace is None:
            namespace = self.config.namespace
        return geometry_to_kml(geometry, namespace)

    def write_document(self, geometries: Iterable[Geometry]) -> str:
        """Serialize geometries as a full KML document, one Placemark each."""
        return render_document(geometries)
