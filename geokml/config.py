"""
Configuration for the KML adapter.

Settings can be built in code or loaded from a YAML file:

    namespace: gx
    property_names: [name, description]
    max_depth: 32
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY_NAMES = ("name", "description")
DEFAULT_MAX_DEPTH = 32


def validate_namespace(namespace: str | None) -> None:
    """Check a tag prefix such as "gx".

    Raises:
        ValueError: If the prefix is empty or contains a colon.
    """
    if namespace is not None and (not namespace or ":" in namespace):
        raise ValueError(f"Invalid namespace prefix: {namespace!r}")


@dataclass(frozen=True)
class KmlConfig:
    """Immutable adapter settings.

    Attributes:
        namespace: Prefix applied to every tag on write (e.g. "gx" gives
            ``<gx:Point>``). None writes unprefixed tags.
        property_names: Placemark child tags copied into geometry properties.
        max_depth: Maximum geometry nesting accepted by the parser.
    """

    namespace: str | None = None
    property_names: tuple[str, ...] = DEFAULT_PROPERTY_NAMES
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        validate_namespace(self.namespace)
        if isinstance(self.property_names, str):
            raise ValueError("property_names must be a list of tag names, not a string")
        # Tags are matched after lower-casing.
        object.__setattr__(
            self, "property_names", tuple(name.lower() for name in self.property_names)
        )
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KmlConfig:
        """Create a configuration from a mapping.

        Args:
            data: Mapping with any of the keys ``namespace``,
                ``property_names`` and ``max_depth``.

        Returns:
            New KmlConfig instance.

        Raises:
            ValueError: If the mapping has unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}. "
                f"Valid keys: {', '.join(sorted(known))}"
            )
        kwargs = dict(data)
        if "property_names" in kwargs:
            names = kwargs["property_names"]
            if isinstance(names, str) or not isinstance(names, (list, tuple)):
                raise ValueError("property_names must be a list of tag names")
            kwargs["property_names"] = tuple(str(name) for name in names)
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> KmlConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            KmlConfig instance loaded from file.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ValueError: If the file does not contain a mapping or holds
                invalid values.
            yaml.YAMLError: If YAML parsing fails.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            logger.debug(f"Configuration file {path} is empty, using defaults")
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        config = cls.from_dict(data)
        logger.info(f"Loaded KML configuration from {path}")
        return config
