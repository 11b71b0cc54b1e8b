"""Main Typer CLI application for KML geometry tools."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import typer
import yaml

from geokml.config import KmlConfig
from geokml.errors import KmlError
from geokml.geometry import Geometry, geometry_reduce
from geokml.kml import KmlAdapter

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Convert between KML markup and geometries",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    JSON = "json"
    YAML = "yaml"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """KML geometry tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_file: Path | None) -> KmlConfig:
    if config_file is None:
        return KmlConfig()
    try:
        return KmlConfig.from_yaml(config_file)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: Invalid configuration: {e}", err=True)
        raise typer.Exit(1)


def _read_geometries(kml_file: Path, adapter: KmlAdapter) -> list[Geometry]:
    if not kml_file.exists():
        typer.echo(f"Error: KML file not found: {kml_file}", err=True)
        raise typer.Exit(1)

    logger.info(f"Reading {kml_file}")
    try:
        return adapter.read_all(kml_file.read_text(encoding="utf-8"))
    except KmlError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _read_geometry(kml_file: Path, adapter: KmlAdapter) -> Geometry:
    return geometry_reduce(_read_geometries(kml_file, adapter))


def geometry_to_dict(geometry: Geometry) -> dict[str, Any]:
    """Convert a geometry to a GeoJSON-style dict with its properties.

    Tuples are converted to lists so the result serializes to JSON and YAML alike.
    """
    data = json.loads(json.dumps(geometry.__geo_interface__))
    data["properties"] = dict(geometry.properties)
    return data


@app.command("show")
def show_command(
    kml_file: Path = typer.Argument(..., help="Path to KML file"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "--format",
        "-f",
        help="Output format",
    ),
    config_file: Path | None = typer.Option(None, "--config", help="YAML configuration file"),
) -> None:
    """
    Print the geometry of a KML file as GeoJSON-style data.

    Example:
        geokml show parcels.kml
        geokml show parcels.kml --format yaml
    """
    adapter = KmlAdapter(_load_config(config_file))
    data = geometry_to_dict(_read_geometry(kml_file, adapter))

    if output_format == OutputFormat.YAML:
        typer.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
    else:
        typer.echo(json.dumps(data, indent=2))


@app.command("rewrite")
def rewrite_command(
    kml_file: Path = typer.Argument(..., help="Path to KML file"),
    namespace: str | None = typer.Option(
        None, "--namespace", "-n", help="Tag prefix for the output (e.g., 'gx')"
    ),
    config_file: Path | None = typer.Option(None, "--config", help="YAML configuration file"),
) -> None:
    """
    Read a KML file and print its geometry as a KML fragment.

    Example:
        geokml rewrite parcels.kml --namespace gx
    """
    adapter = KmlAdapter(_load_config(config_file))
    geometry = _read_geometry(kml_file, adapter)
    try:
        typer.echo(adapter.write(geometry, namespace=namespace))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("document")
def document_command(
    kml_file: Path = typer.Argument(..., help="Path to KML file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output KML file path"),
    config_file: Path | None = typer.Option(None, "--config", help="YAML configuration file"),
) -> None:
    """
    Normalize a KML file into a document with one Placemark per geometry.

    Example:
        geokml document parcels.kml -o normalized.kml
    """
    adapter = KmlAdapter(_load_config(config_file))
    geometries = _read_geometries(kml_file, adapter)

    content = adapter.write_document(geometries)
    if output is None:
        typer.echo(content)
        return

    output.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {len(geometries)} placemarks to {output}")
    typer.echo(f"Wrote {len(geometries)} placemarks to {output}")


if __name__ == "__main__":
    app()
