"""CLI module for KML geometry tools.

Provides the `geokml` command-line interface.
"""

from geokml.cli.main import app

__all__ = ["app"]
