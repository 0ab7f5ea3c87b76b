"""Command-line interface for brandmark.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- trace: raster logo to run-length SVG
- compose: horizontal, vertical and icon-only layouts as PNG files
- fonts: list the font registry
"""

from brandmark.cli.app import cli, main

__all__ = ["cli", "main"]
