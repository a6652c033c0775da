"""Command-line interface for rasterlab.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Interactive prompt for the coordinate space, algorithm and parameters
- Options that pre-answer any question, for scripted runs
- Point table and character-grid preview of the pixels
- Headless rendering through the render bindings
"""

from rasterlab.cli.app import cli, main

__all__ = ["cli", "main"]
