"""Command-line interface for freehand.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for multi-stroke files
- Verbose/quiet output modes
- SVG, JSON and raw path-data output
- Detailed error reporting
"""

from freehand.cli.app import cli, main

__all__ = ["cli", "main"]
