"""Stroke file I/O layer for freehand.

This module handles reading recorded strokes and writing rendered outlines.
It keeps file formats out of the geometry core, which never performs I/O.

Key responsibilities:
- Load strokes from JSON in several common layouts
- Convert outlines to SVG path data
- Write outlines as JSON, path data, or SVG documents

Key classes:
- StrokeReader: Load strokes files
- OutlineWriter: Save rendered outlines
"""

from freehand.io.converter import get_svg_path_from_stroke, json_to_strokes
from freehand.io.reader import StrokeReader
from freehand.io.writer import OutlineWriter

__all__ = [
    "OutlineWriter",
    "StrokeReader",
    "get_svg_path_from_stroke",
    "json_to_strokes",
]
