"""Core stroke geometry for freehand.

This module contains the outline pipeline:

- Vector operations on (x, y) tuples
- The pressure-to-radius model
- Point normalization and streamlining
- Outline construction (offset chains, corners, caps, dots)

The geometry functions are designed to be:
- Stateless (safe to call from any thread)
- Pure (no side effects, inputs never modified)
- Free of I/O

Key classes:
- StrokeProcessor: Outlines a batch of strokes with logging and statistics

Key functions:
- get_stroke: Raw points to outline polygon
- get_stroke_points: Raw points to streamlined StrokePoints
- get_stroke_outline_points: StrokePoints to outline polygon
- get_stroke_radius: Radius at a point from its pressure
"""

from freehand.core.outline import get_stroke_outline_points
from freehand.core.points import get_stroke_points, normalize_points
from freehand.core.processor import StrokeProcessor
from freehand.core.radius import get_stroke_radius
from freehand.core.stroke import get_stroke

__all__ = [
    "StrokeProcessor",
    "get_stroke",
    "get_stroke_outline_points",
    "get_stroke_points",
    "get_stroke_radius",
    "normalize_points",
]
