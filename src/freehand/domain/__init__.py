"""Domain models for freehand.

This module contains the value types that flow through the stroke pipeline.
All models are designed to be:

- Independent of any input device or renderer
- Cheap to construct, since the pipeline rebuilds them on every call
- Serializable to plain dictionaries

Key classes:
- InputPoint: A raw pointer sample normalized to x, y and pressure
- StrokePoint: A streamlined point with direction, distance and arc length
- Stroke: A named list of input points with option overrides
"""

from freehand.domain.points import DEFAULT_PRESSURE, InputPoint, Stroke, StrokePoint, Vec

__all__: list[str] = [
    "DEFAULT_PRESSURE",
    # Aliases
    "Vec",
    # Core types
    "InputPoint",
    "StrokePoint",
    "Stroke",
]
