"""freehand - Pressure-sensitive outlines for freehand strokes.

freehand turns a list of pointer samples (x, y and optional pressure) into a
closed polygon that, when filled, looks like a tapered ink stroke. Width
variation, rounded corners and caps are part of the polygon itself, so any
renderer can draw the result with a plain fill.

Example:
    >>> from freehand import get_stroke
    >>> outline = get_stroke([(0, 0), (10, 10), (20, 5)], {"size": 8})

The command-line front end renders recorded strokes to SVG:

    $ freehand strokes.json
"""

from freehand.config import CapOptions, StrokeOptions
from freehand.core import (
    get_stroke,
    get_stroke_outline_points,
    get_stroke_points,
    get_stroke_radius,
)

__version__ = "0.1.0"

__all__ = [
    "CapOptions",
    "StrokeOptions",
    "__version__",
    "get_stroke",
    "get_stroke_outline_points",
    "get_stroke_points",
    "get_stroke_radius",
]
