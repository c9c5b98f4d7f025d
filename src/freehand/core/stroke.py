"""Single entry point from raw points to outline polygon."""

from collections.abc import Iterable, Mapping
from typing import Any

from freehand.config import StrokeOptions, resolve_options
from freehand.core.outline import get_stroke_outline_points
from freehand.core.points import get_stroke_points
from freehand.domain import Vec


def get_stroke(
    points: Iterable[Any],
    options: StrokeOptions | Mapping[str, Any] | None = None,
) -> list[Vec]:
    """Get the outline polygon surrounding a freehand stroke.

    Pure and deterministic: the same points and options always produce the
    same outline, and neither argument is modified.

    Args:
        points: Raw points as ``[x, y]``, ``[x, y, pressure]``,
            ``{"x", "y", "pressure"}`` mappings or x/y objects
        options: Stroke options (instance, mapping or None for defaults)

    Returns:
        List of (x, y) outline vertices, implicitly closed

    Example:
        outline = get_stroke(
            [(0, 0, 0.5), (10, 5, 0.6), (20, 0, 0.7)],
            StrokeOptions(size=8, thinning=0.6),
        )
    """
    opts = resolve_options(options)
    return get_stroke_outline_points(get_stroke_points(points, opts), opts)
