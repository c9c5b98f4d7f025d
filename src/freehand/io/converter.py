"""Conversion between JSON stroke data and domain models, and outline to SVG path.

This module handles:
- Recognizing the supported strokes-file layouts
- Normalizing recorded points into InputPoints
- Building SVG path data from outline polygons
"""

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from freehand.domain import InputPoint, Stroke, Vec


def _is_point(value: Any) -> bool:
    if isinstance(value, Mapping):
        return "x" in value
    if isinstance(value, Sequence) and not isinstance(value, str):
        return len(value) > 0 and isinstance(value[0], Real)
    return False


def _to_stroke(value: Any, name: str) -> Stroke:
    if isinstance(value, Mapping):
        if "points" not in value:
            raise ValueError(f"stroke '{name}' has no 'points'")
        return Stroke(
            name=str(value.get("name") or name),
            points=[InputPoint.from_raw(p) for p in value["points"]],
            options=dict(value.get("options") or {}),
        )
    if isinstance(value, Sequence) and not isinstance(value, str):
        return Stroke(name=name, points=[InputPoint.from_raw(p) for p in value])
    raise ValueError(f"stroke '{name}' is not a list of points")


def json_to_strokes(data: Any, default_name: str = "stroke") -> tuple[list[Stroke], dict[str, Any]]:
    """Convert parsed strokes-file JSON into domain strokes.

    Supported layouts:
    - ``[[x, y, p], ...]`` or ``[{"x", "y", "pressure"}, ...]``: one stroke
    - ``[[point, ...], [point, ...]]``: several strokes
    - ``{"points": [...], "options": {...}}``: one stroke with options
    - ``{"strokes": [...], "options": {...}}``: several strokes with shared
      options; each stroke is a point list or a
      ``{"name", "points", "options"}`` object

    Args:
        data: Parsed JSON value
        default_name: Base name for strokes without one

    Returns:
        Tuple of (strokes, file-level option overrides)

    Raises:
        ValueError: If the layout is not recognized
        InvalidPointError: If a point cannot be interpreted
    """
    options: dict[str, Any] = {}

    if isinstance(data, Mapping):
        options = dict(data.get("options") or {})
        if "strokes" in data:
            items = data["strokes"]
        elif "points" in data:
            return [_to_stroke(data, default_name)], {}
        else:
            raise ValueError("expected a 'strokes' or 'points' key")
    elif isinstance(data, list):
        if not data:
            return [], {}
        if _is_point(data[0]):
            return [_to_stroke(data, default_name)], {}
        items = data
    else:
        raise ValueError(f"unsupported top-level JSON type {type(data).__name__}")

    if not isinstance(items, list):
        raise ValueError("'strokes' must be a list")

    strokes = [_to_stroke(item, f"{default_name}-{i + 1}") for i, item in enumerate(items)]
    return strokes, options


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def get_svg_path_from_stroke(outline: Sequence[Vec], precision: int = 3) -> str:
    """Build SVG path data for an outline polygon.

    Each vertex becomes the control point of a quadratic segment ending at
    the midpoint to the next vertex, which smooths the polygon's facets.
    The last vertex wraps around to the first, and a final line returns
    to the starting point before the path closes.

    Args:
        outline: Outline vertices from ``get_stroke``
        precision: Decimal places per coordinate

    Returns:
        Path data string (``M ... Q ... L ... Z``), empty for an empty outline

    Examples:
        >>> get_svg_path_from_stroke([(0, 0), (2, 0), (2, 2)], precision=0)
        'M0,0 Q0,0 1,0 2,0 2,1 2,2 1,1 L0,0 Z'
    """
    if not outline:
        return ""

    first = outline[0]
    start = f"{_fmt(first[0], precision)},{_fmt(first[1], precision)}"

    segments = []
    for a, b in zip(outline, [*outline[1:], first]):
        mid_x = (a[0] + b[0]) / 2
        mid_y = (a[1] + b[1]) / 2
        segments.append(
            f"{_fmt(a[0], precision)},{_fmt(a[1], precision)} "
            f"{_fmt(mid_x, precision)},{_fmt(mid_y, precision)}"
        )

    return f"M{start} Q{' '.join(segments)} L{start} Z"
