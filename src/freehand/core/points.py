"""Input normalization and streamlining.

Turns raw pointer samples into StrokePoints: each point is pulled toward
the previous one to damp input jitter, then annotated with the direction
back to its predecessor, the segment length and the running arc length.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from freehand.config import StrokeOptions, resolve_options
from freehand.core.vec import dist, is_equal, lrp, sub, uni
from freehand.domain import InputPoint, StrokePoint

# Streamline is divided down before use; simulated pressure implies mouse
# input, which gets lighter damping.
STREAMLINE_DIVISOR_SIMULATED = 3
STREAMLINE_DIVISOR_REAL = 2

# Offset of the synthetic second point for single-point input
SINGLE_POINT_OFFSET = (1.0, 1.0)

# Two-point input is split into this many segments
TWO_POINT_SEGMENTS = 4


def normalize_points(points: Iterable[Any]) -> list[InputPoint]:
    """Normalize raw points to InputPoints.

    Args:
        points: Raw points as sequences, mappings or x/y objects

    Returns:
        List of InputPoints with pressure defaulted and clamped

    Raises:
        InvalidPointError: If a point has an unsupported shape
    """
    return [InputPoint.from_raw(p) for p in points]


def _subdivide_pair(first: InputPoint, last: InputPoint) -> list[InputPoint]:
    # A bare pair gives tapered strokes nothing to taper over
    pts = [first]
    for i in range(1, TWO_POINT_SEGMENTS):
        t = i / TWO_POINT_SEGMENTS
        x, y = lrp(first.to_tuple(), last.to_tuple(), t)
        pressure = first.pressure + (last.pressure - first.pressure) * t
        pts.append(InputPoint(x, y, pressure))
    pts.append(last)
    return pts


def get_stroke_points(
    points: Iterable[Any],
    options: StrokeOptions | Mapping[str, Any] | None = None,
) -> list[StrokePoint]:
    """Get streamlined, annotated points for a stroke.

    The first stroke point is the first input point, unchanged, with a zero
    vector. Every later point is interpolated between the previously emitted
    point and the next input point; with ``last`` set, the final input
    point is emitted exactly. Points that land on their predecessor are
    dropped so every emitted vector is a true unit vector.

    Args:
        points: Raw points as ``[x, y]``, ``[x, y, pressure]``,
            ``{"x", "y", "pressure"}`` mappings or x/y objects
        options: Stroke options (instance, mapping or None for defaults)

    Returns:
        List of StrokePoints, empty for empty input

    Raises:
        InvalidPointError: If a point has an unsupported shape
    """
    opts = resolve_options(options)
    pts = normalize_points(points)

    if not pts:
        return []

    if len(pts) == 2:
        pts = _subdivide_pair(pts[0], pts[1])

    if len(pts) == 1:
        only = pts[0]
        pts = [
            only,
            InputPoint(
                only.x + SINGLE_POINT_OFFSET[0],
                only.y + SINGLE_POINT_OFFSET[1],
                only.pressure,
            ),
        ]

    divisor = (
        STREAMLINE_DIVISOR_SIMULATED if opts.simulate_pressure else STREAMLINE_DIVISOR_REAL
    )
    t = 1 - opts.streamline / divisor
    is_complete = opts.last

    first = pts[0]
    prev = StrokePoint(point=(first.x, first.y), pressure=first.pressure)
    stroke_points = [prev]

    max_index = len(pts) - 1

    for i in range(1, len(pts)):
        raw = pts[i]

        if is_complete and i == max_index:
            point = (raw.x, raw.y)
        else:
            point = lrp(prev.point, (raw.x, raw.y), t)

        if is_equal(prev.point, point):
            continue

        distance = dist(point, prev.point)

        prev = StrokePoint(
            point=point,
            pressure=raw.pressure,
            vector=uni(sub(prev.point, point)),
            distance=distance,
            running_length=prev.running_length + distance,
        )
        stroke_points.append(prev)

    return stroke_points
