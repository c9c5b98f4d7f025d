"""Stroke outline construction.

This module walks streamlined stroke points and offsets each one to both
sides by its radius, producing a left and a right chain of outline points.
Sharp corners get a rounded fan instead of an offset pair, and both ends of
the stroke get a cap: rounded, flat, or a single point when tapered. Very
short strokes collapse into a dot.

The result is a single open polygon in fixed winding order:
left chain, end cap, reversed right chain, start cap.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from freehand.config import StrokeOptions, resolve_options
from freehand.core.radius import get_stroke_radius
from freehand.core.vec import (
    add,
    dist,
    dist2,
    dpr,
    is_equal,
    lrp,
    med,
    mul,
    neg,
    per,
    prj,
    rot_around,
    sub,
    uni,
)
from freehand.domain import StrokePoint, Vec
from freehand.easing import Easing, ease_out_cubic, ease_out_quad

logger = logging.getLogger(__name__)

# How quickly simulated pressure follows changes in point spacing
RATE_OF_CHANGE = 0.275

# Number of leading points blended into the starting pressure
PRESSURE_SEED_POINTS = 10

MIN_RADIUS = 0.01

# Angular resolution of the generated arcs
CORNER_FAN_STEPS = 13  # pi
START_CAP_STEPS = 13  # pi
END_CAP_STEPS = 29  # END_CAP_HALF_TURNS * pi
END_CAP_HALF_TURNS = 3
DOT_STEPS = 13  # 2 * pi

# Corners with a smaller dot product always keep their offset points
SHARP_CORNER_DPR = 0.25

# Cap arcs stop once they come this close to the opposite chain
CAP_SNAP_DISTANCE = 1.0

# Flat caps are inset slightly so the polygon never folds over itself
FLAT_CAP_INSET = 0.95


def _simulate_pressure(prev_pressure: float, distance: float, size: float) -> float:
    # Fast movement (large spacing) pulls pressure down, slow movement up
    sp = min(1.0, distance / size) if size else 1.0
    rp = min(1.0, 1.0 - sp)
    pressure = prev_pressure + (rp - prev_pressure) * (sp * RATE_OF_CHANGE)
    return max(0.0, min(1.0, pressure))


def _seed_pressure(points: list[StrokePoint], size: float, simulate: bool) -> float:
    """Blend the first few pressures so strokes don't start fat."""
    acc = points[0].pressure
    for point in points[:PRESSURE_SEED_POINTS]:
        pressure = point.pressure
        if simulate:
            pressure = _simulate_pressure(acc, point.distance, size)
        acc = (acc + pressure) / 2
    return acc


def _draw_dot(
    points: list[StrokePoint],
    size: float,
    thinning: float,
    easing: Easing,
    fallback_radius: float,
) -> list[Vec]:
    """Draw a small circle around the first point."""
    radius = fallback_radius
    for point in points:
        if point.running_length > size:
            radius = get_stroke_radius(size, thinning, point.pressure, easing)
            break
    radius = max(MIN_RADIUS, radius)

    first = points[0].point
    last = points[-1].point

    if is_equal(first, last):
        direction = (1.0, 0.0)
    else:
        direction = per(uni(sub(first, last)))

    start = prj(first, direction, -radius)
    step = math.pi * 2 / DOT_STEPS

    return [rot_around(start, first, step * i) for i in range(DOT_STEPS)]


def get_stroke_outline_points(
    points: list[StrokePoint],
    options: StrokeOptions | Mapping[str, Any] | None = None,
) -> list[Vec]:
    """Get the outline polygon of a stroke.

    Args:
        points: Stroke points from ``get_stroke_points``
        options: Stroke options (instance, mapping or None for defaults)

    Returns:
        List of (x, y) vertices. The polygon is implicitly closed; the last
        vertex connects back to the first. Empty for empty input.
    """
    if not points:
        return []

    opts = resolve_options(options)

    size = opts.size
    thinning = opts.thinning
    smoothing = opts.smoothing
    easing = opts.easing
    simulate_pressure = opts.simulate_pressure
    is_complete = opts.last

    cap_start = opts.start.cap
    taper_start = opts.start.taper
    taper_start_ease = opts.start.easing or ease_out_quad

    cap_end = opts.end.cap
    taper_end = opts.end.taper
    taper_end_ease = opts.end.easing or ease_out_cubic

    total_length = points[-1].running_length
    min_distance2 = (size * smoothing) ** 2

    left_pts: list[Vec] = []
    right_pts: list[Vec] = []

    prev_pressure = _seed_pressure(points, size, simulate_pressure)

    # Used when no point in the loop produces a radius
    radius = get_stroke_radius(size, thinning, points[-1].pressure, easing)
    seed_radius = radius

    # The first point has no direction of its own; borrow the first segment's
    first_vector = points[1].vector if len(points) > 1 else (0.0, 0.0)
    prev_vector = first_vector

    # Last accepted left and right points
    pl = points[0].point
    pr = pl

    short = True

    for i in range(len(points) - 1):
        current = points[i]
        point = current.point
        running_length = current.running_length
        vector = current.vector if i else first_vector

        # Point 0 is always offset but does not clear the flag; only the running length does
        if i > 0 and short:
            if running_length < size / 2:
                continue
            short = False

        # Radius
        pressure = current.pressure
        if thinning:
            if simulate_pressure:
                pressure = _simulate_pressure(prev_pressure, current.distance, size)
            radius = get_stroke_radius(size, thinning, pressure, easing)
        else:
            radius = size / 2

        # Taper
        ts = (
            taper_start_ease(running_length / taper_start)
            if running_length < taper_start
            else 1.0
        )
        remaining = total_length - running_length
        te = taper_end_ease(remaining / taper_end) if remaining < taper_end else 1.0

        radius = max(MIN_RADIUS, radius * min(ts, te))

        next_vector = points[i + 1].vector
        next_dpr = dpr(vector, next_vector)

        # Turns sharper than a right angle get a rounded fan
        if next_dpr < 0:
            offset = mul(per(prev_vector), radius)
            left_spoke = sub(point, offset)
            right_spoke = add(point, offset)
            tl = left_spoke
            tr = right_spoke

            for step in range(CORNER_FAN_STEPS):
                angle = math.pi * step / CORNER_FAN_STEPS
                tr = rot_around(right_spoke, point, -angle)
                tl = rot_around(left_spoke, point, angle)
                right_pts.append(tr)
                left_pts.append(tl)

            pl = tl
            pr = tr
            continue

        offset = mul(per(lrp(next_vector, vector, next_dpr)), radius)

        tl = sub(point, offset)
        tr = add(point, offset)

        always_add = i < 2 or next_dpr < SHARP_CORNER_DPR

        if always_add or dist2(pl, tl) > min_distance2:
            left_pts.append(tl)
            pl = tl

        if always_add or dist2(pr, tr) > min_distance2:
            right_pts.append(tr)
            pr = tr

        prev_pressure = pressure
        prev_vector = vector

    first_point = points[0].point
    last_point = points[-1].point
    is_very_short = short or len(right_pts) < 2 or len(left_pts) < 2

    # Tapered strokes still get a dot when they could not form a polygon
    if is_very_short and (
        not (taper_start or taper_end)
        or is_complete
        or len(left_pts) + len(right_pts) < 3
    ):
        logger.debug(
            "Stroke too short for an outline, drawing dot (points=%d, length=%.2f)",
            len(points), total_length,
        )
        return _draw_dot(points, size, thinning, easing, seed_radius)

    start_cap: list[Vec] = []
    end_cap: list[Vec] = []

    if len(left_pts) > 1 and len(right_pts) > 1:
        # Start cap
        tr = right_pts[1]
        tl = left_pts[1]
        for candidate in left_pts[1:]:
            if not is_equal(tr, candidate):
                tl = candidate
                break

        if cap_start or taper_start:
            if not taper_start and not (taper_end and is_very_short):
                if not is_equal(tr, tl):
                    start = prj(first_point, uni(sub(tl, tr)), -dist(tr, tl) / 2)
                    for step in range(START_CAP_STEPS + 1):
                        pt = rot_around(start, first_point, math.pi * step / START_CAP_STEPS)
                        if dist(pt, tl) < CAP_SNAP_DISTANCE:
                            break
                        start_cap.append(pt)
                    del left_pts[0]
                    del right_pts[0]
            else:
                start_cap.append(first_point)
        elif not is_equal(tr, tl):
            vector = uni(sub(tl, tr))
            half_width = dist(tr, tl) / 2

            start_cap.extend(
                (
                    prj(first_point, vector, half_width * FLAT_CAP_INSET),
                    prj(first_point, vector, half_width),
                    prj(first_point, vector, -half_width),
                    prj(first_point, vector, -half_width * FLAT_CAP_INSET),
                )
            )
            del left_pts[0]
            del right_pts[0]

        # End cap
        ll = left_pts[-1]
        lr = right_pts[-1]
        mid = med(ll, lr)

        if is_equal(last_point, mid):
            forward = neg(points[-1].vector)
        else:
            forward = uni(sub(last_point, mid))
        direction = per(forward)

        if cap_end or taper_end:
            if not taper_end and not (taper_start and is_very_short):
                # A turn and a half, so sharp final turns still close cleanly
                start = prj(last_point, direction, radius)
                sweep = math.pi * END_CAP_HALF_TURNS
                for step in range(END_CAP_STEPS + 1):
                    pt = rot_around(start, last_point, sweep * step / END_CAP_STEPS)
                    if dist(pt, lr) < CAP_SNAP_DISTANCE:
                        break
                    end_cap.append(pt)
            else:
                end_cap.append(last_point)
        else:
            just_before = lrp(mid, last_point, FLAT_CAP_INSET)
            r = radius * FLAT_CAP_INSET

            end_cap.extend(
                (
                    prj(just_before, direction, r),
                    prj(last_point, direction, r),
                    prj(last_point, direction, -r),
                    prj(just_before, direction, -r),
                )
            )

    right_pts.reverse()
    outline = left_pts + end_cap + right_pts + start_cap

    # Tiny strokes can lose their cap arcs to snapping and end up degenerate
    if len(outline) < 3:
        logger.debug("Outline collapsed to %d vertices, drawing dot", len(outline))
        return _draw_dot(points, size, thinning, easing, seed_radius)

    return outline
