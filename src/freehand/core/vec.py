"""Vector operations for stroke geometry.

This module provides the 2-D primitives the resampler and outline builder
are written in terms of. Vectors are plain ``(x, y)`` tuples.

All functions are pure, stateless and O(1).

Note: ``uni`` divides by the vector's length. Callers must never pass a
zero-length vector; the resampler drops coincident points so direction
vectors are always defined.
"""

import math

from freehand.domain import Vec


def neg(a: Vec) -> Vec:
    """Negate a vector."""
    return (-a[0], -a[1])


def add(a: Vec, b: Vec) -> Vec:
    """Add two vectors."""
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    """Subtract vector b from vector a."""
    return (a[0] - b[0], a[1] - b[1])


def mul(a: Vec, n: float) -> Vec:
    """Multiply a vector by a scalar."""
    return (a[0] * n, a[1] * n)


def div(a: Vec, n: float) -> Vec:
    """Divide a vector by a scalar."""
    return (a[0] / n, a[1] / n)


def per(a: Vec) -> Vec:
    """Rotate a vector by 90 degrees.

    Examples:
        >>> per((1.0, 0.0))
        (0.0, -1.0)
    """
    return (a[1], -a[0])


def dpr(a: Vec, b: Vec) -> float:
    """Dot product of two vectors."""
    return a[0] * b[0] + a[1] * b[1]


def is_equal(a: Vec, b: Vec) -> bool:
    """Check whether two vectors have identical coordinates."""
    return a[0] == b[0] and a[1] == b[1]


def length(a: Vec) -> float:
    """Length of a vector."""
    return math.hypot(a[0], a[1])


def length2(a: Vec) -> float:
    """Squared length of a vector."""
    return a[0] * a[0] + a[1] * a[1]


def dist(a: Vec, b: Vec) -> float:
    """Distance between two points."""
    return math.hypot(a[1] - b[1], a[0] - b[0])


def dist2(a: Vec, b: Vec) -> float:
    """Squared distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def uni(a: Vec) -> Vec:
    """Unit vector in the direction of a.

    Examples:
        >>> uni((3.0, 4.0))
        (0.6, 0.8)
    """
    return div(a, length(a))


def lrp(a: Vec, b: Vec, t: float) -> Vec:
    """Linear interpolation from a to b by t."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def med(a: Vec, b: Vec) -> Vec:
    """Midpoint of two points."""
    return ((a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5)


def prj(a: Vec, direction: Vec, c: float) -> Vec:
    """Project point a along a direction by a scalar distance."""
    return (a[0] + direction[0] * c, a[1] + direction[1] * c)


def rot_around(a: Vec, center: Vec, r: float) -> Vec:
    """Rotate point a around a center point by r radians.

    Args:
        a: The point to rotate
        center: The pivot
        r: Rotation in radians

    Returns:
        The rotated point
    """
    s = math.sin(r)
    c = math.cos(r)

    px = a[0] - center[0]
    py = a[1] - center[1]

    nx = px * c - py * s
    ny = px * s + py * c

    return (nx + center[0], ny + center[1])
