"""Easing functions for pressure and taper remapping.

Each easing maps ``t`` in [0, 1] onto [0, 1]. They are plain functions and
can be passed directly as ``easing`` options. The ``EASINGS`` registry
exposes them under their conventional camelCase names so options loaded from
JSON files or the command line can refer to them as strings.
"""

import math
from collections.abc import Callable

from freehand.exceptions import UnknownEasingError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    """Default start-taper easing, ``t * (2 - t)``."""
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Default end-taper easing, ``(t - 1)^3 + 1``."""
    t -= 1
    return t * t * t + 1


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return (t - 1) * (2 * t - 2) * (2 * t - 2) + 1


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    t -= 1
    return 1 - t * t * t * t


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    t -= 1
    return 1 - 8 * t * t * t * t


def ease_in_quint(t: float) -> float:
    return t * t * t * t * t


def ease_out_quint(t: float) -> float:
    t -= 1
    return 1 + t * t * t * t * t


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    t -= 1
    return 1 + 16 * t * t * t * t * t


def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_expo(t: float) -> float:
    return 0.0 if t <= 0 else 2 ** (10 * t - 10)


def ease_out_expo(t: float) -> float:
    return 1.0 if t >= 1 else 1 - 2 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "easeInQuad": ease_in_quad,
    "easeOutQuad": ease_out_quad,
    "easeInOutQuad": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInQuart": ease_in_quart,
    "easeOutQuart": ease_out_quart,
    "easeInOutQuart": ease_in_out_quart,
    "easeInQuint": ease_in_quint,
    "easeOutQuint": ease_out_quint,
    "easeInOutQuint": ease_in_out_quint,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
}


def get_easing(name: str) -> Easing:
    """Look up an easing function by name.

    Both the registry's camelCase names and the snake_case function names
    are accepted (``"easeOutCubic"`` or ``"ease_out_cubic"``).

    Args:
        name: Easing name

    Returns:
        The easing function

    Raises:
        UnknownEasingError: If no easing is registered under that name
    """
    if name in EASINGS:
        return EASINGS[name]

    for fn in EASINGS.values():
        if fn.__name__ == name:
            return fn

    raise UnknownEasingError(name)


def easing_name(fn: Easing) -> str | None:
    """Return the registry name of an easing function, if registered."""
    for key, registered in EASINGS.items():
        if registered is fn:
            return key
    return None
