"""Pressure-to-radius model."""

from freehand.easing import Easing, linear


def get_stroke_radius(
    size: float,
    thinning: float,
    pressure: float,
    easing: Easing = linear,
) -> float:
    """Compute the stroke's half-width at a point from its pressure.

    With ``thinning == 0`` the eased value is always ``easing(0.5)``, so the
    radius is constant. Positive thinning widens the stroke as pressure
    rises; negative thinning narrows it. The result is not clamped; callers
    apply the minimum radius.

    Args:
        size: Base diameter of the stroke
        thinning: Strength and direction of the pressure effect
        pressure: Pressure at the point, in [0, 1]
        easing: Pressure remapping function

    Returns:
        Stroke radius at the point

    Examples:
        >>> get_stroke_radius(100, 0.5, 1.0)
        75.0
        >>> get_stroke_radius(100, 0, 0.2)
        50.0
    """
    return size * easing(0.5 - thinning * (0.5 - pressure))
