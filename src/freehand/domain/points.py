"""Core value types for stroke input and resampled stroke points.

This module defines the point types that flow through the pipeline:
- InputPoint: A normalized raw pointer sample
- StrokePoint: A resampled point annotated with direction and arc length
- Stroke: A named sequence of input points with optional option overrides
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from freehand.exceptions import InvalidPointError

Vec = tuple[float, float]

DEFAULT_PRESSURE = 0.5


def _clamp_pressure(pressure: float) -> float:
    # NaN compares false both ways and falls through to the default
    if pressure >= 1.0:
        return 1.0
    if pressure >= 0.0:
        return float(pressure)
    if pressure < 0.0:
        return 0.0
    return DEFAULT_PRESSURE


@dataclass(frozen=True, slots=True)
class InputPoint:
    """A raw pointer sample normalized to x, y and pressure.

    Immutable and hashable. Pressure is always within [0, 1].

    Attributes:
        x: X coordinate
        y: Y coordinate
        pressure: Pen pressure, 0.5 when the device reports none
    """

    x: float
    y: float
    pressure: float = DEFAULT_PRESSURE

    def to_tuple(self) -> Vec:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y and pressure fields
        """
        return {"x": self.x, "y": self.y, "pressure": self.pressure}

    @classmethod
    def from_raw(cls, raw: Any) -> "InputPoint":
        """Normalize any supported raw point form.

        Accepts ``[x, y]`` / ``[x, y, pressure]`` sequences, mappings with
        ``x``, ``y`` and optional ``pressure`` keys, and objects exposing
        ``x`` and ``y`` attributes.

        Args:
            raw: The raw point

        Returns:
            InputPoint instance

        Raises:
            InvalidPointError: If the value has none of the supported shapes
        """
        if isinstance(raw, InputPoint):
            return raw

        if isinstance(raw, Mapping):
            if "x" not in raw or "y" not in raw:
                raise InvalidPointError(raw, "mapping needs 'x' and 'y' keys")
            x, y = raw["x"], raw["y"]
            pressure = raw.get("pressure")
        elif isinstance(raw, (str, bytes)):
            raise InvalidPointError(raw, "expected a point, got a string")
        elif hasattr(raw, "x") and hasattr(raw, "y"):
            x, y = raw.x, raw.y
            pressure = getattr(raw, "pressure", None)
        else:
            try:
                values = list(raw)
            except TypeError:
                raise InvalidPointError(raw, "unsupported point type") from None
            if len(values) < 2:
                raise InvalidPointError(raw, "expected at least two coordinates")
            x, y = values[0], values[1]
            pressure = values[2] if len(values) > 2 else None

        try:
            x, y = float(x), float(y)
            pressure = DEFAULT_PRESSURE if pressure is None else float(pressure)
        except (TypeError, ValueError) as e:
            raise InvalidPointError(raw, str(e)) from e

        return cls(x, y, _clamp_pressure(pressure))


@dataclass(slots=True)
class StrokePoint:
    """A streamlined point annotated for outline construction.

    Attributes:
        point: Adjusted (x, y) position
        pressure: Pressure of the raw point this was derived from
        vector: Unit vector pointing back toward the previous point
        distance: Distance to the previous stroke point
        running_length: Arc length from the first stroke point
    """

    point: Vec
    pressure: float
    vector: Vec = (0.0, 0.0)
    distance: float = 0.0
    running_length: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the stroke point
        """
        return {
            "point": list(self.point),
            "pressure": self.pressure,
            "vector": list(self.vector),
            "distance": self.distance,
            "running_length": self.running_length,
        }


@dataclass
class Stroke:
    """A recorded stroke as loaded from a strokes file.

    Attributes:
        name: Display name of the stroke
        points: Normalized input points
        options: Per-stroke option overrides (camelCase or snake_case keys)
    """

    name: str
    points: list[InputPoint]
    options: dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Check if stroke has no points.

        Returns:
            True if the stroke has no points
        """
        return len(self.points) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with name, points and options
        """
        return {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
            "options": dict(self.options),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with name, points and optional options

        Returns:
            Stroke instance
        """
        return cls(
            name=data["name"],
            points=[InputPoint.from_raw(p) for p in data["points"]],
            options=dict(data.get("options") or {}),
        )
