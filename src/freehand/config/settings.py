"""Configuration settings for freehand."""

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from freehand.easing import Easing, get_easing, linear

# camelCase spellings accepted in option files, mapped to field names
_OPTION_ALIASES: dict[str, str] = {
    "simulatePressure": "simulate_pressure",
    "isComplete": "last",
    "is_complete": "last",
}


def _resolve_easing(value: Any) -> Any:
    if isinstance(value, str):
        return get_easing(value)
    return value


class OutputFormat(str, Enum):
    """Outline output format."""

    SVG = "svg"
    JSON = "json"
    PATH = "path"

    @property
    def suffix(self) -> str:
        """File suffix for this format."""
        return ".txt" if self is OutputFormat.PATH else f".{self.value}"


class CapOptions(BaseModel):
    """Cap and taper settings for one end of a stroke.

    An ``easing`` of None selects the side's default: ``ease_out_quad`` at
    the start and ``ease_out_cubic`` at the end.
    """

    cap: bool = Field(
        default=True,
        description="Draw a rounded cap (True) or a flat cap (False)",
    )
    taper: float = Field(
        default=0.0,
        description="Distance over which the stroke narrows to a point (0 = no taper)",
    )
    easing: Easing | None = Field(
        default=None,
        description="Taper easing function, or a registered easing name",
    )

    @field_validator("easing", mode="before")
    @classmethod
    def _check_easing(cls, value: Any) -> Any:
        return _resolve_easing(value)


class StrokeOptions(BaseModel):
    """Options for building a stroke outline.

    Values are intentionally not range-checked: out-of-range sizes or
    thinning produce degenerate geometry rather than an error.
    """

    model_config = ConfigDict(populate_by_name=True)

    size: float = Field(
        default=16.0,
        description="Base diameter of the stroke",
    )
    thinning: float = Field(
        default=0.5,
        description="Effect of pressure on the stroke's width (-1 to 1)",
    )
    smoothing: float = Field(
        default=0.5,
        description="Minimum spacing between outline points, as a fraction of size",
    )
    streamline: float = Field(
        default=0.5,
        description="How strongly new input points are pulled toward the previous point",
    )
    easing: Easing = Field(
        default=linear,
        description="Pressure easing function, or a registered easing name",
    )
    simulate_pressure: bool = Field(
        default=True,
        alias="simulatePressure",
        description="Derive pressure from point spacing instead of the input",
    )
    start: CapOptions = Field(default_factory=CapOptions)
    end: CapOptions = Field(default_factory=CapOptions)
    last: bool = Field(
        default=False,
        validation_alias=AliasChoices("last", "isComplete", "is_complete"),
        description="Whether the stroke is finished",
    )

    @field_validator("easing", mode="before")
    @classmethod
    def _check_easing(cls, value: Any) -> Any:
        return _resolve_easing(value)

    @property
    def is_complete(self) -> bool:
        """Whether the stroke is finished (alias of ``last``)."""
        return self.last

    def with_overrides(self, overrides: Mapping[str, Any]) -> "StrokeOptions":
        """Return a copy with the given values replaced.

        Keys may use field names or camelCase aliases. ``start`` and ``end``
        mappings are merged into the existing cap settings rather than
        replacing them.

        Args:
            overrides: Option values to apply

        Returns:
            New validated StrokeOptions
        """
        data = self.model_dump()
        for key, value in overrides.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in ("start", "end") and isinstance(value, Mapping):
                data[name] = {**data[name], **value}
            else:
                data[name] = value
        return StrokeOptions.model_validate(data)


class OutputConfig(BaseModel):
    """Configuration for writing outlines."""

    format: OutputFormat = Field(
        default=OutputFormat.SVG,
        description="Output format",
    )
    precision: int = Field(
        default=3,
        ge=0,
        le=8,
        description="Decimal places for coordinates in SVG and path output",
    )
    fill: str = Field(
        default="black",
        description="Fill color for SVG paths",
    )
    padding: float = Field(
        default=16.0,
        ge=0.0,
        description="Margin around the outlines in SVG documents",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FreehandSettings(BaseModel):
    """Main application settings."""

    stroke: StrokeOptions = Field(default_factory=StrokeOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FreehandSettings:
    """Get default application settings."""
    return FreehandSettings()


def resolve_options(
    options: StrokeOptions | Mapping[str, Any] | None,
) -> StrokeOptions:
    """Coerce caller-supplied options into StrokeOptions.

    Args:
        options: A StrokeOptions instance, a mapping of option values
            (field names or camelCase aliases), or None for defaults

    Returns:
        StrokeOptions instance
    """
    if options is None:
        return StrokeOptions()
    if isinstance(options, StrokeOptions):
        return options
    return StrokeOptions().with_overrides(options)
