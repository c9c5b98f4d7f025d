"""Configuration management for freehand.

This module provides configuration management using Pydantic models.
Stroke options can be provided in code, loaded from a strokes file, or set
from CLI arguments.

Key classes:
- CapOptions: Cap and taper settings for one end of a stroke
- StrokeOptions: Outline geometry settings
- OutputConfig: Outline writer settings
- LoggingConfig: Logging settings
- FreehandSettings: Main application settings
"""

from freehand.config.settings import (
    CapOptions,
    FreehandSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    StrokeOptions,
    get_default_settings,
    resolve_options,
)

__all__ = [
    "CapOptions",
    "FreehandSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "StrokeOptions",
    "get_default_settings",
    "resolve_options",
]
