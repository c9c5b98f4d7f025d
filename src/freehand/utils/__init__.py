"""Utility functions for freehand.

This module provides utility functions including:

- Logging setup and configuration
- Per-stroke progress and statistics tracking
"""

from freehand.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
