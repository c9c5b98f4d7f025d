"""Batch orchestration for outlining several strokes.

Resolves per-stroke options, runs the outline pipeline for each stroke and
records timing and statistics. Reading and writing files is left to the
caller.

Key components:
- StrokeProcessor: Outlines a list of strokes with shared settings
"""

import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from freehand.config import FreehandSettings, StrokeOptions
from freehand.core.stroke import get_stroke
from freehand.domain import Stroke, Vec
from freehand.exceptions import FreehandError
from freehand.utils import RenderLogger, RenderStats, configure_logging


class StrokeProcessor:
    """Outlines strokes and tracks render statistics.

    Option precedence, lowest first: ``settings.stroke``, the
    ``file_options`` passed to ``process``, each stroke's own options, and
    finally ``overrides`` (typically explicit CLI flags).

    Example:
        processor = StrokeProcessor(FreehandSettings())
        outlines, stats = processor.process(strokes)
    """

    def __init__(
        self,
        settings: FreehandSettings,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            settings: Application settings
            overrides: Option values that win over every other source
        """
        self.settings = settings
        self.overrides = dict(overrides or {})
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        self.render_logger = RenderLogger(self.logger)

    def resolve_options(
        self,
        stroke: Stroke,
        file_options: Mapping[str, Any] | None = None,
    ) -> StrokeOptions:
        """Combine every option source for one stroke."""
        options = self.settings.stroke
        for layer in (file_options, stroke.options, self.overrides):
            if layer:
                options = options.with_overrides(layer)
        return options

    def process(
        self,
        strokes: Sequence[Stroke],
        file_options: Mapping[str, Any] | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> tuple[list[tuple[str, list[Vec]]], RenderStats]:
        """Outline every stroke.

        Empty strokes are skipped. A stroke whose options fail to resolve is
        logged as an error and left out of the result; the rest still
        render.

        Args:
            strokes: Strokes to outline
            file_options: File-level option overrides
            progress_callback: Called with (completed, total) after each stroke

        Returns:
            Tuple of (named outlines, render statistics)
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()
        outlines: list[tuple[str, list[Vec]]] = []
        total = len(strokes)

        self.logger.info("Starting render", strokes=total)

        for completed, stroke in enumerate(strokes, start=1):
            if stroke.is_empty():
                self.render_logger.log_stroke_skipped(stroke.name, "no points")
            else:
                self.render_logger.log_stroke_start(stroke.name, len(stroke.points))
                start = time.perf_counter()
                try:
                    options = self.resolve_options(stroke, file_options)
                    outline = get_stroke(stroke.points, options)
                except (FreehandError, ValueError) as e:
                    self.render_logger.log_stroke_error(stroke.name, e)
                else:
                    duration_ms = (time.perf_counter() - start) * 1000
                    outlines.append((stroke.name, outline))
                    self.render_logger.log_stroke_complete(
                        stroke.name, len(stroke.points), len(outline), duration_ms
                    )

            if progress_callback is not None:
                progress_callback(completed, total)

        stats.end_time = time.time()
        self.logger.info(
            "Render complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            vertices=stats.outline_vertices,
        )

        return outlines, stats
