"""Logging utilities for freehand."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

PACKAGE_LOGGER = "freehand"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    rendered_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    input_points: int = 0
    outline_vertices: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    stroke_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_stroke_time_ms(self) -> float | None:
        """Average outline time per rendered stroke."""
        if not self.stroke_times_ms:
            return None
        return sum(self.stroke_times_ms) / len(self.stroke_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Handlers are attached to the ``freehand`` package logger and replaced on
    every call, so configuring twice never duplicates output. Console
    output goes to stderr so it never mixes with outline data written to
    stdout. A file handler is only added when a log file is given.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(PACKAGE_LOGGER)
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        started=datetime.now().isoformat(timespec="seconds"),
    )

    return logger


class RenderLogger:
    """Logger for tracking per-stroke progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_stroke_start(self, stroke_name: str, point_count: int) -> None:
        """Log start of stroke outlining."""
        self._logger.debug("Outlining stroke", stroke=stroke_name, points=point_count)

    def log_stroke_complete(
        self,
        stroke_name: str,
        point_count: int,
        vertex_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful stroke outlining."""
        self._logger.info(
            "Stroke outlined",
            stroke=stroke_name,
            points=point_count,
            vertices=vertex_count,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.rendered_count += 1
        self._stats.input_points += point_count
        self._stats.outline_vertices += vertex_count
        self._stats.stroke_times_ms.append(duration_ms)

    def log_stroke_skipped(self, stroke_name: str, reason: str) -> None:
        """Log skipped stroke."""
        self._logger.debug("Stroke skipped", stroke=stroke_name, reason=reason)
        self._stats.skipped_count += 1

    def log_stroke_error(self, stroke_name: str, error: Exception) -> None:
        """Log stroke outlining error."""
        self._logger.error(
            "Stroke outlining failed",
            stroke=stroke_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((stroke_name, str(error)))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
