"""Stroke reader for loading recorded strokes.

This module provides the StrokeReader class for loading JSON strokes files
into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from freehand.domain import Stroke
from freehand.exceptions import InvalidPointError, StrokeFileError
from freehand.io.converter import json_to_strokes


class StrokeReader:
    """Loads recorded strokes from a JSON file.

    Example:
        reader = StrokeReader(Path("strokes.json"))
        reader.load()
        for stroke in reader.iter_strokes():
            print(stroke.name, len(stroke.points))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the stroke reader.

        Args:
            path: Path to the strokes JSON file
        """
        self._path = path
        self._strokes: list[Stroke] | None = None
        self._options: dict[str, Any] = {}

    def load(self) -> None:
        """Load and parse the strokes file.

        Raises:
            FileNotFoundError: If the file does not exist
            StrokeFileError: If the file is unreadable or not a strokes file
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Strokes file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StrokeFileError(str(self._path), str(e)) from e

        try:
            self._strokes, self._options = json_to_strokes(data, default_name=self._path.stem)
        except (ValueError, InvalidPointError) as e:
            raise StrokeFileError(str(self._path), str(e)) from e

    def _require_loaded(self) -> list[Stroke]:
        if self._strokes is None:
            raise RuntimeError("Strokes not loaded. Call load() first.")
        return self._strokes

    @property
    def stroke_count(self) -> int:
        """Return the number of strokes in the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return len(self._require_loaded())

    @property
    def options(self) -> dict[str, Any]:
        """Return file-level option overrides.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        self._require_loaded()
        return dict(self._options)

    def iter_strokes(self) -> Iterator[Stroke]:
        """Iterate over the loaded strokes.

        Yields:
            Stroke domain objects in file order

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        yield from self._require_loaded()
