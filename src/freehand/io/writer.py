"""Outline writer for saving rendered strokes.

This module provides the OutlineWriter class for serializing outline
polygons as JSON vertex lists, raw SVG path data, or an SVG document.
"""

import json
from collections.abc import Sequence
from pathlib import Path

import svgwrite

from freehand.config import OutputConfig, OutputFormat
from freehand.domain import Vec
from freehand.exceptions import OutlineSaveError
from freehand.io.converter import get_svg_path_from_stroke

NamedOutline = tuple[str, list[Vec]]


def outline_bounds(outlines: Sequence[NamedOutline]) -> tuple[float, float, float, float]:
    """Calculate the bounding box of all outline vertices.

    Args:
        outlines: Named outlines

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zero when there are no vertices
    """
    xs = [v[0] for _, outline in outlines for v in outline]
    ys = [v[1] for _, outline in outlines for v in outline]

    if not xs:
        return (0.0, 0.0, 0.0, 0.0)

    return (min(xs), min(ys), max(xs), max(ys))


class OutlineWriter:
    """Serializes outlines in the configured output format.

    Example:
        writer = OutlineWriter(OutputConfig(format=OutputFormat.SVG))
        writer.write([("stroke-1", outline)], Path("stroke.svg"))
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the outline writer.

        Args:
            config: Output settings (defaults to an SVG document)
        """
        self._config = config or OutputConfig()

    @property
    def format(self) -> OutputFormat:
        """Return the configured output format."""
        return self._config.format

    def render(self, outlines: Sequence[NamedOutline]) -> str:
        """Render outlines to text in the configured format.

        Args:
            outlines: Sequence of (name, outline) pairs

        Returns:
            Serialized outlines
        """
        if self._config.format is OutputFormat.JSON:
            return self._render_json(outlines)
        if self._config.format is OutputFormat.PATH:
            return self._render_path(outlines)
        return self._render_svg(outlines)

    def write(self, outlines: Sequence[NamedOutline], output_path: Path) -> None:
        """Render outlines and save them to a file.

        Args:
            outlines: Sequence of (name, outline) pairs
            output_path: Destination file

        Raises:
            OutlineSaveError: If the file cannot be written
        """
        content = self.render(outlines)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutlineSaveError(str(output_path), str(e)) from e

    def _render_json(self, outlines: Sequence[NamedOutline]) -> str:
        data = [
            {"name": name, "outline": [[x, y] for x, y in outline]}
            for name, outline in outlines
        ]
        return json.dumps(data, indent=2)

    def _render_path(self, outlines: Sequence[NamedOutline]) -> str:
        precision = self._config.precision
        lines = [get_svg_path_from_stroke(outline, precision) for _, outline in outlines]
        return "\n".join(lines) + "\n"

    def _render_svg(self, outlines: Sequence[NamedOutline]) -> str:
        padding = self._config.padding
        min_x, min_y, max_x, max_y = outline_bounds(outlines)

        width = max_x - min_x + padding * 2
        height = max_y - min_y + padding * 2

        dwg = svgwrite.Drawing(size=(f"{width:g}px", f"{height:g}px"))
        dwg.viewbox(min_x - padding, min_y - padding, width, height)

        group = dwg.g(id="strokes", fill=self._config.fill, stroke="none")

        for i, (_name, outline) in enumerate(outlines):
            if not outline:
                continue
            group.add(
                dwg.path(
                    d=get_svg_path_from_stroke(outline, self._config.precision),
                    id=f"stroke-{i + 1}",
                )
            )

        dwg.add(group)
        return dwg.tostring()

    @staticmethod
    def get_output_path(input_path: Path, output_format: OutputFormat) -> Path:
        """Generate the default output path for an input file.

        Converts: strokes.json -> strokes-stroke.svg

        Args:
            input_path: Strokes file path
            output_format: Output format, which selects the extension

        Returns:
            Path next to the input with a -stroke suffix
        """
        return input_path.parent / f"{input_path.stem}-stroke{output_format.suffix}"
