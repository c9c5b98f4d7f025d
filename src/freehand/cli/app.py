"""CLI application entry point for freehand.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from freehand import __version__
from freehand.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_input_info,
    print_options,
    print_outlines,
    print_step,
    print_success,
)
from freehand.config import (
    FreehandSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
)
from freehand.core import StrokeProcessor
from freehand.easing import EASINGS, get_easing
from freehand.exceptions import (
    FreehandError,
    OutlineSaveError,
    StrokeFileError,
    UnknownEasingError,
)
from freehand.io import OutlineWriter, StrokeReader

STDOUT_PATH = Path("-")

# Create the Typer app
app = typer.Typer(
    name="freehand",
    help="Render recorded pointer strokes as pressure-sensitive outline polygons.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]freehand[/bold blue] v{__version__}")
        raise typer.Exit()


def _collect_overrides(**values: Any) -> dict[str, Any]:
    """Keep only the options that were given on the command line."""
    overrides: dict[str, Any] = {}
    start: dict[str, Any] = {}
    end: dict[str, Any] = {}

    for key, value in values.items():
        if value is None:
            continue
        if key.startswith("start_"):
            start[key.removeprefix("start_")] = value
        elif key.startswith("end_"):
            end[key.removeprefix("end_")] = value
        else:
            overrides[key] = value

    if start:
        overrides["start"] = start
    if end:
        overrides["end"] = end
    return overrides


@app.command()
def render(
    input_strokes: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON strokes file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path, or '-' for stdout (default: {name}-stroke.{ext})",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (svg|json|path)",
        ),
    ] = "svg",
    size: Annotated[
        float | None,
        typer.Option("--size", "-s", help="Base stroke diameter"),
    ] = None,
    thinning: Annotated[
        float | None,
        typer.Option("--thinning", "-t", help="Effect of pressure on width (-1 to 1)"),
    ] = None,
    smoothing: Annotated[
        float | None,
        typer.Option("--smoothing", help="Minimum outline point spacing, as a fraction of size"),
    ] = None,
    streamline: Annotated[
        float | None,
        typer.Option("--streamline", help="Input damping strength"),
    ] = None,
    easing: Annotated[
        str | None,
        typer.Option("--easing", help="Pressure easing name (e.g. easeOutSine)"),
    ] = None,
    no_simulate_pressure: Annotated[
        bool,
        typer.Option(
            "--no-simulate-pressure",
            help="Use recorded pressure instead of deriving it from point spacing",
        ),
    ] = False,
    taper_start: Annotated[
        float | None,
        typer.Option("--taper-start", help="Distance to taper at the start"),
    ] = None,
    taper_end: Annotated[
        float | None,
        typer.Option("--taper-end", help="Distance to taper at the end"),
    ] = None,
    taper_start_easing: Annotated[
        str | None,
        typer.Option("--taper-start-easing", help="Easing name for the start taper"),
    ] = None,
    taper_end_easing: Annotated[
        str | None,
        typer.Option("--taper-end-easing", help="Easing name for the end taper"),
    ] = None,
    flat_start: Annotated[
        bool,
        typer.Option("--flat-start", help="Draw a flat cap at the start"),
    ] = False,
    flat_end: Annotated[
        bool,
        typer.Option("--flat-end", help="Draw a flat cap at the end"),
    ] = False,
    last: Annotated[
        bool,
        typer.Option("--last", help="Treat strokes as finished"),
    ] = False,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places in SVG and path output (0-8)",
            min=0,
            max=8,
        ),
    ] = 3,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render the strokes in a JSON file as filled outline polygons.

    Options given here override options stored in the strokes file, which in
    turn override the built-in defaults.

    Example:
        freehand signature.json --taper-end 40 -o signature.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_strokes.exists():
        print_error(
            f"Input file not found: {input_strokes}",
            details=f"The file '{input_strokes}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_strokes.is_file():
        print_error(
            f"Input path is not a file: {input_strokes}",
            details="Please provide a path to a JSON strokes file.",
        )
        raise typer.Exit(code=1)

    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: svg, json, path",
        )
        raise typer.Exit(code=1)

    # Validate easing names before any work starts
    try:
        for name in (easing, taper_start_easing, taper_end_easing):
            if name is not None:
                get_easing(name)
    except UnknownEasingError as e:
        print_error(str(e), details="Valid values: " + ", ".join(EASINGS))
        raise typer.Exit(code=1)

    overrides = _collect_overrides(
        size=size,
        thinning=thinning,
        smoothing=smoothing,
        streamline=streamline,
        easing=easing,
        simulate_pressure=False if no_simulate_pressure else None,
        last=True if last else None,
        start_taper=taper_start,
        start_easing=taper_start_easing,
        start_cap=False if flat_start else None,
        end_taper=taper_end,
        end_easing=taper_end_easing,
        end_cap=False if flat_end else None,
    )

    settings = FreehandSettings(
        output=OutputConfig(format=fmt, precision=precision),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else ("ERROR" if quiet else log_level),
        ),
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading strokes")

        reader = StrokeReader(input_strokes)
        reader.load()
        strokes = list(reader.iter_strokes())

        if not quiet:
            print_input_info(
                input_path=str(input_strokes),
                stroke_count=len(strokes),
                point_count=sum(len(s.points) for s in strokes),
            )

        if not strokes:
            if not quiet:
                console.print("\nNo strokes found. Nothing to render.")
            raise typer.Exit(code=0)

        processor = StrokeProcessor(settings, overrides)

        if not quiet:
            base = settings.stroke.with_overrides(overrides)
            print_step("Rendering")
            print_options(base.size, base.thinning, base.streamline, base.smoothing)

            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Outlining {len(strokes)} strokes",
                    total=len(strokes),
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                outlines, stats = processor.process(
                    strokes,
                    file_options=reader.options,
                    progress_callback=update_progress,
                )

            print_outlines(outlines, verbose)
        else:
            outlines, stats = processor.process(strokes, file_options=reader.options)

        writer = OutlineWriter(settings.output)

        if output == STDOUT_PATH:
            typer.echo(writer.render(outlines), nl=False)
            destination = "<stdout>"
        else:
            output_path = output or OutlineWriter.get_output_path(input_strokes, fmt)
            writer.write(outlines, output_path)
            destination = str(output_path)

        if not quiet:
            print_success(
                output_path=destination,
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                vertices=stats.outline_vertices,
                skipped=stats.skipped_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_stroke_time_ms,
            )

        if stats.error_count:
            raise typer.Exit(code=1)

    except StrokeFileError as e:
        print_error(f"Could not load strokes: {e.reason}")
        raise typer.Exit(code=1)
    except OutlineSaveError as e:
        print_error(f"Could not save outline: {e.reason}")
        raise typer.Exit(code=1)
    except FreehandError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
