"""Console reporting for the freehand CLI.

Status, progress and summaries are written with Rich to stderr so that
``--output -`` can stream outline data on stdout undisturbed.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

MARK_STEP = "▸"
MARK_DONE = "✓"
MARK_FAIL = "✗"
SEP = "·"

# Verbose listings stop after this many strokes
MAX_LISTED_STROKES = 20


def create_progress() -> Progress:
    """Build the transient per-stroke progress bar."""
    return Progress(
        TextColumn("  [progress.description]{task.description}"),
        BarColumn(bar_width=32, complete_style="cyan", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print the program banner."""
    console.print(f"\n[bold]freehand[/bold] [dim]{version}[/dim]")
    console.rule(style="dim")


def print_step(message: str) -> None:
    console.print(f"\n[bold cyan]{MARK_STEP}[/bold cyan] {message}")


def print_input_info(input_path: str, stroke_count: int, point_count: int) -> None:
    """Describe the loaded strokes file.

    Args:
        input_path: Path of the strokes file
        stroke_count: Strokes found in the file
        point_count: Input points across all strokes
    """
    console.print(Text(f"  {input_path}", style="bold"))
    console.print(f"  [dim]{stroke_count:,} strokes {SEP} {point_count:,} points[/dim]")


def print_options(size: float, thinning: float, streamline: float, smoothing: float) -> None:
    """Print the base stroke options in effect."""
    console.print(
        f"  [dim]size[/dim] {size:g}  [dim]thinning[/dim] {thinning:g}  "
        f"[dim]streamline[/dim] {streamline:g}  [dim]smoothing[/dim] {smoothing:g}"
    )


def print_outlines(outlines: Sequence[tuple[str, list]], verbose: bool) -> None:
    """List the vertex count of each rendered stroke.

    Only shown in verbose mode.

    Args:
        outlines: Named outlines in render order
        verbose: Whether verbose output was requested
    """
    if not verbose or not outlines:
        return

    table = Table(box=None, show_header=True, header_style="dim", padding=(0, 2))
    table.add_column("stroke")
    table.add_column("vertices", justify="right")

    for name, outline in outlines[:MAX_LISTED_STROKES]:
        table.add_row(name, f"{len(outline):,}")

    console.print(table)

    hidden = len(outlines) - MAX_LISTED_STROKES
    if hidden > 0:
        console.print(f"  [dim]and {hidden} more[/dim]")


def _elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m{rest:04.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    rendered: int,
    vertices: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Summarize a finished render.

    Args:
        output_path: Where the outlines went (a path or ``<stdout>``)
        total_time_s: Wall time of the render
        rendered: Strokes outlined
        vertices: Outline vertices across all strokes
        skipped: Empty strokes that were skipped
        errors: Strokes that failed to render
        avg_time_ms: Mean outline time per stroke
    """
    status = "[bold yellow]Done with errors[/bold yellow]" if errors else (
        f"[bold green]{MARK_DONE} Done[/bold green]"
    )
    console.print(f"\n{status} [dim]in {_elapsed(total_time_s)}[/dim]")
    console.print(Text(f"  {output_path}", style="bold"))

    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="dim")
    summary.add_column(justify="right")
    summary.add_row("  strokes", str(rendered))
    summary.add_row("  vertices", f"{vertices:,}")
    if skipped:
        summary.add_row("  skipped", str(skipped))
    if errors:
        summary.add_row("  failed", f"[red]{errors}[/red]")
    if avg_time_ms is not None:
        summary.add_row("  per stroke", f"{avg_time_ms:.3f}ms")
    console.print(summary)


def print_error(message: str, details: str | None = None) -> None:
    """Report an error.

    Args:
        message: What went wrong
        details: Optional hint shown beneath the message
    """
    console.print(f"\n[bold red]{MARK_FAIL} {message}[/bold red]")
    if details:
        console.print(f"  [dim]{details}[/dim]")
