"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, a text preview of the pixels, and formatted messages.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from rasterlab.core import Scene
from rasterlab.domain import Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

PIXEL = "#"
EMPTY = "."


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]RasterLab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene: Scene, width: int, height: int) -> None:
    """Print what was rasterized.

    Args:
        scene: The assembled scene
        width: Width of the coordinate space
        height: Height of the coordinate space
    """
    params = " ".join(f"{v:g}" for v in scene.params.to_tuple())
    line = Text("  ")
    line.append(scene.algorithm.label, style="bold")
    line.append(f" ({scene.algorithm.value}) {params}")
    console.print(line)
    shape = "closed ring" if scene.closed else "open polyline"
    console.print(
        f"  {scene.point_count} points {SYM_DOT} {scene.segment_count} segments "
        f"{SYM_DOT} {shape} {SYM_DOT} {width}x{height}"
    )


def print_points_table(points: Iterable[Point]) -> None:
    """Print the rasterized points as a table."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("z", justify="right")
    for i, p in enumerate(points):
        table.add_row(str(i), f"{p.x:g}", f"{p.y:g}", f"{p.z:g}")
    console.print(table)


def format_preview(points: Iterable[Point], max_width: int = 80, max_height: int = 40) -> list[str]:
    """Draw the points on a character grid, top row first.

    The grid spans the bounding box of the points, so row 0 is the largest
    y and column 0 the smallest x.

    Args:
        points: Lattice points to draw
        max_width: Widest grid to draw, in columns
        max_height: Tallest grid to draw, in rows

    Returns:
        Grid rows, or an empty list when there is nothing to draw or the
        bounding box exceeds the limits
    """
    cells = {(int(p.x), int(p.y)) for p in points}
    if not cells:
        return []

    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    if max_x - min_x + 1 > max_width or max_y - min_y + 1 > max_height:
        return []

    return [
        "".join(PIXEL if (x, y) in cells else EMPTY for x in range(min_x, max_x + 1))
        for y in range(max_y, min_y - 1, -1)
    ]


def print_preview(points: Iterable[Point]) -> None:
    """Print a character-grid preview of the points."""
    rows = format_preview(points)
    if not rows:
        console.print(f"  {SYM_DOT} Too large to preview")
        return
    for row in rows:
        console.print(f"  {row}", highlight=False)


def print_success(frames: int, meshes: int, draw_calls: int, total_time_s: float) -> None:
    """Print success message with a render summary.

    Args:
        frames: Number of frames rendered
        meshes: Number of meshes uploaded
        draw_calls: Total draw calls issued
        total_time_s: Scene build time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    console.print(f"  {meshes} meshes {SYM_DOT} {frames} frames {SYM_DOT} {draw_calls} draw calls")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
