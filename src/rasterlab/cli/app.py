"""CLI application entry point for rasterlab.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from rasterlab import __version__
from rasterlab.cli.output import (
    console,
    print_error,
    print_header,
    print_points_table,
    print_preview,
    print_scene_info,
    print_step,
    print_success,
)
from rasterlab.cli.prompt import KERNEL_PARAMETERS, InteractivePrompt
from rasterlab.config import (
    LoggingConfig,
    RasterConfig,
    RasterLabSettings,
    WindowConfig,
)
from rasterlab.core import SceneAssembler
from rasterlab.exceptions import DomainError, RasterLabError
from rasterlab.render import HeadlessRenderHost, SceneRenderer
from rasterlab.utils import SceneLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="rasterlab",
    help="Rasterize lines and circles with the classical algorithms and render the result.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]RasterLab[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def rasterize(
    width: Annotated[
        int | None,
        typer.Option(
            "--width",
            help="Width of the coordinate space (prompted if omitted, default 800)",
            min=1,
        ),
    ] = None,
    height: Annotated[
        int | None,
        typer.Option(
            "--height",
            help="Height of the coordinate space (prompted if omitted, default 600)",
            min=1,
        ),
    ] = None,
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help="Algorithm code (BIA|DDA|BA|MPC|BCA), any case",
        ),
    ] = None,
    params: Annotated[
        str | None,
        typer.Option(
            "--params",
            "-p",
            help='Kernel parameters: "x1 y1 x2 y2" for lines, "cx cy r" for circles',
        ),
    ] = None,
    frames: Annotated[
        int,
        typer.Option(
            "--frames",
            "-f",
            help="Number of frames to render",
            min=1,
        ),
    ] = 1,
    inclusive_end: Annotated[
        bool,
        typer.Option(
            "--inclusive-end",
            help="Basic incremental line: also emit the column at floor(x2)",
        ),
    ] = False,
    show_points: Annotated[
        bool,
        typer.Option(
            "--show-points",
            help="Print every rasterized point",
        ),
    ] = False,
    preview: Annotated[
        bool,
        typer.Option(
            "--preview",
            help="Print a character-grid preview of the pixels",
        ),
    ] = False,
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
    """Rasterize a line or circle and render it.

    Asks for the coordinate space, the algorithm and its parameters, skipping
    any question already answered by an option. A bad answer typed at the
    prompt is reported and asked again; a bad option value exits with code 1.

    Example:
        rasterlab --algorithm BCA --params "0 0 3" --preview
    """
    if not quiet:
        print_header(__version__)

    try:
        prompt = InteractivePrompt(
            ask=lambda question: console.input(escape(question)),
            announce=None if quiet else console.print,
            on_error=lambda error: print_error(str(error)),
        )
        answers = prompt.collect(
            width=width,
            height=height,
            algorithm=algorithm,
            params=params,
        )

        settings = RasterLabSettings(
            window=WindowConfig(width=answers.width, height=answers.height),
            raster=RasterConfig(inclusive_end=inclusive_end),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
        scene_logger = SceneLogger(
            configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
                quiet=quiet,
            )
        )

        if not quiet:
            print_step("Rasterizing")
        assembler = SceneAssembler(settings, scene_logger)
        values = answers.params
        while True:
            try:
                scene = assembler.build(answers.algorithm, values)
                break
            except DomainError as e:
                # Only parameters typed at the prompt are asked again
                if params is not None or e.parameter not in KERNEL_PARAMETERS:
                    raise
                print_error(str(e))
                values = prompt.ask_params(answers.algorithm)

        if not quiet:
            print_scene_info(scene, settings.window.width, settings.window.height)
            if show_points:
                print_points_table(scene.points)
            if preview:
                print_preview(scene.points)
            print_step("Rendering")

        host = HeadlessRenderHost()
        with SceneRenderer(host, scene_logger) as renderer:
            handles = renderer.upload(scene)
            rendered = renderer.run(frames)
            draw_calls = sum(host.draw_calls.values())

        if not quiet:
            print_success(
                frames=rendered,
                meshes=len(handles),
                draw_calls=draw_calls,
                total_time_s=scene_logger.stats.duration_seconds,
            )

    except RasterLabError as e:
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
