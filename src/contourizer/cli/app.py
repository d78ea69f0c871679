"""CLI application entry point for contourizer.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from contourizer import __version__
from contourizer.cli.output import (
    console,
    print_error,
    print_header,
    print_image_info,
    print_shape_table,
    print_step,
    print_success,
)
from contourizer.config import (
    ContourizerSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    PreprocessConfig,
    SimplifyConfig,
)
from contourizer.core import ImageProcessor
from contourizer.exceptions import ContourizerError, ImageLoadError, OutputSaveError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="contourizer",
    help="Trace shape contours in bi-level images and classify them.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Contourizer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (PNG, BMP, JPEG, ...)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-contours.{format})",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (json|svg)",
        ),
    ] = "json",
    blur: Annotated[
        bool,
        typer.Option(
            "--blur",
            help="Apply a 3x3 box blur before thresholding",
        ),
    ] = False,
    threshold: Annotated[
        float,
        typer.Option(
            "--threshold",
            "-t",
            help="Luminance cutoff (0-255); pixels at or above it are foreground",
            min=0.0,
            max=255.0,
        ),
    ] = 85.0,
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            help="Treat pixels darker than the threshold as foreground",
        ),
    ] = False,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Simplification tolerance in pixels",
            min=0.0,
        ),
    ] = 1.0,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Trace and classify without writing an output file",
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output (INFO logs)",
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
    """Trace the contours of foreground shapes in an image and classify them.

    Pixels whose luminance is at or above the threshold are foreground
    (use --invert for dark shapes on a light background). Every connected
    foreground region becomes one contour, which is simplified and
    classified as a point, line, triangle, square, rectangle, circle or
    polygon.

    Example:
        contourizer drawing.png --invert --format svg

    This will create drawing-contours.svg with one outline per shape.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    # Validate log level
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    console_level = log_level.upper()
    if verbose and console_level != "DEBUG":
        console_level = "INFO"

    # Validate format argument
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: json, svg",
        )
        raise typer.Exit(code=1)

    try:
        settings = ContourizerSettings(
            preprocess=PreprocessConfig(blur=blur, threshold=threshold, invert=invert),
            simplify=SimplifyConfig(epsilon=epsilon),
            output=OutputConfig(format=fmt),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=console_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Tracing contours" + (" (dry run)" if dry_run else ""))

        processor = ImageProcessor(settings, quiet=quiet)
        stats = processor.process(
            image_path=input_image,
            output_path=output,
            dry_run=dry_run,
        )

        if not quiet:
            if stats.image_size is not None:
                width, height = stats.image_size
                print_image_info(
                    image_path=str(input_image),
                    width=width,
                    height=height,
                    mode=stats.image_mode or "",
                )
            console.print()
            print_shape_table(stats.shape_counts)
            print_success(
                output_path=str(stats.output_path) if stats.output_path else None,
                total_time_s=stats.duration_seconds,
                contours=stats.contours_found,
                shapes=stats.shapes_found,
                vertices_before=stats.vertices_before,
                vertices_after=stats.vertices_after,
            )

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except OutputSaveError as e:
        print_error(f"Could not save output: {e.reason}")
        raise typer.Exit(code=1)
    except ContourizerError as e:
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


if __name__ == "__main__":
    cli()
