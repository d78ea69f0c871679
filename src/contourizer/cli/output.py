"""Console reporting for the contourizer command.

Progress steps, image details and the shape-count table are rendered
with Rich.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Status markers
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Contourizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, width: int, height: int, mode: str) -> None:
    """Print input image information.

    Args:
        image_path: Path to the image file
        width: Image width in pixels
        height: Image height in pixels
        mode: Decoded pixel mode (e.g., "RGB")
    """
    # Text keeps square brackets in paths from being read as markup
    line = Text("  ")
    line.append(image_path)
    line.append(f" ({mode})")
    console.print(line)
    console.print(f"  {width} x {height} px")


def print_shape_table(counts: dict[str, int]) -> None:
    """Print shape counts as a table.

    Args:
        counts: Number of shapes per bucket
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Shape")
    table.add_column("Count", justify="right")
    for kind, count in counts.items():
        style = "green" if count else "dim"
        table.add_row(kind, f"[{style}]{count}[/{style}]")
    console.print(table)


def _format_time(seconds: float) -> str:
    """Render a duration as ms, seconds or minutes."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m {rest:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    contours: int,
    shapes: int,
    vertices_before: int,
    vertices_after: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None for dry runs)
        total_time_s: Total processing time in seconds
        contours: Number of contours traced
        shapes: Number of shapes classified
        vertices_before: Vertex count before simplification
        vertices_after: Vertex count after simplification
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {contours} contours {SYM_DOT} {shapes} shapes {SYM_DOT} "
        f"{vertices_before} → {vertices_after} vertices"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
