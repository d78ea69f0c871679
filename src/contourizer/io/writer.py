"""Result writer for saving traced contours and shapes.

This module provides the ResultWriter class for writing extraction results
as JSON documents or SVG outlines.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from contourizer.config import OutputFormat
from contourizer.domain import ShapeCollection, ShapeKind
from contourizer.exceptions import OutputSaveError

if TYPE_CHECKING:
    from contourizer.core.finder import ContourFinder

# Outline colour per shape bucket
SHAPE_COLORS: dict[ShapeKind, str] = {
    ShapeKind.POINT: "#222222",
    ShapeKind.LINE: "#1f77b4",
    ShapeKind.TRIANGLE: "#ff7f0e",
    ShapeKind.SQUARE: "#2ca02c",
    ShapeKind.RECTANGLE: "#17becf",
    ShapeKind.CIRCLE: "#d62728",
    ShapeKind.POLYGON: "#9467bd",
}


def result_to_dict(finder: "ContourFinder") -> dict[str, Any]:
    """Serialize a finder's contours and shapes.

    Args:
        finder: Finder whose contours (and, if approximated, shapes) to export

    Returns:
        JSON-compatible dictionary
    """
    return {
        "width": finder.width,
        "height": finder.height,
        "simplified": finder.is_simplified,
        "contours": [[p.to_tuple() for p in c] for c in finder.contours],
        "shapes": finder.collection.to_dict(),
        "counts": finder.collection.counts(),
    }


def render_svg(
    width: int,
    height: int,
    collection: ShapeCollection,
    stroke_width: float = 1.0,
) -> str:
    """Render classified shapes as an SVG document.

    Shapes are drawn on pixel centres; single points become 1x1 squares.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        collection: Classified shapes
        stroke_width: Outline stroke width

    Returns:
        SVG document text
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
    ]

    for point in collection.points:
        lines.append(
            f'  <rect class="{ShapeKind.POINT.value}" x="{point.x}" y="{point.y}" '
            f'width="1" height="1" fill="{SHAPE_COLORS[ShapeKind.POINT]}"/>'
        )

    for kind in ShapeKind:
        if kind is ShapeKind.POINT:
            continue
        for contour in collection[kind]:
            coords = " ".join(f"{p.x + 0.5},{p.y + 0.5}" for p in contour)
            element = "polyline" if kind is ShapeKind.LINE else "polygon"
            lines.append(
                f'  <{element} class="{kind.value}" points="{coords}" fill="none" '
                f'stroke="{SHAPE_COLORS[kind]}" stroke-width="{stroke_width}"/>'
            )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


class ResultWriter:
    """Writes extraction results to disk.

    Example:
        writer = ResultWriter()
        writer.write(finder, Path("drawing-contours.svg"), OutputFormat.SVG)
    """

    def __init__(self, stroke_width: float = 1.0) -> None:
        self.stroke_width = stroke_width

    def write_json(self, finder: "ContourFinder", output_path: Path) -> None:
        """Write contours and shapes as JSON.

        Raises:
            OutputSaveError: If the file cannot be written
        """
        self._write_text(output_path, json.dumps(result_to_dict(finder), indent=2))

    def write_svg(self, finder: "ContourFinder", output_path: Path) -> None:
        """Write classified shapes as SVG outlines.

        Raises:
            OutputSaveError: If the file cannot be written
        """
        svg = render_svg(finder.width, finder.height, finder.collection, self.stroke_width)
        self._write_text(output_path, svg)

    def write(self, finder: "ContourFinder", output_path: Path, fmt: OutputFormat) -> None:
        """Write results in the requested format.

        Args:
            finder: Approximated finder to export
            output_path: Destination file
            fmt: Output format
        """
        if OutputFormat(fmt) is OutputFormat.SVG:
            self.write_svg(finder, output_path)
        else:
            self.write_json(finder, output_path)

    @staticmethod
    def _write_text(output_path: Path, text: str) -> None:
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputSaveError(str(output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path, fmt: OutputFormat = OutputFormat.JSON) -> Path:
        """Generate output path next to the input image.

        Args:
            input_path: Original image path
            fmt: Output format, selects the extension

        Returns:
            Path with '-contours' suffix (e.g., drawing.png -> drawing-contours.json)
        """
        return input_path.parent / f"{input_path.stem}-contours.{OutputFormat(fmt).value}"
