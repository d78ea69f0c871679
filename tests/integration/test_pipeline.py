"""End-to-end tests for the image processing pipeline.

These tests draw small images with numpy, save them with Pillow and run
them through ImageProcessor, checking the traced contours, the shape
buckets and the written result files.
"""

import json
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from contourizer.config import (
    ContourizerSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    PreprocessConfig,
    SimplifyConfig,
)
from contourizer.core.processor import ImageProcessor
from contourizer.exceptions import ImageLoadError
from contourizer.io import ResultWriter

WIDTH = 64
HEIGHT = 48


def draw_shapes(foreground: int = 255, background: int = 0) -> np.ndarray:
    """Draw one square, rectangle, triangle, disk and dot."""
    canvas = np.full((HEIGHT, WIDTH), background, dtype=np.uint8)
    # square
    canvas[5:17, 5:17] = foreground
    # rectangle
    canvas[8:16, 25:45] = foreground
    # right triangle with a 45 degree hypotenuse
    for y in range(25, 38):
        canvas[y, 3 : 3 + (y - 25) + 1] = foreground
    # disk
    yy, xx = np.mgrid[0:HEIGHT, 0:WIDTH]
    canvas[(xx - 50) ** 2 + (yy - 33) ** 2 <= 12**2] = foreground
    # dot
    canvas[40, 30] = foreground
    return canvas


@pytest.fixture
def shapes_png(tmp_path: Path) -> Path:
    """RGB image with white shapes on black."""
    grey = draw_shapes()
    path = tmp_path / "shapes.png"
    Image.fromarray(np.stack([grey] * 3, axis=-1)).save(path)
    return path


@pytest.fixture
def dark_shapes_png(tmp_path: Path) -> Path:
    """RGB image with black shapes on white."""
    grey = draw_shapes(foreground=0, background=255)
    path = tmp_path / "dark.png"
    Image.fromarray(np.stack([grey] * 3, axis=-1)).save(path)
    return path


def make_processor(**overrides: object) -> ImageProcessor:
    """Create a quiet processor with the given settings sections."""
    settings = ContourizerSettings(**overrides)  # type: ignore[arg-type]
    return ImageProcessor(settings, quiet=True)


class TestRun:
    """Tests for tracing and classifying a decoded image."""

    def test_finds_every_shape(self, shapes_png: Path) -> None:
        """Test that each drawn shape becomes one contour."""
        finder = make_processor().run(shapes_png)
        assert len(finder.contours) == 5
        assert finder.is_simplified

    def test_discovery_order(self, shapes_png: Path) -> None:
        """Test that contours follow the column-major scan."""
        finder = make_processor().run(shapes_png)
        seeds = [c[0].to_tuple() for c in finder.contours]
        # triangle (x=3), square (x=5), rectangle (x=25), dot (x=30), disk (x=38)
        assert seeds[:4] == [(3, 37), (5, 16), (25, 15), (30, 40)]
        assert seeds[4][0] == 38

    def test_shape_buckets(self, shapes_png: Path) -> None:
        """Test that the drawn primitives land in their buckets."""
        shapes = make_processor().run(shapes_png).collection
        assert len(shapes.points) == 1
        assert len(shapes.triangles) == 1
        assert len(shapes.squares) == 1
        assert len(shapes.rectangles) == 1
        assert shapes.total == 5

    def test_disk_is_circle(self, shapes_png: Path) -> None:
        """Test that a rasterized disk approximates to a circle."""
        shapes = make_processor().run(shapes_png).collection
        assert len(shapes.circles) == 1

    def test_wrong_polarity_finds_background(self, dark_shapes_png: Path) -> None:
        """Test that without inversion the light background is traced."""
        finder = make_processor().run(dark_shapes_png)
        assert finder.contours[0][0].to_tuple() == (0, HEIGHT - 1)

    def test_invert(self, dark_shapes_png: Path) -> None:
        """Test that inverting traces dark shapes on a light background."""
        processor = make_processor(preprocess=PreprocessConfig(invert=True))
        finder = processor.run(dark_shapes_png)
        assert len(finder.contours) == 5
        assert len(finder.collection.squares) == 1

    def test_blur_removes_dot(self, shapes_png: Path) -> None:
        """Test that blurring erases single-pixel specks."""
        processor = make_processor(preprocess=PreprocessConfig(blur=True, threshold=100))
        finder = processor.run(shapes_png)
        assert len(finder.collection.points) == 0
        assert len(finder.collection.squares) == 1

    def test_zero_epsilon_keeps_staircase(self, shapes_png: Path) -> None:
        """Test that a zero tolerance leaves more vertices than the default."""
        default = make_processor().run(shapes_png)
        exact = make_processor(simplify=SimplifyConfig(epsilon=0.0)).run(shapes_png)
        default_vertices = sum(len(c) for c in default.contours)
        exact_vertices = sum(len(c) for c in exact.contours)
        assert exact_vertices > default_vertices


class TestProcess:
    """Tests for ImageProcessor.process."""

    def test_writes_json_next_to_input(self, shapes_png: Path) -> None:
        """Test default output path and JSON content."""
        stats = make_processor().process(shapes_png)
        output = ResultWriter.get_output_path(shapes_png, OutputFormat.JSON)
        assert stats.output_path == output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["width"] == WIDTH
        assert data["height"] == HEIGHT
        assert len(data["contours"]) == 5
        assert data["counts"]["squares"] == 1

    def test_writes_svg(self, shapes_png: Path, tmp_path: Path) -> None:
        """Test SVG output to an explicit path."""
        output = tmp_path / "result.svg"
        processor = make_processor(output=OutputConfig(format=OutputFormat.SVG))
        processor.process(shapes_png, output_path=output)
        text = output.read_text(encoding="utf-8")
        assert f'viewBox="0 0 {WIDTH} {HEIGHT}"' in text
        assert 'class="rectangles"' in text
        assert '<rect class="points" x="30" y="40"' in text

    def test_dry_run(self, shapes_png: Path, tmp_path: Path) -> None:
        """Test that a dry run writes nothing but still counts shapes."""
        output = tmp_path / "should-not-exist.json"
        stats = make_processor().process(shapes_png, output_path=output, dry_run=True)
        assert not output.exists()
        assert stats.output_path is None
        assert stats.shapes_found == 5

    def test_stats(self, shapes_png: Path) -> None:
        """Test the collected statistics."""
        stats = make_processor().process(shapes_png, dry_run=True)
        assert stats.images_processed == 1
        assert stats.contours_found == 5
        assert stats.vertices_before > stats.vertices_after
        assert stats.shape_counts["points"] == 1
        assert stats.image_size == (WIDTH, HEIGHT)
        assert stats.image_mode == "RGB"
        assert stats.error_count == 0
        assert stats.duration_seconds >= 0.0

    def test_log_file(self, shapes_png: Path, tmp_path: Path) -> None:
        """Test that detailed logs are written to the log file."""
        log_file = tmp_path / "run.log"
        processor = make_processor(logging=LoggingConfig(log_file=log_file))
        processor.process(shapes_png, dry_run=True)
        text = log_file.read_text(encoding="utf-8")
        assert "Image loaded" in text
        assert "Shapes classified" in text

    def test_corrupt_image(self, tmp_path: Path) -> None:
        """Test that decode failures are logged and re-raised."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"\x89PNG but not really")
        processor = make_processor()
        with pytest.raises(ImageLoadError):
            processor.process(path)
        stats = processor.extraction_logger.stats
        assert stats.error_count == 1
        assert stats.errors[0][0] == str(path)
