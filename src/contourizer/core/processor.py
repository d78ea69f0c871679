"""Processing orchestration for the image-to-shapes pipeline.

This module coordinates the full workflow for an image file: decode, trace,
simplify, classify and write the result.

Key components:
- ImageProcessor: Main orchestrator class for image processing
"""

import time
import traceback
from pathlib import Path

from contourizer.config import ContourizerSettings, OutputFormat
from contourizer.core.finder import ContourFinder
from contourizer.exceptions import ContourizerError
from contourizer.io.reader import ImageReader
from contourizer.io.writer import ResultWriter
from contourizer.utils import ExtractionLogger, ExtractionStats, configure_logging


class ImageProcessor:
    """Orchestrates contour extraction for image files.

    Manages the complete workflow:
    1. Load and decode the image
    2. Threshold and trace contours
    3. Simplify contours
    4. Classify contours into shapes
    5. Save the result (unless running dry)

    Example:
        settings = ContourizerSettings()
        processor = ImageProcessor(settings)
        stats = processor.process(
            image_path=Path("drawing.png"),
            output_path=Path("drawing-contours.svg"),
        )
    """

    def __init__(self, config: ContourizerSettings, quiet: bool = False) -> None:
        """Initialize the image processor with configuration.

        Args:
            config: Contourizer settings
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.extraction_logger = ExtractionLogger(self.logger)
        self.writer = ResultWriter(stroke_width=config.output.stroke_width)

    def run(self, image_path: Path) -> ContourFinder:
        """Trace, simplify and classify one image without writing anything.

        Args:
            image_path: Path to the input image

        Returns:
            Approximated ContourFinder

        Raises:
            FileNotFoundError: If the image does not exist
            ImageLoadError: If the image cannot be decoded
        """
        with ImageReader(image_path) as reader:
            self.extraction_logger.log_image_loaded(
                str(image_path), reader.width, reader.height, reader.mode
            )
            image = reader.to_image_data()

        start = time.time()
        finder = ContourFinder(image, self.config.preprocess, self.config.shapes)
        self.extraction_logger.log_contours_extracted(
            str(image_path), len(finder.contours), (time.time() - start) * 1000
        )

        before = sum(len(c) for c in finder.contours)
        finder.simplify(self.config.simplify.epsilon)
        self.extraction_logger.log_simplified(
            str(image_path),
            self.config.simplify.epsilon,
            before,
            sum(len(c) for c in finder.contours),
        )

        self.extraction_logger.log_shapes(str(image_path), finder.approximate())
        return finder

    def process(
        self,
        image_path: Path,
        output_path: Path | None = None,
        dry_run: bool = False,
    ) -> ExtractionStats:
        """Process an image file end to end.

        Args:
            image_path: Path to the input image
            output_path: Path for the result file (auto-generated if None)
            dry_run: If True, skip writing the result

        Returns:
            ExtractionStats with counts and timing

        Raises:
            ContourizerError: If the image cannot be loaded or the result saved
            FileNotFoundError: If the image does not exist
        """
        stats = self.extraction_logger.stats
        stats.start_time = time.time()

        fmt: OutputFormat = self.config.output.format
        if output_path is None:
            output_path = ResultWriter.get_output_path(image_path, fmt)

        self.logger.info(
            "Starting image processing",
            input=str(image_path),
            output=None if dry_run else str(output_path),
            format=fmt.value,
        )

        try:
            finder = self.run(image_path)
            if not dry_run:
                self.writer.write(finder, output_path, fmt)
                stats.output_path = output_path
        except ContourizerError as e:
            self.extraction_logger.log_image_error(str(image_path), e, traceback.format_exc())
            raise
        finally:
            stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            duration_s=round(stats.duration_seconds, 3),
            contours=stats.contours_found,
            shapes=stats.shapes_found,
        )
        return stats
