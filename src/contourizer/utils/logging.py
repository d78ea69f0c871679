"""Logging utilities for Contourizer."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from contourizer.domain import ShapeCollection


@dataclass
class ExtractionStats:
    """Statistics from an extraction run."""

    images_processed: int = 0
    contours_found: int = 0
    vertices_before: int = 0
    vertices_after: int = 0
    error_count: int = 0
    shape_counts: dict[str, int] = field(default_factory=dict)
    errors: list[tuple[str, str]] = field(default_factory=list)
    output_path: Path | None = None
    image_size: tuple[int, int] | None = None
    image_mode: str | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def shapes_found(self) -> int:
        """Total number of classified shapes."""
        return sum(self.shape_counts.values())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("contourizer")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExtractionLogger:
    """Logger for tracking extraction progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExtractionStats()

    def log_image_loaded(self, path: str, width: int, height: int, mode: str) -> None:
        """Log a decoded input image."""
        self._logger.info("Image loaded", path=path, width=width, height=height, mode=mode)
        self._stats.image_size = (width, height)
        self._stats.image_mode = mode

    def log_contours_extracted(self, path: str, contour_count: int, duration_ms: float) -> None:
        """Log the result of contour extraction."""
        self._logger.info(
            "Contours extracted",
            path=path,
            contours=contour_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.contours_found += contour_count

    def log_simplified(self, path: str, epsilon: float, before: int, after: int) -> None:
        """Log a simplification pass."""
        self._logger.debug(
            "Contours simplified",
            path=path,
            epsilon=epsilon,
            vertices_before=before,
            vertices_after=after,
        )
        self._stats.vertices_before += before
        self._stats.vertices_after += after

    def log_shapes(self, path: str, collection: ShapeCollection) -> None:
        """Log shape classification counts."""
        counts = collection.counts()
        self._logger.info("Shapes classified", path=path, **counts)
        for kind, count in counts.items():
            self._stats.shape_counts[kind] = self._stats.shape_counts.get(kind, 0) + count
        self._stats.images_processed += 1

    def log_image_error(
        self,
        path: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log an image processing error."""
        self._logger.error(
            "Image processing failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path, str(error)))

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
