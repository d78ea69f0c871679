"""Image reader for loading raster files.

This module provides the ImageReader class for decoding image files with
Pillow and converting them into the ImageData domain model.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from contourizer.domain import ImageData
from contourizer.exceptions import ImageLoadError


class ImageReader:
    """Loads raster images and converts them to pixel buffers.

    Every image is decoded to RGB, or RGBA when it has transparency, so
    files always go through the luminance threshold.

    Example:
        with ImageReader(Path("drawing.png")) as reader:
            image = reader.to_image_data()
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Load and decode the image file.

        Raises:
            FileNotFoundError: If the image file does not exist
            ImageLoadError: If the file cannot be decoded
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            with Image.open(self._image_path) as source:
                source.load()
                self._image = self._normalize(source)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    @staticmethod
    def _normalize(image: Image.Image) -> Image.Image:
        """Convert any image mode to RGB or RGBA."""
        has_alpha = image.mode in ("RGBA", "LA", "PA") or (
            image.mode == "P" and "transparency" in image.info
        )
        return image.convert("RGBA" if has_alpha else "RGB")

    def _require_loaded(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def width(self) -> int:
        """Return image width in pixels.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._require_loaded().width

    @property
    def height(self) -> int:
        """Return image height in pixels.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._require_loaded().height

    @property
    def mode(self) -> str:
        """Return the decoded image mode ('RGB' or 'RGBA').

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._require_loaded().mode

    def to_image_data(self) -> ImageData:
        """Convert the decoded image to an interleaved pixel buffer.

        Returns:
            ImageData with 3 or 4 channels

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        image = self._require_loaded()
        pixels = np.asarray(image, dtype=np.uint8)
        return ImageData(pixels.reshape(-1), image.width, image.height)

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
