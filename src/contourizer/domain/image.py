"""Raster representations consumed by the contour pipeline.

This module defines the two pixel grids of the pipeline:
- ImageData: The caller's interleaved pixel buffer with its dimensions
- BitMask: The single-channel foreground/background mask derived from it

Any fixed-length, indexable numeric buffer is accepted (list, bytes,
bytearray, array.array, numpy.ndarray); it is converted once with
numpy.asarray so the rest of the pipeline sees a single buffer type.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from contourizer.domain.contour import Point
from contourizer.exceptions import InvalidImageBuffer, ZeroSizeImage

FOREGROUND = 0
BACKGROUND = 255


def as_pixel_array(data: Any) -> np.ndarray:
    """Convert any supported pixel buffer to a flat numpy array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    return np.asarray(data).reshape(-1)


class ImageData:
    """An interleaved pixel buffer with known dimensions.

    The channel count is implied by the buffer length:
    ``channels == len(data) // (width * height)``.

    Attributes:
        data: Flat buffer, row-major, channels interleaved per pixel
        width: Number of columns
        height: Number of rows

    Raises:
        ZeroSizeImage: If width or height is not positive
        InvalidImageBuffer: If the buffer length is not a positive multiple
            of width * height
    """

    def __init__(self, data: Sequence[float] | np.ndarray, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ZeroSizeImage(width, height)

        array = as_pixel_array(data)
        pixel_count = width * height
        if array.size == 0 or array.size % pixel_count != 0:
            raise InvalidImageBuffer(array.size, width, height)

        self.data = array
        self.width = int(width)
        self.height = int(height)
        self.channels = array.size // pixel_count

    @classmethod
    def from_any(cls, image: Any) -> "ImageData":
        """Build from any object exposing ``data``, ``width`` and ``height``.

        Args:
            image: ImageData instance or an ImageData-like object

        Returns:
            ImageData instance
        """
        if isinstance(image, cls):
            return image
        return cls(image.data, image.width, image.height)

    def to_array(self) -> np.ndarray:
        """Return the buffer shaped as (height, width, channels)."""
        return self.data.reshape(self.height, self.width, self.channels)


class BitMask:
    """Single-channel mask where 0 is foreground and anything else background.

    The underlying array is read-only; a mask is produced once and never
    modified afterwards.
    """

    def __init__(self, values: np.ndarray, width: int, height: int) -> None:
        """Initialize the mask.

        Args:
            values: Flat buffer of length width * height
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidImageBuffer: If the buffer length is not width * height
        """
        values = as_pixel_array(values)
        if values.size != width * height:
            raise InvalidImageBuffer(values.size, width, height)

        self._values = values.copy()
        self._values.flags.writeable = False
        self.width = width
        self.height = height

    def __len__(self) -> int:
        return int(self._values.size)

    @property
    def values(self) -> np.ndarray:
        """Read-only flat view of the mask."""
        return self._values

    def point_to_index(self, point: Point) -> int:
        """Convert a point to its row-major index."""
        return point.y * self.width + point.x

    def index_to_point(self, index: int) -> Point:
        """Convert a row-major index back to a point."""
        return Point(index % self.width, index // self.width)

    def in_bounds(self, point: Point) -> bool:
        """Check whether a point lies inside the grid."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_foreground(self, point: Point) -> bool:
        """Check whether a point is a foreground pixel.

        Points outside the grid are background; the buffer is never read
        at such locations.
        """
        if not self.in_bounds(point):
            return False
        return bool(self._values[point.y * self.width + point.x] == FOREGROUND)

    def foreground_count(self) -> int:
        """Count foreground pixels in the mask."""
        return int(np.count_nonzero(self._values == FOREGROUND))
