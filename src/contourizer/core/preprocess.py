"""Pixel preprocessing: optional box blur followed by a luminance threshold.

Single-channel buffers are taken as a ready-made mask and passed through.
Multi-channel buffers are (optionally) blurred with a 3x3 box filter and then
thresholded on Rec. 709 luminance into a 0/255 mask.

All functions are pure; the caller's buffer is never modified.
"""

import logging

import numpy as np

from contourizer.config import PreprocessConfig
from contourizer.domain import BACKGROUND, FOREGROUND, BitMask, ImageData

logger = logging.getLogger(__name__)

# Rec. 709 luma coefficients for R, G, B
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def box_blur(pixels: np.ndarray) -> np.ndarray:
    """Average every channel of every pixel with its 8 Moore neighbours.

    Neighbours outside the image are clamped to the nearest edge pixel, so
    every output value is the mean of exactly nine samples.

    Args:
        pixels: Array of shape (height, width, channels)

    Returns:
        Float array of the same shape
    """
    height, width = pixels.shape[:2]
    padded = np.pad(pixels.astype(np.float64), ((1, 1), (1, 1), (0, 0)), mode="edge")

    total = np.zeros((height, width, pixels.shape[2]), dtype=np.float64)
    for dy in range(3):
        for dx in range(3):
            total += padded[dy : dy + height, dx : dx + width]

    return total / 9.0


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Compute per-pixel luminance.

    Images with at least three channels use ``0.2126*R + 0.7152*G + 0.0722*B``;
    channels after the third (e.g. alpha) are ignored. Two-channel images
    (grey + alpha) use the grey channel as is.

    Args:
        pixels: Array of shape (height, width, channels)

    Returns:
        Float array of shape (height, width)
    """
    pixels = pixels.astype(np.float64)
    if pixels.shape[2] < 3:
        return pixels[..., 0]

    r_weight, g_weight, b_weight = LUMA_WEIGHTS
    return r_weight * pixels[..., 0] + g_weight * pixels[..., 1] + b_weight * pixels[..., 2]


def threshold_luminance(
    lum: np.ndarray, threshold: float, invert: bool = False
) -> np.ndarray:
    """Convert luminance values into a 0/255 mask.

    Args:
        lum: Luminance array of any shape
        threshold: Cutoff on the 0-255 scale
        invert: If True, pixels below the threshold become foreground

    Returns:
        uint8 array with FOREGROUND (0) where ``lum >= threshold``
        (or ``lum < threshold`` when inverted) and BACKGROUND (255) elsewhere
    """
    foreground = lum >= threshold
    if invert:
        foreground = ~foreground
    return np.where(foreground, FOREGROUND, BACKGROUND).astype(np.uint8)


class Preprocessor:
    """Converts an ImageData buffer into a BitMask.

    Example:
        preprocessor = Preprocessor(PreprocessConfig(blur=True, threshold=100))
        mask = preprocessor.run(ImageData(rgba_bytes, width, height))
    """

    def __init__(self, config: PreprocessConfig | None = None) -> None:
        self.config = config or PreprocessConfig()

    def run(self, image: ImageData) -> BitMask:
        """Produce the bit mask for an image.

        Args:
            image: Source pixel buffer

        Returns:
            BitMask over the same width and height
        """
        if image.channels == 1:
            return BitMask(image.data, image.width, image.height)

        pixels = image.to_array()
        if self.config.blur:
            pixels = box_blur(pixels)

        mask = threshold_luminance(
            luminance(pixels), self.config.threshold, self.config.invert
        )

        logger.debug(
            "Thresholded %dx%d image with %d channels at %.1f (blur=%s, invert=%s)",
            image.width,
            image.height,
            image.channels,
            self.config.threshold,
            self.config.blur,
            self.config.invert,
        )
        return BitMask(mask.reshape(-1), image.width, image.height)
