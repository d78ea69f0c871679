"""Public entry point: contour finding and shape approximation for one image.

A ContourFinder preprocesses its image and extracts all contours as soon as
it is constructed. Simplification and approximation are later passes over
the same in-memory contours.

Example:
    finder = ContourFinder(ImageData(pixels, width=64, height=64), {"threshold": 100})
    finder.contours        # traced contours, discovery order
    finder.simplify(2.0)   # in place, returns the finder
    shapes = finder.approximate()
    shapes.rectangles
"""

import logging
from collections.abc import Mapping
from typing import Any

from contourizer.config import PreprocessConfig, ShapeConfig
from contourizer.core.classifier import ShapeClassifier
from contourizer.core.extractor import ContourExtractor
from contourizer.core.preprocess import Preprocessor
from contourizer.core.simplify import simplify_contours
from contourizer.domain import BitMask, Contour, ImageData, Point, ShapeCollection
from contourizer.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1.0


def _coerce_options(options: PreprocessConfig | Mapping[str, Any] | None) -> PreprocessConfig:
    """Build a PreprocessConfig from a config, a plain mapping or None.

    Mapping entries set to None fall back to their defaults.

    Raises:
        ConfigurationError: If the mapping contains unknown keys
    """
    if options is None:
        return PreprocessConfig()
    if isinstance(options, PreprocessConfig):
        return options

    unknown = set(options) - set(PreprocessConfig.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown preprocessing options: {', '.join(sorted(unknown))}")

    return PreprocessConfig(**{key: value for key, value in options.items() if value is not None})


class ContourFinder:
    """Traces contours of a bi-level image and classifies them as shapes.

    Each instance owns its mask, visited set, contours and shape collection.
    Instances are independent, but ``simplify`` and ``approximate`` mutate
    the instance and must not be called concurrently on the same one.

    Attributes:
        options: Preprocessing options in effect
        mask: Bit mask the contours were traced on
        collection: Shape buckets; empty until approximate() is called
    """

    def __init__(
        self,
        image: Any,
        options: PreprocessConfig | Mapping[str, Any] | None = None,
        shape_config: ShapeConfig | None = None,
    ) -> None:
        """Preprocess the image and extract its contours.

        Args:
            image: ImageData, or any object with ``data``, ``width`` and
                ``height`` attributes
            options: Preprocessing options (``blur``, ``threshold``, ``invert``)
            shape_config: Tolerances for shape approximation

        Raises:
            ZeroSizeImage: If width or height is 0
            InvalidImageBuffer: If the buffer length is not a multiple of
                width * height
            ConfigurationError: If options contains unknown keys
        """
        self.options = _coerce_options(options)
        self._image = ImageData.from_any(image)
        self._classifier = ShapeClassifier(shape_config)
        self._is_simplified = False

        self.mask: BitMask = Preprocessor(self.options).run(self._image)
        self.collection = ShapeCollection()

        extractor = ContourExtractor(self.mask)
        self._contours: list[Contour] = extractor.extract()
        self.visited_count = extractor.visited_count

        logger.debug(
            "Found %d contours in %dx%d image",
            len(self._contours),
            self._image.width,
            self._image.height,
        )

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def channels(self) -> int:
        return self._image.channels

    @property
    def contours(self) -> tuple[Contour, ...]:
        """Contours in discovery order (read-only view)."""
        return tuple(self._contours)

    @property
    def is_simplified(self) -> bool:
        """Whether simplify() has been applied at least once."""
        return self._is_simplified

    def point_to_index(self, point: Point) -> int:
        """Convert a point to its row-major pixel index."""
        return self.mask.point_to_index(point)

    def index_to_point(self, index: int) -> Point:
        """Convert a row-major pixel index to a point."""
        return self.mask.index_to_point(index)

    def simplify(self, epsilon: float = DEFAULT_EPSILON) -> "ContourFinder":
        """Simplify all contours in place with Douglas-Peucker.

        Repeated calls compound: simplifying again with a smaller epsilon
        does not restore points removed earlier.

        Args:
            epsilon: Tolerance in pixels

        Returns:
            This finder, for chaining
        """
        simplify_contours(self._contours, epsilon)
        self._is_simplified = True

        logger.debug(
            "Simplified %d contours (epsilon=%s, vertices=%d)",
            len(self._contours),
            epsilon,
            sum(len(c) for c in self._contours),
        )
        return self

    def approximate(self) -> ShapeCollection:
        """Classify the contours into shape buckets.

        Contours are simplified with the default tolerance first if
        simplify() has not been called yet. The collection is rebuilt on
        every call.

        Returns:
            The populated shape collection (also stored in ``collection``)
        """
        if not self._is_simplified:
            self.simplify()

        self.collection = self._classifier.collect(self._contours)
        return self.collection
