"""Shape classification of simplified contours.

Each contour goes to the first bucket whose rule matches:

1. one point -> points
2. two points -> lines
3. three points -> triangles
4. four points forming a rectangle -> squares if the sides are equal,
   rectangles otherwise
5. a circle -> circles
6. anything else -> polygons
"""

import logging
from collections.abc import Iterable

from contourizer.config import ShapeConfig
from contourizer.core.geometry import is_circle, is_rectangle, is_square
from contourizer.domain import Contour, ShapeCollection, ShapeKind

logger = logging.getLogger(__name__)


class ShapeClassifier:
    """Buckets contours into geometric primitives.

    The classifier is stateless apart from its tolerances. Contours are
    expected to be simplified already; raw traced contours almost always
    fall through to the polygon bucket.
    """

    def __init__(self, config: ShapeConfig | None = None) -> None:
        self.config = config or ShapeConfig()

    def classify(self, contour: Contour) -> ShapeKind:
        """Determine the shape kind of a single contour.

        Args:
            contour: Simplified contour

        Returns:
            The matching ShapeKind
        """
        length = len(contour)

        if length == 1:
            return ShapeKind.POINT
        if length == 2:
            return ShapeKind.LINE
        if length == 3:
            return ShapeKind.TRIANGLE
        if length == 4 and is_rectangle(contour, self.config.right_angle_tolerance):
            if is_square(
                contour,
                self.config.right_angle_tolerance,
                self.config.square_tolerance,
            ):
                return ShapeKind.SQUARE
            return ShapeKind.RECTANGLE
        if is_circle(
            contour,
            min_vertices=self.config.circle_min_vertices,
            radius_tolerance=self.config.circle_radius_tolerance,
            min_circularity=self.config.circle_min_circularity,
        ):
            return ShapeKind.CIRCLE
        return ShapeKind.POLYGON

    def collect(self, contours: Iterable[Contour]) -> ShapeCollection:
        """Classify contours into a new shape collection.

        Args:
            contours: Simplified contours, in discovery order

        Returns:
            ShapeCollection with every non-empty contour in exactly one bucket
        """
        collection = ShapeCollection()
        for contour in contours:
            if not len(contour):
                continue
            collection.add(self.classify(contour), contour)

        logger.debug("Classified shapes: %s", collection.counts())
        return collection
