"""Contour extraction: find every foreground component and trace it once.

The mask is scanned column by column, left to right, each column bottom to
top. The first pixel found for a component is therefore its leftmost column's
bottommost pixel, which is the "entered from below" seed the tracer expects.
"""

import logging
from collections.abc import Iterator

from contourizer.core.tracer import BoundaryTracer
from contourizer.domain import FOREGROUND, BitMask, Contour, Point

logger = logging.getLogger(__name__)


class ContourExtractor:
    """Scans a bit mask and traces one contour per connected component.

    Each extractor owns the visited set of its run; it is not reused or
    shared between runs.

    Example:
        extractor = ContourExtractor(mask)
        contours = extractor.extract()
    """

    def __init__(self, mask: BitMask) -> None:
        self._mask = mask
        self._visited: set[int] = set()
        self._tracer = BoundaryTracer(mask, self._visited)

    @property
    def visited_count(self) -> int:
        """Number of mask pixels emitted in some contour so far."""
        return len(self._visited)

    def is_visited(self, point: Point) -> bool:
        """Check whether a pixel was already emitted in some contour."""
        return self._mask.point_to_index(point) in self._visited

    def iter_contours(self) -> Iterator[Contour]:
        """Scan the mask and yield contours in discovery order.

        Once a run of foreground pixels in a column hits an already visited
        pixel or yields a seed, the rest of that run belongs to a traced
        component and is skipped. Any background pixel ends the run.

        Yields:
            One contour per connected foreground component
        """
        width = self._mask.width
        height = self._mask.height
        values = self._mask.values
        for x in range(width):
            skipping = False
            for y in range(height - 1, -1, -1):
                index = y * width + x

                if values[index] != FOREGROUND:
                    skipping = False
                    continue

                if skipping or index in self._visited:
                    skipping = True
                    continue

                self._visited.add(index)
                yield self._tracer.trace(Point(x, y))
                # the rest of this run belongs to the component just traced
                skipping = True

    def extract(self) -> list[Contour]:
        """Trace every component of the mask.

        Returns:
            Contours in discovery order
        """
        contours = list(self.iter_contours())
        logger.debug(
            "Extracted %d contours from %dx%d mask (%d boundary pixels)",
            len(contours),
            self._mask.width,
            self._mask.height,
            self.visited_count,
        )
        return contours
