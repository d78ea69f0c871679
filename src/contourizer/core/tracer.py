"""Moore-Neighbor boundary tracing with Jacob's stopping criterion.

Given a seed pixel that the scan entered from below, the tracer walks the
outer boundary of the seed's 8-connected component clockwise, probing the
Moore neighbourhood of the current boundary pixel one neighbour at a time:

    Set B to the seed s, p = s, b = the pixel below s.
    Repeat:
        c = next clockwise neighbour of p, starting after b.
        If c is foreground: b stays the last background neighbour probed,
            p = c, and c is appended to B unless already visited.
        Else: b = c.
    Until (p, b) == (s, pixel below s).

The stopping test is Jacob's criterion: the seed must be re-entered from
the same side it was first entered from, which distinguishes a full
revolution from passing through the seed along a thin, one-pixel-wide part.
The walk is deterministic, so a (b, p) pair reached twice after a move means
it has closed on a cycle that skips the seed's entry state; the trace ends
there as well.
"""

import logging

from contourizer.domain import BitMask, Contour, Point

logger = logging.getLogger(__name__)

# Offset of the last probed neighbour (relative to the boundary pixel)
# mapped to the offset of the next neighbour to probe, going clockwise
# with the y axis pointing down.
CLOCKWISE_OFFSETS: dict[tuple[int, int], tuple[int, int]] = {
    (1, 0): (1, 1),  # right -> right-down
    (1, 1): (0, 1),  # right-down -> down
    (0, 1): (-1, 1),  # down -> down-left
    (-1, 1): (-1, 0),  # down-left -> left
    (-1, 0): (-1, -1),  # left -> left-top
    (-1, -1): (0, -1),  # left-top -> top
    (0, -1): (1, -1),  # top -> top-right
    (1, -1): (1, 0),  # top-right -> right
}

NEIGHBOURHOOD_SIZE = len(CLOCKWISE_OFFSETS)

TraceState = tuple[Point, Point]


def clockwise_neighbor(previous: Point, boundary: Point) -> Point:
    """Return the neighbour of ``boundary`` that follows ``previous`` clockwise.

    Args:
        previous: Last probed pixel, one of the 8 neighbours of boundary
        boundary: Current boundary pixel

    Returns:
        Next neighbour to probe (may lie outside the image)

    Raises:
        KeyError: If previous is not a Moore neighbour of boundary
    """
    dx, dy = CLOCKWISE_OFFSETS[(previous.x - boundary.x, previous.y - boundary.y)]
    return Point(boundary.x + dx, boundary.y + dy)


class BoundaryTracer:
    """Traces the closed boundary of a foreground component.

    The tracer shares the visited set of the extraction run that owns it:
    every boundary pixel it emits is recorded there, so a pixel shared by
    two touching traces is emitted only once.
    """

    def __init__(self, mask: BitMask, visited: set[int]) -> None:
        """Initialize the tracer.

        Args:
            mask: Bit mask to trace on
            visited: Mask indices already emitted in this extraction run
        """
        self._mask = mask
        self._visited = visited
        # one state per (boundary pixel, backtrack direction)
        self._max_steps = NEIGHBOURHOOD_SIZE * mask.width * mask.height + NEIGHBOURHOOD_SIZE

    def trace(self, first: Point) -> Contour:
        """Trace the contour of the component containing ``first``.

        The seed must be foreground and must have been discovered from below,
        i.e. the pixel under it is background or outside the image.

        Args:
            first: Seed pixel; becomes element 0 of the contour

        Returns:
            Contour in clockwise order starting at ``first``. An isolated
            pixel yields a one-point contour.
        """
        first_previous = Point(first.x, first.y + 1)
        stop: TraceState = (first_previous, first)

        contour = Contour([first])
        self._visited.add(self._mask.point_to_index(first))
        previous, boundary = stop
        seen: set[TraceState] = set()

        for _ in range(self._max_steps):
            previous, boundary = self._advance(previous, boundary, stop)
            if (previous, boundary) == stop:
                return contour

            state = (previous, boundary)
            if state in seen:
                logger.debug(
                    "Trace from (%d, %d) closed without re-entering its seed", first.x, first.y
                )
                return contour
            seen.add(state)

            index = self._mask.point_to_index(boundary)
            if index not in self._visited:
                self._visited.add(index)
                contour.append(boundary)

        logger.warning(
            "Trace from (%d, %d) did not return to its seed after %d steps",
            first.x,
            first.y,
            self._max_steps,
        )
        return contour

    def _advance(self, previous: Point, boundary: Point, stop: TraceState) -> TraceState:
        """Rotate clockwise around ``boundary`` to the next foreground pixel.

        Out-of-bounds neighbours count as background. Rotation ends early when
        the stopping state is reached.

        Returns:
            New (previous, boundary) pair. ``previous`` is the last background
            neighbour probed before the new boundary pixel.
        """
        for _ in range(NEIGHBOURHOOD_SIZE):
            candidate = clockwise_neighbor(previous, boundary)
            if self._mask.is_foreground(candidate):
                return previous, candidate

            previous = candidate
            if (previous, boundary) == stop:
                return stop

        # no foreground neighbour at all
        return stop
