"""Polyline simplification of traced contours.

Reduction itself is Douglas-Peucker as implemented by shapely; this module
only adapts implicitly closed contours to it. The ring is closed by
repeating the first point, simplified as an open line (so the seed pixel is
always kept as an endpoint), and the repeated point is removed again.
"""

from shapely.geometry import LineString

from contourizer.domain import Contour, Point


def simplify_contour(contour: Contour, epsilon: float = 1.0) -> Contour:
    """Simplify a contour with the Douglas-Peucker algorithm.

    Args:
        contour: Implicitly closed contour
        epsilon: Maximum distance in pixels between the original boundary
            and the simplified one

    Returns:
        New contour whose points are a subset of the input points, in the
        same order and starting at the same point. Contours with fewer
        than 3 points are returned unchanged.
    """
    if len(contour) < 3:
        return Contour(list(contour.points))

    ring = [*contour.to_tuples(), contour[0].to_tuple()]
    simplified = LineString(ring).simplify(epsilon, preserve_topology=False)

    coords = [(round(x), round(y)) for x, y in simplified.coords]
    if len(coords) > 1 and coords[-1] == coords[0]:
        coords.pop()
    if not coords:
        coords = [contour[0].to_tuple()]

    return Contour([Point(x, y) for x, y in coords])


def simplify_contours(contours: list[Contour], epsilon: float = 1.0) -> None:
    """Simplify a list of contours in place.

    Args:
        contours: Contours to replace with their simplified versions
        epsilon: Douglas-Peucker tolerance in pixels
    """
    for index, contour in enumerate(contours):
        contours[index] = simplify_contour(contour, epsilon)
