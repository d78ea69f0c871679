"""Geometric measures and shape predicates for simplified contours.

This module provides the pure functions the shape classifier dispatches on:
- Signed area (shoelace formula), perimeter and vertex centroid
- Corner angles of a closed polygon
- is_rectangle / is_square / is_circle predicates

Polygons are implicitly closed point sequences in pixel coordinates.
All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from contourizer.domain import Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    With the y axis pointing down (image coordinates), clockwise-on-screen
    polygons have a positive area.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square pixels. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        4.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def perimeter(points: Sequence[Point]) -> float:
    """Length of the closed polygon boundary."""
    n = len(points)
    if n < 2:
        return 0.0
    return sum(
        math.hypot(points[(i + 1) % n].x - points[i].x, points[(i + 1) % n].y - points[i].y)
        for i in range(n)
    )


def centroid(points: Sequence[Point]) -> tuple[float, float]:
    """Mean of the polygon vertices.

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute centroid of an empty polygon")
    return (
        sum(p.x for p in points) / len(points),
        sum(p.y for p in points) / len(points),
    )


def side_lengths(points: Sequence[Point]) -> list[float]:
    """Lengths of the polygon edges, edge i running from vertex i to i+1."""
    n = len(points)
    return [
        math.hypot(points[(i + 1) % n].x - points[i].x, points[(i + 1) % n].y - points[i].y)
        for i in range(n)
    ]


def corner_angles(points: Sequence[Point]) -> list[float]:
    """Angle in degrees between the two edges meeting at each vertex.

    Zero-length edges give an angle of 0.

    Args:
        points: Vertices of a closed polygon

    Returns:
        One angle in [0, 180] per vertex
    """
    n = len(points)
    angles: list[float] = []
    for i in range(n):
        prev_pt = points[i - 1]
        curr_pt = points[i]
        next_pt = points[(i + 1) % n]

        ax, ay = prev_pt.x - curr_pt.x, prev_pt.y - curr_pt.y
        bx, by = next_pt.x - curr_pt.x, next_pt.y - curr_pt.y
        norm = math.hypot(ax, ay) * math.hypot(bx, by)
        if norm == 0:
            angles.append(0.0)
            continue

        cos_angle = max(-1.0, min(1.0, (ax * bx + ay * by) / norm))
        angles.append(math.degrees(math.acos(cos_angle)))

    return angles


def is_rectangle(points: Sequence[Point], angle_tolerance: float = 10.0) -> bool:
    """Check whether a 4-vertex polygon is a rectangle.

    Args:
        points: Polygon vertices
        angle_tolerance: Allowed deviation from 90 degrees at each corner

    Returns:
        True if there are exactly four vertices and every corner is a right
        angle within tolerance

    Examples:
        >>> is_rectangle([Point(0, 0), Point(4, 0), Point(4, 2), Point(0, 2)])
        True
    """
    if len(points) != 4:
        return False
    return all(abs(angle - 90.0) <= angle_tolerance for angle in corner_angles(points))


def is_square(
    points: Sequence[Point],
    angle_tolerance: float = 10.0,
    side_tolerance: float = 0.1,
) -> bool:
    """Check whether a 4-vertex polygon is a square.

    Args:
        points: Polygon vertices
        angle_tolerance: Allowed deviation from 90 degrees at each corner
        side_tolerance: Allowed relative difference between the longest and
            shortest side

    Returns:
        True if the polygon is a rectangle with (nearly) equal sides
    """
    if not is_rectangle(points, angle_tolerance):
        return False

    sides = side_lengths(points)
    longest = max(sides)
    return (longest - min(sides)) / longest <= side_tolerance


def circularity(points: Sequence[Point]) -> float:
    """Isoperimetric ratio 4*pi*area / perimeter^2 (1.0 for a perfect circle)."""
    length = perimeter(points)
    if length == 0:
        return 0.0
    return 4.0 * math.pi * abs(signed_area(points)) / (length * length)


def is_circle(
    points: Sequence[Point],
    min_vertices: int = 6,
    radius_tolerance: float = 0.2,
    min_circularity: float = 0.8,
) -> bool:
    """Check whether a polygon approximates a circle.

    A polygon counts as a circle when it has enough vertices, every vertex
    lies at roughly the same distance from the vertex centroid, and its
    isoperimetric ratio is close to that of a circle.

    Args:
        points: Polygon vertices
        min_vertices: Minimum number of vertices
        radius_tolerance: Allowed relative deviation of any vertex radius
            from the mean radius
        min_circularity: Minimum value of 4*pi*area/perimeter^2

    Returns:
        True if the polygon passes all three tests
    """
    if len(points) < min_vertices:
        return False

    cx, cy = centroid(points)
    radii = [math.hypot(p.x - cx, p.y - cy) for p in points]
    mean_radius = sum(radii) / len(radii)
    if mean_radius == 0:
        return False

    if max(abs(r - mean_radius) for r in radii) / mean_radius > radius_tolerance:
        return False

    return circularity(points) >= min_circularity
