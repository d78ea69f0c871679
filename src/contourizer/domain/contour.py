"""Core geometric types for contour representation.

This module defines the pixel-space types produced by boundary tracing:
- Point: An integer pixel coordinate
- Contour: An ordered, implicitly closed sequence of boundary pixels
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel coordinate.

    Immutable and hashable for use in sets/dicts. The y axis points down,
    as in the raster the point was traced from.

    Attributes:
        x: Column index
        y: Row index
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}


@dataclass
class Contour:
    """A closed boundary of one 8-connected foreground component.

    Points run clockwise in image coordinates, starting at the pixel the
    scan discovered first. Closure is implicit: the last point neighbours
    the first one but is not a copy of it.

    A contour compares equal to a plain list of points with the same
    content, so it can be used wherever a point sequence is expected.

    Attributes:
        points: Boundary pixels in tracing order
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Contour):
            return self.points == other.points
        if isinstance(other, (list, tuple)):
            return self.points == list(other)
        return NotImplemented

    def append(self, point: Point) -> None:
        """Append a boundary point."""
        self.points.append(point)

    def to_tuples(self) -> list[tuple[int, int]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the contour
        """
        return {"points": [p.to_dict() for p in self.points]}
