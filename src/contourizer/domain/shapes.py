"""Shape buckets produced by contour approximation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contourizer.domain.contour import Contour, Point


class ShapeKind(str, Enum):
    """Geometric primitive a contour is classified as."""

    POINT = "points"
    LINE = "lines"
    TRIANGLE = "triangles"
    SQUARE = "squares"
    RECTANGLE = "rectangles"
    CIRCLE = "circles"
    POLYGON = "polygons"


@dataclass
class ShapeCollection:
    """Classified contours grouped by shape kind.

    The points bucket holds bare points (one-pixel contours); every other
    bucket holds whole contours. Within a bucket, entries keep the order in
    which their contours were discovered.
    """

    points: list[Point] = field(default_factory=list)
    lines: list[Contour] = field(default_factory=list)
    triangles: list[Contour] = field(default_factory=list)
    squares: list[Contour] = field(default_factory=list)
    rectangles: list[Contour] = field(default_factory=list)
    circles: list[Contour] = field(default_factory=list)
    polygons: list[Contour] = field(default_factory=list)

    def __getitem__(self, kind: ShapeKind) -> list[Any]:
        return getattr(self, ShapeKind(kind).value)

    def add(self, kind: ShapeKind, contour: Contour) -> None:
        """Add a contour to the bucket for ``kind``.

        Points are stored unwrapped.
        """
        if kind is ShapeKind.POINT:
            self.points.append(contour[0])
        else:
            self[kind].append(contour)

    @property
    def total(self) -> int:
        """Total number of shapes across all buckets."""
        return sum(self.counts().values())

    def counts(self) -> dict[str, int]:
        """Return the number of shapes per bucket."""
        return {kind.value: len(self[kind]) for kind in ShapeKind}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Mapping of bucket name to serialized points or contours
        """
        return {
            ShapeKind.POINT.value: [p.to_dict() for p in self.points],
            **{
                kind.value: [c.to_dict() for c in self[kind]]
                for kind in ShapeKind
                if kind is not ShapeKind.POINT
            },
        }
