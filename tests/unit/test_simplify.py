"""Unit tests for Douglas-Peucker contour simplification."""

import pytest

from contourizer.core.simplify import simplify_contour, simplify_contours
from contourizer.domain import Contour, Point


def block_outline(x0: int, y0: int, x1: int, y1: int) -> Contour:
    """Clockwise boundary of a filled block, starting at its bottom-left pixel."""
    points = [Point(x0, y) for y in range(y1, y0 - 1, -1)]
    points += [Point(x, y0) for x in range(x0 + 1, x1 + 1)]
    points += [Point(x1, y) for y in range(y0 + 1, y1 + 1)]
    points += [Point(x, y1) for x in range(x1 - 1, x0, -1)]
    return Contour(points)


class TestSimplifyContour:
    """Tests for simplify_contour function."""

    def test_single_point_unchanged(self) -> None:
        """Test that a one-point contour is returned as is."""
        assert simplify_contour(Contour([Point(1, 1)])) == [Point(1, 1)]

    def test_two_points_unchanged(self) -> None:
        """Test that a two-point contour is returned as is."""
        contour = Contour([Point(0, 0), Point(0, 1)])
        assert simplify_contour(contour, 5.0) == contour

    def test_diagonal_line(self) -> None:
        """Test that a straight diagonal run collapses to its endpoints."""
        contour = Contour([Point(0, 0), Point(1, 1), Point(2, 2)])
        assert simplify_contour(contour) == [Point(0, 0), Point(2, 2)]

    def test_block_reduced_to_corners(self) -> None:
        """Test that a rectangular outline keeps only its four corners."""
        contour = block_outline(1, 1, 6, 6)
        assert len(contour) == 20
        simplified = simplify_contour(contour, 1.0)
        assert simplified == [Point(1, 6), Point(1, 1), Point(6, 1), Point(6, 6)]

    def test_first_point_kept(self) -> None:
        """Test that the seed pixel survives simplification."""
        contour = block_outline(2, 3, 9, 7)
        assert simplify_contour(contour, 2.0)[0] == contour[0]

    def test_subset_in_order(self) -> None:
        """Test that output points are input points in their original order."""
        contour = block_outline(0, 0, 10, 4)
        simplified = simplify_contour(contour, 1.0)
        indices = [contour.points.index(p) for p in simplified]
        assert indices == sorted(indices)

    def test_no_closing_duplicate(self) -> None:
        """Test that the repeated closing point is removed again."""
        simplified = simplify_contour(block_outline(0, 0, 5, 5), 1.0)
        assert simplified[-1] != simplified[0]

    def test_input_not_modified(self) -> None:
        """Test that simplification returns a new contour."""
        contour = block_outline(0, 0, 5, 5)
        before = list(contour.points)
        simplify_contour(contour, 1.0)
        assert contour.points == before


class TestSimplifyContours:
    """Tests for simplify_contours function."""

    def test_replaces_in_place(self) -> None:
        """Test that every list entry is replaced by its simplified version."""
        contours = [
            Contour([Point(1, 1)]),
            Contour([Point(0, 0), Point(1, 1), Point(2, 2)]),
        ]
        original = contours
        simplify_contours(contours, 1.0)
        assert contours is original
        assert contours[0] == [Point(1, 1)]
        assert contours[1] == [Point(0, 0), Point(2, 2)]

    def test_repeated_simplification_compounds(self) -> None:
        """Test that a second pass never adds points back."""
        contours = [block_outline(0, 0, 8, 8)]
        simplify_contours(contours, 1.0)
        once = len(contours[0])
        simplify_contours(contours, 0.1)
        assert len(contours[0]) <= once

    @pytest.mark.parametrize(("first", "second"), [(0.5, 0.5), (0.5, 1.0), (1.0, 2.5), (0.0, 3.0)])
    def test_larger_epsilon_never_adds_points(self, first: float, second: float) -> None:
        """Test that a second pass with an equal or larger epsilon keeps or drops points."""
        triangle = [Point(0, y) for y in range(9, -1, -1)]
        triangle += [Point(x, x) for x in range(1, 10)]
        triangle += [Point(x, 9) for x in range(8, 0, -1)]
        contours = [block_outline(0, 0, 8, 5), Contour(triangle)]
        simplify_contours(contours, first)
        counts = [len(c) for c in contours]
        simplify_contours(contours, second)
        assert all(len(c) <= n for c, n in zip(contours, counts))
