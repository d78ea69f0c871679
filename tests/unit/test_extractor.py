"""Unit tests for contour extraction over a whole mask."""

import logging

import numpy as np
import pytest

from contourizer.core.extractor import ContourExtractor
from contourizer.domain import BACKGROUND, FOREGROUND, BitMask, Point


def mask_from_rows(rows: list[str]) -> BitMask:
    """Build a mask from text rows where '#' marks foreground."""
    values = np.array(
        [FOREGROUND if ch == "#" else BACKGROUND for row in rows for ch in row],
        dtype=np.uint8,
    )
    return BitMask(values, len(rows[0]), len(rows))


def extract(rows: list[str]) -> list[list[tuple[int, int]]]:
    """Extract all contours and return them as tuple lists."""
    return [c.to_tuples() for c in ContourExtractor(mask_from_rows(rows)).extract()]


class TestContourExtractor:
    """Tests for ContourExtractor class."""

    def test_empty_mask(self) -> None:
        """Test that a mask without foreground yields no contours."""
        assert extract(["....", "....", "...."]) == []

    def test_dot(self) -> None:
        """Test a single foreground pixel."""
        assert extract(["...", ".#.", "..."]) == [[(1, 1)]]

    def test_square(self) -> None:
        """Test a 2x2 square in the middle of the image."""
        rows = [
            "....",
            ".##.",
            ".##.",
            "....",
        ]
        assert extract(rows) == [[(1, 2), (1, 1), (2, 1), (2, 2)]]

    def test_whole_image(self) -> None:
        """Test an image that is foreground everywhere."""
        assert extract(["##", "##"]) == [[(0, 1), (0, 0), (1, 0), (1, 1)]]

    def test_multiple_squares(self) -> None:
        """Test that separate components yield separate contours."""
        rows = [
            "........",
            ".##.....",
            ".##..##.",
            ".....##.",
            "........",
        ]
        assert extract(rows) == [
            [(1, 2), (1, 1), (2, 1), (2, 2)],
            [(5, 3), (5, 2), (6, 2), (6, 3)],
        ]

    def test_edge_squares(self) -> None:
        """Test components touching the image border."""
        rows = [
            "##...",
            "##.##",
            "...##",
        ]
        assert extract(rows) == [
            [(0, 1), (0, 0), (1, 0), (1, 1)],
            [(3, 2), (3, 1), (4, 1), (4, 2)],
        ]

    def test_diagonal_neighbours_connected(self) -> None:
        """Test that squares touching at a corner form one component."""
        rows = [
            "##..",
            "##..",
            "..##",
            "..##",
        ]
        assert len(extract(rows)) == 1

    def test_filled_block_traced_once(self) -> None:
        """Test that interior pixels of a traced component are skipped."""
        rows = [
            ".......",
            ".#####.",
            ".#####.",
            ".#####.",
            ".#####.",
            ".#####.",
            ".......",
        ]
        contours = extract(rows)
        assert len(contours) == 1
        assert contours[0][0] == (1, 5)
        assert len(contours[0]) == 16

    def test_hole_yields_inner_contour(self) -> None:
        """Test that a hole produces a second contour along its rim."""
        rows = [
            "#####",
            "#####",
            "##.##",
            "#####",
            "#####",
        ]
        contours = extract(rows)
        assert len(contours) == 2
        assert contours[0][0] == (0, 4)
        assert contours[1][0] == (2, 1)
        assert contours[1] == [(2, 1), (1, 2), (2, 3), (3, 2)]

    def test_thick_walled_ring(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a block whose walls around a one-pixel hole are three pixels thick."""
        rows = ["#######"] * 3 + ["###.###"] + ["#######"] * 3
        with caplog.at_level(logging.DEBUG):
            contours = extract(rows)
        assert len(contours) == 2
        assert len(contours[0]) == 24
        assert contours[1] == [(3, 2), (2, 3), (3, 4), (4, 3)]
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_run_above_seed_skipped(self) -> None:
        """Test that pixels above a hole rim seed are not traced again."""
        rows = [
            "###",
            "###",
            "###",
            "#.#",
            "###",
        ]
        contours = extract(rows)
        assert len(contours) == 2
        assert contours[1] == [(1, 2)]

    def test_many_holes(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test one contour per hole in a block with a grid of holes."""
        holes = {(x, y) for x in (2, 5, 8) for y in (2, 5, 8)}
        rows = [
            "".join("." if (x, y) in holes else "#" for x in range(11)) for y in range(11)
        ]
        with caplog.at_level(logging.DEBUG):
            contours = extract(rows)
        assert len(contours) == 1 + len(holes)
        assert sorted(c[0] for c in contours[1:]) == sorted((x, y - 1) for x, y in holes)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_discovery_order_column_major(self) -> None:
        """Test that contours are ordered by their leftmost column, bottom first."""
        rows = [
            "............",
            ".##...#.....",
            ".##..###....",
            "......#.....",
            "............",
            "..####...#..",
            "..####......",
            "............",
        ]
        contours = extract(rows)
        assert [c[0] for c in contours] == [(1, 2), (2, 6), (5, 2), (9, 5)]
        assert contours[0] == [(1, 2), (1, 1), (2, 1), (2, 2)]
        assert contours[3] == [(9, 5)]

    def test_pixels_emitted_once(self) -> None:
        """Test that no pixel appears in more than one contour."""
        rows = [
            "#.#.#",
            ".###.",
            "##.##",
            ".###.",
            "#.#.#",
        ]
        contours = extract(rows)
        emitted = [p for c in contours for p in c]
        assert len(emitted) == len(set(emitted))

    def test_every_contour_starts_at_seed(self) -> None:
        """Test that each contour starts at a pixel whose lower neighbour is background."""
        rows = [
            "#...#",
            "#.#.#",
            "###.#",
        ]
        mask = mask_from_rows(rows)
        for contour in ContourExtractor(mask).extract():
            first = contour[0]
            assert mask.is_foreground(first)
            assert not mask.is_foreground(Point(first.x, first.y + 1))

    def test_visited_tracking(self) -> None:
        """Test visited queries after extraction."""
        mask = mask_from_rows(["...", ".#.", "..."])
        extractor = ContourExtractor(mask)
        assert not extractor.is_visited(Point(1, 1))
        extractor.extract()
        assert extractor.is_visited(Point(1, 1))
        assert extractor.visited_count == 1

    def test_iter_contours_is_lazy(self) -> None:
        """Test that contours can be consumed one at a time."""
        mask = mask_from_rows(["#.#", "...", "#.#"])
        iterator = ContourExtractor(mask).iter_contours()
        assert next(iterator).to_tuples() == [(0, 2)]
        assert len(list(iterator)) == 3
