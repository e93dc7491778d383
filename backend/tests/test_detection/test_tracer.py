"""Tests for Moore-neighbourhood boundary tracing."""

from __future__ import annotations

from holdmap.engine.primitives import Point, Region
from holdmap.engine.regions import extract_regions
from holdmap.engine.tracer import find_start_point, trace_boundary, trace_contour
from tests.conftest import SQUARE_CONTOUR, make_disk, make_grid


def _region(points) -> Region:
    return Region(pixels=[Point(x, y) for x, y in points])


def _rect_region(x0, y0, x1, y1) -> Region:
    return _region([(x, y) for y in range(y0, y1 + 1) for x in range(x0, x1 + 1)])


class TestStartPoint:
    def test_topmost_wins(self):
        region = _region([(2, 1), (1, 1), (3, 0), (0, 2)])
        assert find_start_point(region) == Point(3, 0)

    def test_leftmost_among_ties(self):
        region = _region([(5, 2), (1, 2), (3, 2), (4, 3)])
        assert find_start_point(region) == Point(1, 2)

    def test_empty_region(self):
        assert find_start_point(Region()) is None


class TestTrace:
    def test_square_clockwise(self):
        assert trace_boundary(_rect_region(3, 3, 6, 6)) == [Point(*p) for p in SQUARE_CONTOUR]

    def test_two_by_two(self):
        assert trace_boundary(_rect_region(1, 1, 2, 2)) == [
            Point(1, 1), Point(2, 1), Point(2, 2), Point(1, 2),
        ]

    def test_single_pixel(self):
        assert trace_boundary(_region([(5, 5)])) == [Point(5, 5)]

    def test_line_revisits_interior_pixel(self):
        line = _region([(0, 0), (1, 0), (2, 0)])
        assert trace_boundary(line) == [Point(0, 0), Point(1, 0), Point(2, 0), Point(1, 0)]

    def test_empty_region(self):
        assert trace_boundary(Region()) == []

    def test_points_are_boundary_and_8_adjacent(self):
        region = extract_regions(make_disk(50, 50, 25, 25, 15))[0]
        contour = trace_boundary(region)

        assert len(contour) > 20
        for p in contour:
            assert p in region
            neighbours = [
                Point(p.x + dx, p.y + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy
            ]
            assert any(n not in region for n in neighbours)
        for a, b in zip(contour, contour[1:]):
            assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1

    def test_trace_ends_next_to_start(self):
        region = extract_regions(make_grid(20, 20, rects=[(2, 4, 15, 12)]))[0]
        contour = trace_boundary(region)
        first, last = contour[0], contour[-1]
        assert max(abs(first.x - last.x), abs(first.y - last.y)) == 1

    def test_cap_truncates(self):
        result = trace_contour(_rect_region(0, 0, 9, 9), max_points=5)
        assert result.truncated
        assert len(result.points) == 5

    def test_closed_trace_not_truncated(self):
        result = trace_contour(_rect_region(0, 0, 9, 9))
        assert not result.truncated
        assert len(result.points) == 36
