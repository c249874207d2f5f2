"""
Unit tests for the Graham scan convex hull.
"""

import logging

from OD_Libs.GeometryLib.hull import Hull
from OD_Libs.GeometryLib.primitives import Point


def _points(*coords):
    return [Point(x, y) for x, y in coords]


SCATTER = _points((3, 1), (7, 2), (9, 6), (5, 9), (1, 6), (4, 4), (6, 5), (5, 3))


class TestHull:
    """Tests for Hull construction."""

    def test_square_with_interior_point(self):
        """Should keep only the four outer corners."""
        hull = Hull(_points((0, 0), (4, 0), (4, 4), (0, 4), (2, 2)))
        assert list(hull.points) == _points((0, 0), (4, 0), (4, 4), (0, 4))

    def test_input_order_does_not_matter(self):
        """Should find the same ring for a shuffled input."""
        hull = Hull(_points((2, 2), (0, 4), (4, 4), (4, 0), (0, 0)))
        assert set(hull.points) == set(_points((0, 0), (4, 0), (4, 4), (0, 4)))
        assert len(hull) == 4

    def test_pivot_is_first_lowest_point(self):
        """Should start the ring at the first minimum-y point in input order."""
        hull = Hull(_points((2, 2), (4, 0), (0, 0), (4, 4), (0, 4)))
        assert list(hull.points) == _points((4, 0), (4, 4), (0, 4), (0, 0))

    def test_scatter(self):
        """Should drop interior points of an irregular set."""
        hull = Hull(SCATTER)
        assert list(hull.points) == _points((3, 1), (7, 2), (9, 6), (5, 9), (1, 6))

    def test_turns_in_one_direction(self):
        """Should never turn clockwise along the ring."""
        ring = list(Hull(SCATTER).points)
        count = len(ring)
        for i in range(count):
            assert Point.rotate(ring[i], ring[(i + 1) % count], ring[(i + 2) % count]) > 0

    def test_encloses_all_points(self):
        """Should keep every input point on the inner side of each edge."""
        ring = list(Hull(SCATTER).points)
        count = len(ring)
        for point in SCATTER:
            for i in range(count):
                assert Point.rotate(ring[i], ring[(i + 1) % count], point) >= 0

    def test_collinear_boundary_points_are_kept(self):
        """Should keep exactly collinear points (strict pop rule)."""
        hull = Hull(_points((0, 0), (2, 0), (4, 0), (4, 4), (0, 4)))
        assert Point(2, 0) in hull.points
        assert len(hull) == 5

    def test_points_on_pivot_row_do_not_double_back(self):
        """Should walk the pivot row once, back toward the pivot."""
        source = _points((4, 0), (0, 0), (4, 2), (3, 0), (1, 0))
        ring = list(Hull(source).points)

        assert ring == _points((4, 0), (4, 2), (0, 0), (1, 0), (3, 0))
        count = len(ring)
        for i in range(count):
            assert Point.rotate(ring[i], ring[(i + 1) % count], ring[(i + 2) % count]) >= 0
            for point in source:
                assert Point.rotate(ring[i], ring[(i + 1) % count], point) >= 0

    def test_angle_ties_are_nearest_first(self):
        """Should visit collinear points on the first ray nearest first."""
        hull = Hull(_points((0, 0), (4, 0), (2, 0), (2, 3)))
        assert list(hull.points) == _points((0, 0), (2, 0), (4, 0), (2, 3))

    def test_duplicates_are_not_repeated(self):
        """Should not emit the same point twice in a row."""
        ring = list(Hull(_points((0, 0), (0, 0), (4, 0), (4, 4), (4, 4), (0, 4))).points)
        for current, following in zip(ring, ring[1:] + ring[:1]):
            assert current != following

    def test_is_a_snapshot(self):
        """Should ignore changes to the input list after construction."""
        source = _points((0, 0), (4, 0), (4, 4))
        hull = Hull(source)
        source.append(Point(-10, 50))
        source[0] = Point(100, 100)
        assert list(hull.points) == _points((0, 0), (4, 0), (4, 4))

    def test_degenerate_input_is_returned_as_is(self, caplog):
        """Should return fewer than three points unchanged and warn."""
        with caplog.at_level(logging.WARNING, logger="OD_Libs.GeometryLib.hull"):
            hull = Hull(_points((1, 1), (2, 2)))

        assert list(hull.points) == _points((1, 1), (2, 2))
        assert "at least 3 points" in caplog.text

    def test_empty_input(self):
        """Should not raise for an empty point set."""
        assert len(Hull([])) == 0
