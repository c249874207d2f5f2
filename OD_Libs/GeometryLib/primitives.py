"""
Geometric primitives for Open Drawer.

This module defines the integer grid types the rasterizers work with.

Classes:
    Point: Immutable integer (x, y) grid coordinate
    Line: Segment between two points with a parametric intersection test

Functions:
    detect_point: Find the stored point nearest to a query, within a radius
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from OD_Libs.constants import DETECT_POINT_THRESHOLD


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def distance(self, other: "Point") -> int:
        """Euclidean distance to ``other``, truncated to an integer."""
        return int(math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2))

    def transposed(self) -> "Point":
        return Point(self.y, self.x)

    def translated(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    @staticmethod
    def rotate(a: "Point", b: "Point", c: "Point") -> int:
        """
        Cross product of (b - a) and (c - a).

        Positive when a -> b -> c turns counter-clockwise in a y-up frame,
        negative for a clockwise turn and zero for collinear points.
        """
        return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def _truncated_midpoint(a: int, b: int) -> int:
    # Integer division toward zero, not floor
    return int((a + b) / 2)


class Line:
    """A segment between two grid points."""

    def __init__(self, start: Point, end: Point):
        self._points: Tuple[Point, Point] = (start, end)

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> "Line":
        return cls(Point(x1, y1), Point(x2, y2))

    @property
    def points(self) -> Tuple[Point, Point]:
        return self._points

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[1]

    @property
    def x1(self) -> int:
        return self._points[0].x

    @property
    def y1(self) -> int:
        return self._points[0].y

    @property
    def x2(self) -> int:
        return self._points[1].x

    @property
    def y2(self) -> int:
        return self._points[1].y

    @property
    def center(self) -> Point:
        return Point(_truncated_midpoint(self.x1, self.x2), _truncated_midpoint(self.y1, self.y2))

    def with_end(self, end: Point) -> "Line":
        """Return a copy of this line with its second endpoint replaced."""
        return Line(self.start, end)

    def intersection(self, other: "Line") -> Optional[Point]:
        """
        Intersect this segment with another.

        Solves A + t(B - A) = C + u(D - C). The intersection is returned only
        when both t and u lie in [0, 1]; coordinates are truncated to ints.

        Args:
            other: The segment to intersect with

        Returns:
            The intersection point, or None for parallel/collinear segments
            and for crossings outside either segment
        """
        a, b = self._points
        c, d = other._points

        determinant = (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)
        if determinant == 0:
            return None

        t = ((c.x - a.x) * (d.y - c.y) - (c.y - a.y) * (d.x - c.x)) / determinant
        u = ((c.x - a.x) * (b.y - a.y) - (c.y - a.y) * (b.x - a.x)) / determinant

        if not (0 <= t <= 1 and 0 <= u <= 1):
            return None

        x = int(a.x + t * (b.x - a.x))
        y = int(a.y + t * (b.y - a.y))
        return Point(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Line({self.start!r}, {self.end!r})"


def detect_point(
    points: Sequence[Point],
    target: Point,
    threshold: int = DETECT_POINT_THRESHOLD,
) -> Optional[Point]:
    """
    Find the point nearest to ``target``.

    Args:
        points: Candidate points
        target: Query position
        threshold: Maximum (truncated) distance for a match

    Returns:
        The nearest point, or None when there are no points or the nearest
        one is farther than ``threshold``
    """
    if not points:
        return None

    nearest = min(points, key=lambda point: point.distance(target))
    if nearest.distance(target) > threshold:
        return None
    return nearest
