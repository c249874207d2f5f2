"""
Convex hull computation (Graham scan).
"""

import logging
import math
from typing import Iterable, List, Tuple

from OD_Libs.GeometryLib.primitives import Point

logger = logging.getLogger(__name__)

MIN_HULL_POINTS = 3


class Hull:
    """
    Convex hull of a point set, computed once at construction.

    The input is copied, so later changes to the caller's list do not affect
    the hull. Exactly collinear boundary points are kept (the scan only pops
    on a strict clockwise turn).

    Example:
        >>> hull = Hull([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)])
        >>> hull.points
        (Point(x=0, y=0), Point(x=4, y=0), Point(x=4, y=4), Point(x=0, y=4))
    """

    def __init__(self, points: Iterable[Point]):
        # Repeated points would show up as consecutive duplicates on the hull.
        self._source: Tuple[Point, ...] = tuple(dict.fromkeys(points))
        self._points: Tuple[Point, ...] = self._create()

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def _create(self) -> Tuple[Point, ...]:
        if len(self._source) < MIN_HULL_POINTS:
            logger.warning(f"Hull needs at least {MIN_HULL_POINTS} points, got {len(self._source)}")
            return self._source

        # Stable sorts: the pivot is the first point with the smallest y.
        by_y = sorted(self._source, key=lambda p: p.y)
        pivot = by_y[0]
        ordered = self._order_around(pivot, by_y)

        stack: List[Point] = [ordered[0], ordered[1]]
        for point in ordered[2:]:
            while len(stack) > 1 and Point.rotate(stack[-2], stack[-1], point) < 0:
                stack.pop()
            stack.append(point)

        logger.debug(f"Hull of {len(self._source)} points has {len(stack)} vertices")
        return tuple(stack)

    @staticmethod
    def _order_around(pivot: Point, points: List[Point]) -> List[Point]:
        """
        Sort points by polar angle around the pivot, nearest first on ties.

        Points on the last ray are reversed (farthest first) so the ring
        walks back to the pivot along that ray instead of doubling over it.
        All-collinear input is left nearest first.
        """
        def angle(p: Point) -> float:
            return math.atan2(p.y - pivot.y, p.x - pivot.x)

        def squared_distance(p: Point) -> int:
            return (p.x - pivot.x) ** 2 + (p.y - pivot.y) ** 2

        ordered = sorted(points, key=lambda p: (angle(p), squared_distance(p)))

        last_angle = angle(ordered[-1])
        start = len(ordered) - 1
        while start > 1 and angle(ordered[start - 1]) == last_angle:
            start -= 1
        if start > 1:
            ordered[start:] = reversed(ordered[start:])
        return ordered

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)
