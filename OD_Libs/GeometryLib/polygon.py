"""
Polygon edges and point-in-polygon classification.

Classes:
    EdgeDirection: Lean of an edge when walked from its upper vertex down
    Edge: Directed polygon edge normalized so ``up`` has the smaller y
    Polygon: Ordered vertex ring with an edge-crossing containment test
"""

from enum import Enum
from typing import Iterable, List

from OD_Libs.GeometryLib.primitives import Point


class EdgeDirection(Enum):
    RIGHT = "right"
    LEFT = "left"


class Edge:
    """A polygon edge; ``up.y <= down.y`` always holds."""

    def __init__(self, p1: Point, p2: Point):
        if p1.y > p2.y:
            self._up, self._down = p2, p1
        else:
            self._up, self._down = p1, p2

        if self._up.x > self._down.x:
            self._direction = EdgeDirection.LEFT
        else:
            self._direction = EdgeDirection.RIGHT

    @property
    def up(self) -> Point:
        return self._up

    @property
    def down(self) -> Point:
        return self._down

    @property
    def direction(self) -> EdgeDirection:
        return self._direction

    @property
    def is_horizontal(self) -> bool:
        return self._up.y == self._down.y

    def is_right(self, q: Point) -> bool:
        """Sign test of the cross product (up - down) x (q - down)."""
        up, down = self._up, self._down
        return (up.x - down.x) * (q.y - down.y) - (up.y - down.y) * (q.x - down.x) > 0

    def __repr__(self) -> str:
        return f"Edge(up={self._up!r}, down={self._down!r}, direction={self._direction.name})"


class Polygon:
    """
    Polygon defined by its vertices in boundary order.

    The edge ring connects consecutive vertices and wraps last -> first, so
    a polygon always has exactly as many edges as vertices.
    """

    def __init__(self, vertices: Iterable[Point] = ()):
        self._vertices: List[Point] = list(vertices)

    @property
    def vertices(self) -> List[Point]:
        return self._vertices

    def add(self, point: Point) -> None:
        self._vertices.append(point)

    @property
    def edges(self) -> List[Edge]:
        count = len(self._vertices)
        return [Edge(self._vertices[i], self._vertices[(i + 1) % count]) for i in range(count)]

    @property
    def center(self) -> Point:
        count = len(self._vertices)
        if count == 0:
            raise ValueError("Polygon has no vertices")
        x_sum = sum(point.x for point in self._vertices)
        y_sum = sum(point.y for point in self._vertices)
        return Point(int(x_sum / count), int(y_sum / count))

    def contains(self, point: Point) -> bool:
        """
        Classify ``point`` with a half-open ray-casting parity test.

        Horizontal edges and edges whose lower vertex lies on the point's row
        are skipped, so a vertex shared by two edges is counted once. An edge
        spanning the row counts as a crossing when the point lies to its
        right and past the edge's direction-dependent x threshold.

        Args:
            point: Query point

        Returns:
            True when the number of crossings is odd
        """
        intersections = 0
        for edge in self.edges:
            if edge.is_horizontal or point.y == edge.down.y:
                continue

            # Screen coordinates: "up" is the smaller y.
            if edge.up.y <= point.y < edge.down.y and edge.is_right(point):
                if edge.direction is EdgeDirection.LEFT and edge.down.x < point.x:
                    intersections += 1
                if edge.direction is EdgeDirection.RIGHT and edge.up.x < point.x:
                    intersections += 1

        return intersections % 2 == 1

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon({self._vertices!r})"
