"""
Shaded triangle rasterization for Open Drawer.

Two fill strategies with linear (never perspective-corrected) color
interpolation between the vertex colors:
- Scanline: per-row boundary probing and interpolation along edges, then
  across the row
- Barycentric: per-pixel weights against the two edge vectors from the
  first vertex

Both reproduce the vertex colors exactly at the vertices and shade the
interior affinely.
"""

import logging
from typing import Sequence, Tuple

from OD_Libs.constants import TRIANGLE_METHOD_BARYCENTRIC, TRIANGLE_METHOD_SCANLINE, TRIANGLE_METHODS
from OD_Libs.GeometryLib.color import Color
from OD_Libs.GeometryLib.primitives import Point
from OD_Libs.RasterLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

ShadedVertex = Tuple[Point, Color]


def is_point_in_triangle(p: Point, p1: Point, p2: Point, p3: Point) -> bool:
    """Inside (or on the boundary) when all three half-plane values share a sign."""
    p1_side = (p1.y - p2.y) * p.x + (p2.x - p1.x) * p.y + (p1.x * p2.y - p2.x * p1.y)
    p2_side = (p2.y - p3.y) * p.x + (p3.x - p2.x) * p.y + (p2.x * p3.y - p3.x * p2.y)
    p3_side = (p3.y - p1.y) * p.x + (p1.x - p3.x) * p.y + (p3.x * p1.y - p1.x * p3.y)

    return (p1_side >= 0 and p2_side >= 0 and p3_side >= 0) or (
        p1_side <= 0 and p2_side <= 0 and p3_side <= 0
    )


def interpolate_color(coord: float, coord1: float, c1: Color, coord2: float, c2: Color) -> Color:
    """
    Linearly interpolate between (coord1, c1) and (coord2, c2) at ``coord``.

    Extrapolates outside the interval; a zero-length interval yields c1.
    """
    if coord1 == coord2:
        return c1
    weight = (coord - coord1) / (coord2 - coord1)
    return c1.get_sum_with(c2.get_diff_with(c1).get_mult_by(weight))


def _interpolate_x(y: float, a: Point, b: Point) -> float:
    if a.y == b.y:
        return float(a.x)
    return a.x + (b.x - a.x) * (y - a.y) / (b.y - a.y)


def normalize_triangle(
    v1: ShadedVertex,
    v2: ShadedVertex,
    v3: ShadedVertex,
) -> Tuple[ShadedVertex, ShadedVertex, ShadedVertex]:
    """
    Put shaded vertices into canonical order without mutating them.

    The topmost vertex (smallest y, first on ties) comes first, unless it
    shares its row with the second topmost; then the remaining vertex is
    the apex and goes first. The other two are ordered by x.
    """
    top, middle, bottom = sorted((v1, v2, v3), key=lambda vertex: vertex[0].y)

    if top[0].y == middle[0].y:
        apex, rest = bottom, (top, middle)
    else:
        apex, rest = top, (middle, bottom)

    left, right = sorted(rest, key=lambda vertex: vertex[0].x)
    return apex, left, right


def _bounding_box(points: Sequence[Point]) -> Tuple[int, int, int, int]:
    xs = [point.x for point in points]
    ys = [point.y for point in points]
    return min(xs), min(ys), max(xs), max(ys)


def draw_triangle_scanline(
    buffer: PixelBuffer,
    v1: ShadedVertex,
    v2: ShadedVertex,
    v3: ShadedVertex,
) -> int:
    """
    Fill a triangle row by row.

    For every row the leftmost and rightmost pixels inside the triangle are
    found by probing inward from the bounding box. Colors on the lines
    p1-p2 and p1-p3 are interpolated in y at that row (with the x position
    where each line crosses it), and each pixel is interpolated in x between
    those two samples. Degenerate (zero-area) triangles draw nothing.

    Returns:
        Number of pixels written
    """
    (p1, c1), (p2, c2), (p3, c3) = normalize_triangle(v1, v2, v3)
    if Point.rotate(p1, p2, p3) == 0:
        logger.debug(f"Skipping degenerate triangle {p1}, {p2}, {p3}")
        return 0

    x_min, y_min, x_max, y_max = _bounding_box((p1, p2, p3))

    written = 0
    for y in range(y_min, y_max + 1):
        x_left = x_min
        while x_left <= x_max and not is_point_in_triangle(Point(x_left, y), p1, p2, p3):
            x_left += 1
        if x_left > x_max:
            continue
        x_right = x_max
        while not is_point_in_triangle(Point(x_right, y), p1, p2, p3):
            x_right -= 1

        c_left = interpolate_color(y, p1.y, c1, p2.y, c2)
        c_right = interpolate_color(y, p1.y, c1, p3.y, c3)
        xa = _interpolate_x(y, p1, p2)
        xb = _interpolate_x(y, p1, p3)

        for x in range(x_left, x_right + 1):
            color = interpolate_color(x, xa, c_left, xb, c_right)
            buffer.set_pixel(x, y, color.to_bgra())
            written += 1

    logger.debug(f"Scanline triangle {p1}, {p2}, {p3}: {written} pixels")
    return written


def draw_triangle_barycentric(
    buffer: PixelBuffer,
    v1: ShadedVertex,
    v2: ShadedVertex,
    v3: ShadedVertex,
) -> int:
    """
    Fill a triangle by solving for barycentric weights per pixel.

    With p1 moved to the origin, a point q = w1 * e2 + w2 * e3 for the edge
    vectors e2 = p2 - p1 and e3 = p3 - p1. The inside test runs on exact
    integer numerators; the color is c1 + (c2 - c1) * w1 + (c3 - c1) * w2.
    Degenerate (zero-area) triangles draw nothing.

    Returns:
        Number of pixels written
    """
    (p1, c1), (p2, c2), (p3, c3) = v1, v2, v3
    e2 = Point(p2.x - p1.x, p2.y - p1.y)
    e3 = Point(p3.x - p1.x, p3.y - p1.y)

    determinant = e2.x * e3.y - e3.x * e2.y
    if determinant == 0:
        logger.debug(f"Skipping degenerate triangle {p1}, {p2}, {p3}")
        return 0

    # Work with a positive denominator so the inside test needs no sign flips.
    sign = 1 if determinant > 0 else -1
    denominator = determinant * sign

    diff1 = c2.get_diff_with(c1)
    diff2 = c3.get_diff_with(c1)

    x_min, y_min, x_max, y_max = _bounding_box((Point(0, 0), e2, e3))

    written = 0
    for y in range(y_min, y_max + 1):
        for x in range(x_min, x_max + 1):
            n1 = (x * e3.y - y * e3.x) * sign
            n2 = (e2.x * y - e2.y * x) * sign
            if n1 < 0 or n2 < 0 or n1 + n2 > denominator:
                continue

            w1 = n1 / denominator
            w2 = n2 / denominator
            color = c1.get_sum_with(diff1.get_mult_by(w1)).get_sum_with(diff2.get_mult_by(w2))
            buffer.set_pixel(x + p1.x, y + p1.y, color.to_bgra())
            written += 1

    logger.debug(f"Barycentric triangle {p1}, {p2}, {p3}: {written} pixels")
    return written


def draw_triangle(
    buffer: PixelBuffer,
    vertices: Sequence[Point],
    colors: Sequence[Color],
    method: str = TRIANGLE_METHOD_SCANLINE,
) -> int:
    """
    Draw a color-shaded triangle.

    Args:
        buffer: Target pixel buffer
        vertices: Three vertices
        colors: Color of each vertex
        method: "scanline" or "barycentric"

    Returns:
        Number of pixels written

    Raises:
        ValueError: If there are not exactly three vertices and colors, or the
                    method is not supported
    """
    if len(vertices) != 3 or len(colors) != 3:
        raise ValueError(f"A triangle needs 3 vertices and 3 colors, got {len(vertices)} and {len(colors)}")

    v1, v2, v3 = zip(vertices, colors)
    if method == TRIANGLE_METHOD_SCANLINE:
        return draw_triangle_scanline(buffer, v1, v2, v3)
    if method == TRIANGLE_METHOD_BARYCENTRIC:
        return draw_triangle_barycentric(buffer, v1, v2, v3)

    raise ValueError(f"Unsupported triangle method: {method}. Expected one of {TRIANGLE_METHODS}")
