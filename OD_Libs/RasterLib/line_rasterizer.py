"""
Line rasterization for Open Drawer.

Provides two line algorithms plus point markers and outlines:
- Bresenham: integer-only aliased lines, one pixel per major-axis step
- Wu: anti-aliased lines that split coverage between two adjacent pixels

Coverage is written as the pixel's alpha and overwrites whatever is in the
buffer; there is no alpha compositing.

Example:
    >>> buffer = PixelBuffer(100, 100)
    >>> draw_line(buffer, Point(10, 10), Point(90, 40), Colors.BLACK)
    >>> draw_line(buffer, Point(10, 50), Point(90, 80), Colors.RED, algorithm="wu")
"""

import logging
import math
from typing import Iterator, Sequence, Tuple, Union

from OD_Libs.constants import (
    DEFAULT_POINT_THICKNESS,
    LINE_ALGORITHM_BRESENHAM,
    LINE_ALGORITHM_WU,
    LINE_ALGORITHMS,
    MAX_CHANNEL_VALUE,
)
from OD_Libs.GeometryLib.color import Color
from OD_Libs.GeometryLib.polygon import Polygon
from OD_Libs.GeometryLib.primitives import Line, Point
from OD_Libs.RasterLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


# ============================================================================
# Bresenham
# ============================================================================

def bresenham_points(start: Point, end: Point) -> Iterator[Point]:
    """
    Yield the pixels of an aliased line from ``start`` to ``end``.

    The major axis is the one with the larger delta. Endpoints are swapped so
    the minor coordinate only ever increases, and the major coordinate steps
    by +1 or -1. The first and last pixels are the endpoints.
    """
    x1, y1, x2, y2 = start.x, start.y, end.x, end.y
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)

    if dy <= dx:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        step = -1 if x1 > x2 else 1
        di = 2 * dy - dx
        y = y1
        for x in range(x1, x2 + step, step):
            yield Point(x, y)
            if di < 0:
                di += 2 * dy
            else:
                y += 1
                di += 2 * (dy - dx)
    else:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        step = -1 if y1 > y2 else 1
        di = 2 * dx - dy
        x = x1
        for y in range(y1, y2 + step, step):
            yield Point(x, y)
            if di < 0:
                di += 2 * dx
            else:
                x += 1
                di += 2 * (dx - dy)


def draw_line_bresenham(buffer: PixelBuffer, start: Point, end: Point, color: Color) -> None:
    bgra = color.to_bgra()
    for point in bresenham_points(start, end):
        buffer.set_pixel(point.x, point.y, bgra)


# ============================================================================
# Wu
# ============================================================================

def _fpart(value: float) -> float:
    return value - math.floor(value)


def _rfpart(value: float) -> float:
    return 1.0 - _fpart(value)


def wu_samples(start: Point, end: Point) -> Iterator[Tuple[int, int, float]]:
    """
    Yield ``(x, y, coverage)`` samples of an anti-aliased line.

    Steep lines are drawn transposed and both endpoints are ordered left to
    right. Each column contributes a vertically adjacent pair whose coverages
    are the complementary fractional parts of the ideal y. Samples are
    yielded in buffer coordinates, endpoint pairs first.
    """
    x1, y1, x2, y2 = start.x, start.y, end.x, end.y
    steep = abs(y2 - y1) > abs(x2 - x1)

    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2

    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = x2 - x1
    dy = y2 - y1
    gradient = 1.0 if dx == 0 else dy / dx

    def sample(x: int, y: int, coverage: float) -> Tuple[int, int, float]:
        return (y, x, coverage) if steep else (x, y, coverage)

    # Integer endpoints sit on pixel centers, so each endpoint pair is fully covered.
    for xend, yend in ((x1, float(y1)), (x2, float(y2))):
        ypxl = math.floor(yend)
        yield sample(xend, ypxl, _rfpart(yend))
        yield sample(xend, ypxl + 1, _fpart(yend))

    intery = y1 + gradient
    for x in range(x1 + 1, x2):
        ypxl = math.floor(intery)
        yield sample(x, ypxl, _rfpart(intery))
        yield sample(x, ypxl + 1, _fpart(intery))
        intery += gradient


def draw_line_wu(buffer: PixelBuffer, start: Point, end: Point, color: Color) -> None:
    for x, y, coverage in wu_samples(start, end):
        buffer.set_pixel(x, y, color.with_alpha(coverage * MAX_CHANNEL_VALUE).to_bgra())


# ============================================================================
# Dispatch
# ============================================================================

def draw_line(
    buffer: PixelBuffer,
    start: Point,
    end: Point,
    color: Color,
    algorithm: str = LINE_ALGORITHM_BRESENHAM,
) -> None:
    """
    Draw a segment given by two points.

    Args:
        buffer: Target pixel buffer
        start: First endpoint
        end: Second endpoint
        color: Line color (Wu replaces its alpha with coverage)
        algorithm: "bresenham" or "wu"

    Raises:
        ValueError: If algorithm is not supported
    """
    if algorithm == LINE_ALGORITHM_BRESENHAM:
        draw_line_bresenham(buffer, start, end, color)
    elif algorithm == LINE_ALGORITHM_WU:
        draw_line_wu(buffer, start, end, color)
    else:
        raise ValueError(f"Unsupported line algorithm: {algorithm}. Expected one of {LINE_ALGORITHMS}")


def draw_segment(
    buffer: PixelBuffer,
    line: Line,
    color: Color,
    algorithm: str = LINE_ALGORITHM_BRESENHAM,
) -> None:
    """Draw a ``Line`` entity; see ``draw_line``."""
    draw_line(buffer, line.start, line.end, color, algorithm)


# ============================================================================
# Points and outlines
# ============================================================================

def draw_point(
    buffer: PixelBuffer,
    point: Point,
    color: Color,
    thickness: int = DEFAULT_POINT_THICKNESS,
) -> None:
    """
    Stamp a round marker centered on ``point``.

    Args:
        buffer: Target pixel buffer
        point: Marker center
        color: Marker color
        thickness: Brush diameter; the disc radius is ``thickness // 2``,
                   so 1 draws a single pixel

    Raises:
        ValueError: If thickness is negative
    """
    if thickness < 0:
        raise ValueError(f"thickness must be >= 0, got {thickness}")

    bgra = color.to_bgra()
    radius = thickness // 2
    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            if j * j + i * i <= radius * radius:
                buffer.set_pixel(point.x + j, point.y + i, bgra)


def draw_polygon(
    buffer: PixelBuffer,
    shape: Union[Polygon, Sequence[Point]],
    color: Color,
    algorithm: str = LINE_ALGORITHM_BRESENHAM,
) -> None:
    """Outline a closed ring of vertices, last vertex joined back to the first."""
    points = shape.vertices if isinstance(shape, Polygon) else list(shape)
    count = len(points)
    for i in range(count):
        draw_line(buffer, points[i], points[(i + 1) % count], color, algorithm)
    logger.debug(f"Outlined polygon with {count} vertices using {algorithm}")


def draw_segments(
    buffer: PixelBuffer,
    lines: Sequence[Line],
    color: Color,
    algorithm: str = LINE_ALGORITHM_BRESENHAM,
) -> None:
    for line in lines:
        draw_segment(buffer, line, color, algorithm)
