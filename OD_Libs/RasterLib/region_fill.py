"""
Region fill and border tracing for Open Drawer.

Functions:
    flood_fill: Scanline seed fill of the base-colored region with one color
    fill_texture: Same region discovery, painting from a wrapped texture
    trace_border: Collect the 8-connected near-black pixels of a border
    highlight_border: Trace a border and recolor it

All functions use explicit worklists instead of recursion, visiting runs in
the same order as the classic recursive formulation. Coordinates outside
the buffer simply stop the exploration; nothing here raises for them.

Fills work on whole rows: runs are found from a numpy row mask and each
neighboring row is seeded once per base-colored segment, not per column.
"""

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

import numpy as np

from OD_Libs.constants import DEFAULT_SIMILARITY_THRESHOLD, NEIGHBOR_DIRECTIONS
from OD_Libs.GeometryLib.color import BgraBytes, Color, Colors
from OD_Libs.GeometryLib.primitives import Point
from OD_Libs.RasterLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

_BLACK_BYTES = Colors.BLACK.to_bgra()


def _segment_starts(buffer: PixelBuffer, y: int, left: int, right: int, bgra: BgraBytes) -> List[int]:
    """
    First column of every ``bgra`` segment of row ``y`` between the exclusive
    bounds ``left`` and ``right``. Rows outside the buffer have none.
    """
    mask = buffer.match_row(y, bgra)[left + 1:right]
    starts = mask.copy()
    starts[1:] &= ~mask[:-1]
    return (np.flatnonzero(starts) + left + 1).tolist()


# ============================================================================
# Solid fill
# ============================================================================

def flood_fill(buffer: PixelBuffer, x: int, y: int, color: Color) -> int:
    """
    Repaint the region of ``buffer.base_color`` pixels connected to (x, y).

    A seed is skipped when it is outside the buffer, already has the fill
    color, is black, or differs from the base color. Otherwise its whole
    horizontal run is painted with a single span write, and each base-colored
    segment touching the run seeds the row below, then the row above.

    Termination relies on painted pixels no longer matching the base color.
    Colors are compared as bytes, so filling with the base color itself is
    a no-op.

    Args:
        buffer: Target pixel buffer (its base_color defines the region)
        x: Seed column
        y: Seed row
        color: Fill color

    Returns:
        Number of pixels painted
    """
    bgra = color.to_bgra()
    base = buffer.base_color.to_bgra()

    painted = 0
    stack: List[Tuple[int, int]] = [(x, y)]
    while stack:
        x, y = stack.pop()
        if not buffer.in_bounds(x, y):
            continue
        pixel = buffer.get_bgra(x, y)
        if pixel == bgra or pixel == _BLACK_BYTES or pixel != base:
            continue

        left_x, right_x = buffer.find_run(x, y, base)
        buffer.fill_span(left_x + 1, y, right_x, bgra)
        painted += right_x - left_x - 1

        # Pop by column, row below before row above on the same column.
        seeds = [(i, y + 1) for i in _segment_starts(buffer, y + 1, left_x, right_x, base)]
        seeds += [(i, y - 1) for i in _segment_starts(buffer, y - 1, left_x, right_x, base)]
        seeds.sort(key=lambda seed: seed[0])
        stack.extend(reversed(seeds))

    logger.debug(f"Flood fill from seed painted {painted} pixels")
    return painted


# ============================================================================
# Textured fill
# ============================================================================

def _as_texture(texture: Any) -> PixelBuffer:
    if isinstance(texture, PixelBuffer):
        return texture
    if hasattr(texture, "convert"):
        return PixelBuffer.from_image(texture)
    raise TypeError(f"Expected PixelBuffer or PIL Image texture, got {type(texture)}")


def fill_texture(
    buffer: PixelBuffer,
    x: int,
    y: int,
    texture: Any,
    anchor: Optional[Point] = None,
) -> int:
    """
    Fill the base-colored region around (x, y) with a tiled texture.

    The texture is addressed with wrap-around so that its ``anchor`` texel
    lands on the seed pixel. Because painted texels may still match the base
    color, processed spans are memoized per row.

    Args:
        buffer: Target pixel buffer (its base_color defines the region)
        x: Seed column
        y: Seed row
        texture: PixelBuffer or PIL Image to sample
        anchor: Texel aligned with the seed; defaults to the texture center

    Returns:
        Number of pixels painted

    Raises:
        TypeError: If texture is neither a PixelBuffer nor a PIL Image
    """
    source = _as_texture(texture)
    if anchor is None:
        anchor = Point(source.width // 2, source.height // 2)

    offset_x = anchor.x - x
    offset_y = anchor.y - y
    base = buffer.base_color.to_bgra()

    used: Dict[int, List[Tuple[int, int]]] = {}
    painted = 0
    stack: List[Tuple[int, int]] = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if any(left <= cx <= right for left, right in used.get(cy, ())):
            continue
        if not buffer.in_bounds(cx, cy):
            continue
        pixel = buffer.get_bgra(cx, cy)
        if pixel == _BLACK_BYTES or pixel != base:
            continue

        left_x, right_x = buffer.find_run(cx, cy, base)
        used.setdefault(cy, []).append((left_x, right_x))

        texels = source.get_row((cy + offset_y) % source.height)
        columns = (np.arange(left_x + 1, right_x) + offset_x) % source.width
        buffer.put_span(left_x + 1, cy, texels[columns])
        painted += right_x - left_x - 1

        # All of the row below is explored before any of the row above.
        for i in reversed(_segment_starts(buffer, cy - 1, left_x, right_x, base)):
            stack.append((i, cy - 1))
        for i in reversed(_segment_starts(buffer, cy + 1, left_x, right_x, base)):
            stack.append((i, cy + 1))

    logger.debug(f"Texture fill painted {painted} pixels over {sum(len(s) for s in used.values())} spans")
    return painted


# ============================================================================
# Border tracing
# ============================================================================

def _is_border_pixel(buffer: PixelBuffer, x: int, y: int, threshold: float) -> bool:
    return buffer.get_pixel(x, y).is_similar(Colors.BLACK, threshold)


def trace_border(
    buffer: PixelBuffer,
    x: int,
    y: int,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> List[Point]:
    """
    Collect the near-black border reachable from a point.

    Starting at (x, y), walks left until a near-black pixel (or column 0) is
    reached, then explores 8-connected near-black pixels with an explicit
    stack and a visited set.

    Args:
        buffer: Pixel buffer to read
        x: Start column (usually inside the outlined region)
        y: Start row
        threshold: RGB distance from black still counted as border

    Returns:
        Border points in visit order; empty if no border was found
    """
    if threshold < 0:
        raise ValueError(f"threshold must be >= 0, got {threshold}")
    if not buffer.in_bounds(x, y):
        return []

    left_x = x
    while left_x > 0 and not _is_border_pixel(buffer, left_x, y, threshold):
        left_x -= 1

    stack: List[Point] = [Point(left_x, y)]
    labeled: Set[Point] = set()
    result: List[Point] = []

    while stack:
        point = stack.pop()
        if point in labeled or not buffer.in_bounds(point.x, point.y):
            continue
        if not _is_border_pixel(buffer, point.x, point.y, threshold):
            continue

        result.append(point)
        labeled.add(point)
        for dx, dy in NEIGHBOR_DIRECTIONS:
            stack.append(Point(point.x + dx, point.y + dy))

    logger.debug(f"Traced {len(result)} border pixels from ({x}, {y})")
    return result


def highlight_border(
    buffer: PixelBuffer,
    x: int,
    y: int,
    color: Color,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> List[Point]:
    """Trace the border next to (x, y), repaint it with ``color`` and return it."""
    border = trace_border(buffer, x, y, threshold)
    bgra = color.to_bgra()
    for point in border:
        buffer.set_pixel(point.x, point.y, bgra)
    return border
