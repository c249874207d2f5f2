"""
Pixel buffer backing store for Open Drawer.

The buffer is a ``(height, width, 4)`` uint8 numpy array in BGRA byte order.
It is the only mutable state of the engine: every rasterizer writes into it
directly and every query (pixel reads, flood matching) reads from it.

Writes outside the buffer are silently dropped; reads outside it raise
IndexError.

Example:
    >>> buffer = PixelBuffer(4, 3)
    >>> buffer.set_pixel(1, 1, (0, 0, 255, 255))
    >>> buffer.get_pixel(1, 1)
    Color(blue=0.0, green=0.0, red=255.0, alpha=255.0)
    >>> image = buffer.to_image()   # Pillow RGBA image for display
"""

from typing import Any, Optional, Tuple

import numpy as np
from PIL import Image

from OD_Libs.constants import BGRA_WHITE, CHANNELS_PER_PIXEL, PIL_EXPORT_MODE
from OD_Libs.GeometryLib.color import BgraBytes, Color, Colors

# Channel permutation between BGRA and RGBA (its own inverse)
_SWAP_RED_BLUE = [2, 1, 0, 3]


class PixelBuffer:
    """
    Width x height grid of BGRA pixels.

    Attributes:
        base_color: Color sampled by ``set_base_color``; flood fill only
                    repaints pixels equal to it
    """

    def __init__(self, width: int, height: int, background: BgraBytes = BGRA_WHITE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)
        self._pixels = np.empty((self._height, self._width, CHANNELS_PER_PIXEL), dtype=np.uint8)
        self.base_color: Color = Colors.WHITE
        self.clear(background)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "PixelBuffer":
        """Wrap a copy of a ``(height, width, 4)`` BGRA array."""
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS_PER_PIXEL:
            raise ValueError(f"Expected a (height, width, 4) array, got shape {pixels.shape}")
        height, width = pixels.shape[:2]
        buffer = cls(width, height)
        buffer._pixels[...] = pixels.astype(np.uint8)
        return buffer

    @classmethod
    def from_image(cls, image: Any) -> "PixelBuffer":
        """
        Build a buffer from a Pillow image.

        Args:
            image: PIL Image in any mode (converted to RGBA)

        Returns:
            New PixelBuffer holding the image pixels

        Raises:
            TypeError: If image is not a PIL Image
        """
        if not hasattr(image, "convert"):
            raise TypeError(f"Expected PIL Image, got {type(image)}")

        rgba = np.asarray(image.convert(PIL_EXPORT_MODE), dtype=np.uint8)
        return cls.from_array(rgba[..., _SWAP_RED_BLUE])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self):
        return self._width, self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def clear(self, background: BgraBytes = BGRA_WHITE) -> None:
        self._pixels[...] = background

    def get_bgra(self, x: int, y: int) -> BgraBytes:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} buffer")
        blue, green, red, alpha = self._pixels[y, x]
        return int(blue), int(green), int(red), int(alpha)

    def get_pixel(self, x: int, y: int) -> Color:
        return Color.from_bgra(self.get_bgra(x, y))

    def set_pixel(self, x: int, y: int, bgra: BgraBytes) -> None:
        if self.in_bounds(x, y):
            self._pixels[y, x] = bgra

    def fill_span(self, x_start: int, y: int, x_end: int, bgra: BgraBytes) -> None:
        """Write ``bgra`` to columns ``[x_start, x_end)`` of row ``y`` in one slice."""
        if not 0 <= y < self._height:
            return
        x_start = max(0, x_start)
        x_end = min(self._width, x_end)
        if x_end > x_start:
            self._pixels[y, x_start:x_end] = bgra

    def put_span(self, x_start: int, y: int, pixels: np.ndarray) -> None:
        """Write an ``(n, 4)`` BGRA array to row ``y`` starting at ``x_start``, clipped."""
        if not 0 <= y < self._height:
            return
        pixels = np.asarray(pixels, dtype=np.uint8)
        x_end = min(self._width, x_start + len(pixels))
        skip = max(0, -x_start)
        if x_end > x_start + skip:
            self._pixels[y, x_start + skip:x_end] = pixels[skip:x_end - x_start]

    def get_row(self, y: int) -> np.ndarray:
        """Copy of row ``y`` as a ``(width, 4)`` BGRA array."""
        if not 0 <= y < self._height:
            raise IndexError(f"Row {y} is outside the {self._width}x{self._height} buffer")
        return self._pixels[y].copy()

    def match_row(self, y: int, bgra: BgraBytes) -> np.ndarray:
        """
        Boolean mask of the pixels in row ``y`` exactly equal to ``bgra``.

        Rows outside the buffer give an all-False mask.
        """
        if not 0 <= y < self._height:
            return np.zeros(self._width, dtype=bool)
        return np.all(self._pixels[y] == np.asarray(bgra, dtype=np.uint8), axis=-1)

    def find_run(self, x: int, y: int, bgra: BgraBytes) -> Tuple[int, int]:
        """
        Widen (x, y) into the maximal run of ``bgra`` pixels on its row.

        Args:
            x: Column inside the run
            y: Row to scan
            bgra: Byte tuple the run consists of

        Returns:
            (left, right), both exclusive: the run covers columns left+1 .. right-1.
            (x, x) when (x, y) itself does not match or lies outside the buffer.
        """
        if not self.in_bounds(x, y):
            return x, x
        row = self.match_row(y, bgra)
        if not row[x]:
            return x, x

        stops_left = np.flatnonzero(~row[:x])
        stops_right = np.flatnonzero(~row[x + 1:])
        left = int(stops_left[-1]) if stops_left.size else -1
        right = x + 1 + int(stops_right[0]) if stops_right.size else self._width
        return left, right

    def set_base_color(self, x: int, y: int) -> Color:
        """Record the color under (x, y) as the region flood fill may repaint."""
        self.base_color = self.get_pixel(x, y)
        return self.base_color

    def snapshot(self) -> np.ndarray:
        """Copy of the raw BGRA array."""
        return self._pixels.copy()

    def copy(self) -> "PixelBuffer":
        duplicate = PixelBuffer.from_array(self._pixels)
        duplicate.base_color = self.base_color
        return duplicate

    def to_image(self) -> Any:
        """Export as a Pillow RGBA image for blitting to a display surface."""
        return Image.fromarray(np.ascontiguousarray(self._pixels[..., _SWAP_RED_BLUE]))

    def count_pixels(self, bgra: BgraBytes, region: Optional[tuple] = None) -> int:
        """
        Count pixels exactly equal to ``bgra``.

        Args:
            bgra: Byte tuple to look for
            region: Optional (left, top, right, bottom) box, right/bottom exclusive

        Returns:
            Number of matching pixels
        """
        pixels = self._pixels
        if region is not None:
            left, top, right, bottom = region
            pixels = pixels[max(0, top):bottom, max(0, left):right]
        return int(np.all(pixels == np.asarray(bgra, dtype=np.uint8), axis=-1).sum())

    def __repr__(self) -> str:
        return f"PixelBuffer({self._width}x{self._height})"
