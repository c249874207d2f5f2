"""
Color value type for Open Drawer.

Channels are kept as unclamped floats so that interpolation can take
differences, sums and scalar multiples without clipping. Values are clamped
to [0, 255] and rounded only when converted to pixel bytes.

Classes:
    Color: Blue/green/red/alpha color with linear arithmetic
    Colors: Named palette

Type Aliases:
    BgraBytes: A tuple of 4 integers in buffer byte order (0-255)
    RgbaColor: A tuple of 4 integers in Pillow channel order (0-255)
"""

import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from OD_Libs.constants import (
    BGRA_BLACK,
    BGRA_BLUE,
    BGRA_GREEN,
    BGRA_RED,
    BGRA_WHITE,
    DEFAULT_SIMILARITY_THRESHOLD,
    MAX_CHANNEL_VALUE,
    MIN_CHANNEL_VALUE,
    OPAQUE_ALPHA,
)

BgraBytes = Tuple[int, int, int, int]
RgbaColor = Tuple[int, int, int, int]


def _clamp_byte(value: float) -> int:
    # Halves round up, not to even.
    return int(max(MIN_CHANNEL_VALUE, min(MAX_CHANNEL_VALUE, math.floor(value + 0.5))))


@dataclass(frozen=True)
class Color:
    blue: float
    green: float
    red: float
    alpha: float = OPAQUE_ALPHA

    @classmethod
    def from_bgra(cls, data: Sequence[int]) -> "Color":
        blue, green, red, alpha = data
        return cls(float(blue), float(green), float(red), float(alpha))

    @classmethod
    def from_rgba(cls, data: Sequence[int]) -> "Color":
        red, green, blue, alpha = data
        return cls(float(blue), float(green), float(red), float(alpha))

    def get_diff_with(self, other: "Color") -> "Color":
        """Channel-wise ``self - other`` on B, G, R; the result is opaque."""
        return Color(self.blue - other.blue, self.green - other.green, self.red - other.red)

    def get_sum_with(self, other: "Color") -> "Color":
        """Channel-wise ``self + other`` on B, G, R; the result is opaque."""
        return Color(self.blue + other.blue, self.green + other.green, self.red + other.red)

    def get_mult_by(self, k: float) -> "Color":
        """Scale B, G, R by ``k``; the result is opaque."""
        return Color(self.blue * k, self.green * k, self.red * k)

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.blue, self.green, self.red, alpha)

    def to_bgra(self) -> BgraBytes:
        return (
            _clamp_byte(self.blue),
            _clamp_byte(self.green),
            _clamp_byte(self.red),
            _clamp_byte(self.alpha),
        )

    def to_rgba(self) -> RgbaColor:
        blue, green, red, alpha = self.to_bgra()
        return (red, green, blue, alpha)

    def is_similar(self, other: "Color", threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
        """
        Check whether two colors are close in RGB space.

        Args:
            other: Color to compare with
            threshold: Maximum Euclidean (R, G, B) distance; alpha is ignored

        Returns:
            True if the distance is at most ``threshold``
        """
        r_diff = self.red - other.red
        g_diff = self.green - other.green
        b_diff = self.blue - other.blue
        distance = (r_diff * r_diff + g_diff * g_diff + b_diff * b_diff) ** 0.5
        return distance <= threshold


class Colors:
    """Named palette."""

    BLACK = Color.from_bgra(BGRA_BLACK)
    WHITE = Color.from_bgra(BGRA_WHITE)
    RED = Color.from_bgra(BGRA_RED)
    GREEN = Color.from_bgra(BGRA_GREEN)
    BLUE = Color.from_bgra(BGRA_BLUE)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Color:
        """Pick one of red, green or blue."""
        chooser = rng if rng is not None else random
        return chooser.choice((cls.RED, cls.GREEN, cls.BLUE))
