"""
Drawer facade over the Open Drawer engine.

Bundles a PixelBuffer with the rasterizers, fills and geometry algorithms
behind one object, so a display layer only has to forward buffer
coordinates and re-blit ``to_image()`` after each call. It also keeps the
point set used for convex hull construction.

Example:
    >>> drawer = Drawer(200, 150)
    >>> for x, y in [(20, 20), (180, 30), (100, 130), (90, 60)]:
    ...     drawer.add_point(x, y)
    >>> hull = drawer.create_hull()
    >>> drawer.fill(100, 60, Colors.GREEN)
    >>> image = drawer.to_image()
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from OD_Libs.constants import (
    BGRA_WHITE,
    DEFAULT_POINT_THICKNESS,
    DEFAULT_SIMILARITY_THRESHOLD,
    DETECT_POINT_THRESHOLD,
    HULL_POINT_THICKNESS,
    LINE_ALGORITHM_BRESENHAM,
    LINE_ALGORITHMS,
    TRIANGLE_METHOD_SCANLINE,
    TRIANGLE_METHODS,
)
from OD_Libs.GeometryLib.color import BgraBytes, Color, Colors
from OD_Libs.GeometryLib.hull import Hull
from OD_Libs.GeometryLib.polygon import Polygon
from OD_Libs.GeometryLib.primitives import Line, Point, detect_point
from OD_Libs.RasterLib import region_fill as fills
from OD_Libs.RasterLib import line_rasterizer as lines
from OD_Libs.RasterLib import triangle_rasterizer as triangles
from OD_Libs.RasterLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawerOptions:
    """Configuration for a Drawer.

    Attributes:
        similarity_threshold: RGB distance from black counted as border
        line_color: Default color for lines, outlines and hulls
        point_color: Color of hull input point markers
        point_thickness: Default brush diameter for ``draw_point``
        marker_thickness: Brush diameter of hull input point markers
        line_algorithm: Default line algorithm ("bresenham" or "wu")
        triangle_method: Default triangle method ("scanline" or "barycentric")
        background: BGRA bytes used by ``clear``
        detect_threshold: Max distance for picking a stored point
    """
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    line_color: Color = field(default=Colors.BLACK)
    point_color: Color = field(default=Colors.BLUE)
    point_thickness: int = DEFAULT_POINT_THICKNESS
    marker_thickness: int = HULL_POINT_THICKNESS
    line_algorithm: str = LINE_ALGORITHM_BRESENHAM
    triangle_method: str = TRIANGLE_METHOD_SCANLINE
    background: BgraBytes = BGRA_WHITE
    detect_threshold: int = DETECT_POINT_THRESHOLD

    def __post_init__(self):
        """Validate option values."""
        if self.similarity_threshold < 0:
            raise ValueError(f"similarity_threshold must be >= 0, got {self.similarity_threshold}")

        if self.point_thickness < 0 or self.marker_thickness < 0:
            raise ValueError(
                f"thickness must be >= 0, got point={self.point_thickness}, marker={self.marker_thickness}"
            )

        if self.line_algorithm not in LINE_ALGORITHMS:
            raise ValueError(f"Unsupported line algorithm: {self.line_algorithm}")

        if self.triangle_method not in TRIANGLE_METHODS:
            raise ValueError(f"Unsupported triangle method: {self.triangle_method}")

        if self.detect_threshold < 0:
            raise ValueError(f"detect_threshold must be >= 0, got {self.detect_threshold}")


class Drawer:
    """Single-buffer software renderer. Not thread-safe; serialize all calls."""

    def __init__(self, width: int, height: int, options: Optional[DrawerOptions] = None):
        self.options = options if options is not None else DrawerOptions()
        self.buffer = PixelBuffer(width, height, self.options.background)
        self._points: List[Point] = []

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    # ------------------------------------------------------------------
    # Buffer access
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.buffer.clear(self.options.background)

    def get_pixel(self, x: int, y: int) -> Color:
        return self.buffer.get_pixel(x, y)

    def set_base_color(self, x: int, y: int) -> Color:
        return self.buffer.set_base_color(x, y)

    def to_image(self) -> Any:
        return self.buffer.to_image()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_point(self, point: Point, color: Optional[Color] = None, thickness: Optional[int] = None) -> None:
        lines.draw_point(
            self.buffer,
            point,
            color if color is not None else self.options.line_color,
            thickness if thickness is not None else self.options.point_thickness,
        )

    def draw_line(
        self,
        start: Point,
        end: Point,
        color: Optional[Color] = None,
        algorithm: Optional[str] = None,
    ) -> None:
        lines.draw_line(
            self.buffer,
            start,
            end,
            color if color is not None else self.options.line_color,
            algorithm or self.options.line_algorithm,
        )

    def draw_segment(self, line: Line, color: Optional[Color] = None, algorithm: Optional[str] = None) -> None:
        self.draw_line(line.start, line.end, color, algorithm)

    def draw_polygon(
        self,
        shape: Union[Polygon, Sequence[Point]],
        color: Optional[Color] = None,
        algorithm: Optional[str] = None,
    ) -> None:
        lines.draw_polygon(
            self.buffer,
            shape,
            color if color is not None else self.options.line_color,
            algorithm or self.options.line_algorithm,
        )

    def draw_triangle(
        self,
        vertices: Sequence[Point],
        colors: Sequence[Color],
        method: Optional[str] = None,
    ) -> int:
        return triangles.draw_triangle(self.buffer, vertices, colors, method or self.options.triangle_method)

    # ------------------------------------------------------------------
    # Fills
    # ------------------------------------------------------------------

    def fill(self, x: int, y: int, color: Color) -> int:
        """Sample the base color under (x, y), then flood fill from there."""
        if not self.buffer.in_bounds(x, y):
            return 0
        self.buffer.set_base_color(x, y)
        return fills.flood_fill(self.buffer, x, y, color)

    def fill_texture(self, x: int, y: int, texture: Any, anchor: Optional[Point] = None) -> int:
        """Sample the base color under (x, y), then fill with a tiled texture."""
        if not self.buffer.in_bounds(x, y):
            return 0
        self.buffer.set_base_color(x, y)
        return fills.fill_texture(self.buffer, x, y, texture, anchor)

    def highlight(self, x: int, y: int, color: Color) -> List[Point]:
        return fills.highlight_border(self.buffer, x, y, color, self.options.similarity_threshold)

    # ------------------------------------------------------------------
    # Hull point set
    # ------------------------------------------------------------------

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def add_point(self, x: int, y: int) -> Point:
        point = Point(x, y)
        self._points.append(point)
        lines.draw_point(self.buffer, point, self.options.point_color, self.options.marker_thickness)
        return point

    def detect_point(self, x: int, y: int) -> Optional[Point]:
        return detect_point(self._points, Point(x, y), self.options.detect_threshold)

    def remove_point(self, x: int, y: int) -> Optional[Point]:
        """Remove the stored point nearest to (x, y), if close enough, and redraw."""
        target = self.detect_point(x, y)
        if target is None:
            return None
        self._points.remove(target)
        self.redraw()
        return target

    def clear_points(self) -> None:
        self._points.clear()
        self.clear()

    def redraw(self) -> None:
        """Clear the buffer and re-stamp every stored point."""
        self.clear()
        for point in self._points:
            lines.draw_point(self.buffer, point, self.options.point_color, self.options.marker_thickness)

    def create_hull(self, color: Optional[Color] = None) -> Optional[Hull]:
        """
        Build the convex hull of the stored points and outline it.

        Returns:
            The Hull, or None when no points are stored
        """
        if not self._points:
            return None
        hull = Hull(self._points)
        self.draw_polygon(list(hull.points), color if color is not None else Colors.RED)
        logger.debug(f"Drew hull with {len(hull)} vertices over {len(self._points)} points")
        return hull
