"""
RasterLib - Pixel buffer and rasterization algorithms

This module provides the BGRA pixel buffer, line and triangle
rasterizers, region fills, border tracing and the Drawer facade.
"""

from OD_Libs.RasterLib.pixel_buffer import PixelBuffer
from OD_Libs.RasterLib.line_rasterizer import (
    bresenham_points,
    wu_samples,
    draw_line,
    draw_line_bresenham,
    draw_line_wu,
    draw_segment,
    draw_segments,
    draw_point,
    draw_polygon,
)
from OD_Libs.RasterLib.triangle_rasterizer import (
    is_point_in_triangle,
    interpolate_color,
    normalize_triangle,
    draw_triangle,
    draw_triangle_scanline,
    draw_triangle_barycentric,
)
from OD_Libs.RasterLib.region_fill import (
    flood_fill,
    fill_texture,
    trace_border,
    highlight_border,
)
from OD_Libs.RasterLib.drawer import Drawer, DrawerOptions

__all__ = [
    "PixelBuffer",
    "bresenham_points",
    "wu_samples",
    "draw_line",
    "draw_line_bresenham",
    "draw_line_wu",
    "draw_segment",
    "draw_segments",
    "draw_point",
    "draw_polygon",
    "is_point_in_triangle",
    "interpolate_color",
    "normalize_triangle",
    "draw_triangle",
    "draw_triangle_scanline",
    "draw_triangle_barycentric",
    "flood_fill",
    "fill_texture",
    "trace_border",
    "highlight_border",
    "Drawer",
    "DrawerOptions",
]
