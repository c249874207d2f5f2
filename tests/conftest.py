"""
Pytest configuration and shared fixtures for Open Drawer tests.

This module provides shared buffers and colors used across
multiple test modules.
"""

import pytest

from OD_Libs.GeometryLib.color import Color, Colors
from OD_Libs.GeometryLib.primitives import Point
from OD_Libs.RasterLib.line_rasterizer import draw_polygon
from OD_Libs.RasterLib.pixel_buffer import PixelBuffer

RECT_CORNERS = [Point(5, 5), Point(25, 5), Point(25, 20), Point(5, 20)]


@pytest.fixture
def white_buffer():
    """
    Provide a blank 40x30 buffer.

    Returns:
        PixelBuffer cleared to opaque white
    """
    return PixelBuffer(40, 30)


@pytest.fixture
def outlined_buffer(white_buffer):
    """
    Provide a 40x30 white buffer with a closed black rectangle outline.

    Returns:
        PixelBuffer with the RECT_CORNERS outline drawn in black
    """
    draw_polygon(white_buffer, RECT_CORNERS, Colors.BLACK)
    return white_buffer


@pytest.fixture
def primary_colors():
    """
    Provide the three primary colors as Color objects.

    Returns:
        List of red, green and blue Colors
    """
    return [Colors.RED, Colors.GREEN, Colors.BLUE]


@pytest.fixture
def sample_bgra_colors():
    """
    Provide a list of sample BGRA byte tuples for testing.

    Returns:
        List of (B, G, R, A) tuples with common test colors
    """
    return [
        (0, 0, 255, 255),      # Red
        (0, 255, 0, 255),      # Green
        (255, 0, 0, 255),      # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),        # Black
        (128, 128, 128, 255),  # Gray
    ]


@pytest.fixture
def near_black():
    """A dark gray within the default border threshold of black."""
    return Color(20, 20, 20)
