"""
Tests for the Drawer facade and DrawerOptions.

Covers option validation, hull point editing, hull outlines and the
forwarding of drawing and fill calls to the buffer.
"""

import dataclasses
import unittest

import pytest
from PIL import Image

from OD_Libs.constants import BGRA_BLACK, DETECT_POINT_THRESHOLD
from OD_Libs.GeometryLib.color import Colors
from OD_Libs.GeometryLib.primitives import Line, Point
from OD_Libs.RasterLib.drawer import Drawer, DrawerOptions

HULL_INPUT = [(20, 20), (120, 20), (120, 100), (20, 100), (70, 60)]
BOX = [Point(10, 10), Point(60, 10), Point(60, 40), Point(10, 40)]

BLUE = Colors.BLUE.to_bgra()
RED = Colors.RED.to_bgra()


@pytest.fixture
def drawer():
    """Provide a 200x150 drawer with default options."""
    return Drawer(200, 150)


@pytest.fixture
def boxed_drawer(drawer):
    """Provide a drawer with a black 51x31 box outline."""
    drawer.draw_polygon(BOX)
    return drawer


class TestDrawerOptions(unittest.TestCase):
    """Test cases for DrawerOptions validation."""

    def test_defaults(self):
        """Test the default configuration."""
        options = DrawerOptions()
        self.assertEqual(options.similarity_threshold, 50)
        self.assertEqual(options.point_thickness, 1)
        self.assertEqual(options.line_algorithm, "bresenham")
        self.assertEqual(options.triangle_method, "scanline")
        self.assertEqual(options.detect_threshold, DETECT_POINT_THRESHOLD)

    def test_negative_threshold(self):
        """Test that a negative similarity threshold is rejected."""
        with self.assertRaises(ValueError):
            DrawerOptions(similarity_threshold=-1)

    def test_negative_thickness(self):
        """Test that negative brush sizes are rejected."""
        with self.assertRaises(ValueError):
            DrawerOptions(point_thickness=-1)
        with self.assertRaises(ValueError):
            DrawerOptions(marker_thickness=-2)

    def test_unknown_algorithms(self):
        """Test that unsupported algorithm names are rejected."""
        with self.assertRaises(ValueError):
            DrawerOptions(line_algorithm="dda")
        with self.assertRaises(ValueError):
            DrawerOptions(triangle_method="zbuffer")

    def test_negative_detect_threshold(self):
        """Test that a negative pick distance is rejected."""
        with self.assertRaises(ValueError):
            DrawerOptions(detect_threshold=-5)

    def test_is_frozen(self):
        """Test that options cannot be changed after creation."""
        options = DrawerOptions()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            options.line_algorithm = "wu"


class TestDrawerBuffer:
    """Tests for buffer access through the Drawer."""

    def test_dimensions(self, drawer):
        """Should expose the buffer size."""
        assert (drawer.width, drawer.height) == (200, 150)

    def test_invalid_dimensions(self):
        """Should reject empty canvases."""
        with pytest.raises(ValueError):
            Drawer(0, 10)

    def test_background_option(self):
        """Should clear to the configured background."""
        drawer = Drawer(10, 10, DrawerOptions(background=BGRA_BLACK))
        assert drawer.get_pixel(5, 5) == Colors.BLACK
        drawer.draw_line(Point(0, 0), Point(9, 0), Colors.RED)
        drawer.clear()
        assert drawer.buffer.count_pixels(BGRA_BLACK) == 100

    def test_to_image(self, drawer):
        """Should export a Pillow RGBA image of the canvas."""
        drawer.draw_point(Point(3, 4), Colors.RED)
        image = drawer.to_image()
        assert isinstance(image, Image.Image)
        assert image.size == (200, 150)
        assert image.getpixel((3, 4)) == (255, 0, 0, 255)


class TestDrawerDrawing:
    """Tests for drawing calls forwarded by the Drawer."""

    def test_line_uses_default_color(self, drawer):
        """Should draw with the configured line color."""
        drawer.draw_line(Point(0, 0), Point(9, 0))
        assert drawer.buffer.count_pixels(Colors.BLACK.to_bgra()) == 10

    def test_line_algorithm_option(self):
        """Should use the configured line algorithm."""
        drawer = Drawer(20, 20, DrawerOptions(line_algorithm="wu"))
        drawer.draw_line(Point(0, 0), Point(10, 0), Colors.RED)
        assert drawer.buffer.count_pixels((0, 0, 255, 0)) == 11

    def test_segment(self, drawer):
        """Should draw a Line entity."""
        drawer.draw_segment(Line.from_coords(5, 5, 5, 14), Colors.RED)
        assert drawer.buffer.count_pixels(RED) == 10

    def test_triangle_methods(self):
        """Should shade the centroid the same with either method."""
        vertices = [Point(0, 0), Point(30, 0), Point(15, 27)]
        colors = [Colors.RED, Colors.GREEN, Colors.BLUE]
        for method in ("scanline", "barycentric"):
            drawer = Drawer(40, 30, DrawerOptions(triangle_method=method))
            assert drawer.draw_triangle(vertices, colors) > 0
            assert drawer.buffer.get_bgra(15, 9) == (85, 85, 85, 255)


class TestDrawerFills:
    """Tests for fills and highlighting through the Drawer."""

    def test_fill_samples_base_color(self, boxed_drawer):
        """Should fill the box interior after sampling the seed color."""
        painted = boxed_drawer.fill(30, 25, Colors.GREEN)
        assert painted == 49 * 29
        assert boxed_drawer.buffer.base_color == Colors.WHITE

    def test_refill_recolors_region(self, boxed_drawer):
        """Should repaint an already filled region with a new color."""
        boxed_drawer.fill(30, 25, Colors.GREEN)
        assert boxed_drawer.fill(30, 25, Colors.RED) == 49 * 29
        assert boxed_drawer.buffer.base_color == Colors.GREEN

    def test_fill_outside_canvas(self, boxed_drawer):
        """Should ignore seeds outside the canvas."""
        assert boxed_drawer.fill(500, 25, Colors.GREEN) == 0
        assert boxed_drawer.fill_texture(-3, 25, Image.new("RGB", (4, 4))) == 0

    def test_fill_texture(self, boxed_drawer):
        """Should tile a Pillow texture over the box interior."""
        texture = Image.new("RGB", (4, 4), (200, 10, 10))
        assert boxed_drawer.fill_texture(30, 25, texture) == 49 * 29
        assert boxed_drawer.get_pixel(30, 25).to_rgba() == (200, 10, 10, 255)

    def test_highlight(self, boxed_drawer):
        """Should recolor the traced outline."""
        border = boxed_drawer.highlight(30, 25, Colors.RED)
        assert len(border) == 160
        assert boxed_drawer.buffer.count_pixels(RED) == 160


class TestDrawerPoints:
    """Tests for the hull point set."""

    def test_add_point_draws_marker(self, drawer):
        """Should store the point and stamp a blue marker."""
        point = drawer.add_point(50, 50)
        assert point == Point(50, 50)
        assert drawer.points == [Point(50, 50)]
        assert drawer.buffer.count_pixels(BLUE) == 29

    def test_points_is_a_copy(self, drawer):
        """Should not let callers edit the stored list."""
        drawer.add_point(1, 1)
        drawer.points.append(Point(9, 9))
        assert drawer.points == [Point(1, 1)]

    def test_detect_point(self, drawer):
        """Should find the nearest stored point within 25 pixels."""
        drawer.add_point(20, 20)
        drawer.add_point(100, 100)
        assert drawer.detect_point(30, 30) == Point(20, 20)
        assert drawer.detect_point(50, 50) is None

    def test_remove_point_redraws(self, drawer):
        """Should drop the picked point and erase its marker."""
        drawer.add_point(20, 20)
        drawer.add_point(100, 100)

        assert drawer.remove_point(22, 21) == Point(20, 20)
        assert drawer.points == [Point(100, 100)]
        assert drawer.get_pixel(20, 20) == Colors.WHITE
        assert drawer.get_pixel(100, 100) == Colors.BLUE

    def test_remove_without_match(self, drawer):
        """Should leave everything alone when nothing is near."""
        drawer.add_point(20, 20)
        assert drawer.remove_point(150, 120) is None
        assert drawer.points == [Point(20, 20)]

    def test_clear_points(self, drawer):
        """Should forget all points and blank the canvas."""
        drawer.add_point(20, 20)
        drawer.clear_points()
        assert drawer.points == []
        assert drawer.buffer.count_pixels(BLUE) == 0

    def test_create_hull(self, drawer):
        """Should outline the hull of the stored points in red."""
        for x, y in HULL_INPUT:
            drawer.add_point(x, y)

        hull = drawer.create_hull()

        assert set(hull.points) == {Point(20, 20), Point(120, 20), Point(120, 100), Point(20, 100)}
        assert drawer.get_pixel(70, 20) == Colors.RED
        assert drawer.get_pixel(120, 60) == Colors.RED
        assert drawer.get_pixel(70, 60) == Colors.BLUE

    def test_create_hull_custom_color(self, drawer):
        """Should outline with the given color."""
        for x, y in HULL_INPUT:
            drawer.add_point(x, y)
        drawer.create_hull(Colors.GREEN)
        assert drawer.get_pixel(20, 60) == Colors.GREEN

    def test_create_hull_without_points(self, drawer):
        """Should return None when there is nothing to enclose."""
        assert drawer.create_hull() is None
