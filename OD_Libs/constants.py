"""
Constants and configuration values for Open Drawer.

This module centralizes all constant values, magic numbers, and
default settings used throughout the drawing engine.
"""

# Canvas constants
DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 650
CHANNELS_PER_PIXEL = 4

# Byte layout of a pixel (BGRA order)
CHANNEL_BLUE = 0
CHANNEL_GREEN = 1
CHANNEL_RED = 2
CHANNEL_ALPHA = 3

MIN_CHANNEL_VALUE = 0
MAX_CHANNEL_VALUE = 255
OPAQUE_ALPHA = 255

# Palette (BGRA byte tuples)
BGRA_BLACK = (0, 0, 0, 255)
BGRA_WHITE = (255, 255, 255, 255)
BGRA_RED = (0, 0, 255, 255)
BGRA_GREEN = (0, 255, 0, 255)
BGRA_BLUE = (255, 0, 0, 255)

# Fill / border matching
DEFAULT_SIMILARITY_THRESHOLD = 50.0

# Point markers
DEFAULT_POINT_THICKNESS = 1
HULL_POINT_THICKNESS = 6
DETECT_POINT_THRESHOLD = 25

# Algorithm names
LINE_ALGORITHM_BRESENHAM = "bresenham"
LINE_ALGORITHM_WU = "wu"
LINE_ALGORITHMS = (LINE_ALGORITHM_BRESENHAM, LINE_ALGORITHM_WU)

TRIANGLE_METHOD_SCANLINE = "scanline"
TRIANGLE_METHOD_BARYCENTRIC = "barycentric"
TRIANGLE_METHODS = (TRIANGLE_METHOD_SCANLINE, TRIANGLE_METHOD_BARYCENTRIC)

# Border tracing neighbourhood (E, SE, S, SW, W, NW, N, NE)
NEIGHBOR_DIRECTIONS = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

# Image export
PIL_EXPORT_MODE = "RGBA"
