"""
GeometryLib - Geometric primitives and algorithms

This module provides the value types (points, lines, colors, polygons)
and the pure geometry algorithms (convex hull, point-in-polygon) used
by the rasterizers.
"""

from OD_Libs.GeometryLib.primitives import Point, Line, detect_point
from OD_Libs.GeometryLib.color import BgraBytes, RgbaColor, Color, Colors
from OD_Libs.GeometryLib.polygon import Edge, EdgeDirection, Polygon
from OD_Libs.GeometryLib.hull import Hull

__all__ = [
    "Point",
    "Line",
    "detect_point",
    "BgraBytes",
    "RgbaColor",
    "Color",
    "Colors",
    "Edge",
    "EdgeDirection",
    "Polygon",
    "Hull",
]
