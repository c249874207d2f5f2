"""
OD_Libs - Open Drawer Library Modules

This package contains the core of the Open Drawer raster engine,
organized into specialized sub-packages:

- GeometryLib: Points, lines, colors, polygons, convex hulls
- RasterLib: Pixel buffer, line/triangle rasterizers, fills, Drawer facade
"""

__version__ = "0.1.0"
