"""
Open Drawer demonstration.

Draws a convex hull, shaded triangles, Bresenham and Wu lines, a solid fill,
a textured fill and a highlighted border, then saves each canvas as a PNG.
Timing for both triangle methods is printed for comparison.

Usage:
    python examples/drawing_demo.py [output_dir]
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import random
import time

from PIL import Image

from OD_Libs.constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from OD_Libs.GeometryLib import Colors, Point
from OD_Libs.RasterLib import Drawer, DrawerOptions


def demo_hull(output_dir):
    """Example: random points enclosed by their convex hull."""
    print("=" * 60)
    print("Example 1: Convex Hull")
    print("=" * 60)

    drawer = Drawer(DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
    rng = random.Random(7)
    for _ in range(40):
        drawer.add_point(rng.randint(100, 700), rng.randint(100, 550))

    hull = drawer.create_hull()
    print(f"✓ {len(drawer.points)} points, {len(hull)} hull vertices")

    filled = drawer.fill(400, 325, Colors.GREEN)
    print(f"✓ Filled hull interior: {filled} pixels")

    path = output_dir / "hull.png"
    drawer.to_image().save(path)
    print(f"  Saved {path}")


def demo_lines(output_dir):
    """Example: aliased and anti-aliased fans of lines."""
    print("\n" + "=" * 60)
    print("Example 2: Bresenham vs Wu")
    print("=" * 60)

    drawer = Drawer(420, 220)
    for algorithm, origin_x in (("bresenham", 10), ("wu", 220)):
        origin = Point(origin_x, 210)
        for step in range(0, 200, 20):
            drawer.draw_line(origin, Point(origin_x + step, 10), Colors.BLACK, algorithm=algorithm)
        print(f"✓ Drew 10 lines with {algorithm}")

    path = output_dir / "lines.png"
    drawer.to_image().save(path)
    print(f"  Saved {path}")


def demo_triangles(output_dir):
    """Example: shaded triangles with both fill methods."""
    print("\n" + "=" * 60)
    print("Example 3: Shaded Triangles")
    print("=" * 60)

    vertices = [Point(20, 380), Point(380, 380), Point(200, 20)]
    colors = [Colors.RED, Colors.GREEN, Colors.BLUE]

    for method in ("scanline", "barycentric"):
        drawer = Drawer(400, 400, DrawerOptions(triangle_method=method))
        start = time.time()
        written = drawer.draw_triangle(vertices, colors)
        elapsed = time.time() - start
        print(f"✓ {method:11s}: {written} pixels in {elapsed:.3f}s")

        path = output_dir / f"triangle_{method}.png"
        drawer.to_image().save(path)
        print(f"  Saved {path}")


def demo_texture_and_border(output_dir):
    """Example: textured fill inside an outline, then highlight the outline."""
    print("\n" + "=" * 60)
    print("Example 4: Texture Fill and Border Highlight")
    print("=" * 60)

    drawer = Drawer(300, 300)
    outline = [Point(40, 60), Point(250, 30), Point(270, 240), Point(60, 270)]
    drawer.draw_polygon(outline)

    texture = Image.new("RGB", (16, 16), (240, 200, 80))
    for x in range(16):
        texture.putpixel((x, x), (120, 60, 20))

    painted = drawer.fill_texture(150, 150, texture)
    print(f"✓ Textured {painted} pixels")

    border = drawer.highlight(150, 150, Colors.RED)
    print(f"✓ Highlighted {len(border)} border pixels")

    path = output_dir / "texture.png"
    drawer.to_image().save(path)
    print(f"  Saved {path}")


def main():
    """Run all drawing examples."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("demo_output")
    output_dir.mkdir(parents=True, exist_ok=True)

    demo_hull(output_dir)
    demo_lines(output_dir)
    demo_triangles(output_dir)
    demo_texture_and_border(output_dir)

    print("\n" + "=" * 60)
    print(f"All images written to {output_dir.resolve()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
