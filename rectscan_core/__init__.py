"""
RectScan Core
=============

Bounded Context: Overlap detection between axis-aligned rectangles.

Architecture:

    rectscan_core/
    ├── geometry/            # Pure geometry (immutable, stateless)
    │   ├── shapes.py        # Point2D, BoundingRect, interval_intersection
    │   └── intersections.py # Shape, Intersection, list_intersections
    │
    └── rendering/           # Visualization (stateless drawing)
        └── visualizer.py    # IntersectionVisualizer

Usage:

    from rectscan_core import BoundingRect, Point2D, Shape, list_intersections

    class Box(Shape):
        def __init__(self, x, y, w, h):
            self.rect = BoundingRect.from_xywh(x, y, w, h)

        def bounding_rect(self):
            return self.rect

    boxes = [Box(1, 1, 4, 4), Box(2, 2, 1, 1)]
    for hit in list_intersections(boxes):
        print(hit.a_idx, hit.b_idx, hit.area)
"""

# Geometry Layer (immutable, stateless)
from rectscan_core.geometry.shapes import BoundingRect, Point2D, interval_intersection
from rectscan_core.geometry.intersections import Intersection, Shape, list_intersections

# Rendering Layer (stateless)
from rectscan_core.rendering.visualizer import CanvasTransform, IntersectionVisualizer

__all__ = [
    # Geometry
    "Point2D",
    "BoundingRect",
    "interval_intersection",
    "Shape",
    "Intersection",
    "list_intersections",
    # Rendering
    "CanvasTransform",
    "IntersectionVisualizer",
]

__version__ = "1.0.0"
