"""
Geometry Layer
==============

Bounded Context: Axis-aligned rectangles and pairwise overlap search.

Responsibilities:
- Canonical point and rectangle types (immutable)
- Interval and rectangle intersection
- All-pairs intersection search over arbitrary shapes
- NO I/O, NO logging, NO visualization
"""

from rectscan_core.geometry.shapes import (
    BoundingRect,
    Point2D,
    interval_intersection,
)
from rectscan_core.geometry.intersections import (
    Intersection,
    Shape,
    list_intersections,
)

__all__ = [
    "Point2D",
    "BoundingRect",
    "interval_intersection",
    "Shape",
    "Intersection",
    "list_intersections",
]
