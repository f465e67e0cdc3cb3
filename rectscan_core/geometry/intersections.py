"""
Pairwise Intersection Search
============================

Stateless search for intersecting shapes.

Design:
- Shape is a capability: produce a bounding rectangle, optionally
  override how two shapes of the same kind intersect
- Naive O(n^2) pair scan, no spatial index
- Results are emitted in lexicographic (a_idx, b_idx) order
- Input sequence is never mutated
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rectscan_core.geometry.shapes import BoundingRect


class Shape(ABC):
    """
    Anything that can be reduced to an axis-aligned bounding rectangle.

    Subclasses must implement bounding_rect(). intersection() defaults to
    intersecting both bounding rectangles and may be overridden by shapes
    that know a tighter answer.

    Example:
        >>> class Box(Shape):
        ...     def __init__(self, rect):
        ...         self.rect = rect
        ...     def bounding_rect(self):
        ...         return self.rect
    """

    @abstractmethod
    def bounding_rect(self) -> BoundingRect:
        """Return the rectangle bounding this shape."""

    def intersection(self, other: "Shape") -> Optional[BoundingRect]:
        """Calculate the intersection with another shape, if any."""
        return self.bounding_rect().intersect(other.bounding_rect())


@dataclass(frozen=True)
class Intersection:
    """
    Shapes intersection summary.

    Attributes:
        area: Overlap region of the two shapes
        a_idx: Index of the first shape in the searched sequence
        b_idx: Index of the second shape (always > a_idx)
    """

    area: BoundingRect
    a_idx: int
    b_idx: int


def list_intersections(shapes: Sequence[Shape]) -> List[Intersection]:
    """
    Search for intersecting shapes in the given sequence.

    Every unordered pair is compared once, so the cost is O(n^2)
    intersection tests. Outer index ascends, inner index ascends, and the
    result keeps that order.

    Args:
        shapes: Shapes to compare

    Returns:
        One Intersection per overlapping pair; empty for fewer than two shapes
    """
    intersections: List[Intersection] = []

    for i in range(len(shapes)):
        for j in range(i + 1, len(shapes)):
            area = shapes[i].intersection(shapes[j])
            if area is not None:
                intersections.append(Intersection(area=area, a_idx=i, b_idx=j))

    return intersections
