"""
Rectangle Geometry Module
=========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable value types (frozen dataclass pattern)
- Rectangles are always canonical: from_point is the minimum corner
- Intersection is computed independently per axis
- Touching edges do not count as overlap
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


Interval = Tuple[float, float]


@dataclass(frozen=True)
class Point2D:
    """Immutable 2D point."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingRect:
    """
    Immutable axis-aligned rectangle in canonical form.

    Use from_points() or from_xywh() to build one; both sort each axis so
    the invariant below holds regardless of corner order.

    Attributes:
        from_point: Top-left corner (minimum on both axes)
        to_point: Bottom-right corner (maximum on both axes)

    Invariants:
        - from_point.x <= to_point.x
        - from_point.y <= to_point.y
        - Zero width or height is allowed (degenerate rectangle)

    Example:
        >>> BoundingRect.from_points(Point2D(5, 1), Point2D(1, 5))
        BoundingRect(from_point=Point2D(x=1, y=1), to_point=Point2D(x=5, y=5))
    """

    from_point: Point2D
    to_point: Point2D

    @classmethod
    def from_points(cls, a: Point2D, b: Point2D) -> "BoundingRect":
        """Create rectangle from two opposite corners given in any order."""
        x1, x2 = (a.x, b.x) if a.x < b.x else (b.x, a.x)
        y1, y2 = (a.y, b.y) if a.y < b.y else (b.y, a.y)

        return cls(from_point=Point2D(x1, y1), to_point=Point2D(x2, y2))

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "BoundingRect":
        """Create rectangle from an origin corner and a size."""
        return cls.from_points(Point2D(x, y), Point2D(x + width, y + height))

    @property
    def width(self) -> float:
        return self.to_point.x - self.from_point.x

    @property
    def height(self) -> float:
        return self.to_point.y - self.from_point.y

    @property
    def area(self) -> float:
        """Rectangle area in square units."""
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        """True when the rectangle has zero width or zero height."""
        return self.width == 0 or self.height == 0

    @property
    def x_interval(self) -> Interval:
        return (self.from_point.x, self.to_point.x)

    @property
    def y_interval(self) -> Interval:
        return (self.from_point.y, self.to_point.y)

    def as_xyxy(self) -> np.ndarray:
        """Return corners as a float array [x1, y1, x2, y2]."""
        return np.array(
            [self.from_point.x, self.from_point.y, self.to_point.x, self.to_point.y],
            dtype=np.float64,
        )

    def intersect(self, other: "BoundingRect") -> Optional["BoundingRect"]:
        """
        Calculate the intersection with another rectangle.

        Symmetric: a.intersect(b) == b.intersect(a).

        Args:
            other: Rectangle to intersect with

        Returns:
            Overlap rectangle, or None if the rectangles are separated
            (or only touch) along either axis
        """
        x_overlap = interval_intersection(self.x_interval, other.x_interval)
        if x_overlap is None:
            return None

        y_overlap = interval_intersection(self.y_interval, other.y_interval)
        if y_overlap is None:
            return None

        return BoundingRect.from_points(
            Point2D(x_overlap[0], y_overlap[0]),
            Point2D(x_overlap[1], y_overlap[1]),
        )


def interval_intersection(a: Interval, b: Interval) -> Optional[Interval]:
    """
    Calculate the overlap of two closed 1D intervals (lo, hi).

    The interval with the smaller lower bound goes first; ties are ordered
    by upper bound so the result never depends on argument order.

    Args:
        a: First interval, lo <= hi
        b: Second interval, lo <= hi

    Returns:
        (lo, hi) overlap, or None when the intervals are disjoint or only
        share an endpoint
    """
    first, second = sorted((a, b))

    if second[0] >= first[1]:
        return None

    return (second[0], min(first[1], second[1]))
