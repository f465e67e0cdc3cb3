"""
Intersection Report Schema
==========================

Bounded Context: Output Data Structures

This module defines the report printed by the CLI.

Design:
- ObjectArea: Object name paired with its bounding rectangle (a Shape)
- ObjectIntersection: Pair of names paired with their overlap
- IntersectionReport: Both lists, in input / search order
- Immutable (frozen dataclasses)

Report Shape:
    {
        "areas": [{"name": "a", "area": RECT}, ...],
        "intersections": [{"names": ["a", "b"], "area": RECT}, ...]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from rectscan_core.geometry.intersections import Shape
from rectscan_core.geometry.shapes import BoundingRect
from .common import rect_to_dict


@dataclass(frozen=True)
class ObjectArea(Shape):
    """
    Named bounding rectangle.

    Attributes:
        name: Object name
        area: Canonical bounding rectangle of the object
    """
    name: str
    area: BoundingRect

    def bounding_rect(self) -> BoundingRect:
        return self.area

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'name': self.name, 'area': rect_to_dict(self.area)}


@dataclass(frozen=True)
class ObjectIntersection:
    """
    Overlap between two named objects.

    Attributes:
        names: (first, second) names, in input order
        area: Overlap rectangle
    """
    names: Tuple[str, str]
    area: BoundingRect

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'names': list(self.names), 'area': rect_to_dict(self.area)}


@dataclass(frozen=True)
class IntersectionReport:
    """
    Complete result of one scan.

    Attributes:
        areas: One entry per input object, in input order
        intersections: One entry per overlapping pair, in search order
    """
    areas: List[ObjectArea] = field(default_factory=list)
    intersections: List[ObjectIntersection] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict.

        Returns:
            Dictionary ready for json.dumps()
        """
        return {
            'areas': [area.to_dict() for area in self.areas],
            'intersections': [hit.to_dict() for hit in self.intersections],
        }

    @property
    def intersection_count(self) -> int:
        """Number of overlapping pairs."""
        return len(self.intersections)
