"""
Scene Input Schema
==================

Bounded Context: Input Data Structures

This module defines the schema of the scene document read by the CLI.

Design:
- SceneObject: One named rectangle (origin + size) with opaque properties
- InputDocument: The full list of objects, order preserved
- Immutable (frozen dataclasses)
- from_dict() validates structure, raising ValueError

Document Shape:
    {
        "objects": [
            {"name": "table", "x": 1, "y": 1, "width": 4, "height": 4,
             "properties": [...]}
        ]
    }
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from rectscan_core.geometry.shapes import BoundingRect
from .common import require_number
from .report import ObjectArea


@dataclass(frozen=True)
class SceneObject:
    """
    Named rectangular object from the scene document.

    Attributes:
        name: Object name (used to label areas and intersections)
        width: Extent along x (may be negative; canonicalized later)
        height: Extent along y (may be negative; canonicalized later)
        x: Origin x-coordinate
        y: Origin y-coordinate
        properties: Opaque auxiliary values, not used by the search

    Example:
        >>> obj = SceneObject(name="table", width=4, height=4, x=1, y=1)
        >>> obj.area().area
        BoundingRect(from_point=Point2D(x=1, y=1), to_point=Point2D(x=5, y=5))
    """
    name: str
    width: float
    height: float
    x: float
    y: float
    properties: List[Any] = field(default_factory=list)

    def __post_init__(self):
        """Validate invariants."""
        far_corner = (self.x + self.width, self.y + self.height)
        if not all(math.isfinite(value) for value in far_corner):
            raise ValueError(
                f"SceneObject '{self.name}' extends beyond the float range"
            )

    def bounding_rect(self) -> BoundingRect:
        """Rectangle spanned from (x, y) to (x + width, y + height)."""
        return BoundingRect.from_xywh(self.x, self.y, self.width, self.height)

    def area(self) -> ObjectArea:
        """Reduce this object to its named bounding rectangle."""
        return ObjectArea(name=self.name, area=self.bounding_rect())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SceneObject':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys name, width, height, x, y and
                optional properties

        Returns:
            SceneObject instance

        Raises:
            ValueError: If required fields missing or invalid
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"SceneObject must be a JSON object, got {type(data).__name__}"
            )

        try:
            name = data['name']
            if not isinstance(name, str):
                raise TypeError(f"field 'name' must be a string, got {type(name).__name__}")

            properties = data.get('properties', [])
            if not isinstance(properties, list):
                raise TypeError(
                    f"field 'properties' must be a list, got {type(properties).__name__}"
                )

            return cls(
                name=name,
                width=require_number(data, 'width'),
                height=require_number(data, 'height'),
                x=require_number(data, 'x'),
                y=require_number(data, 'y'),
                properties=properties,
            )
        except KeyError as e:
            raise ValueError(f"Missing required SceneObject field: {e}") from e
        except TypeError as e:
            raise ValueError(f"Invalid SceneObject data: {e}") from e


@dataclass(frozen=True)
class InputDocument:
    """
    Complete scene document.

    Attributes:
        objects: Scene objects in file order
    """
    objects: List[SceneObject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InputDocument':
        """Deserialize from dict.

        Raises:
            ValueError: If the document or any object is malformed; the
                message names the index of the offending object
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Input document must be a JSON object, got {type(data).__name__}"
            )
        if 'objects' not in data:
            raise ValueError("Missing required InputDocument field: 'objects'")

        raw_objects = data['objects']
        if not isinstance(raw_objects, list):
            raise ValueError(
                f"Field 'objects' must be a list, got {type(raw_objects).__name__}"
            )

        objects = []
        for idx, raw in enumerate(raw_objects):
            try:
                objects.append(SceneObject.from_dict(raw))
            except ValueError as e:
                raise ValueError(f"objects[{idx}]: {e}") from e

        return cls(objects=objects)

    @property
    def object_count(self) -> int:
        """Number of objects in the document."""
        return len(self.objects)
