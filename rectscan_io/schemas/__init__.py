"""
RectScan Schemas
================

Bounded Context: Data Structures

This module defines immutable, typed data structures for the scene
document (input) and the intersection report (output).

Design:
- Frozen dataclasses (immutability)
- Type hints for all fields
- to_dict() for JSON serialization
- from_dict() for deserialization of input

Public API
----------
Input Types:
    SceneObject: Named rectangle with opaque properties
    InputDocument: List of scene objects

Report Types:
    ObjectArea: Named bounding rectangle (a Shape)
    ObjectIntersection: Named pair with overlap rectangle
    IntersectionReport: Areas and intersections

Helpers:
    point_to_dict, rect_to_dict
"""

from .common import point_to_dict, rect_to_dict
from .report import ObjectArea, ObjectIntersection, IntersectionReport
from .objects import SceneObject, InputDocument

__all__ = [
    # Helpers
    'point_to_dict',
    'rect_to_dict',
    # Input types
    'SceneObject',
    'InputDocument',
    # Report types
    'ObjectArea',
    'ObjectIntersection',
    'IntersectionReport',
]
