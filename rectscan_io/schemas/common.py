"""
Common Schema Helpers
=====================

Bounded Context: Shared serialization of geometry types.

The geometry layer stays free of I/O concerns, so its value types are
serialized here:

    Point2D      -> {"x": 1.0, "y": 2.0}
    BoundingRect -> {"from": POINT, "to": POINT}
"""

import math
from numbers import Real
from typing import Any, Dict

from rectscan_core.geometry.shapes import BoundingRect, Point2D


def point_to_dict(point: Point2D) -> Dict[str, float]:
    """Serialize point to JSON-compatible dict."""
    return {'x': point.x, 'y': point.y}


def rect_to_dict(rect: BoundingRect) -> Dict[str, Dict[str, float]]:
    """Serialize rectangle to JSON-compatible dict."""
    return {
        'from': point_to_dict(rect.from_point),
        'to': point_to_dict(rect.to_point),
    }


def require_number(data: Dict[str, Any], key: str) -> float:
    """Read a finite numeric field, rejecting booleans and strings.

    Raises:
        KeyError: If the field is missing
        TypeError: If the field is not a finite number
    """
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"field '{key}' must be a number, got {type(value).__name__}")

    try:
        number = float(value)
    except OverflowError as e:
        raise TypeError(f"field '{key}' is too large: {e}") from e

    if not math.isfinite(number):
        raise TypeError(f"field '{key}' must be finite, got {number}")
    return number
