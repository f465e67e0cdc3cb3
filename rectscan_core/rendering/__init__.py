"""
Rendering Layer
===============

Bounded Context: Drawing object areas and intersections.

Responsibilities:
- Fit world coordinates into a bounded canvas
- Draw area outlines, intersection fills and name labels
- Pure rendering - no logic, no state

Non-responsibilities:
- Intersection search (handled by geometry)
- Writing files (handled by the CLI)
"""

from rectscan_core.rendering.visualizer import CanvasTransform, IntersectionVisualizer

__all__ = [
    "CanvasTransform",
    "IntersectionVisualizer",
]
