"""
Intersection Visualizer Module
==============================

Pure visualization layer for rectangles and their overlaps.

Design:
- Stateless rendering (pure functions)
- No geometry logic, only drawing
- World coordinates are fitted into a bounded canvas
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Rect, Point)
- numpy (canvas, extent computation)
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import supervision as sv

from rectscan_core.geometry.shapes import BoundingRect


@dataclass(frozen=True)
class CanvasTransform:
    """
    Mapping from world coordinates to canvas pixels.

    Attributes:
        scale: Pixels per world unit
        origin: World point (x, y) drawn at (padding, padding)
        padding: Margin in pixels around the drawing
        size_wh: Canvas (width, height) in pixels
    """

    scale: float
    origin: Tuple[float, float]
    padding: int
    size_wh: Tuple[int, int]

    def to_canvas(self, rect: BoundingRect) -> sv.Rect:
        """Project a world rectangle onto the canvas."""
        return sv.Rect(
            x=(rect.from_point.x - self.origin[0]) * self.scale + self.padding,
            y=(rect.from_point.y - self.origin[1]) * self.scale + self.padding,
            width=rect.width * self.scale,
            height=rect.height * self.scale,
        )


class IntersectionVisualizer:
    """
    Stateless visualizer for object areas and intersections.

    Usage:
        visualizer = IntersectionVisualizer(scale=10.0)
        frame = visualizer.render(areas, intersections, labels=names)
        cv2.imwrite("scene.png", frame)
    """

    def __init__(
        self,
        area_color: sv.Color = sv.Color(r=0, g=200, b=0),
        intersection_color: sv.Color = sv.Color(r=220, g=0, b=0),
        text_color: sv.Color = sv.Color(r=0, g=0, b=0),
        background_color: sv.Color = sv.Color(r=255, g=255, b=255),
        scale: float = 20.0,
        padding: int = 20,
        max_canvas_size: int = 4096,
        thickness: int = 2,
        opacity: float = 0.35,
        text_scale: float = 0.5,
        text_thickness: int = 1,
        text_padding: int = 4,
    ):
        """
        Initialize visualizer with style configuration.

        Args:
            area_color: Outline color for object areas
            intersection_color: Fill color for intersections
            text_color: Color for name labels
            background_color: Canvas background
            scale: Preferred pixels per world unit (reduced to fit the canvas)
            padding: Margin around the drawing in pixels
            max_canvas_size: Upper bound for canvas width and height
            thickness: Outline thickness
            opacity: Intersection fill opacity (0-1)
            text_scale: Scale factor for labels
            text_thickness: Thickness for labels
            text_padding: Padding for label background
        """
        if scale <= 0:
            raise ValueError(f"scale must be > 0, got {scale}")
        if max_canvas_size <= 2 * padding + 1:
            raise ValueError(
                f"max_canvas_size ({max_canvas_size}) must exceed twice the padding ({padding})"
            )

        self.area_color = area_color
        self.intersection_color = intersection_color
        self.text_color = text_color
        self.background_color = background_color
        self.scale = scale
        self.padding = padding
        self.max_canvas_size = max_canvas_size
        self.thickness = thickness
        self.opacity = opacity
        self.text_scale = text_scale
        self.text_thickness = text_thickness
        self.text_padding = text_padding

    def canvas_transform(self, rects: Sequence[BoundingRect]) -> CanvasTransform:
        """
        Fit the extent of all rectangles into the canvas.

        Args:
            rects: Rectangles that must be visible

        Returns:
            Transform with the largest scale (up to self.scale) that keeps
            the canvas within max_canvas_size on both sides
        """
        if not rects:
            side = 2 * self.padding
            return CanvasTransform(
                scale=self.scale,
                origin=(0.0, 0.0),
                padding=self.padding,
                size_wh=(side, side),
            )

        corners = np.stack([rect.as_xyxy() for rect in rects])
        lower = corners[:, :2].min(axis=0)
        upper = corners[:, 2:].max(axis=0)
        extent = upper - lower

        available = self.max_canvas_size - 2 * self.padding - 1
        largest = float(extent.max())
        scale = self.scale if largest == 0 else min(self.scale, available / largest)

        # Drawing truncates to int, so the far edge lands on floor(extent * scale)
        width, height = (np.floor(extent * scale).astype(int) + 2 * self.padding + 1).tolist()

        return CanvasTransform(
            scale=scale,
            origin=(float(lower[0]), float(lower[1])),
            padding=self.padding,
            size_wh=(width, height),
        )

    def render(
        self,
        areas: Sequence[BoundingRect],
        intersections: Sequence[BoundingRect],
        labels: Optional[List[str]] = None,
    ) -> np.ndarray:
        """
        Draw object areas and their intersections on a fresh canvas.

        Args:
            areas: Object bounding rectangles
            intersections: Overlap rectangles (drawn under the outlines)
            labels: Optional name per area

        Returns:
            BGR image of shape (height, width, 3)
        """
        transform = self.canvas_transform(list(areas) + list(intersections))
        width, height = transform.size_wh

        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:] = self.background_color.as_bgr()

        for overlap in intersections:
            frame = sv.draw_filled_rectangle(
                scene=frame,
                rect=transform.to_canvas(overlap),
                color=self.intersection_color,
                opacity=self.opacity,
            )

        for area in areas:
            frame = sv.draw_rectangle(
                scene=frame,
                rect=transform.to_canvas(area),
                color=self.area_color,
                thickness=self.thickness,
            )

        if labels is not None:
            frame = self._draw_labels(frame, transform, areas, labels)

        return frame

    def _draw_labels(
        self,
        frame: np.ndarray,
        transform: CanvasTransform,
        areas: Sequence[BoundingRect],
        labels: List[str],
    ) -> np.ndarray:
        if len(labels) != len(areas):
            raise ValueError(
                f"Expected {len(areas)} labels, got {len(labels)}"
            )

        for area, label in zip(areas, labels):
            rect = transform.to_canvas(area)
            # Anchor is the text center; keep it inside the area's top edge
            anchor = sv.Point(x=int(rect.x + rect.width / 2), y=int(rect.y) + self.text_padding * 2)
            frame = sv.draw_text(
                scene=frame,
                text=label,
                text_anchor=anchor,
                text_color=self.text_color,
                text_scale=self.text_scale,
                text_thickness=self.text_thickness,
                text_padding=self.text_padding,
            )

        return frame
