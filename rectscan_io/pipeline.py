"""
Intersection Report Pipeline
============================

Orchestration: scene document -> object areas -> pairwise search -> report.

Design:
- build_report() is pure and works on an in-memory document
- IntersectionPipeline adds file loading and structured logging
- Input errors propagate to the caller after being logged; the search
  never runs on a document that failed to load
"""

from pathlib import Path
from typing import Union

from rectscan_core.geometry.intersections import list_intersections

from .errors import FileReadError, ParseError
from .loader import load_input
from .logging import LogEvent, StructuredLogger
from .schemas import InputDocument, IntersectionReport, ObjectIntersection, rect_to_dict


def build_report(document: InputDocument) -> IntersectionReport:
    """
    Search a scene document for overlapping objects.

    Args:
        document: Validated scene document

    Returns:
        Report with one area per object (input order) and one entry per
        overlapping pair (search order)
    """
    areas = [obj.area() for obj in document.objects]

    intersections = [
        ObjectIntersection(
            names=(areas[hit.a_idx].name, areas[hit.b_idx].name),
            area=hit.area,
        )
        for hit in list_intersections(areas)
    ]

    return IntersectionReport(areas=areas, intersections=intersections)


class IntersectionPipeline:
    """
    Load a scene file and build its intersection report.

    Usage:
        pipeline = IntersectionPipeline(logger=create_logger("pipeline"))
        report = pipeline.run("scene.json")
    """

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def load(self, path: Union[str, Path]) -> InputDocument:
        """Load the scene document, logging the outcome."""
        try:
            document = load_input(path)
        except FileReadError as e:
            self.logger.error(
                event=LogEvent.INPUT_READ_FAILED,
                message="Scene file could not be opened",
                metadata={'path': str(e.path)},
                exc_info=e.reason,
            )
            raise
        except ParseError as e:
            self.logger.error(
                event=LogEvent.INPUT_PARSE_FAILED,
                message="Scene file is malformed",
                metadata={'path': str(path)},
                exc_info=e.reason,
            )
            raise

        self.logger.info(
            event=LogEvent.INPUT_LOADED,
            message=f"Loaded {document.object_count} objects",
            metadata={'path': str(path), 'objects': document.object_count},
        )
        return document

    def run(self, path: Union[str, Path]) -> IntersectionReport:
        """
        Load the scene file and search it.

        Raises:
            FileReadError: If the file cannot be opened
            ParseError: If the file content is malformed
        """
        document = self.load(path)
        report = build_report(document)

        for hit in report.intersections:
            self.logger.debug(
                event=LogEvent.INTERSECTION_FOUND,
                message=f"{hit.names[0]} overlaps {hit.names[1]}",
                metadata={'names': list(hit.names), 'area': rect_to_dict(hit.area)},
            )

        self.logger.info(
            event=LogEvent.SEARCH_COMPLETED,
            message=f"Found {report.intersection_count} intersections",
            metadata={
                'objects': document.object_count,
                'intersections': report.intersection_count,
            },
        )
        return report
