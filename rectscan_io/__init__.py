"""
RectScan I/O Package
====================

Bounded Context: Scene documents, reports and observability

Architecture:
- schemas/: Immutable input and report structures
- logging/: Structured JSON logging
- errors.py: Input acquisition error taxonomy
- loader.py: JSON scene loading
- pipeline.py: Scene -> report orchestration

Example:
    >>> from rectscan_io import IntersectionPipeline, create_logger
    >>> pipeline = IntersectionPipeline(logger=create_logger("pipeline"))
    >>> report = pipeline.run("scene.json")
    >>> report.to_dict()["intersections"]
"""

__version__ = "1.0.0"

# Errors
from .errors import RectScanError, FileReadError, ParseError

# Schemas
from .schemas import (
    SceneObject,
    InputDocument,
    ObjectArea,
    ObjectIntersection,
    IntersectionReport,
)

# Logging
from .logging import LogEvent, StructuredLogger, create_logger

# Loading and orchestration
from .loader import load_input
from .pipeline import IntersectionPipeline, build_report

__all__ = [
    # Version
    '__version__',
    # Errors
    'RectScanError',
    'FileReadError',
    'ParseError',
    # Schemas
    'SceneObject',
    'InputDocument',
    'ObjectArea',
    'ObjectIntersection',
    'IntersectionReport',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    # Loading
    'load_input',
    'IntersectionPipeline',
    'build_report',
]
