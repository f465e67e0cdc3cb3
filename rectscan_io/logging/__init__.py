"""
Structured Logging for RectScan
===============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from rectscan_io.logging import create_logger, LogEvent
    >>> logger = create_logger("cli")
    >>> logger.info(
    ...     event=LogEvent.INPUT_LOADED,
    ...     message="Loaded 4 objects",
    ...     metadata={'path': 'scene.json'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
