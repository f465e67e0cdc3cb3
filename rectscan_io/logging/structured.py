"""
JSON log lines for rectscan.

Each call writes one JSON object to stderr:

    {"timestamp": "...", "level": "INFO", "component": "cli",
     "event": "search.completed", "message": "Found 2 intersections",
     "metadata": {"objects": 4, "intersections": 2}}

stdout is left to the report.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """Emit LogEvent entries for one component through the logging module."""

    def __init__(
        self,
        component: str,
        level: int = logging.WARNING,
    ):
        self.component = component
        self.logger = logging.getLogger(f"rectscan.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        # Skip building the entry for filtered levels
        if not self.logger.isEnabledFor(level):
            return

        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(level, json.dumps(entry, default=str))

    def debug(self, event: LogEvent, message: str,
              metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """Log a failure; exc_info is summarized as {"type", "message"}."""
        self._log(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass through messages that StructuredLogger already encoded."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.WARNING) -> StructuredLogger:
    """Return a StructuredLogger writing as rectscan.<component>."""
    return StructuredLogger(component=component, level=level)
