"""
Event names for rectscan log lines, grouped as <category>.<action>.

Categories: config, input, search, report, render, error.
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - config.*: Configuration loading
    - input.*: Scene file acquisition
    - search.*: Intersection search
    - report.* / render.*: Output production
    - error.*: Error conditions outside input acquisition
    """

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    # ========== Input Events ==========
    INPUT_LOADED = "input.loaded"
    """Scene document read and validated."""

    INPUT_READ_FAILED = "input.read_failed"
    """Scene file could not be opened."""

    INPUT_PARSE_FAILED = "input.parse_failed"
    """Scene file content is malformed."""

    # ========== Search Events ==========
    SEARCH_COMPLETED = "search.completed"
    """All-pairs intersection search finished."""

    INTERSECTION_FOUND = "search.intersection_found"
    """One overlapping pair, with its names and overlap."""

    # ========== Output Events ==========
    REPORT_WRITTEN = "report.written"
    """Report serialized to stdout."""

    RENDER_SAVED = "render.saved"
    """Rendered image written to disk."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

    RENDER_ERROR = "error.render"
    """Rendered image could not be written."""
