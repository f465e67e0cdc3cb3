"""
Input Acquisition Errors
========================

Bounded Context: Error taxonomy for reading scene files.

- FileReadError: the source could not be opened or read
- ParseError: the source was read but is not a valid scene document

The geometry core never raises; these only surface at the I/O boundary.
"""

from pathlib import Path
from typing import Union


class RectScanError(Exception):
    """Base class for all rectscan errors."""


class FileReadError(RectScanError):
    """
    Input file could not be opened.

    Attributes:
        path: Location that was attempted
        reason: Underlying exception
    """

    def __init__(self, path: Union[str, Path], reason: BaseException):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"File '{self.path}' could not be opened due to: {reason}")


class ParseError(RectScanError):
    """
    Input file content is malformed.

    Attributes:
        reason: Underlying decode, JSON or schema exception
    """

    def __init__(self, reason: BaseException):
        self.reason = reason
        super().__init__(f"Parse error: {reason}")
