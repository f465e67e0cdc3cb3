"""
Scene Loader
============

Reads a scene document from disk.

Failure modes are kept apart so callers can report them precisely:
- FileReadError: missing file, permission denied, path is a directory
- ParseError: bad UTF-8, bad JSON, or a document that fails validation
"""

import json
from pathlib import Path
from typing import Union

from .errors import FileReadError, ParseError
from .schemas import InputDocument


def load_input(path: Union[str, Path]) -> InputDocument:
    """
    Load and validate a scene document.

    Args:
        path: Path to a JSON scene file

    Returns:
        Validated InputDocument

    Raises:
        FileReadError: If the file cannot be opened or read
        ParseError: If the content is not a valid scene document
    """
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(e) from e
    except OSError as e:
        raise FileReadError(path, e) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(e) from e

    try:
        return InputDocument.from_dict(data)
    except ValueError as e:
        raise ParseError(e) from e
