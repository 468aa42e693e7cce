"""Reading résumé records from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import InputError
from .models import ResumeRecord

logger = logging.getLogger(__name__)


def load_resume(path: str | Path) -> ResumeRecord:
    """Load a résumé record from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Parsed ResumeRecord

    Raises:
        InputError: If the file is missing, unreadable, not valid JSON,
            or its top level is not an object
    """
    path = Path(path)
    logger.debug(f"Reading résumé data from {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError("Résumé data file not found", str(path)) from e
    except OSError as e:
        raise InputError("Cannot read résumé data file", f"{path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputError("Malformed résumé JSON", f"{path}: {e}") from e

    if not isinstance(data, dict):
        raise InputError("Résumé JSON must be an object", f"{path}: got {type(data).__name__}")

    check_text_encodable(data, str(path))
    return ResumeRecord.from_dict(data)


def check_text_encodable(data: Any, source: str = "<record>") -> None:
    """Reject strings that cannot be written as UTF-16 text.

    JSON allows ``\\uD83D``-style escapes that decode to a lone surrogate.
    Such a string has no UTF-16 encoding, so it is refused up front.

    Raises:
        InputError: If any string (key or value) holds an unpaired surrogate
    """
    if isinstance(data, str):
        try:
            data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InputError("Résumé JSON contains unpaired surrogates", f"{source}: {data!r}") from e
    elif isinstance(data, dict):
        for key, value in data.items():
            check_text_encodable(key, source)
            check_text_encodable(value, source)
    elif isinstance(data, list):
        for item in data:
            check_text_encodable(item, source)
