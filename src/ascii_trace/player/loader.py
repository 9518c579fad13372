"""
Document Loader
===============

Parses a Document into the ordered list of renderable frames.

Rules:
    - Missing or unreadable file            -> InputError
    - Invalid JSON / top level not an object -> FormatError
    - 'frames' absent or not a list          -> FormatError
    - Record without a non-empty 'content' list is skipped
    - Document order is preserved otherwise

Row lengths are NOT checked: malformed rows simply render ragged.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from ascii_trace.errors import FormatError, InputError
from ascii_trace.models.frame import Frame


logger = logging.getLogger(__name__)


def load_document(path: Union[str, Path]) -> List[Frame]:
    """
    Read and parse a Document file.

    Args:
        path: Document written by the encoder

    Returns:
        Renderable frames in document order

    Raises:
        InputError: If the file is missing or unreadable
        FormatError: If the JSON is invalid or misshapen
    """
    doc_path = Path(path)
    logger.info(f"Loading ASCII data from: {doc_path}")

    try:
        text = doc_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(f"Document not found: {doc_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Unable to read Document {doc_path}: {e}") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON in {doc_path}: {e}") from e

    return parse_document(raw)


def parse_document(raw: Any) -> List[Frame]:
    """
    Extract renderable frames from decoded JSON.

    Args:
        raw: Result of json.loads on a Document

    Returns:
        Frames in document order, malformed or empty records skipped

    Raises:
        FormatError: If the top-level 'frames' array is missing
    """
    if not isinstance(raw, dict):
        raise FormatError("Invalid JSON format: top level must be an object")

    records = raw.get("frames")
    if not isinstance(records, list):
        raise FormatError("Invalid JSON format: 'frames' array not found")

    frames: List[Frame] = []
    skipped = 0

    for record in records:
        content = record.get("content") if isinstance(record, dict) else None
        if not isinstance(content, list) or not content:
            skipped += 1
            continue
        frames.append(Frame(rows=tuple(_as_text(line) for line in content)))

    if skipped:
        logger.warning(f"Skipped {skipped} frame records without content")

    logger.info(f"Loaded {len(frames)} frames")
    return frames


def _as_text(value: Any) -> str:
    """Render a row entry as text (scalars as JSON literals, containers empty)."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return ""
