"""Parse Simplestream document text into a JSON tree."""

import json
from typing import Any

from .exceptions import DocumentParseError


def parse_document(text: str | bytes) -> Any:
    """
    Parse a JSON document.

    Object members keep their document order.

    Args:
        text: Raw document body

    Returns:
        The parsed tree

    Raises:
        DocumentParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Document is not valid UTF-8: {e.reason}") from e
