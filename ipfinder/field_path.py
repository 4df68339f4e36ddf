"""Dot-notation lookups into decoded JSON documents.

Providers describe where each attribute lives with a path such as
``"data.country"``. Lookups never fail: any missing key, out-of-range index or
segment that lands on a scalar yields an empty string.
"""

import json
from collections.abc import Mapping
from typing import Any


def extract_field(document: Any, path: str) -> str:
    """Return the value at `path` inside `document` rendered as text, or ``""``."""
    if not path:
        return ""

    current = document
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return ""
            current = current[segment]
        elif isinstance(current, list):
            if not segment.isdigit():
                return ""
            index = int(segment)
            if index >= len(current):
                return ""
            current = current[index]
        else:
            return ""

    return _as_text(current)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before numbers: True is an int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
