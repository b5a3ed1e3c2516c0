"""
Shared helpers for building Asana resource paths.
"""

from typing import Any
from urllib.parse import quote, urlencode


def segment(value: Any) -> str:
    """Percent-encode one path segment (gids are opaque strings)."""
    return quote(str(value), safe="")


def with_query(path: str, **params: Any) -> str:
    """
    Append query parameters to a path, skipping None values.
    Booleans are sent the way Asana expects them ("true"/"false").
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, value))
    if not pairs:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{urlencode(pairs)}"
