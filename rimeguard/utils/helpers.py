"""Shared utility functions for RimeGuard."""

import json
import os
from typing import Any


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_json_file(filepath: str) -> Any:
    """Read and decode a UTF-8 JSON file."""
    with open(expand_file_path(filepath), encoding="utf-8") as f:
        return json.load(f)


def unwrap_list(data: Any, key: str) -> list:
    """Return data itself if it is a list, otherwise data[key].

    Accepts both a bare JSON array and an object wrapping the array, e.g.
    ``[...]`` and ``{"items": [...]}``.

    Raises:
        ValueError: If no list can be found
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get(key), list):
        return data[key]
    raise ValueError(f"Expected a JSON array or an object with a '{key}' array")
