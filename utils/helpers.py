# -*- coding: utf-8 -*-
"""
Utility helper functions for working with the data document.
"""

from typing import Any, Dict, Optional


_MISSING = object()


def get_in(data: Optional[Dict[str, Any]], path: str, default: Any = None) -> Any:
    """
    Read a value from nested dictionaries using a dotted path.

    Args:
        data: Data document (may be None)
        path: Key or dotted path, e.g. "address.city"
        default: Value returned when any segment is missing

    Returns:
        The stored value or default
    """
    if not path or data is None:
        return default

    current: Any = data
    for segment in path.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def set_in(data: Dict[str, Any], path: str, value: Any) -> None:
    """
    Write a value into nested dictionaries, creating parents as needed.

    Args:
        data: Data document to mutate
        path: Key or dotted path
        value: Value to store
    """
    segments = path.split(".")
    current = data
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value


def is_empty_value(value: Any) -> bool:
    """Check if a field value counts as not filled in."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False
