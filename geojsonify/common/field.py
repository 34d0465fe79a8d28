"""Normalisation of loosely-typed document field values."""

from __future__ import annotations

from typing import Any


def get_string_value(value: Any) -> str | None:
    """Return a single trimmed string for a raw field value.

    Lists contribute their first item. Empty values (None, empty strings,
    empty containers, whitespace) return None.
    """
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    if value is None or isinstance(value, (dict, list, tuple)):
        return None
    cleaned = str(value).strip()
    return cleaned or None


def get_array_value(value: Any) -> list:
    if value is None or value == "" or value == [] or value == {}:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def is_present(value: Any) -> bool:
    """Numbers always count as present; bools and empty values never do."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return True
