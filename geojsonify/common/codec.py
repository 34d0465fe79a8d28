"""Addendum codec: namespaced addendum values are stored as JSON text."""

from __future__ import annotations

import json
from typing import Any

from geojsonify.common.errors import AddendumDecodeError


def encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def decode(encoded: Any) -> Any:
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AddendumDecodeError(str(exc)) from exc
    if not isinstance(encoded, str):
        raise AddendumDecodeError(f"Expected encoded text, got {type(encoded).__name__}")
    try:
        return json.loads(encoded)
    except json.JSONDecodeError as exc:
        raise AddendumDecodeError(str(exc)) from exc
