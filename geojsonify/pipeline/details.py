"""Collect configured detail properties from a raw place document."""

from __future__ import annotations

import logging
from typing import Any

from geojsonify.common.constants import DEFAULT_DETAIL_FIELDS, DETAIL_FIELD_TYPES, RESERVED_PROPERTY_KEYS
from geojsonify.common.field import get_array_value, get_string_value, is_present
from geojsonify.common.logging import get_logger, log_event

_CONVERTERS = {
    "string": get_string_value,
    "array": get_array_value,
}


def _raw_value(document: dict, name: str) -> Any:
    if name in document:
        return document[name]
    parent = document.get("parent")
    if isinstance(parent, dict):
        return parent.get(name)
    return None


def _well_formed(field: Any) -> bool:
    return (
        isinstance(field, dict)
        and isinstance(field.get("name"), str)
        and bool(field["name"])
        and field.get("type") in DETAIL_FIELD_TYPES
    )


def _requirement_met(config: dict, field: dict) -> bool:
    requirement = field.get("requires")
    if requirement is None:
        return True
    return bool(config.get(requirement))


def collect_details(config: dict, document: dict, logger: logging.Logger | None = None) -> dict:
    logger = logger or get_logger()
    fields = config.get("details", DEFAULT_DETAIL_FIELDS)
    if not isinstance(fields, (list, tuple)):
        log_event(
            logger,
            f"details must be a list, got {type(fields).__name__}; using defaults",
            level=logging.WARNING,
            event="DETAIL_FIELD_INVALID",
            status="defaulted",
        )
        fields = DEFAULT_DETAIL_FIELDS

    details: dict[str, Any] = {}
    for field in fields:
        if not _well_formed(field):
            log_event(
                logger,
                f"skipping malformed detail field {field!r}",
                level=logging.WARNING,
                event="DETAIL_FIELD_INVALID",
                status="skipped",
            )
            continue
        if not _requirement_met(config, field):
            continue

        name = field["name"]
        if name in RESERVED_PROPERTY_KEYS:
            continue
        value = _raw_value(document, name)
        converter = _CONVERTERS.get(field["type"])
        if converter is not None:
            value = converter(value)

        if is_present(value):
            details[name] = value
    return details
