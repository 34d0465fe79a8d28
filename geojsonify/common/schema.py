"""Minimal strict schema for YAML config validation."""

from __future__ import annotations

from geojsonify.common.constants import (
    COORDINATE_POLICIES,
    DETAIL_FIELD_TYPES,
    RESERVED_PROPERTY_KEYS,
)
from geojsonify.common.errors import ConfigError

KNOWN_CONFIG_KEYS = {"details", "categories", "coordinate_policy"}
KNOWN_DETAIL_KEYS = {"name", "type", "requires"}
KNOWN_REQUIREMENTS = {"categories"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_detail_fields(fields: list, *, allow_unknown: bool = False) -> list:
    if not isinstance(fields, list):
        raise ConfigError("details must be a list")

    names: list[str] = []
    for idx, field in enumerate(fields):
        ctx = f"details[{idx}]"
        if not isinstance(field, dict):
            raise ConfigError(f"{ctx} must be a mapping")
        _assert_required_keys(field, {"name", "type"}, ctx)
        _assert_no_unknown_keys(field, KNOWN_DETAIL_KEYS, ctx, allow_unknown)

        name = field["name"]
        if not isinstance(name, str) or not name:
            raise ConfigError(f"{ctx}.name must be a non-empty string")
        if name in RESERVED_PROPERTY_KEYS:
            raise ConfigError(f"{ctx}.name uses reserved property key: {name}")
        if field["type"] not in DETAIL_FIELD_TYPES:
            raise ConfigError(f"{ctx}.type must be one of {', '.join(DETAIL_FIELD_TYPES)}")
        if "requires" in field and field["requires"] not in KNOWN_REQUIREMENTS:
            raise ConfigError(f"{ctx}.requires must be one of {', '.join(sorted(KNOWN_REQUIREMENTS))}")
        names.append(name)

    dupes = {name for name in names if names.count(name) > 1}
    if dupes:
        raise ConfigError(f"Duplicate detail fields: {', '.join(sorted(dupes))}")

    return fields


def validate_geojsonify_config(cfg: dict | None, *, allow_unknown: bool = False) -> dict:
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError("geojsonify config must be a mapping")
    _assert_no_unknown_keys(cfg, KNOWN_CONFIG_KEYS, "geojsonify config", allow_unknown)

    if "details" in cfg:
        validate_detail_fields(cfg["details"], allow_unknown=allow_unknown)
    if "categories" in cfg and not isinstance(cfg["categories"], bool):
        raise ConfigError("categories must be a boolean")
    policy = cfg.get("coordinate_policy")
    if policy is not None and policy not in COORDINATE_POLICIES:
        raise ConfigError(f"coordinate_policy must be one of {', '.join(COORDINATE_POLICIES)}")

    return cfg
