"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from geojsonify.common.constants import DEFAULT_COORDINATE_POLICY, DEFAULT_DETAIL_FIELDS
from geojsonify.common.errors import ConfigError
from geojsonify.common.fs import read_yaml
from geojsonify.common.schema import validate_geojsonify_config


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path) or {}
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def resolve_config(cfg: dict | None) -> dict:
    """Fill defaults for every key the pipeline reads."""
    resolved = dict(cfg or {})
    resolved.setdefault("details", [dict(field) for field in DEFAULT_DETAIL_FIELDS])
    resolved.setdefault("categories", False)
    resolved.setdefault("coordinate_policy", DEFAULT_COORDINATE_POLICY)
    return resolved


def load_config(
    path: Path | None,
    *,
    allow_unknown: bool = False,
    overlay_path: Path | None = None,
) -> dict:
    if path is None:
        return resolve_config(None)
    cfg = _load_yaml_with_overlay(path, overlay_path)
    return resolve_config(validate_geojsonify_config(cfg, allow_unknown=allow_unknown))
