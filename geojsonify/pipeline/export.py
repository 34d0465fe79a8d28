"""GeoJSON export."""

from __future__ import annotations

import json
from pathlib import Path

from geojsonify.common.fs import write_json


def _serialise_feature(feature: dict) -> dict:
    out = dict(feature)
    # unset properties (such as an unresolved country_code) are left out of output
    out["properties"] = {key: value for key, value in feature["properties"].items() if value is not None}
    return out


def serialise_feature_collection(collection: dict) -> dict:
    out = dict(collection)
    out["features"] = [_serialise_feature(feature) for feature in collection["features"]]
    return out


def dumps_feature_collection(collection: dict, *, indent: int | None = 2) -> str:
    return json.dumps(serialise_feature_collection(collection), ensure_ascii=False, indent=indent)


def write_feature_collection(path: Path, collection: dict) -> Path:
    write_json(path, serialise_feature_collection(collection), sort_keys=False)
    return path
