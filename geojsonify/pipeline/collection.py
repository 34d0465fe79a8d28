"""Assemble a GeoJSON FeatureCollection from raw place documents."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping

from geojsonify.common import iso3166
from geojsonify.common.config_loader import resolve_config
from geojsonify.common.constants import COORDINATE_POLICIES, DEFAULT_COORDINATE_POLICY
from geojsonify.common.errors import ExtentError, PipelineError
from geojsonify.common.logging import get_logger, log_event
from geojsonify.common.models import BoundingBox, ExtentPoint
from geojsonify.pipeline.extent import compute_bbox, extract_extent_points
from geojsonify.pipeline.place import geojsonify_place


def _has_center_point(document: dict) -> bool:
    return isinstance(document, dict) and isinstance(document.get("center_point"), dict)


def _has_finite_coordinates(record: dict) -> bool:
    return math.isfinite(record["lat"]) and math.isfinite(record["lng"])


def _coordinate_policy(config: dict, logger: logging.Logger) -> str:
    policy = config.get("coordinate_policy")
    normalised = policy.strip().lower() if isinstance(policy, str) else None
    if normalised in COORDINATE_POLICIES:
        return normalised
    log_event(
        logger,
        f"unknown coordinate_policy {policy!r}, using {DEFAULT_COORDINATE_POLICY}",
        level=logging.WARNING,
        event="CONFIG_INVALID",
        status="defaulted",
    )
    return DEFAULT_COORDINATE_POLICY


def to_feature(record: dict) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [record["lng"], record["lat"]]},
        "properties": record,
    }


def add_bbox_per_feature(features: Iterable[dict]) -> None:
    for feature in features:
        properties = feature["properties"]
        bounding_box = properties.get("bounding_box")
        if bounding_box and isinstance(bounding_box, Mapping):
            feature["bbox"] = BoundingBox.from_mapping(bounding_box).as_list()
        properties.pop("bounding_box", None)


def add_iso3166_props_per_feature(features: Iterable[dict]) -> None:
    for feature in features:
        properties = feature["properties"]
        code = properties.get("country_a") or properties.get("dependency_a") or ""
        if not isinstance(code, str) or not code:
            continue

        country = iso3166.info(code)
        alpha2 = country.alpha2 if country is not None else None
        if not isinstance(alpha2, str) or len(alpha2) != 2:
            continue

        properties["country_code"] = alpha2


def compute_collection_bbox(collection: dict, extent_points: list[ExtentPoint], logger: logging.Logger) -> bool:
    if not extent_points:
        return False
    try:
        collection["bbox"] = compute_bbox(extent_points)
    except ExtentError as exc:
        log_event(
            logger,
            f"bbox error: {exc}",
            level=logging.ERROR,
            event="BBOX_ERROR",
            status="skipped",
            error_code=exc.error_code,
        )
        log_event(
            logger,
            f"extent points: {[(point.lng, point.lat) for point in extent_points]}",
            level=logging.ERROR,
            event="BBOX_ERROR",
            status="skipped",
        )
        return False
    return True


def assemble_with_stats(
    config: dict | None,
    documents: Iterable[dict],
    logger: logging.Logger | None = None,
) -> tuple[dict, dict]:
    logger = logger or get_logger()
    config = resolve_config(config)
    drop_bad_coordinates = _coordinate_policy(config, logger) == "drop"

    stats = {
        "documents_in": 0,
        "features_out": 0,
        "dropped_no_center_point": 0,
        "dropped_bad_coordinates": 0,
        "dropped_transform_error": 0,
        "bbox_computed": False,
    }

    records: list[dict] = []
    for document in documents:
        stats["documents_in"] += 1
        if not _has_center_point(document):
            stats["dropped_no_center_point"] += 1
            log_event(
                logger,
                "No doc or center_point property",
                level=logging.WARNING,
                event="DOC_DROPPED_NO_CENTER_POINT",
                status="skipped",
            )
            continue

        try:
            record = geojsonify_place(config, document, logger)
        except PipelineError as exc:
            stats["dropped_transform_error"] += 1
            log_event(
                logger,
                f"failed to transform doc {document.get('_id')!r}: {exc}",
                level=logging.WARNING,
                event="DOC_DROPPED_TRANSFORM_ERROR",
                status="skipped",
                error_code=exc.error_code,
            )
            continue

        if drop_bad_coordinates and not _has_finite_coordinates(record):
            stats["dropped_bad_coordinates"] += 1
            log_event(
                logger,
                f"doc {record['gid']} has a malformed center_point",
                level=logging.WARNING,
                event="DOC_DROPPED_BAD_COORDINATES",
                status="skipped",
                gid=record["gid"],
            )
            continue

        records.append(record)

    # corners are read before bounding_box is moved off the properties
    extent_points = extract_extent_points(records)

    features = [to_feature(record) for record in records]
    add_bbox_per_feature(features)
    add_iso3166_props_per_feature(features)

    collection = {"type": "FeatureCollection", "features": features}
    stats["bbox_computed"] = compute_collection_bbox(collection, extent_points, logger)
    stats["features_out"] = len(features)
    return collection, stats


def geojsonify_places(
    config: dict | None,
    documents: Iterable[dict],
    logger: logging.Logger | None = None,
) -> dict:
    collection, _stats = assemble_with_stats(config, documents, logger)
    return collection
