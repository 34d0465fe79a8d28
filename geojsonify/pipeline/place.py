"""Transform one raw place document into flat feature properties."""

from __future__ import annotations

import logging
from typing import Any

from geojsonify.common import codec
from geojsonify.common.errors import AddendumDecodeError, GidError
from geojsonify.common.field import get_string_value
from geojsonify.common.gid import build_gid, decode_gid
from geojsonify.common.logging import get_logger, log_event
from geojsonify.pipeline.details import collect_details


def parse_coordinate(value: Any) -> float:
    """Parse a numeric-or-numeric-string coordinate; anything else is NaN.

    Strings with trailing junk such as "12abc" become NaN rather than 12.
    """
    if isinstance(value, bool):
        return float("nan")
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def _decode_addendum(addendum: dict, gid: str, logger: logging.Logger) -> dict:
    decoded: dict[str, Any] = {}
    for namespace, encoded in addendum.items():
        try:
            decoded[namespace] = codec.decode(encoded)
        except AddendumDecodeError as exc:
            log_event(
                logger,
                f"doc {gid} failed to decode addendum namespace {namespace}",
                level=logging.WARNING,
                event="ADDENDUM_DECODE_FAILED",
                status="skipped",
                gid=gid,
                namespace=namespace,
                error_code=exc.error_code,
            )
    return decoded


def geojsonify_place(config: dict, place: dict, logger: logging.Logger | None = None) -> dict:
    logger = logger or get_logger()

    if "_id" not in place:
        raise GidError("document has no _id")
    gid_components = decode_gid(place["_id"])
    source = place.get("source") or gid_components.source
    layer = place.get("layer") or gid_components.layer
    gid = build_gid(source, layer, gid_components.id)
    center_point = place["center_point"]

    doc: dict[str, Any] = {
        "id": gid_components.id,
        "gid": gid,
        "layer": layer,
        "source": source,
        "source_id": gid_components.id,
        "country_code": None,
        "bounding_box": place.get("bounding_box"),
        "lat": parse_coordinate(center_point.get("lat")),
        "lng": parse_coordinate(center_point.get("lon")),
    }

    name = place.get("name")
    if isinstance(name, dict) and "default" in name:
        doc["name"] = get_string_value(name["default"])
    else:
        log_event(
            logger,
            f"doc {gid} does not contain name.default",
            level=logging.WARNING,
            event="NAME_MISSING",
            status="partial",
            gid=gid,
        )

    doc.update(collect_details(config, place, logger))

    # addendum is assigned after every mapped property
    if "addendum" in place and isinstance(place["addendum"], dict):
        addendum = _decode_addendum(place["addendum"], gid, logger)
        if addendum:
            doc["addendum"] = addendum

    if place.get("debug"):
        doc["debug"] = place["debug"]

    return doc
