"""Extent points and bounding-box math."""

from __future__ import annotations

import math
from typing import Any, Iterable

from geojsonify.common.errors import ExtentError
from geojsonify.common.models import BoundingBox, ExtentPoint


def extract_extent_points(records: Iterable[dict]) -> list[ExtentPoint]:
    """Collect the points that bound a set of transformed records.

    A record with a bounding box contributes its lower-left and upper-right
    corners; any other record contributes its own point.
    """
    points: list[ExtentPoint] = []
    for record in records:
        bounding_box = record.get("bounding_box")
        if bounding_box:
            points.extend(BoundingBox.from_mapping(bounding_box).corners())
        else:
            points.append(ExtentPoint(lng=record.get("lng"), lat=record.get("lat")))
    return points


def _finite(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise ExtentError(f"{label} is not numeric: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ExtentError(f"{label} is not numeric: {value!r}") from exc
    if not math.isfinite(number):
        raise ExtentError(f"{label} is not finite: {value!r}")
    return number


def compute_bbox(points: Iterable[ExtentPoint]) -> list[float]:
    """Return [min_lon, min_lat, max_lon, max_lat] enclosing every point."""
    lngs: list[float] = []
    lats: list[float] = []
    for idx, point in enumerate(points):
        lngs.append(_finite(point.lng, f"extent point {idx} lng"))
        lats.append(_finite(point.lat, f"extent point {idx} lat"))

    if not lngs:
        raise ExtentError("cannot compute a bounding box from zero points")

    return [min(lngs), min(lats), max(lngs), max(lats)]
