"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class GidComponents:
    source: str | None
    layer: str | None
    id: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BoundingBox:
    min_lon: Any
    min_lat: Any
    max_lon: Any
    max_lat: Any

    @classmethod
    def from_mapping(cls, value: Any) -> "BoundingBox":
        # Edges are carried verbatim; ordering is never checked here.
        if not isinstance(value, Mapping):
            return cls(min_lon=None, min_lat=None, max_lon=None, max_lat=None)
        return cls(
            min_lon=value.get("min_lon"),
            min_lat=value.get("min_lat"),
            max_lon=value.get("max_lon"),
            max_lat=value.get("max_lat"),
        )

    def as_list(self) -> list[Any]:
        return [self.min_lon, self.min_lat, self.max_lon, self.max_lat]

    def corners(self) -> tuple["ExtentPoint", "ExtentPoint"]:
        return (
            ExtentPoint(lng=self.min_lon, lat=self.min_lat),
            ExtentPoint(lng=self.max_lon, lat=self.max_lat),
        )


@dataclass(frozen=True)
class ExtentPoint:
    lng: Any
    lat: Any


@dataclass(frozen=True)
class CountryInfo:
    alpha2: str
    alpha3: str
