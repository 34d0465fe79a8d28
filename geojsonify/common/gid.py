"""Global identifier (GID) helpers."""

from __future__ import annotations

from geojsonify.common.errors import GidError
from geojsonify.common.models import GidComponents

GID_SEPARATOR = ":"


def decode_gid(compound_id: str) -> GidComponents:
    if not isinstance(compound_id, str) or not compound_id:
        raise GidError(f"Invalid document id: {compound_id!r}")

    parts = compound_id.split(GID_SEPARATOR, 2)
    if len(parts) < 3:
        # Bare local id, source and layer come from the document.
        return GidComponents(source=None, layer=None, id=compound_id)

    source, layer, local_id = parts
    if not local_id:
        raise GidError(f"Document id has an empty local id: {compound_id!r}")
    return GidComponents(source=source or None, layer=layer or None, id=local_id)


def build_gid(source: str | None, layer: str | None, local_id: str) -> str:
    for label, value in (("source", source), ("layer", layer), ("id", local_id)):
        if not isinstance(value, str) or not value:
            raise GidError(f"Cannot build gid without {label}")
    return GID_SEPARATOR.join((source, layer, local_id))
