"""Application constants."""

EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20

LOGGER_NAME = "geojsonify"

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "event",
    "status",
    "gid",
    "namespace",
    "documents_in",
    "features_out",
    "error_code",
    "message",
)

# Keys owned by the place transformer; detail fields must not overwrite them.
RESERVED_PROPERTY_KEYS = frozenset(
    {
        "id",
        "gid",
        "layer",
        "source",
        "source_id",
        "lat",
        "lng",
        "bounding_box",
    }
)

DETAIL_FIELD_TYPES = ("string", "array", "default")
COORDINATE_POLICIES = ("drop", "propagate")
DEFAULT_COORDINATE_POLICY = "drop"

_HIERARCHY_LAYERS = (
    "country",
    "dependency",
    "macroregion",
    "region",
    "macrocounty",
    "county",
    "localadmin",
    "locality",
    "borough",
    "neighbourhood",
)


def _hierarchy_fields() -> list[dict]:
    fields: list[dict] = []
    for layer in _HIERARCHY_LAYERS:
        fields.append({"name": layer, "type": "string"})
        fields.append({"name": f"{layer}_gid", "type": "string"})
        fields.append({"name": f"{layer}_a", "type": "string"})
    return fields


DEFAULT_DETAIL_FIELDS = (
    {"name": "unit", "type": "string"},
    {"name": "housenumber", "type": "string"},
    {"name": "street", "type": "string"},
    {"name": "postalcode", "type": "string"},
    {"name": "postalcode_gid", "type": "string"},
    {"name": "confidence", "type": "default"},
    {"name": "match_type", "type": "string"},
    {"name": "distance", "type": "default"},
    {"name": "accuracy", "type": "string"},
    *_hierarchy_fields(),
    {"name": "continent", "type": "string"},
    {"name": "continent_gid", "type": "string"},
    {"name": "ocean", "type": "string"},
    {"name": "ocean_gid", "type": "string"},
    {"name": "marinearea", "type": "string"},
    {"name": "marinearea_gid", "type": "string"},
    {"name": "label", "type": "string"},
    {"name": "category", "type": "array", "requires": "categories"},
)
