import json
import logging

import pytest

from geojsonify.common.errors import InputError
from geojsonify.common.fs import read_json
from geojsonify.common.logging import JsonLineFormatter
from geojsonify.common.models import BoundingBox, ExtentPoint
from geojsonify.common.time_utils import generate_run_id


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("run-")


def test_json_line_formatter_emits_stable_fields():
    record = logging.LogRecord("geojsonify", logging.WARNING, __file__, 1, "doc %s dropped", ("x",), None)
    record.event = "DOC_DROPPED_NO_CENTER_POINT"
    record.gid = "osm:venue:1"

    payload = json.loads(JsonLineFormatter().format(record))

    assert payload["message"] == "doc x dropped"
    assert payload["event"] == "DOC_DROPPED_NO_CENTER_POINT"
    assert payload["gid"] == "osm:venue:1"
    assert payload["level"] == "WARNING"
    assert payload["namespace"] is None
    assert "timestamp" in payload


def test_bounding_box_from_mapping_keeps_edges_verbatim():
    box = BoundingBox.from_mapping({"min_lon": 3, "min_lat": 4, "max_lon": 1, "max_lat": 2})
    assert box.as_list() == [3, 4, 1, 2]
    assert box.corners() == (ExtentPoint(lng=3, lat=4), ExtentPoint(lng=1, lat=2))


def test_read_json_wraps_missing_and_malformed_files(tmp_path):
    with pytest.raises(InputError):
        read_json(tmp_path / "absent.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{nope", encoding="utf-8")
    with pytest.raises(InputError):
        read_json(bad)
