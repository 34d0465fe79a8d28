import pytest

from geojsonify.common import codec
from geojsonify.common.errors import AddendumDecodeError


def test_decode_parses_json_text():
    assert codec.decode('{"wikidata":"Q90"}') == {"wikidata": "Q90"}
    assert codec.decode(b'[1, 2]') == [1, 2]


def test_encode_is_compact_json():
    assert codec.encode({"a": 1}) == '{"a":1}'


@pytest.mark.parametrize("encoded", ["{not json", 42, None, {"already": "decoded"}, b"\xff"])
def test_decode_rejects_invalid_values(encoded):
    with pytest.raises(AddendumDecodeError):
        codec.decode(encoded)
