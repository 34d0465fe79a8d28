import pytest

from geojsonify.common.errors import ExtentError
from geojsonify.common.models import ExtentPoint
from geojsonify.pipeline.extent import compute_bbox, extract_extent_points


def test_extract_extent_points_uses_corners_or_point():
    records = [
        {"lat": 1.0, "lng": 2.0, "bounding_box": None},
        {"lat": 5.0, "lng": 5.0, "bounding_box": {"min_lon": 4, "min_lat": 3, "max_lon": 6, "max_lat": 7}},
    ]

    points = extract_extent_points(records)

    assert points == [
        ExtentPoint(lng=2.0, lat=1.0),
        ExtentPoint(lng=4, lat=3),
        ExtentPoint(lng=6, lat=7),
    ]


def test_compute_bbox_encloses_all_points():
    points = [ExtentPoint(lng=0, lat=0), ExtentPoint(lng=10, lat=10), ExtentPoint(lng=-5, lat=2)]
    assert compute_bbox(points) == [-5, 0, 10, 10]


def test_compute_bbox_tolerates_inverted_corners():
    points = [ExtentPoint(lng=6, lat=7), ExtentPoint(lng=4, lat=3)]
    assert compute_bbox(points) == [4, 3, 6, 7]


@pytest.mark.parametrize(
    "points",
    [
        [],
        [ExtentPoint(lng=float("nan"), lat=0)],
        [ExtentPoint(lng=None, lat=0)],
        [ExtentPoint(lng="east", lat=0)],
    ],
)
def test_compute_bbox_rejects_degenerate_input(points):
    with pytest.raises(ExtentError):
        compute_bbox(points)
