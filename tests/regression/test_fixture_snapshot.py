from __future__ import annotations

from pathlib import Path

import pytest

from geojsonify.cli import parse_args, run_command
from geojsonify.common.fs import read_json


def _run_once(out_path: Path, run_id: str) -> None:
    args = parse_args(
        [
            "tests/fixtures/places.json",
            "--config",
            "config/geojsonify.yml",
            "--output",
            str(out_path),
            "--run-id",
            run_id,
        ]
    )
    run_command(args)


@pytest.mark.regression
def test_fixture_output_matches_snapshot(tmp_path: Path):
    out_path = tmp_path / "places.geojson"

    _run_once(out_path, "run-fixture")

    assert read_json(out_path) == read_json(Path("tests/fixtures/expected/places.geojson"))


@pytest.mark.regression
def test_outputs_are_byte_stable_for_same_inputs(tmp_path: Path):
    first = tmp_path / "first.geojson"
    second = tmp_path / "second.geojson"

    _run_once(first, "run-a")
    _run_once(second, "run-b")

    assert first.read_bytes() == second.read_bytes()
