from pathlib import Path

import pytest

from geojsonify.common.config_loader import load_config, resolve_config
from geojsonify.common.constants import DEFAULT_DETAIL_FIELDS
from geojsonify.common.errors import ConfigError


def test_load_config_from_repo_config_dir():
    cfg = load_config(Path("config/geojsonify.yml"))
    assert cfg["coordinate_policy"] == "drop"
    assert cfg["categories"] is False
    assert [field["name"] for field in cfg["details"]] == [field["name"] for field in DEFAULT_DETAIL_FIELDS]


def test_load_config_without_path_returns_defaults():
    assert load_config(None) == resolve_config({})


def test_load_config_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "geojsonify.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(
        """categories: false
coordinate_policy: drop
details:
  - name: street
    type: string
""",
        encoding="utf-8",
    )
    overlay.write_text("categories: true\ncoordinate_policy: propagate\n", encoding="utf-8")

    cfg = load_config(base, overlay_path=overlay)

    assert cfg["categories"] is True
    assert cfg["coordinate_policy"] == "propagate"
    assert cfg["details"] == [{"name": "street", "type": "string"}]


def test_load_config_ignores_empty_overlay_file(tmp_path: Path):
    base = tmp_path / "geojsonify.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text("categories: true\n", encoding="utf-8")
    overlay.write_text("", encoding="utf-8")

    assert load_config(base, overlay_path=overlay)["categories"] is True


def test_load_config_validates_merged_result(tmp_path: Path):
    base = tmp_path / "geojsonify.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text("categories: false\n", encoding="utf-8")
    overlay.write_text("details:\n  - name: gid\n    type: string\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(base, overlay_path=overlay)


def test_load_config_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yml")
