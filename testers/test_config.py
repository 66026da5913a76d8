# -*- coding: utf-8 -*-
import json

from mosaicfx.utils.config import DEFAULT_CONFIG, Config


def test_missing_file_creates_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg["backend"] == "numpy"


def test_existing_file_is_loaded(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"backend": "numba", "passes": ["chunky"]}), encoding="utf-8")
    cfg = Config(str(path))
    assert cfg["backend"] == "numba"
    assert cfg["passes"] == ["chunky"]
    # отсутствующие ключи берутся из значений по‑умолчанию
    assert cfg["workers"] == 0


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{ not json", encoding="utf-8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULT_CONFIG
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_section_merges_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"sampling": {"address": "wrap"}}), encoding="utf-8")
    sampling = Config(str(path)).section("sampling")
    assert sampling == {"source_filter": "nearest", "atlas_filter": "nearest", "address": "wrap"}


def test_setitem_persists(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg["workers"] = 4
    assert json.loads(path.read_text(encoding="utf-8"))["workers"] == 4


def test_same_path_same_instance(tmp_path):
    a = Config(str(tmp_path / "a.json"))
    assert Config(str(tmp_path / "a.json")) is a
    b = Config(str(tmp_path / "b.json"))
    assert b is not a


def test_defaults_are_not_shared(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    cfg.data["sampling"]["address"] = "wrap"
    assert DEFAULT_CONFIG["sampling"]["address"] == "clamp"
