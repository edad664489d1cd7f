import json

from engine import config as engine_config


def test_dotted_lookup():
    engine_config.reset({"cube": {"initial_radius": 4, "storage": "arena"}})
    assert engine_config.get("cube.initial_radius") == 4
    assert engine_config.get("cube.storage") == "arena"
    assert engine_config.get("cube.missing", "dflt") == "dflt"
    assert engine_config.get("cube.storage.deeper") is None
    assert engine_config.get("")["cube"]["initial_radius"] == 4


def test_load_from_file(tmp_path):
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"render": {"cube_size": 0.5}}), encoding="utf-8")
    engine_config.load(path)
    assert engine_config.get("render.cube_size") == 0.5


def test_bad_or_missing_file_falls_back(tmp_path, caplog):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert engine_config.load(broken) == {}
    assert any("failed to load config" in r.getMessage() for r in caplog.records)
    assert engine_config.load(tmp_path / "absent.json") == {}
    assert engine_config.get("cube.storage", "nested") == "nested"


def test_non_object_json_ignored(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert engine_config.load(path) == {}


def test_shipped_defaults():
    engine_config.reset()
    assert engine_config.get("cube.size_change_behaviour") == "exception"
    assert engine_config.get("cube.storage") == "nested"
    assert engine_config.get("cube.initial_radius") == 3
