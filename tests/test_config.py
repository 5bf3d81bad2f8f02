# tests/test_config.py

import json

import pytest

from freq_autocompleter.utils.config_manager import Config, ConfigError


def test_defaults_when_file_missing(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 5
    assert cfg.get("float_format") == "single"
    assert not path.exists()


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": 3, "float_format": "double"}))
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("float_format") == "double"
    assert cfg.get("log_level") == "WARNING"


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "7")
    assert cfg.get("max_suggestions") == 7
    assert json.loads(path.read_text())["max_suggestions"] == 7


@pytest.mark.parametrize(
    "key,val",
    [("nope", 1), ("max_suggestions", "many"), ("max_suggestions", -1),
     ("float_format", "half"), ("log_level", "LOUD")],
)
def test_set_rejects_bad_input(tmp_path, key, val):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(ConfigError):
        cfg.set(key, val)


def test_malformed_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config(str(path))
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        Config(str(path))
