import json

import pytest

from passgen.charclass import CharacterClass, GroupMode
from passgen.config import DEFAULTS, config_path, generator_config_from, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == DEFAULTS


def test_save_then_load_merges_defaults(tmp_path):
    path = str(tmp_path / "sub" / "config.json")
    save_config({"length": 20, "excluded": "lI1O0"}, path)
    cfg = load_config(path)
    assert cfg["length"] == 20
    assert cfg["excluded"] == "lI1O0"
    assert cfg["clipboard_clear_seconds"] == DEFAULTS["clipboard_clear_seconds"]


def test_broken_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == DEFAULTS
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert load_config(str(path)) == DEFAULTS


def test_env_override(tmp_path, monkeypatch):
    target = str(tmp_path / "custom.json")
    monkeypatch.setenv("PASSGEN_CONFIG", target)
    assert config_path() == target


def test_generator_config_from_settings():
    cfg = generator_config_from({
        "length": "16",
        "classes": ["lower", "digits"],
        "excluded": "0",
        "one_per_group": True,
        "group_mode": "append",
    })
    assert cfg.length == 16
    assert cfg.classes == {CharacterClass.LOWER_LETTERS, CharacterClass.NUMBERS}
    assert cfg.excluded == "0"
    assert cfg.one_per_group is True
    assert cfg.group_mode is GroupMode.APPEND


def test_default_settings_make_a_valid_generator():
    cfg = generator_config_from(DEFAULTS)
    assert cfg.length == 12
    assert len(cfg.classes) == 4
    assert cfg.group_mode is GroupMode.REPLACE


@pytest.mark.parametrize("bad", [
    {"classes": ["emoji"]},
    {"classes": [1]},
    {"group_mode": "x"},
    {"length": "abc"},
    {"length": None},
    {"excluded": ["a"]},
    {"one_per_group": "yes"},
])
def test_invalid_settings_fall_back_to_defaults(bad):
    settings = DEFAULTS.copy()
    settings.update(bad)
    assert generator_config_from(settings) == generator_config_from(DEFAULTS)
