import pathlib

import pytest

from blockfall.config import DEFAULT_CONFIG, load_config, merge_config

SETTINGS_PATH = pathlib.Path(__file__).resolve().parent.parent / "config" / "settings.yaml"


def test_defaults():
    config = merge_config(None)
    assert config == DEFAULT_CONFIG
    assert config["rows"] == 20
    assert config["cols"] == 12
    assert config["fall_speed_ms"] == 200
    assert config["fast_fall_speed_ms"] == 50


def test_load_fills_missing_keys(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("block_size: 30\nspawn_x: 4\n")
    config = load_config(path)
    assert config["block_size"] == 30
    assert config["spawn_x"] == 4
    assert config["rows"] == 20


def test_load_empty_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="level"):
        merge_config({"level": 3})


@pytest.mark.parametrize("key", ["rows", "block_size", "fall_speed_ms"])
def test_non_positive_rejected(key):
    with pytest.raises(ValueError):
        merge_config({key: 0})


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_shipped_settings_match_defaults():
    assert load_config(SETTINGS_PATH) == DEFAULT_CONFIG


@pytest.mark.parametrize("spawn_x", [-2, -1, 9, 11])
def test_spawn_x_must_fit_widest_shape(spawn_x):
    with pytest.raises(ValueError, match="spawn_x"):
        merge_config({"spawn_x": spawn_x})


def test_spawn_x_range_follows_cols():
    assert merge_config({"spawn_x": 8})["spawn_x"] == 8
    assert merge_config({"cols": 6, "spawn_x": 2})["spawn_x"] == 2
    with pytest.raises(ValueError):
        merge_config({"cols": 6, "spawn_x": 3})


def test_spawn_offsets_must_be_integers():
    with pytest.raises(ValueError, match="spawn_x"):
        merge_config({"spawn_x": 3.5})
    with pytest.raises(ValueError, match="spawn_y"):
        merge_config({"spawn_y": "0"})


def test_spawn_y_bounds():
    assert merge_config({"spawn_y": -2})["spawn_y"] == -2
    with pytest.raises(ValueError, match="spawn_y"):
        merge_config({"spawn_y": 17})
