"""
Tests for motion_control configuration: JSON files, env overrides, validation.
"""

import sys
import json
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from motion_control.config import (
    load_config, save_config, create_planner_from_config, validate_config,
    DEFAULT_CONFIG_PATH
)
from motion_control.config.settings import env_overrides
from motion_control.core.exceptions import ConfigError
from motion_control.motion.motion_planner import MotionPlanner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MOTION_WINDOW_SIZE", raising=False)
    monkeypatch.delenv("MOTION_MAX_SPEED", raising=False)


def test_default_config_file():
    assert DEFAULT_CONFIG_PATH.exists()

    config = load_config()
    assert config['motion_planner']['window_size'] == 3
    assert config['motion_planner']['max_speed_m_s'] is None


def test_save_and_load_roundtrip(tmp_path):
    path = tmp_path / "planner.json"
    config = {'motion_planner': {'window_size': 5, 'max_speed_m_s': 1.2}}

    save_config(config, str(path))

    assert json.loads(path.read_text(encoding='utf-8')) == config
    assert load_config(str(path)) == config


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_config(str(tmp_path / "missing.json"))

    assert exc_info.value.code == "CONFIG_ERROR"
    assert "missing.json" in exc_info.value.details["path"]


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding='utf-8')

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_create_planner_from_default_config():
    planner = create_planner_from_config()

    assert isinstance(planner, MotionPlanner)
    assert planner.window_size == 3
    assert planner.max_speed is None


def test_create_planner_from_dict():
    planner = create_planner_from_config(
        {'motion_planner': {'window_size': 7, 'max_speed_m_s': 0.8}}
    )

    assert planner.window_size == 7
    assert planner.max_speed == 0.8
    assert planner.optimal_speed(100.0, 1.0) == 0.8


def test_create_planner_missing_section_uses_defaults():
    planner = create_planner_from_config({})

    assert planner.window_size == 3
    assert planner.max_speed is None


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("MOTION_WINDOW_SIZE", "5")
    monkeypatch.setenv("MOTION_MAX_SPEED", "1.5")

    assert env_overrides() == {'window_size': 5, 'max_speed_m_s': 1.5}

    planner = create_planner_from_config(
        {'motion_planner': {'window_size': 9, 'max_speed_m_s': 3.0}}
    )
    assert planner.window_size == 5
    assert planner.max_speed == 1.5


def test_env_override_not_a_number(monkeypatch):
    monkeypatch.setenv("MOTION_WINDOW_SIZE", "three")

    with pytest.raises(ConfigError):
        env_overrides()


def test_validate_config_reports_all_errors():
    with pytest.raises(ConfigError) as exc_info:
        validate_config({'window_size': 0, 'max_speed_m_s': -1.0})

    message = exc_info.value.message
    assert "window_size" in message
    assert "max_speed_m_s" in message


def test_validate_config_ok():
    assert validate_config({'window_size': 1, 'max_speed_m_s': None}) is True
    assert validate_config({'window_size': 3, 'max_speed_m_s': 2}) is True


def test_create_planner_invalid_window():
    with pytest.raises(ConfigError):
        create_planner_from_config({'motion_planner': {'window_size': "3"}})


def test_create_planner_null_section():
    with pytest.raises(ConfigError) as exc_info:
        create_planner_from_config({'motion_planner': None})

    assert "motion_planner" in exc_info.value.message


def test_create_planner_config_not_an_object():
    with pytest.raises(ConfigError):
        create_planner_from_config([])


def test_load_config_top_level_not_an_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding='utf-8')

    with pytest.raises(ConfigError) as exc_info:
        load_config(str(path))

    assert exc_info.value.details["path"] == str(path)
