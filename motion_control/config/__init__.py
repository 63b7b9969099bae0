"""Configuration management for motion_control."""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from ..core.exceptions import ConfigError
from ..motion.motion_planner import MotionPlanner, DEFAULT_WINDOW_SIZE
from .settings import env_overrides, validate_config

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "default_config.json"


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to config file (default: default_config.json)

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: file is missing, is not valid JSON or is not an object
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError("config file not found", path=str(config_path))

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON ({e})", path=str(config_path)) from e

    if not isinstance(config, dict):
        raise ConfigError("top level of config file must be an object", path=str(config_path))

    logger.debug(f"Loaded config from {config_path}")
    return config


def save_config(config: Dict[str, Any], config_path: str = None):
    """
    Save configuration to JSON file.

    Args:
        config: Configuration dictionary
        config_path: Path to save config (default: default_config.json)
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=4)


def create_planner_from_config(config: Dict[str, Any] = None) -> MotionPlanner:
    """
    Create MotionPlanner from configuration dictionary.

    Environment variables (MOTION_WINDOW_SIZE, MOTION_MAX_SPEED) take
    precedence over values in the dictionary.

    Args:
        config: Configuration dict (loads default if None)

    Returns:
        MotionPlanner instance

    Raises:
        ConfigError: config is not an object or resulting settings are invalid
    """
    if config is None:
        config = load_config()

    if not isinstance(config, dict):
        raise ConfigError("config must be an object")

    section = config.get('motion_planner', {})
    if not isinstance(section, dict):
        raise ConfigError("'motion_planner' section must be an object")

    planner_config = {
        'window_size': DEFAULT_WINDOW_SIZE,
        'max_speed_m_s': None,
    }
    planner_config.update(section)
    planner_config.update(env_overrides())

    validate_config(planner_config)

    return MotionPlanner(
        window_size=planner_config['window_size'],
        max_speed=planner_config['max_speed_m_s']
    )


__all__ = [
    'load_config',
    'save_config',
    'create_planner_from_config',
    'validate_config',
    'DEFAULT_CONFIG_PATH'
]
