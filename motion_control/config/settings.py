"""
Environment settings for motion_control.

Values come from the process environment or a .env file in the working
directory. Unset variables leave the JSON config values in place.
"""

import os

from dotenv import load_dotenv

from ..core.exceptions import ConfigError

# Read .env into the environment
load_dotenv()

# ============================================================
# MOTION PLANNER
# ============================================================

# Moving average window (samples)
ENV_WINDOW_SIZE = "MOTION_WINDOW_SIZE"

# Speed limit for optimal speed [m/s]
ENV_MAX_SPEED = "MOTION_MAX_SPEED"


def env_overrides() -> dict:
    """
    Planner settings taken from the environment.

    Re-reads os.environ on each call so tests and long-running callers see
    current values.
    """
    overrides = {}

    window = os.getenv(ENV_WINDOW_SIZE, "").strip()
    if window:
        try:
            overrides['window_size'] = int(window)
        except ValueError as e:
            raise ConfigError(f"MOTION_WINDOW_SIZE is not an integer: {window!r}") from e

    max_speed = os.getenv(ENV_MAX_SPEED, "").strip()
    if max_speed:
        try:
            overrides['max_speed_m_s'] = float(max_speed)
        except ValueError as e:
            raise ConfigError(f"MOTION_MAX_SPEED is not a number: {max_speed!r}") from e

    return overrides


def validate_config(planner_config: dict) -> bool:
    """
    Check planner settings.

    Raises:
        ConfigError: listing every problem found
    """
    errors = []

    window = planner_config.get('window_size')
    if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
        errors.append(f"window_size must be a positive integer (got {window!r})")

    max_speed = planner_config.get('max_speed_m_s')
    if max_speed is not None:
        if isinstance(max_speed, bool) or not isinstance(max_speed, (int, float)):
            errors.append(f"max_speed_m_s must be a number (got {max_speed!r})")
        elif max_speed < 0:
            errors.append(f"max_speed_m_s must not be negative (got {max_speed})")

    if errors:
        raise ConfigError(", ".join(errors))

    return True
