"""Motion planning helpers: optimal speed, path parsing, speed smoothing."""

from .motion_planner import (
    MotionPlanner,
    PREMIUM_URL,
    DEFAULT_WINDOW_SIZE,
    optimal_speed,
    parse_motion_path,
    smooth_speeds,
    get_premium_url
)

__all__ = [
    'MotionPlanner',
    'PREMIUM_URL',
    'DEFAULT_WINDOW_SIZE',
    'optimal_speed',
    'parse_motion_path',
    'smooth_speeds',
    'get_premium_url'
]
