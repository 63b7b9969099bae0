"""
Motion Control - small helpers for planning simple motions.

Main components:
- motion: optimal speed, path string parsing, speed smoothing
- models: MotionCommand, Direction
- core: exception hierarchy
- config: JSON defaults with environment overrides
"""

from .motion.motion_planner import (
    MotionPlanner,
    PREMIUM_URL,
    optimal_speed,
    parse_motion_path,
    smooth_speeds,
    get_premium_url
)
from .models.motion_command import (
    Direction,
    MotionCommand
)
from .core.exceptions import (
    MotionControlError,
    ValidationError,
    InvalidArgumentError,
    InvalidInputError,
    ConfigError
)
from .config import (
    load_config,
    save_config,
    create_planner_from_config
)

__version__ = "1.0.0"

__all__ = [
    # Motion
    'MotionPlanner',
    'PREMIUM_URL',
    'optimal_speed',
    'parse_motion_path',
    'smooth_speeds',
    'get_premium_url',

    # Models
    'Direction',
    'MotionCommand',

    # Errors
    'MotionControlError',
    'ValidationError',
    'InvalidArgumentError',
    'InvalidInputError',
    'ConfigError',

    # Config
    'load_config',
    'save_config',
    'create_planner_from_config',
]
