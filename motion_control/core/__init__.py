"""Core building blocks shared across motion_control."""

from .exceptions import (
    MotionControlError,
    ValidationError,
    InvalidArgumentError,
    InvalidInputError,
    ConfigError
)

__all__ = [
    'MotionControlError',
    'ValidationError',
    'InvalidArgumentError',
    'InvalidInputError',
    'ConfigError'
]
