"""Data models for motion commands."""

from .motion_command import (
    Direction,
    MotionCommand
)

__all__ = [
    'Direction',
    'MotionCommand'
]
