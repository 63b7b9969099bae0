"""
Motion command data model.

A path string such as "F10L45B5R90" is broken into MotionCommand
instances, one per letter+number token.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class Direction(Enum):
    """Direction of a single motion command."""
    FORWARD = "Forward"
    BACKWARD = "Backward"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def letter(self) -> str:
        """Single-letter code used in path strings."""
        return self.value[0]

    @classmethod
    def from_letter(cls, letter: str) -> "Direction":
        """
        Map a path letter (F/B/L/R, any case) to a Direction.

        Raises:
            KeyError: letter is not one of F, B, L, R
        """
        return _LETTER_TO_DIRECTION[letter.upper()]


_LETTER_TO_DIRECTION = {d.letter: d for d in Direction}


@dataclass(frozen=True)
class MotionCommand:
    """Single discrete directive extracted from a path string."""
    direction: Direction
    value: float  # Distance [m] for F/B, angle [deg] for L/R

    def to_dict(self) -> Dict[str, Any]:
        return {
            'direction': self.direction.value,
            'value': self.value,
        }

    def __str__(self):
        return f"{self.direction.letter}{self.value:g}"
