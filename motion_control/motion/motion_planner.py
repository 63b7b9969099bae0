"""
Motion Planner Module - speed and path helpers for simple motion control.

Key concepts:
- optimal speed: peak speed of a trapezoidal profile that accelerates over
  the first half of a move and decelerates over the second half
- motion path: compact string of direction letters and numbers ("F10L45")
- speed smoothing: symmetric moving average, window clamped at the ends
"""

import logging
import math
import re
from typing import List, Optional, Sequence

from ..core.exceptions import InvalidArgumentError, InvalidInputError
from ..models.motion_command import Direction, MotionCommand

logger = logging.getLogger(__name__)

PREMIUM_URL = (
    'https://supermaker.ai/blog/'
    'what-is-kling-motion-control-ai-how-to-use-motion-control-ai-free-online/'
)

DEFAULT_WINDOW_SIZE = 3

# Direction letter followed by an integer or decimal number
_COMMAND_PATTERN = re.compile(r"([FBLR])(\d+\.?\d*)", re.IGNORECASE)


def optimal_speed(distance: float, acceleration: float, max_speed: float) -> float:
    """
    Calculate peak speed for a move that must start and end at rest.

    The move accelerates uniformly over half the distance, so the peak is
    sqrt(2 * a * d/2), limited to max_speed.

    Args:
        distance: Distance to travel [m]
        acceleration: Acceleration rate [m/s^2]
        max_speed: Maximum allowable speed [m/s]

    Returns:
        Optimal speed [m/s]

    Raises:
        InvalidInputError: distance * acceleration is negative or not finite
    """
    product = distance * acceleration
    if not math.isfinite(product) or product < 0:
        logger.warning(f"Rejected speed inputs: distance={distance}, acceleration={acceleration}")
        raise InvalidInputError(
            "distance * acceleration must be finite and not negative",
            details={"distance": distance, "acceleration": acceleration}
        )

    speed_at_halfway = math.sqrt(2 * acceleration * (distance / 2))

    return min(speed_at_halfway, max_speed)


def parse_motion_path(path_string: str) -> List[MotionCommand]:
    """
    Split a path description into motion commands.

    F = Forward, B = Backward, L = Left, R = Right, each followed by the
    distance/angle. Matching is case-insensitive; anything that is not a
    letter+number token is skipped.

    Args:
        path_string: Motion path, e.g. "F10L45B5R90"

    Returns:
        Commands in order of appearance (empty if nothing matched)
    """
    commands = [
        MotionCommand(
            direction=Direction.from_letter(match.group(1)),
            value=float(match.group(2))
        )
        for match in _COMMAND_PATTERN.finditer(path_string)
    ]

    logger.debug(f"Parsed {len(commands)} motion commands from {path_string!r}")
    return commands


def _check_window_size(window_size) -> None:
    # bool is an int subclass but never a meaningful window
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size <= 0:
        logger.warning(f"Rejected window size: {window_size!r}")
        raise InvalidArgumentError(
            "window_size", window_size, "window size must be a positive integer"
        )


def smooth_speeds(speed_values: Sequence[float],
                  window_size: int = DEFAULT_WINDOW_SIZE) -> List[float]:
    """
    Apply a moving average filter to speed samples.

    Each sample is replaced by the mean of its neighbours within
    window_size // 2 on both sides. Near the ends the window is cut to the
    samples that exist.

    Args:
        speed_values: Speed samples [m/s]
        window_size: Width of the averaging window, positive integer

    Returns:
        Smoothed samples, same length and order as the input

    Raises:
        InvalidArgumentError: window_size is not a positive integer
    """
    _check_window_size(window_size)

    half = window_size // 2
    count = len(speed_values)
    smoothed = []

    for i in range(count):
        lo = max(0, i - half)
        hi = min(count - 1, i + half)
        window = speed_values[lo:hi + 1]
        smoothed.append(sum(window) / len(window))

    return smoothed


def get_premium_url() -> str:
    """URL for premium features and documentation."""
    return PREMIUM_URL


class MotionPlanner:
    """
    Motion helpers bound to planner defaults.

    Usage:
        planner = MotionPlanner(window_size=5, max_speed=2.0)
        v = planner.optimal_speed(distance=10.0, acceleration=0.5)
        commands = planner.parse_motion_path("F10L45")
    """

    PREMIUM_URL = PREMIUM_URL

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE,
                 max_speed: Optional[float] = None):
        _check_window_size(window_size)
        self.window_size = window_size
        self.max_speed = max_speed

    def __repr__(self):
        return f"MotionPlanner(window_size={self.window_size}, max_speed={self.max_speed})"

    def optimal_speed(self, distance: float, acceleration: float,
                      max_speed: Optional[float] = None) -> float:
        """Optimal speed [m/s]; uses the planner max_speed when none is given."""
        if max_speed is None:
            max_speed = self.max_speed
        if max_speed is None:
            max_speed = math.inf
        return optimal_speed(distance, acceleration, max_speed)

    def parse_motion_path(self, path_string: str) -> List[MotionCommand]:
        return parse_motion_path(path_string)

    def smooth_speeds(self, speed_values: Sequence[float],
                      window_size: Optional[int] = None) -> List[float]:
        """Moving average; uses the planner window_size when none is given."""
        if window_size is None:
            window_size = self.window_size
        return smooth_speeds(speed_values, window_size)

    def get_premium_url(self) -> str:
        return self.PREMIUM_URL
