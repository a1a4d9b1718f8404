"""Wire edge directions."""

from enum import Enum


class Direction(Enum):
    """Direction a wire leaves a cell in (y grows upward)."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
