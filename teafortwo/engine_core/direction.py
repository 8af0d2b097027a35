"""
Direction - The closed set of moves a player can make.

Directions are enumerated in the order the strategies scan them:
right, down, left, up. Each one maps to a unit step on the grid,
x growing to the right and y growing downwards.
"""

from __future__ import annotations
from enum import Enum

from .errors import InvalidDirection


class Direction(Enum):
    """The four cardinal shift directions."""
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """
        Coerce a Direction or its name ("left", "UP", ...) to a Direction.

        Raises InvalidDirection for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDirection(value)


# Enumeration order used by probes and strategies.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
    Direction.UP,
)


def shift_vector(direction: Direction) -> tuple[int, int]:
    """Map a direction to its (dx, dy) unit step."""
    if direction is Direction.RIGHT:
        return 1, 0
    if direction is Direction.DOWN:
        return 0, 1
    if direction is Direction.LEFT:
        return -1, 0
    if direction is Direction.UP:
        return 0, -1
    raise InvalidDirection(direction)
