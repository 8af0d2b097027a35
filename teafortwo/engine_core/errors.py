"""
Errors - The game's error taxonomy.

All engine, session and strategy failures derive from GameError:
- ImpossibleMove: a strict shift produced no change (grid untouched)
- BoardFull: random placement requested with no empty cell
- InvalidDirection: a value outside the four cardinal directions
- NoAvailableDirection: a strategy found no movable direction
  although the session reported moves left

None of these are transient. They signal logic errors in the caller
and are never retried.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for every error raised by the game core."""


class ImpossibleMove(GameError):
    """Raised when a shift that was required to move left the grid unchanged."""

    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"Shifting {direction} does not move any tile")


class BoardFull(GameError):
    """Raised when a random tile is requested but no cell is empty."""

    def __init__(self):
        super().__init__("Board is full")


class InvalidDirection(GameError, ValueError):
    """Raised for a direction outside right/down/left/up."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid direction: {value!r}")


class NoAvailableDirection(GameError):
    """Raised when a strategy cannot find any direction that moves."""

    def __init__(self, strategy: str):
        self.strategy = strategy
        super().__init__(
            f"{strategy} found no possible direction while moves were reported left"
        )
