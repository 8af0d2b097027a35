"""
Naive Strategy - Up and left as much as possible.

Alternates between up and left, starting with up. When neither moves,
falls back to right, then down. Moves are attempted directly on the
session: a shift that moves nothing leaves the session untouched, so a
failed attempt costs nothing.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core import Direction, NoAvailableDirection
from .policy import StrategyPolicy, Decision

if TYPE_CHECKING:
    from ..session import Session


class NaivePolicy(StrategyPolicy):
    """Fixed alternating preference with one bit of state."""

    def __init__(self):
        self.next_is_up = True

    def step(self, session: Session) -> Decision:
        if self.next_is_up:
            preferred = (Direction.UP, Direction.LEFT)
        else:
            preferred = (Direction.LEFT, Direction.UP)

        attempts = 0
        for direction in preferred:
            attempts += 1
            if session.shift(direction):
                self.next_is_up = direction is Direction.LEFT
                return Decision(
                    direction=direction,
                    explanation="Preferred direction",
                    evaluated_directions=attempts,
                )

        for direction in (Direction.RIGHT, Direction.DOWN):
            attempts += 1
            if session.shift(direction):
                return Decision(
                    direction=direction,
                    explanation="Up and left blocked",
                    evaluated_directions=attempts,
                )

        raise NoAvailableDirection(self.get_name())
