"""
Hungry Strategy - Greedy one-ply lookahead.

Each turn:
1. Probe right, down, left and up on independent grid copies
2. Keep the first direction that moves anything (fallback)
3. Keep the direction with the strictly greatest score gain
4. Commit the best-gain direction, or the fallback when nothing scores

The probes never place tiles, so the lookahead cannot shift the
session's random stream.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core import DIRECTIONS, NoAvailableDirection, probe
from .policy import StrategyPolicy, Decision

if TYPE_CHECKING:
    from ..engine_core import Grid
    from ..session import Session


class HungryPolicy(StrategyPolicy):
    """
    Maximizes the score of each move.

    Usage:
        HungryPolicy().solve(Session(seed=1))
    """

    def select_direction(self, grid: Grid) -> Decision:
        """
        Pick a direction for a grid without committing it.

        Ties keep the earliest direction in enumeration order.
        Raises NoAvailableDirection if no direction moves.
        """
        fallback = None
        best = None
        best_gain = 0

        for direction in DIRECTIONS:
            _, result = probe(grid, direction)
            if not result.changed:
                continue
            if fallback is None:
                fallback = direction
            if result.score_gained > best_gain:
                best = direction
                best_gain = result.score_gained

        if best is not None:
            return Decision(
                direction=best,
                explanation=f"Best gain {best_gain}",
                expected_gain=best_gain,
                evaluated_directions=len(DIRECTIONS),
            )
        if fallback is not None:
            return Decision(
                direction=fallback,
                explanation="No merge available, first movable direction",
                evaluated_directions=len(DIRECTIONS),
            )
        raise NoAvailableDirection(self.get_name())

    def step(self, session: Session) -> Decision:
        decision = self.select_direction(session.grid)
        session.shift(decision.direction, strict=True)
        return decision
