"""
Strategy Policy - Interface for automatic players.

A StrategyPolicy plays a session one committed move at a time:
- step() picks a direction and commits it with a real shift
- solve() repeats step() until the session has no moves left

Strategies look ahead only through probes on grid copies. They never
touch the session's random stream except by committing a move.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from ..engine_core import Direction
    from ..session import Session

logger = logging.getLogger(__name__)


@dataclass
class Decision:
    """
    A committed move.

    Contains:
    - The direction that was shifted
    - Explanation (for debugging)
    - The score gain the probe predicted, when the strategy probed
    - Session score right after the commit
    """
    direction: Direction
    explanation: str = ""
    expected_gain: int = 0
    score_after: int = 0
    evaluated_directions: int = 0


@dataclass
class SolveResult:
    """Everything a strategy committed while solving one session."""
    strategy: str
    decisions: list[Decision] = field(default_factory=list)

    @property
    def committed(self) -> int:
        return len(self.decisions)


class StrategyPolicy(ABC):
    """
    Abstract base class for strategies.

    Implementations decide and commit one move per step().
    """

    @abstractmethod
    def step(self, session: Session) -> Decision:
        """
        Commit exactly one move on a session that has moves left.

        Returns the Decision describing the committed move.
        """
        pass

    def solve(self, session: Session) -> SolveResult:
        """
        Play until the session has no moves left.

        Terminates because every committed move places a tile on a finite
        grid. Errors from step() propagate unchanged.
        """
        result = SolveResult(strategy=self.get_name())
        while session.has_moves_left():
            decision = self.step(session)
            decision.score_after = session.score
            result.decisions.append(decision)

        logger.debug(
            "%s solved seed=%s in %d moves, score=%d highest=%d",
            self.get_name(), session.seed, result.committed, session.score, session.highest,
        )
        return result

    def get_name(self) -> str:
        """Get the strategy's name/identifier."""
        return self.__class__.__name__
