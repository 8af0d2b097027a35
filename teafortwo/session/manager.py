"""
Session Manager - Live games and seeded batch runs.

A Session is one game in progress:
- Owns its Grid and a random stream seeded at construction
- Mutated only through shift() and reset()
- Answers has_moves_left() without side effects

Randomness is never shared. Probes work on grid clones that have no
access to the session's stream, so a game replays identically from its
seed whatever lookahead a strategy performs.

The SessionManager keeps sessions by id and runs a strategy over many
seeded sessions, which is how batch mode picks its best game.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging
import random
import uuid

from ..engine_core import (
    Direction,
    DIRECTIONS,
    Grid,
    ImpossibleMove,
    WIN_TILE,
    can_shift,
    place_random,
    shift_grid,
)

if TYPE_CHECKING:
    from ..bots import StrategyPolicy

logger = logging.getLogger(__name__)


class Session:
    """
    A live game.

    Usage:
        session = Session(seed=42)
        while session.has_moves_left():
            session.shift(Direction.LEFT)
        print(session.score, session.highest)
    """

    def __init__(self, seed: int, grid: Grid | None = None):
        self._start(seed, grid)

    @classmethod
    def with_grid(cls, seed: int, grid: Grid) -> Session:
        """
        Session starting from a given position instead of one random tile.

        The random stream starts fresh from the seed.
        """
        return cls(seed, grid=grid)

    def _start(self, seed: int, grid: Grid | None):
        """Set every field for a fresh game; a random tile is placed unless a grid is given."""
        self._seed = seed
        self._rng = random.Random(seed)
        self._grid = Grid() if grid is None else grid.clone()
        self._score = 0
        self._moves = 0
        self._highest = self._grid.max_tile
        self._won = self._grid.max_tile >= WIN_TILE
        if grid is None:
            self._place_tile()

    def __repr__(self):
        return (
            f"Session(seed={self._seed}, score={self._score}, "
            f"moves={self._moves}, highest={self._highest})"
        )

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def score(self) -> int:
        return self._score

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def highest(self) -> int:
        return self._highest

    @property
    def won(self) -> bool:
        return self._won

    @property
    def grid(self) -> Grid:
        """Detached snapshot of the tiles, safe to probe or modify."""
        return self._grid.clone()

    def get(self, x: int, y: int) -> int:
        return self._grid.get(x, y)

    def shift(self, direction: Direction | str, strict: bool = False) -> bool:
        """
        Shift the live grid.

        Returns True when tiles moved; a random tile has then been placed
        and score, moves, highest and won are updated. Returns False when
        nothing moved, leaving the session untouched, or raises
        ImpossibleMove if strict is set.

        Raises InvalidDirection for an unknown direction and BoardFull if
        no tile can be placed after the move.
        """
        direction = Direction.parse(direction)
        result = shift_grid(self._grid, direction)
        if not result.changed:
            if strict:
                raise ImpossibleMove(direction)
            return False

        self._score += result.score_gained
        if result.highest_merge >= WIN_TILE:
            self._won = True
        self._moves += 1
        self._place_tile()

        logger.debug(
            "seed=%s move=%d %s gained=%d score=%d",
            self._seed, self._moves, direction, result.score_gained, self._score,
        )
        return True

    def can_shift(self, direction: Direction | str) -> tuple[bool, int]:
        """Probe a direction: (would move, score it would gain)."""
        return can_shift(self._grid, Direction.parse(direction))

    def has_moves_left(self) -> bool:
        """
        Whether any direction can still move.

        Pure query: probes run on clones and consume no randomness.
        """
        if not self._grid.is_full:
            return True
        return any(can_shift(self._grid, d)[0] for d in DIRECTIONS)

    def reset(self, seed: int | None = None):
        """
        Start over as a fresh session.

        Reuses the stored seed unless a new one is given, so replays of a
        batch run stay reproducible while an interactive driver can pick a
        new game.
        """
        self._start(self._seed if seed is None else seed, None)
        logger.debug("seed=%s reset", self._seed)

    def _place_tile(self):
        place_random(self._grid, self._rng)
        self._highest = max(self._highest, self._grid.max_tile)


@dataclass
class BatchOutcome:
    """
    Result of running one strategy over many seeded sessions.

    best is the session with the highest tile, ties broken by score and
    then by the earliest seed.
    """
    strategy: str
    base_seed: int
    sessions: list[Session] = field(default_factory=list)

    @property
    def runs(self) -> int:
        return len(self.sessions)

    @property
    def best(self) -> Session | None:
        if not self.sessions:
            return None
        return max(self.sessions, key=lambda s: (s.highest, s.score, -s.seed))

    @property
    def mean_score(self) -> float:
        if not self.sessions:
            return 0.0
        return sum(s.score for s in self.sessions) / len(self.sessions)

    @property
    def win_count(self) -> int:
        return sum(1 for s in self.sessions if s.won)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create seeded sessions
    - Track them by id
    - Run a strategy over a batch of sessions

    In-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, seed: int) -> tuple[str, Session]:
        """Create and register a session; returns (session_id, session)."""
        session_id = str(uuid.uuid4())
        session = Session(seed)
        self._sessions[session_id] = session
        return session_id, session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Forget a session. Returns False if it was unknown."""
        return self._sessions.pop(session_id, None) is not None

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    def run_batch(
        self,
        strategy: str,
        runs: int,
        base_seed: int = 0,
    ) -> BatchOutcome:
        """
        Solve `runs` sessions seeded base_seed, base_seed + 1, ...

        Each session gets a fresh strategy instance. Errors raised by a
        strategy propagate; the batch stops at the first one.
        """
        from ..bots import create_strategy

        if runs < 1:
            raise ValueError("runs must be >= 1")

        outcome = BatchOutcome(strategy=strategy, base_seed=base_seed)
        for i in range(runs):
            session_id, session = self.create_session(base_seed + i)
            policy: StrategyPolicy = create_strategy(strategy)
            policy.solve(session)
            outcome.sessions.append(session)
            logger.info(
                "run %d/%d seed=%s score=%d highest=%d moves=%d",
                i + 1, runs, session.seed, session.score, session.highest, session.moves,
            )
            self.end_session(session_id)

        best = outcome.best
        logger.info(
            "batch %s done: best seed=%s highest=%d score=%d",
            strategy, best.seed, best.highest, best.score,
        )
        return outcome
