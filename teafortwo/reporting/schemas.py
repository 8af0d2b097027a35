"""
Pydantic Schemas - Validated configuration and JSON reports.

These models define what batch mode accepts and what it prints
with --json. Nothing is written to disk.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from ..session import BatchOutcome, Session


# =============================================================================
# Configuration
# =============================================================================

class BatchConfig(BaseModel):
    """Resolved batch-mode settings (environment defaults plus flags)."""
    strategy: str = "hungry"
    runs: int = Field(100, ge=1, description="Number of seeded sessions")
    base_seed: int = Field(0, description="Seed of the first session")

    @field_validator("strategy")
    @classmethod
    def strategy_exists(cls, value: str) -> str:
        from ..bots import STRATEGIES

        value = value.strip().lower()
        if value not in STRATEGIES:
            raise ValueError(
                f"unknown strategy {value!r}, expected one of {sorted(STRATEGIES)}"
            )
        return value


# =============================================================================
# Reports
# =============================================================================

class SessionSummary(BaseModel):
    """Final state of one session."""
    seed: int
    score: int = Field(ge=0)
    moves: int = Field(ge=0)
    highest: int = Field(ge=0)
    won: bool = False
    rows: list[list[int]] = Field(default_factory=list, description="Tiles, top row first")

    @classmethod
    def from_session(cls, session: Session) -> SessionSummary:
        return cls(
            seed=session.seed,
            score=session.score,
            moves=session.moves,
            highest=session.highest,
            won=session.won,
            rows=session.grid.rows(),
        )


class BatchReport(BaseModel):
    """Summary of a batch run and its best session."""
    strategy: str
    runs: int = Field(ge=1)
    base_seed: int
    best: SessionSummary
    mean_score: float = Field(ge=0.0)
    win_count: int = Field(0, ge=0)

    @classmethod
    def from_outcome(cls, outcome: BatchOutcome) -> BatchReport:
        return cls(
            strategy=outcome.strategy,
            runs=outcome.runs,
            base_seed=outcome.base_seed,
            best=SessionSummary.from_session(outcome.best),
            mean_score=outcome.mean_score,
            win_count=outcome.win_count,
        )
