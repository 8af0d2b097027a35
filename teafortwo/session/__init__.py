"""
Session Module - Live games and the drivers around them.

A session represents one play-through:
- Created from a seed, with one random tile placed
- Holds the grid, score, move count and random stream
- Reset in place when the player starts over

Sessions are in-memory only. Nothing is saved.
"""

from .manager import SessionManager, Session, BatchOutcome
from .game_loop import GameLoop, LoopState, TurnResult, KEY_BINDINGS

__all__ = [
    "SessionManager",
    "Session",
    "BatchOutcome",
    "GameLoop",
    "LoopState",
    "TurnResult",
    "KEY_BINDINGS",
]
