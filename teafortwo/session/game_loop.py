"""
Game Loop - The key-driven interactive driver.

The loop:
1. Player presses a key
2. Key maps to a direction, a reset or quit
3. Session shifts (placing a random tile on success)
4. Loop reports what happened and the new loop state
5. Repeat until the player quits

Reaching 2048 does not stop play. The game is over once the session
has no moves left; only reset or quit are useful from there.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TYPE_CHECKING
import logging
import time

from ..engine_core import Direction

if TYPE_CHECKING:
    from .manager import Session

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the interactive loop."""
    PLAYING = "playing"
    WON = "won"  # 2048 reached, play continues
    GAME_OVER = "game_over"
    QUIT = "quit"


class Command(Enum):
    """Non-move commands."""
    RESET = "reset"
    QUIT = "quit"


KEY_BINDINGS: dict[str, Direction | Command] = {
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "up": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "w": Direction.UP,
    "l": Direction.RIGHT,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "k": Direction.UP,
    "r": Command.RESET,
    "q": Command.QUIT,
}


@dataclass
class TurnResult:
    """
    Result of handling one key.

    success is false for unknown keys and for moves that moved nothing.
    """
    success: bool
    loop_state: LoopState
    moved: bool = False
    message: str = ""


class GameLoop:
    """
    The interactive driver.

    Usage:
        loop = GameLoop(session)
        result = loop.handle_key("left")
        if result.loop_state == LoopState.GAME_OVER:
            ...
    """

    def __init__(self, session: Session, seed_source: Callable[[], int] = time.time_ns):
        self.session = session
        self.seed_source = seed_source
        self.state = self._current_state()

    def handle_key(self, key: str) -> TurnResult:
        """Apply one key press."""
        binding = KEY_BINDINGS.get(key.strip().lower())
        if binding is None:
            return TurnResult(
                success=False,
                loop_state=self.state,
                message=f"Unknown key: {key!r}",
            )

        if binding is Command.QUIT:
            self.state = LoopState.QUIT
            return TurnResult(success=True, loop_state=self.state, message="Bye")

        if binding is Command.RESET:
            seed = self.seed_source()
            self.session.reset(seed=seed)
            self.state = self._current_state()
            logger.debug("new game seed=%s", seed)
            return TurnResult(success=True, loop_state=self.state, message="New game")

        if self.state in (LoopState.GAME_OVER, LoopState.QUIT):
            return TurnResult(
                success=False,
                loop_state=self.state,
                message="No moves left, press r to restart",
            )

        moved = self.session.shift(binding)
        self.state = self._current_state()
        if not moved:
            return TurnResult(
                success=False,
                loop_state=self.state,
                message=f"Cannot move {binding}",
            )

        message = ""
        if self.state == LoopState.GAME_OVER:
            message = "Game over"
        elif self.state == LoopState.WON:
            message = "You reached 2048!"
        return TurnResult(success=True, loop_state=self.state, moved=True, message=message)

    def _current_state(self) -> LoopState:
        if not self.session.has_moves_left():
            return LoopState.GAME_OVER
        if self.session.won:
            return LoopState.WON
        return LoopState.PLAYING
