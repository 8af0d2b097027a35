"""
Tests for the interactive game loop.
"""

import pytest

from ..engine_core import DIRECTIONS, Grid
from ..session import GameLoop, LoopState, Session, KEY_BINDINGS


@pytest.fixture
def loop():
    session = Session.with_grid(seed=3, grid=Grid.from_rows([[2, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
    return GameLoop(session, seed_source=lambda: 123)


class TestKeys:
    """Key handling."""

    @pytest.mark.parametrize("key", ["d", "right", "L", " l "])
    def test_move_keys(self, loop, key):
        result = loop.handle_key(key)

        assert result.success
        assert result.moved
        assert loop.session.get(3, 0) == 2

    def test_blocked_move(self, loop):
        result = loop.handle_key("a")

        assert not result.success
        assert not result.moved
        assert "left" in result.message
        assert loop.session.moves == 0

    def test_unknown_key(self, loop):
        result = loop.handle_key("x")

        assert not result.success
        assert result.loop_state == LoopState.PLAYING
        assert "Unknown key" in result.message

    def test_quit(self, loop):
        result = loop.handle_key("q")

        assert result.success
        assert result.loop_state == LoopState.QUIT
        assert loop.state == LoopState.QUIT

    def test_reset_draws_new_seed(self, loop):
        loop.handle_key("d")
        result = loop.handle_key("r")

        assert result.success
        assert loop.session.seed == 123
        assert loop.session.moves == 0
        assert loop.session.grid == Session(123).grid

    def test_every_direction_bound(self):
        bound = set(KEY_BINDINGS.values())
        assert set(DIRECTIONS) <= bound


class TestLoopStates:
    """Won and game-over states."""

    def test_won_keeps_playing(self):
        session = Session.with_grid(seed=3, grid=Grid.from_rows([[1024, 1024, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
        loop = GameLoop(session)

        result = loop.handle_key("a")

        assert result.success
        assert result.loop_state == LoopState.WON
        assert "2048" in result.message

    def test_game_over(self, stuck_grid):
        loop = GameLoop(Session.with_grid(seed=3, grid=stuck_grid), seed_source=lambda: 5)
        assert loop.state == LoopState.GAME_OVER

        result = loop.handle_key("w")
        assert not result.success
        assert result.loop_state == LoopState.GAME_OVER

        result = loop.handle_key("r")
        assert result.loop_state == LoopState.PLAYING
        assert loop.session.seed == 5
