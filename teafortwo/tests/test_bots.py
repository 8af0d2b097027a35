"""
Tests for strategies.

Tests:
- Hungry picks the best-scoring direction, earliest on ties
- Naive alternates up and left, then falls back
- Both play a session to the end
- Strategy errors propagate
"""

import pytest

from ..bots import HungryPolicy, NaivePolicy, STRATEGIES, create_strategy
from ..engine_core import Direction, Grid, NoAvailableDirection
from ..session import Session


def single_tile_grid(x, y, value=2):
    grid = Grid()
    grid.set(x, y, value)
    return grid


class TestHungrySelection:
    """Greedy one-ply choice."""

    def test_earliest_of_equal_gains(self):
        grid = Grid.from_rows([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        decision = HungryPolicy().select_direction(grid)

        assert decision.direction is Direction.RIGHT
        assert decision.expected_gain == 4

    def test_greatest_gain_wins(self):
        grid = Grid.from_rows([
            [2, 2, 0, 0],
            [0, 0, 0, 8],
            [0, 0, 0, 8],
            [0, 0, 0, 0],
        ])
        decision = HungryPolicy().select_direction(grid)

        assert decision.direction is Direction.DOWN
        assert decision.expected_gain == 16

    def test_fallback_to_first_movable(self):
        decision = HungryPolicy().select_direction(single_tile_grid(0, 0))

        assert decision.direction is Direction.RIGHT
        assert decision.expected_gain == 0

    def test_fallback_skips_blocked_directions(self):
        decision = HungryPolicy().select_direction(single_tile_grid(3, 3))
        assert decision.direction is Direction.LEFT

    def test_selection_leaves_grid(self, full_mergeable_grid):
        before = full_mergeable_grid.clone()
        HungryPolicy().select_direction(full_mergeable_grid)
        assert full_mergeable_grid == before

    def test_no_direction(self, stuck_grid):
        with pytest.raises(NoAvailableDirection):
            HungryPolicy().select_direction(stuck_grid)


class TestHungrySolve:
    """Hungry plays whole games."""

    def test_score_never_decreases(self):
        session = Session(5)
        result = HungryPolicy().solve(session)

        scores = [d.score_after for d in result.decisions]
        assert scores == sorted(scores)
        assert not session.has_moves_left()
        assert result.committed == session.moves

    def test_lookahead_does_not_change_the_game(self):
        """Replaying the committed directions reproduces the game."""
        played = Session(21)
        result = HungryPolicy().solve(played)

        replay = Session(21)
        for decision in result.decisions:
            assert replay.shift(decision.direction)

        assert replay.grid == played.grid
        assert replay.score == played.score

    def test_solved_session_is_stuck(self, stuck_session):
        result = HungryPolicy().solve(stuck_session)
        assert result.committed == 0


class TestNaive:
    """Up/left alternation."""

    def test_alternates_up_then_left(self):
        session = Session.with_grid(seed=4, grid=single_tile_grid(3, 3))
        policy = NaivePolicy()

        first = policy.step(session)
        assert first.direction is Direction.UP
        assert not policy.next_is_up

        second = policy.step(session)
        assert second.direction is Direction.LEFT
        assert policy.next_is_up

    def test_left_when_up_blocked(self):
        session = Session.with_grid(seed=4, grid=single_tile_grid(3, 0))
        policy = NaivePolicy()

        decision = policy.step(session)

        assert decision.direction is Direction.LEFT
        assert policy.next_is_up

    def test_falls_back_to_right(self):
        session = Session.with_grid(seed=4, grid=single_tile_grid(0, 0))
        policy = NaivePolicy()

        decision = policy.step(session)

        assert decision.direction is Direction.RIGHT
        assert policy.next_is_up

    def test_falls_back_to_down(self):
        grid = Grid.from_rows([[2, 4, 8, 16], [0] * 4, [0] * 4, [0] * 4])
        session = Session.with_grid(seed=4, grid=grid)

        decision = NaivePolicy().step(session)

        assert decision.direction is Direction.DOWN

    def test_disagreement_surfaces(self, stuck_session, monkeypatch):
        """A session claiming moves it cannot make is reported."""
        monkeypatch.setattr(stuck_session, "has_moves_left", lambda: True)

        with pytest.raises(NoAvailableDirection):
            NaivePolicy().solve(stuck_session)

    def test_solves_to_the_end(self):
        session = Session(5)
        result = NaivePolicy().solve(session)

        assert not session.has_moves_left()
        assert result.committed == session.moves
        assert result.strategy == "NaivePolicy"


class TestRegistry:
    """Strategies by name."""

    def test_known_names(self):
        assert set(STRATEGIES) == {"hungry", "naive"}
        assert isinstance(create_strategy("hungry"), HungryPolicy)
        assert isinstance(create_strategy("naive"), NaivePolicy)

    def test_fresh_instances(self):
        assert create_strategy("naive") is not create_strategy("naive")

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            create_strategy("clever")

    @pytest.mark.parametrize("name", ["hungry", "naive"])
    def test_terminates_over_seeds(self, name):
        for seed in range(3):
            session = Session(seed)
            create_strategy(name).solve(session)
            assert not session.has_moves_left()
