"""
Pytest fixtures for teafortwo tests.
"""

import pytest

from ..engine_core import Grid
from ..session import Session


@pytest.fixture
def empty_grid() -> Grid:
    return Grid()


@pytest.fixture
def stuck_grid() -> Grid:
    """Full grid where no direction moves anything."""
    return Grid.from_rows([
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 4, 2],
    ])


@pytest.fixture
def full_mergeable_grid() -> Grid:
    """Full grid whose only possible moves merge the two 8s."""
    return Grid.from_rows([
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 8, 8],
    ])


@pytest.fixture
def session() -> Session:
    """Fresh session with a fixed seed."""
    return Session(seed=42)


@pytest.fixture
def stuck_session(stuck_grid: Grid) -> Session:
    return Session.with_grid(seed=1, grid=stuck_grid)
