"""
Random Placement - Drops a new tile on an empty cell.

Only a session calls this, with the random stream it owns.
Probes never place tiles.
"""

from __future__ import annotations
import random

from .errors import BoardFull
from .grid import Grid

# Chance that a placed tile is a 2 rather than a 4.
TWO_PROBABILITY = 0.9


def place_random(grid: Grid, rng: random.Random) -> tuple[int, int]:
    """
    Place a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell.

    Returns (index, value) of the placed tile.
    Raises BoardFull when there is no empty cell.
    """
    empty = grid.empty_indices()
    if not empty:
        raise BoardFull()

    i = rng.choice(empty)
    value = 2 if rng.random() < TWO_PROBABILITY else 4
    grid.tiles[i] = value
    return i, value
