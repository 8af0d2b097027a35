"""
Engine Core - Deterministic grid mechanics.

The engine is the runtime that:
1. Stores tiles in a Grid
2. Shifts and merges them in a Direction
3. Probes shifts on disposable copies
4. Places random tiles with a caller-owned random stream
"""

from .direction import Direction, DIRECTIONS, shift_vector
from .errors import (
    GameError,
    ImpossibleMove,
    BoardFull,
    InvalidDirection,
    NoAvailableDirection,
)
from .grid import Grid, BOARD_SIDE, CELL_COUNT, WIN_TILE, position_to_index, index_to_position
from .shift import ShiftResult, shift_grid, probe, can_shift
from .placement import place_random

__all__ = [
    "Direction",
    "DIRECTIONS",
    "shift_vector",
    "GameError",
    "ImpossibleMove",
    "BoardFull",
    "InvalidDirection",
    "NoAvailableDirection",
    "Grid",
    "BOARD_SIDE",
    "CELL_COUNT",
    "WIN_TILE",
    "position_to_index",
    "index_to_position",
    "ShiftResult",
    "shift_grid",
    "probe",
    "can_shift",
    "place_random",
]
