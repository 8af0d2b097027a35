"""
Grid - The 4x4 tile container the engine operates on.

Design principles:
- Pure data: reading and writing cells, nothing else
- Row-major storage: cell (x, y) lives at index y * BOARD_SIDE + x
- Only empty (0) or power-of-two (>= 2) values are ever stored
- Copyable: probes work on clones and never see the session's randomness
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator

BOARD_SIDE = 4
CELL_COUNT = BOARD_SIDE * BOARD_SIDE

# Tile value that wins the game.
WIN_TILE = 2048


def position_to_index(x: int, y: int) -> int:
    """Row-major index of cell (x, y)."""
    return y * BOARD_SIDE + x


def index_to_position(i: int) -> tuple[int, int]:
    """Cell (x, y) of row-major index i."""
    return i % BOARD_SIDE, i // BOARD_SIDE


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIDE and 0 <= y < BOARD_SIDE


def is_tile_value(value: int) -> bool:
    """True for 0 (empty) and for powers of two from 2 upwards."""
    if value == 0:
        return True
    return value >= 2 and value & (value - 1) == 0


@dataclass
class Grid:
    """
    Sixteen tile values plus the per-shift merge guard.

    The merge guard marks cells that already took part in a merge during
    the shift in progress. It is empty outside of a shift.
    """
    tiles: list[int] = field(default_factory=lambda: [0] * CELL_COUNT)
    merge_guard: list[bool] = field(default_factory=lambda: [False] * CELL_COUNT)

    def __post_init__(self):
        if len(self.tiles) != CELL_COUNT:
            raise ValueError(f"Grid needs {CELL_COUNT} tiles, got {len(self.tiles)}")
        if len(self.merge_guard) != CELL_COUNT:
            raise ValueError(f"Grid needs {CELL_COUNT} guard flags, got {len(self.merge_guard)}")
        for value in self.tiles:
            if not is_tile_value(value):
                raise ValueError(f"Not a tile value: {value}")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Grid:
        """Build a grid from BOARD_SIDE rows listed top to bottom."""
        tiles: list[int] = []
        for row in rows:
            row = list(row)
            if len(row) != BOARD_SIDE:
                raise ValueError(f"Row needs {BOARD_SIDE} tiles, got {len(row)}")
            tiles.extend(row)
        return cls(tiles=tiles)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.tiles == other.tiles

    def __iter__(self) -> Iterator[int]:
        return iter(self.tiles)

    def get(self, x: int, y: int) -> int:
        """Tile value at (x, y), 0 when empty."""
        if not in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the grid")
        return self.tiles[position_to_index(x, y)]

    def set(self, x: int, y: int, value: int):
        """Write a tile value at (x, y)."""
        if not in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the grid")
        if not is_tile_value(value):
            raise ValueError(f"Not a tile value: {value}")
        self.tiles[position_to_index(x, y)] = value

    def guard(self, i: int):
        self.merge_guard[i] = True

    def move_guard(self, source: int, target: int):
        """Carry the guard of the tile moving from source to target."""
        self.merge_guard[target] = self.merge_guard[source]
        self.merge_guard[source] = False

    def is_guarded(self, i: int) -> bool:
        return self.merge_guard[i]

    def clear_guard(self):
        self.merge_guard = [False] * CELL_COUNT

    def rows(self) -> list[list[int]]:
        """Tiles as BOARD_SIDE rows, top to bottom."""
        return [
            self.tiles[y * BOARD_SIDE:(y + 1) * BOARD_SIDE]
            for y in range(BOARD_SIDE)
        ]

    def empty_indices(self) -> list[int]:
        return [i for i, value in enumerate(self.tiles) if value == 0]

    @property
    def is_full(self) -> bool:
        return 0 not in self.tiles

    @property
    def max_tile(self) -> int:
        return max(self.tiles)

    def clone(self) -> Grid:
        """Independent copy of the tiles, with a fresh merge guard."""
        return Grid(tiles=self.tiles.copy())
