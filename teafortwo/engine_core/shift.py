"""
Shift Engine - Slides and merges the tiles of a grid.

The engine is the single point of tile movement.
Both the live session and every probe go through shift_grid().

Algorithm:
- BOARD_SIDE passes over all cells in row-major order
- Each non-empty cell steps once toward the target edge:
  into an empty neighbour (slide) or onto an equal one (merge)
- Repeating the single step lets tiles cross several gaps per shift
- The merge guard keeps a merge result from merging again in the
  same shift, so [2, 2, 4] shifted left gives [4, 4, 0], never [8, 0, 0].
  A guarded tile carries its guard along when it slides on.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .direction import Direction, shift_vector
from .errors import InvalidDirection
from .grid import BOARD_SIDE, CELL_COUNT, Grid, in_bounds, index_to_position, position_to_index


@dataclass
class ShiftResult:
    """
    Outcome of shifting a grid once.

    changed is false only when the grid is exactly as it was.
    merged lists every merge result, in the order the merges happened.
    """
    direction: Direction
    changed: bool = False
    score_gained: int = 0
    merged: list[int] = field(default_factory=list)

    @property
    def highest_merge(self) -> int:
        return max(self.merged, default=0)


def shift_grid(grid: Grid, direction: Direction) -> ShiftResult:
    """
    Shift a grid in place.

    The caller owns the grid for the duration of the call: the live
    session grid, or a clone made for probing.
    """
    if not isinstance(direction, Direction):
        raise InvalidDirection(direction)
    dx, dy = shift_vector(direction)
    result = ShiftResult(direction=direction)
    tiles = grid.tiles

    for _ in range(BOARD_SIDE):
        for i in range(CELL_COUNT):
            current = tiles[i]
            if current == 0:
                continue

            x, y = index_to_position(i)
            nx, ny = x + dx, y + dy
            if not in_bounds(nx, ny):
                continue

            n = position_to_index(nx, ny)
            neighbour = tiles[n]

            if neighbour == 0:
                # The guard follows the tile so a merge result stays spent.
                tiles[n] = current
                tiles[i] = 0
                grid.move_guard(i, n)
                result.changed = True
            elif neighbour == current and not grid.is_guarded(i) and not grid.is_guarded(n):
                merged = current * 2
                tiles[n] = merged
                tiles[i] = 0
                grid.guard(i)
                grid.guard(n)
                result.changed = True
                result.score_gained += merged
                result.merged.append(merged)

    grid.clear_guard()
    return result


def probe(grid: Grid, direction: Direction) -> tuple[Grid, ShiftResult]:
    """
    What shifting would do, without touching the given grid.

    Returns the shifted clone and the shift result.
    """
    shifted = grid.clone()
    return shifted, shift_grid(shifted, direction)


def can_shift(grid: Grid, direction: Direction) -> tuple[bool, int]:
    """Whether a direction would change the grid, and the score it would gain."""
    _, result = probe(grid, direction)
    return result.changed, result.score_gained
