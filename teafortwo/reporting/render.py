"""
Text rendering of a grid.

Output:
┌──────┬──────┬──────┬──────┐
│      │      │      │      │
│ 2048 │    4 │      │    2 │
│      │      │      │      │
├──────┼──────┼──────┼──────┤
...
└──────┴──────┴──────┴──────┘
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core import BOARD_SIDE

if TYPE_CHECKING:
    from ..engine_core import Grid
    from ..session import Session

TOP = "┌" + "┬".join(["──────"] * BOARD_SIDE) + "┐"
SEPARATOR = "├" + "┼".join(["──────"] * BOARD_SIDE) + "┤"
BOTTOM = "└" + "┴".join(["──────"] * BOARD_SIDE) + "┘"
PADDING = "│" + "│".join(["      "] * BOARD_SIDE) + "│"


def _cell(value: int) -> str:
    if value == 0:
        return "      "
    return f" {value:>4} "


def render_grid(grid: Grid) -> str:
    """Box-drawing picture of the grid, one line per text row."""
    lines = [TOP]
    for y, row in enumerate(grid.rows()):
        lines.append(PADDING)
        lines.append("│" + "│".join(_cell(v) for v in row) + "│")
        lines.append(PADDING)
        if y < BOARD_SIDE - 1:
            lines.append(SEPARATOR)
    lines.append(BOTTOM)
    return "\n".join(lines)


def render_status(session: Session) -> str:
    status = f"Score: {session.score}  Moves: {session.moves}  Highest: {session.highest}"
    if session.won:
        status += "  (won)"
    return status
