"""Route planning between two cells of a rectangular grid."""

from enum import Enum
from typing import List, Tuple


class Direction(str, Enum):
    """A single unit move of the cursor."""
    RIGHT = "RIGHT"
    LEFT = "LEFT"
    DOWN = "DOWN"
    UP = "UP"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.RIGHT: (+1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, +1),
    Direction.UP: (0, -1),
}


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Number of unit moves between two cells without diagonals."""
    return abs(x2 - x1) + abs(y2 - y1)


def plan_moves(start: Tuple[int, int], goal: Tuple[int, int]) -> List[Direction]:
    """Decompose the displacement from start to goal into unit moves.

    Horizontal moves always come before vertical ones. No obstacle is
    considered: every cell between the two points is assumed passable.

    Args:
        start: (x, y) of the cell the cursor starts on
        goal: (x, y) of the cell the cursor must reach

    Returns:
        List of Direction members, empty when start == goal
    """
    dx = goal[0] - start[0]
    dy = goal[1] - start[1]

    moves: List[Direction] = []
    if dx > 0:
        moves.extend([Direction.RIGHT] * dx)
    elif dx < 0:
        moves.extend([Direction.LEFT] * -dx)
    if dy > 0:
        moves.extend([Direction.DOWN] * dy)
    elif dy < 0:
        moves.extend([Direction.UP] * -dy)
    return moves


def format_moves(moves: List[Direction]) -> str:
    """One instruction per line, every line newline-terminated."""
    return "".join(f"{move.value}\n" for move in moves)


def apply_moves(start: Tuple[int, int], moves: List[Direction]) -> Tuple[int, int]:
    """Walk the moves from start and return the cell reached."""
    x, y = start
    for move in moves:
        ox, oy = move.offset
        x, y = x + ox, y + oy
    return x, y
