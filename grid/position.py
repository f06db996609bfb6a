"""Cell coordinate for the character grid."""

from typing import NamedTuple


class Coordinate(NamedTuple):
    """A single (x, y) cell on the grid. Column first, row second."""
    x: int
    y: int

    def __repr__(self):
        return f"Coordinate({self.x}, {self.y})"
