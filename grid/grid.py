from .position import Coordinate
from .errors import EmptyRowError, InconsistentWidthError, FeatureNotFoundError
from logger import get_logger

from typing import Dict, List

# Import the routing helpers
from . import routing

EMPTY = "-"
NEW_LINE = "\n"

_log = get_logger(__name__)


class Grid:
    """Rectangular character grid with single-character features placed on cells."""

    def __init__(self, width: int = 0, height: int = 0):
        # a grid cannot be one-dimensional
        if width <= 0 or height <= 0:
            width = 0
            height = 0
        self.width = width
        self.height = height
        self.features: Dict[str, Coordinate] = {}

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return parse(text)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, features={sorted(self.features)})"

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.render()) == (other.width, other.height, other.render())

    def __contains__(self, marker: str) -> bool:
        return marker in self.features

    # --- Cell access ---
    def get(self, x: int, y: int) -> str:
        """Return the marker placed at (x, y), or EMPTY when the cell is free.

        If several markers share the cell, the earliest inserted one wins.
        """
        for marker, pos in self.features.items():
            if pos.x == x and pos.y == y:
                return marker
        return EMPTY

    def set(self, x: int, y: int, marker: str) -> None:
        """Place marker at (x, y), moving it if it was already on the grid.

        Bounds are not checked; callers keep features inside width x height.
        """
        self.features[marker] = Coordinate(x, y)

    # --- Features ---
    def find(self, marker: str) -> Coordinate:
        pos = self.features.get(marker)
        if pos is None:
            raise FeatureNotFoundError(marker)
        return pos

    def list_feature_names(self) -> List[str]:
        """Return a sorted list of all feature markers present on the grid."""
        return sorted(self.features)

    # --- Rendering ---
    def render(self) -> str:
        """Rebuild the textual grid: height rows of width cells, no trailing newline."""
        if self.width == 0:
            return ""
        rows = []
        for y in range(self.height):
            rows.append("".join(self.get(x, y) for x in range(self.width)))
        return NEW_LINE.join(rows)

    # --- Routing ---
    def route_steps(self, from_marker: str, to_marker: str) -> List[routing.Direction]:
        """Unit moves that take a cursor from one feature to another.

        Args:
            from_marker: Marker of the starting feature
            to_marker: Marker of the destination feature

        Returns:
            List of Direction members, horizontal moves first

        Raises:
            FeatureNotFoundError: if either marker is not on the grid
        """
        start = self.find(from_marker)
        goal = self.find(to_marker)
        moves = routing.plan_moves(start, goal)
        _log.debug(f"route {from_marker}{tuple(start)} -> {to_marker}{tuple(goal)}: {len(moves)} move(s)")
        return moves

    def route(self, from_marker: str, to_marker: str) -> str:
        """Newline-terminated instructions (RIGHT/LEFT then DOWN/UP) between two features."""
        return routing.format_moves(self.route_steps(from_marker, to_marker))


def new_grid(width: int, height: int) -> Grid:
    """Create an empty grid; zero in either dimension gives a 0x0 grid."""
    return Grid(width, height)


def parse(text: str) -> Grid:
    """Build a Grid from newline-separated rows of cells.

    Every character other than EMPTY becomes a feature at (column, row).
    Columns count characters, not bytes. A marker that appears more than once
    ends up at its last occurrence.

    Args:
        text: The grid body, rows joined by a single newline

    Returns:
        The parsed Grid; an empty string gives a 0x0 grid

    Raises:
        EmptyRowError: if a row has no cells
        InconsistentWidthError: if a row differs in length from the first one
    """
    features: Dict[str, Coordinate] = {}
    width = height = 0

    if text != "":
        lines = text.split(NEW_LINE)
        height = len(lines)
        for y, line in enumerate(lines):
            length = len(line)
            if length == 0:
                raise EmptyRowError(y)
            if width == 0:
                width = length
            elif length != width:
                raise InconsistentWidthError(width, length)
            for x, cell in enumerate(line):
                if cell != EMPTY:
                    features[cell] = Coordinate(x, y)

    result = new_grid(width, height)
    result.features = features
    _log.debug(f"parsed {width}x{height} grid with {len(features)} feature(s)")
    return result
