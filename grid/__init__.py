"""Grid package.

Character grid model (parse, render, cell access) and cursor routing between features.
"""

from .grid import Grid, new_grid, parse, EMPTY, NEW_LINE
from .position import Coordinate
from .routing import Direction
from .errors import (
    GridError,
    ParseError,
    EmptyRowError,
    InconsistentWidthError,
    RouteError,
    FeatureNotFoundError,
)

__all__ = [
    "Grid",
    "new_grid",
    "parse",
    "EMPTY",
    "NEW_LINE",
    "Coordinate",
    "Direction",
    "GridError",
    "ParseError",
    "EmptyRowError",
    "InconsistentWidthError",
    "RouteError",
    "FeatureNotFoundError",
]
