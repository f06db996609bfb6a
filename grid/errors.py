"""Errors raised while parsing grids and computing routes."""


class GridError(ValueError):
    """Base class for every grid error."""


class ParseError(GridError):
    """The grid text could not be turned into a Grid."""


class EmptyRowError(ParseError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Empty row at index: {index}")


class InconsistentWidthError(ParseError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Each line must have uniform length (expected: {expected}, current {actual})")


class RouteError(GridError):
    """A route between two features could not be computed."""


class FeatureNotFoundError(RouteError):
    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Feature not found: {marker}")
