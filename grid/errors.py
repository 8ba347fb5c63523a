"""
errors.py — Grid mutation errors
================================
Raised at the mutation boundary.  Every one of them leaves the Grid the
caller holds untouched, so recovering is just "ignore and carry on".
"""


class GridError(ValueError):
    """Base class for rejected grid commands."""


class InvalidCoordinate(GridError):
    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"({row}, {col}) is outside the {rows}x{cols} grid")
        self.row = row
        self.col = col


class IllegalWallPlacement(GridError):
    def __init__(self, row: int, col: int):
        super().__init__(f"cannot place a wall on the start/finish cell at ({row}, {col})")
        self.row = row
        self.col = col


class OverlappingEndpoints(GridError):
    def __init__(self, row: int, col: int):
        super().__init__(f"start and finish cannot share ({row}, {col})")
        self.row = row
        self.col = col
