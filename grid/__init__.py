"""
grid/
-----
Core data layer.  Public API:

    from grid import Grid, Cell, CellState
    from grid import GridError, InvalidCoordinate, IllegalWallPlacement
"""

from grid.cell   import Cell, CellState, Coord
from grid.errors import GridError, InvalidCoordinate, IllegalWallPlacement, OverlappingEndpoints
from grid.grid   import Grid

__all__ = [
    "Cell",      "CellState",  "Coord",
    "Grid",
    "GridError", "InvalidCoordinate", "IllegalWallPlacement", "OverlappingEndpoints",
]
