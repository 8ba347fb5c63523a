"""
cell.py — Grid Cell
===================
One addressable square of the board.  Carries its role flags (start,
finish, wall) and the search-local fields Dijkstra fills in.

Design decisions:
  - Cell is a frozen dataclass.  Every change produces a fresh value via
    `dataclasses.replace`, so a Grid can hand out cells without worrying
    about callers mutating them.
  - `previous` is a (row, col) coordinate into the owning Grid, NOT a Cell
    reference.  This keeps cells trivially copyable / comparable and
    avoids reference cycles between predecessor chains.
  - `distance` uses `math.inf` as the "not reached yet" sentinel.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

Coord = Tuple[int, int]   # (row, col)


# ---------------------------------------------------------------------------
# Cell State Enum: the closed set of symbolic states a renderer draws
# ---------------------------------------------------------------------------
class CellState(Enum):
    UNVISITED           = "unvisited"             # open floor
    WALL                = "wall"                  # user-painted obstacle
    VISITED             = "visited"               # extracted by the search
    SHORTEST_PATH       = "shortest-path"         # interior of the final path
    SHORTEST_PATH_START = "shortest-path-start"   # first cell of the final path
    SHORTEST_PATH_END   = "shortest-path-end"     # last cell of the final path
    MAZE_WALL           = "maze-wall"             # wall placed by the maze generator


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Cell:
    """
    Attributes:
        row, col  : 0-based coordinates inside the grid.
        is_start  : True for the single Start cell.
        is_finish : True for the single Finish cell.
        is_wall   : Impassable for the search.  Never set on Start / Finish.
        distance  : Steps from Start found by the last search (inf = unreached).
        visited   : True once the search has extracted this cell.
        previous  : Coordinate of the predecessor on the best path, or None.
    """

    row:       int
    col:       int
    is_start:  bool            = False
    is_finish: bool            = False
    is_wall:   bool            = False
    distance:  float           = math.inf
    visited:   bool            = False
    previous:  Optional[Coord] = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def reached(self) -> bool:
        return self.distance != math.inf

    def base_state(self) -> CellState:
        """State of the cell with no animation applied."""
        return CellState.WALL if self.is_wall else CellState.UNVISITED

    def cleared(self) -> "Cell":
        """Same role flags, search-local fields back to defaults."""
        return replace(self, distance=math.inf, visited=False, previous=None)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "row":       self.row,
            "col":       self.col,
            "is_start":  self.is_start,
            "is_finish": self.is_finish,
            "is_wall":   self.is_wall,
            "distance":  None if not self.reached else int(self.distance),
        }

    def __repr__(self) -> str:
        flags = "S" if self.is_start else "F" if self.is_finish else "#" if self.is_wall else "."
        return f"Cell({self.row},{self.col} {flags} d={self.distance})"
