"""
results.py — Algorithm Outputs
==============================
What the search and maze algorithms hand back to the scheduler:

    • SearchResult  – cells in the order Dijkstra extracted them
    • PathResult    – Start → Finish cells, or NO_PATH_FOUND
    • MazeWallList  – (row, col) wall placements in generation order

Design decisions:
  - All three are frozen dataclasses holding tuples.  They are produced
    fresh for one run and only ever read afterwards.
  - "No path" is a value, not an exception: NO_PATH_FOUND is an empty
    PathResult whose `found` is False.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from grid import Cell, Coord, Grid


@dataclass(frozen=True)
class SearchResult:
    """
    Attributes:
        visited : Cells in extraction order, each carrying its final distance.
        finish  : The Finish cell as it stands after the search.
        grid    : Post-search snapshot; `previous` links resolve against it.
    """

    visited: Tuple[Cell, ...]
    finish:  Cell
    grid:    Grid

    @property
    def reached(self) -> bool:
        """True when the last extracted cell is the Finish cell."""
        return bool(self.visited) and self.visited[-1].is_finish

    def __len__(self) -> int:
        return len(self.visited)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.visited)


@dataclass(frozen=True)
class PathResult:
    cells: Tuple[Cell, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.cells)

    @property
    def steps(self) -> int:
        return max(len(self.cells) - 1, 0)

    def coords(self) -> Tuple[Coord, ...]:
        return tuple(c.coord for c in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)


NO_PATH_FOUND = PathResult()


@dataclass(frozen=True)
class MazeWallList:
    walls: Tuple[Coord, ...] = ()
    seed:  int = 0
    depth: int = 0      # deepest nesting of dividers

    def __len__(self) -> int:
        return len(self.walls)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.walls)
