"""
recursive_division.py — Recursive Division Maze
================================================
Splits the board into chambers with a one-cell-thick divider that keeps a
single passage, then recurses into both halves.

Chambers are inclusive rectangles (top, left, bottom, right).  Dividers
only ever sit on ODD absolute rows / columns and passages only on EVEN
ones.  Sub-chambers therefore always start on an even index, and a later
divider can never land on (or next to the mouth of) an earlier passage.

Orientation:
  • wider than tall  → horizontal (row) divider
  • taller than wide → vertical (column) divider
  • square           → coin flip on the seeded RNG
If the preferred cut has no legal position the other one is used; if
neither has one the chamber is too small and recursion stops.

Start / Finish are never walled: divider lines that avoid them are
preferred, and when one is unavoidable the endpoint is skipped and the
passage is chosen among the other cells of the line.  An endpoint on an odd
crossing also keeps its even neighbour on the line open.

Output order = animation order: a divider's walls come before the walls of
the two sub-chambers (upper/left first).
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Set

from grid import Coord, Grid
from algorithms.results import MazeWallList

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def divide(chamber):",                                  # 0
    "    if chamber too small: return",                     # 1
    "    orientation ← by aspect ratio (coin flip if square)",  # 2
    "    line ← random odd row/col inside chamber",         # 3
    "    passage ← random even cell on line",               # 4
    "    wall every cell on line except passage, S and F",  # 5
    "    divide(first half)",                                # 6
    "    divide(second half)",                               # 7
]


class Cut(Enum):
    ROW    = "row"      # horizontal line, splits top / bottom
    COLUMN = "column"   # vertical line, splits left / right


@dataclass(frozen=True)
class Chamber:
    top:    int
    left:   int
    bottom: int
    right:  int

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    def row_positions(self) -> List[int]:
        return [r for r in range(self.top + 1, self.bottom) if r % 2 == 1]

    def col_positions(self) -> List[int]:
        return [c for c in range(self.left + 1, self.right) if c % 2 == 1]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def generate_maze(grid: Grid, rng_seed: int = 0) -> MazeWallList:
    rng = random.Random(rng_seed)
    protected = {grid.find_start().coord, grid.find_finish().coord}
    walls: List[Coord] = []

    depth = _divide(Chamber(0, 0, grid.rows - 1, grid.cols - 1), rng, protected, walls)

    logger.debug("recursive division seed=%s placed %d walls, depth %d", rng_seed, len(walls), depth)
    return MazeWallList(walls=tuple(walls), seed=rng_seed, depth=depth)


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------
def _divide(chamber: Chamber, rng: random.Random, protected: Set[Coord], walls: List[Coord]) -> int:
    """Divide `chamber` in place into `walls`; returns the nesting depth of dividers placed."""
    if chamber.height < 2 or chamber.width < 2:
        return 0

    rows = chamber.row_positions()
    cols = chamber.col_positions()
    if not rows and not cols:
        return 0

    cut = _choose_cut(chamber, rng)
    if cut is Cut.ROW and not rows:
        cut = Cut.COLUMN
    elif cut is Cut.COLUMN and not cols:
        cut = Cut.ROW

    if cut is Cut.ROW:
        line_at = _pick_line(rows, rng, lambda r: [(r, c) for c in range(chamber.left, chamber.right + 1)], protected)
        line = [(line_at, c) for c in range(chamber.left, chamber.right + 1)]
        first  = Chamber(chamber.top, chamber.left, line_at - 1, chamber.right)
        second = Chamber(line_at + 1, chamber.left, chamber.bottom, chamber.right)
    else:
        line_at = _pick_line(cols, rng, lambda c: [(r, c) for r in range(chamber.top, chamber.bottom + 1)], protected)
        line = [(r, line_at) for r in range(chamber.top, chamber.bottom + 1)]
        first  = Chamber(chamber.top, chamber.left, chamber.bottom, line_at - 1)
        second = Chamber(chamber.top, line_at + 1, chamber.bottom, chamber.right)

    passage = _pick_passage(line, cut, rng, protected)
    openings = {passage} | _endpoint_mouths(line, cut, protected)
    walls.extend(p for p in line if p not in openings and p not in protected)

    return 1 + max(
        _divide(first, rng, protected, walls),
        _divide(second, rng, protected, walls),
    )


def _choose_cut(chamber: Chamber, rng: random.Random) -> Cut:
    if chamber.width > chamber.height:
        return Cut.ROW
    if chamber.height > chamber.width:
        return Cut.COLUMN
    return rng.choice((Cut.ROW, Cut.COLUMN))


def _pick_line(positions: List[int], rng: random.Random, cells_of, protected: Set[Coord]) -> int:
    clear = [p for p in positions if not protected.intersection(cells_of(p))]
    return rng.choice(clear or positions)


def _pick_passage(line: List[Coord], cut: Cut, rng: random.Random, protected: Set[Coord]) -> Coord:
    # passages run along the even index of the line's free axis
    axis = 1 if cut is Cut.ROW else 0
    even = [p for p in line if p[axis] % 2 == 0]
    candidates = [p for p in even if p not in protected] or even
    return rng.choice(candidates)


def _endpoint_mouths(line: List[Coord], cut: Cut, protected: Set[Coord]) -> Set[Coord]:
    # an endpoint sitting on an odd crossing is only reachable along the line,
    # so its even neighbour on the line stays open as well
    axis = 1 if cut is Cut.ROW else 0
    mouths = set()
    for p in line:
        if p in protected and p[axis] % 2 == 1:
            r, c = p
            mouths.add((r, c - 1) if cut is Cut.ROW else (r - 1, c))
    return mouths
