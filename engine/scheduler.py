"""
scheduler.py — Animation Schedule
=================================
Turns an algorithm's output into a lazy, time-ordered stream of
RenderEvents.  Nothing here touches a timer or a screen: an event only
says WHAT a cell should look like and WHEN (milliseconds after the
animation starts).  The Stepper / browser decide how to honour that.

Timing:
  • search visit i      →  i * search_ms
  • path cell j         →  len(visited) * search_ms + j * path_ms
  • maze wall i         →  i * maze_ms

The path block starts one tick after the last visit, so the two phases
play back to back and never overlap.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from grid import CellState, Coord, Grid
from algorithms.results import SearchResult, PathResult, MazeWallList


@dataclass(frozen=True)
class AnimationDelays:
    search_ms: int = 10      # fast: one visited cell per tick
    path_ms:   int = 50      # slow: emphasise the final path
    maze_ms:   int = 10


DEFAULT_DELAYS = AnimationDelays()


@dataclass(frozen=True)
class RenderEvent:
    row:       int
    col:       int
    state:     CellState
    offset_ms: int
    distance:  Optional[int] = None    # label for visited cells

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def to_dict(self) -> dict:
        return {
            "row":       self.row,
            "col":       self.col,
            "state":     self.state.value,
            "offset_ms": self.offset_ms,
            "distance":  self.distance,
        }


# ---------------------------------------------------------------------------
# Schedules
# ---------------------------------------------------------------------------
def schedule_search_animation(
    search: SearchResult,
    path: PathResult,
    delays: AnimationDelays = DEFAULT_DELAYS,
) -> Iterator[RenderEvent]:
    for i, cell in enumerate(search.visited):
        yield RenderEvent(
            row=cell.row,
            col=cell.col,
            state=CellState.VISITED,
            offset_ms=i * delays.search_ms,
            distance=int(cell.distance),
        )

    base = len(search.visited) * delays.search_ms
    last = len(path.cells) - 1
    for j, cell in enumerate(path.cells):
        if j == 0:
            state = CellState.SHORTEST_PATH_START
        elif j == last:
            state = CellState.SHORTEST_PATH_END
        else:
            state = CellState.SHORTEST_PATH
        yield RenderEvent(row=cell.row, col=cell.col, state=state, offset_ms=base + j * delays.path_ms)


def schedule_maze_animation(
    walls: MazeWallList,
    delays: AnimationDelays = DEFAULT_DELAYS,
) -> Iterator[RenderEvent]:
    for i, (row, col) in enumerate(walls):
        yield RenderEvent(row=row, col=col, state=CellState.MAZE_WALL, offset_ms=i * delays.maze_ms)


def schedule_grid_snapshot(grid: Grid) -> Iterator[RenderEvent]:
    """Every cell in its resting state at offset 0, i.e. a full repaint."""
    for cell in grid:
        yield RenderEvent(row=cell.row, col=cell.col, state=cell.base_state(), offset_ms=0)

