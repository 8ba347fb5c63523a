"""
path.py — Shortest-Path Reconstruction
======================================
Walks the `previous` links Dijkstra left behind, from Finish back to
Start, then reverses them.
"""

import logging

from grid import Cell, Grid
from algorithms.results import PathResult, NO_PATH_FOUND

logger = logging.getLogger(__name__)


def reconstruct_path(grid: Grid, finish: Cell, start: Cell) -> PathResult:
    """
    Return the Start → Finish cells, or NO_PATH_FOUND if the predecessor
    chain from `finish` never reaches `start`.

    `grid` must be the post-search snapshot (SearchResult.grid).  The walk
    is capped at rows * cols hops, so a corrupted chain cannot loop forever.
    """
    path = []
    cur = finish
    for _ in range(grid.rows * grid.cols):
        path.append(cur)
        if cur.coord == start.coord:
            path.reverse()
            return PathResult(cells=tuple(path))
        if cur.previous is None:
            break
        cur = grid.cell(*cur.previous)
    else:
        logger.warning("predecessor chain from %s exceeded %d hops", finish.coord, grid.rows * grid.cols)

    return NO_PATH_FOUND
