"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Uniform-cost Dijkstra over the 4-connected grid using a min-heap (heapq).
Every step to an open neighbour costs 1, so the extraction order is the
BFS layer order with ties broken row-major.

Heap entries are (distance, row-major index, coord):
  • equal distances pop in row-major order → deterministic output
  • stale entries (already visited / superseded distance) are skipped

Relaxation only rewrites a predecessor on a STRICTLY shorter distance,
so the first cell that discovered a neighbour stays its predecessor.

The search stops as soon as Finish is extracted, or when the heap runs
dry.  In the second case the last visited cell is not Finish and the
Finish cell keeps distance = inf / previous = None.
"""

import heapq
import logging
import math
from dataclasses import replace
from typing import Dict, List, Tuple

from grid import Cell, Coord, Grid
from algorithms.path import reconstruct_path
from algorithms.results import SearchResult, PathResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, finish):",            # 0
    "    reset distance / visited / previous",       # 1
    "    dist[start] ← 0",                           # 2
    "    pq ← [(0, start)]",                         # 3
    "    while pq is not empty:",                    # 4
    "        (d, cell) ← pq.pop_min()",              # 5
    "        if cell visited: continue",             # 6
    "        mark cell visited",                     # 7
    "        if cell == finish: return visited",     # 8
    "        for nbr in open 4-neighbours(cell):",   # 9
    "            if d + 1 < dist[nbr]:",             # 10
    "                dist[nbr] ← d + 1",             # 11
    "                previous[nbr] ← cell",          # 12
    "                pq.push((d + 1, nbr))",         # 13
    "    return visited   # finish unreachable",     # 14
]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def dijkstra(grid: Grid, start: Cell, finish: Cell) -> SearchResult:
    grid = grid.reset_search_state()

    INF = math.inf
    dist:    Dict[Coord, int]   = {start.coord: 0}
    parent:  Dict[Coord, Coord] = {}
    visited: Dict[Coord, None]  = {}          # insertion-ordered set
    pq: List[Tuple[int, int, Coord]] = [(0, grid.index_of(start), start.coord)]

    while pq:
        d, _, coord = heapq.heappop(pq)

        # stale entry
        if coord in visited or d > dist.get(coord, INF):
            continue

        visited[coord] = None
        if coord == finish.coord:
            break

        cell = grid.cell(*coord)
        for nbr in grid.neighbours(cell):
            if nbr.coord in visited:
                continue
            new_dist = d + 1
            if new_dist < dist.get(nbr.coord, INF):
                dist[nbr.coord]   = new_dist
                parent[nbr.coord] = coord
                heapq.heappush(pq, (new_dist, grid.index_of(nbr), nbr.coord))

    searched = _snapshot(grid, dist, parent, visited)
    order = tuple(searched.cell(*c) for c in visited)

    logger.debug(
        "dijkstra %s -> %s: %d cells visited, finish %s",
        start.coord, finish.coord, len(order),
        "reached" if finish.coord in visited else "unreachable",
    )
    return SearchResult(visited=order, finish=searched.cell(*finish.coord), grid=searched)


def compute_shortest_path(grid: Grid) -> Tuple[SearchResult, PathResult]:
    """Run Dijkstra between the grid's Start and Finish and rebuild the path."""
    start  = grid.find_start()
    finish = grid.find_finish()
    result = dijkstra(grid, start, finish)
    path   = reconstruct_path(result.grid, result.finish, result.grid.cell(*start.coord))
    return result, path


# ---------------------------------------------------------------------------
def _snapshot(
    grid: Grid,
    dist: Dict[Coord, int],
    parent: Dict[Coord, Coord],
    visited: Dict[Coord, None],
) -> Grid:
    """Copy of `grid` with the search-local fields filled in."""
    cells = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            cell = grid.cell(r, c)
            coord = (r, c)
            if coord in dist:
                cell = replace(
                    cell,
                    distance=dist[coord],
                    visited=coord in visited,
                    previous=parent.get(coord),
                )
            row.append(cell)
        cells.append(row)
    return Grid(grid.rows, grid.cols, cells)
