"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer can run.

    from algorithms import REGISTRY, get_algorithm

Two kinds exist:
    • "search" – fn(grid) → (SearchResult, PathResult)
    • "maze"   – fn(grid, rng_seed) → MazeWallList

The board and the UI both consume AlgoInfo, so adding an algorithm is:
write the function, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.dijkstra           import compute_shortest_path,           PSEUDOCODE as _dij_pc
from algorithms.path               import reconstruct_path
from algorithms.recursive_division import generate_maze,                   PSEUDOCODE as _rd_pc
from algorithms.results            import SearchResult, PathResult, MazeWallList, NO_PATH_FOUND

SEARCH = "search"
MAZE   = "maze"


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                     # registry key, e.g. "dijkstra"
    label:            str                     # button label
    kind:             str                     # SEARCH or MAZE
    fn:               Callable
    pseudocode:       List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    description:      str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Visualize Dijkstra's Algorithm", kind=SEARCH,
        fn=compute_shortest_path, pseudocode=_dij_pc,
        complexity_time="O(V log V)",
        description="Expands the closest cell first. Guarantees the shortest path on an unweighted grid.",
    ),

    "recursive_division": AlgoInfo(
        key="recursive_division", label="Recursive Division Maze", kind=MAZE,
        fn=generate_maze, pseudocode=_rd_pc,
        complexity_time="O(V)",
        description="Splits the board into chambers, each divider keeping a single passage.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    return list(REGISTRY.values())


def algorithms_by_kind(kind: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.kind == kind]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SEARCH",
    "MAZE",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_kind",
    "compute_shortest_path",
    "reconstruct_path",
    "generate_maze",
    "SearchResult",
    "PathResult",
    "MazeWallList",
    "NO_PATH_FOUND",
]
