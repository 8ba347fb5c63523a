"""
recorder.py — Run Recorder & Analytics
========================================
Wraps one algorithm run, times it, and computes the numbers the
analytics panel shows.

Usage:
    rec = Recorder()
    rec.start("dijkstra")
    search, path = compute_shortest_path(grid)
    events = list(schedule_search_animation(search, path))
    metrics = rec.record_search(search, path, events)
    rec.export()                     # JSON-ready snapshot
"""

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from algorithms import get_algorithm, AlgoInfo
from algorithms.results import SearchResult, PathResult, MazeWallList
from engine.scheduler import RenderEvent


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    cells_visited: int   = 0
    path_length:   int   = 0          # steps, i.e. cells on the path - 1
    path_found:    bool  = False
    walls_placed:  int   = 0
    total_events:  int   = 0
    duration_ms:   int   = 0          # offset of the last render event
    wall_time_ms:  float = 0.0        # time spent computing, not animating


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : RenderEvents of the recorded run.
        metrics : RunMetrics (available after record_*).
    """

    def __init__(self):
        self.events:  List[RenderEvent]    = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._start_time: float              = 0.0

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def start(self, algo_key: str) -> AlgoInfo:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        self._algo_info  = info
        self._start_time = time.monotonic()
        self.events      = []
        self.metrics     = None
        return info

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def record_search(self, search: SearchResult, path: PathResult, events: List[RenderEvent]) -> RunMetrics:
        self.events  = list(events)
        self.metrics = self._base_metrics()
        self.metrics.cells_visited = len(search.visited)
        self.metrics.path_found    = path.found
        self.metrics.path_length   = path.steps
        return self.metrics

    def record_maze(self, walls: MazeWallList, events: List[RenderEvent]) -> RunMetrics:
        self.events  = list(events)
        self.metrics = self._base_metrics()
        self.metrics.walls_placed = len(walls)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "events":   [ev.to_dict() for ev in self.events],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _base_metrics(self) -> RunMetrics:
        info = self._algo_info
        wall_ms = (time.monotonic() - self._start_time) * 1000
        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            total_events=len(self.events),
            duration_ms=self.events[-1].offset_ms if self.events else 0,
            wall_time_ms=round(wall_ms, 2),
        )
