"""
board.py — Board Session
========================
The object the web layer talks to.  Holds the current Grid, the Stepper
playing the current animation, and the metrics of the last run.

Commands:
    toggle_wall / relocate_start / relocate_finish   – cell edits
    spawn_start / spawn_finish                        – random relocation
    reset_grid                                        – fresh board, cancels animation
    run(algo_key, seed)                               – search or maze + schedule
    poll(run_id) / skip                               – playback of the current run

Grid edits are refused with AnimationInProgress while an animation is
still playing, so the data never drifts from what is on screen.  Starting
a new run or resetting is always allowed and drops the stale animation.

Thread safety:
  One Board is shared by every request of the app, and the dev server is
  threaded.  Every command and every playback read holds `_lock`, so
  overlapping requests apply one after the other.
"""

import logging
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

from grid import Coord, Grid
from algorithms import SEARCH, MAZE
from engine.recorder import Recorder, RunMetrics
from engine.scheduler import (
    AnimationDelays,
    DEFAULT_DELAYS,
    RenderEvent,
    schedule_search_animation,
    schedule_maze_animation,
)
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


class AnimationInProgress(RuntimeError):
    def __init__(self, run_id: int):
        super().__init__(f"animation {run_id} is still playing")
        self.run_id = run_id


@dataclass
class RunOutcome:
    run_id:     int
    kind:       str
    metrics:    RunMetrics
    path_found: bool              = False
    seed:       Optional[int]     = None
    events:     List[RenderEvent] = field(default_factory=list)
    before:     Optional[Grid]    = None     # grid as it was when the run started


@dataclass
class PlaybackFrame:
    run_id:   int
    stale:    bool
    events:   List[RenderEvent] = field(default_factory=list)
    finished: bool              = False
    grid:     Optional[Grid]    = None
    played:   List[RenderEvent] = field(default_factory=list)   # whole run so far


class Board:
    """
    Attributes:
        grid         : Current Grid (replaced on every edit).
        stepper      : Playback of the current animation.
        last_metrics : RunMetrics of the most recent run, or None.
    """

    def __init__(
        self,
        rows: int = 20,
        cols: int = 50,
        start: Coord = (2, 3),
        finish: Coord = (10, 20),
        delays: AnimationDelays = DEFAULT_DELAYS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.rows:   int             = rows
        self.cols:   int             = cols
        self.start:  Coord           = tuple(start)
        self.finish: Coord           = tuple(finish)
        self.delays: AnimationDelays = delays

        self.grid:         Grid                 = Grid.create(rows, cols, self.start, self.finish)
        self.stepper:      Stepper              = Stepper(clock=clock)
        self.last_metrics: Optional[RunMetrics] = None
        self._lock:        threading.RLock      = threading.RLock()

    @classmethod
    def from_config(cls, config: Mapping, clock: Callable[[], float] = time.monotonic) -> "Board":
        return cls(
            rows=config["GRID_ROWS"],
            cols=config["GRID_COLS"],
            start=tuple(config["START"]),
            finish=tuple(config["FINISH"]),
            delays=AnimationDelays(
                search_ms=config["SEARCH_DELAY_MS"],
                path_ms=config["PATH_DELAY_MS"],
                maze_ms=config["MAZE_DELAY_MS"],
            ),
            clock=clock,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def animation_in_progress(self) -> bool:
        return self.stepper.is_animating

    # ------------------------------------------------------------------
    # Cell edits
    # ------------------------------------------------------------------
    def toggle_wall(self, row: int, col: int) -> Grid:
        with self._lock:
            self._ensure_idle()
            self.grid = self.grid.toggle_wall(row, col)
            return self.grid

    def relocate_start(self, row: int, col: int) -> Grid:
        with self._lock:
            self._ensure_idle()
            self.grid = self.grid.relocate_start(row, col)
            logger.info("start moved to (%d, %d)", row, col)
            return self.grid

    def relocate_finish(self, row: int, col: int) -> Grid:
        with self._lock:
            self._ensure_idle()
            self.grid = self.grid.relocate_finish(row, col)
            logger.info("finish moved to (%d, %d)", row, col)
            return self.grid

    def spawn_start(self, rng: Optional[random.Random] = None) -> Grid:
        """Clear the board, then drop Start on a random cell."""
        with self._lock:
            self._ensure_idle()
            self.reset_grid()
            finish = self.grid.find_finish().coord
            row, col = self._random_cell(rng or random.Random(), avoid=finish)
            return self.relocate_start(row, col)

    def spawn_finish(self, rng: Optional[random.Random] = None) -> Grid:
        """Drop Finish on a random cell, keeping the walls."""
        with self._lock:
            self._ensure_idle()
            start = self.grid.find_start().coord
            row, col = self._random_cell(rng or random.Random(), avoid=start)
            return self.relocate_finish(row, col)

    def reset_grid(self) -> Grid:
        with self._lock:
            self.stepper.cancel()
            self.grid = Grid.create(self.rows, self.cols, self.start, self.finish)
            self.last_metrics = None
            logger.info("board reset to %dx%d", self.rows, self.cols)
            return self.grid

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def run(self, algo_key: str, seed: Optional[int] = None) -> RunOutcome:
        with self._lock:
            return self._run(algo_key, seed)

    def _run(self, algo_key: str, seed: Optional[int]) -> RunOutcome:
        rec    = Recorder()
        info   = rec.start(algo_key)
        before = self.grid

        if info.kind == SEARCH:
            search, path = info.fn(self.grid)
            events  = list(schedule_search_animation(search, path, self.delays))
            metrics = rec.record_search(search, path, events)
            outcome = RunOutcome(run_id=0, kind=SEARCH, metrics=metrics, path_found=path.found)
        elif info.kind == MAZE:
            if seed is None:
                seed = random.randrange(1 << 30)
            walls   = info.fn(self.grid, seed)
            self.grid = self.grid.with_walls(walls)
            events  = list(schedule_maze_animation(walls, self.delays))
            metrics = rec.record_maze(walls, events)
            outcome = RunOutcome(run_id=0, kind=MAZE, metrics=metrics, seed=seed)
        else:
            raise ValueError(f"Unsupported algorithm kind: {info.kind}")

        outcome.events  = events
        outcome.before  = before
        outcome.run_id  = self.stepper.start(events)
        self.last_metrics = metrics
        logger.info(
            "run %d (%s): %d events over %d ms",
            outcome.run_id, algo_key, metrics.total_events, metrics.duration_ms,
        )
        return outcome

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    def poll(self, run_id: Optional[int]) -> PlaybackFrame:
        """Events of run `run_id` now due; a missing or old id is stale."""
        with self._lock:
            current = self.stepper.run_id
            if run_id is None or self.stepper.is_stale(run_id):
                return PlaybackFrame(run_id=current, stale=True)
            events = self.stepper.tick()
            return PlaybackFrame(
                run_id=current, stale=False, events=events, finished=self.stepper.is_finished,
            )

    def skip(self) -> PlaybackFrame:
        """Every remaining event of the current run, plus the finished picture."""
        with self._lock:
            events = self.stepper.jump_to_end()
            return PlaybackFrame(
                run_id=self.stepper.run_id,
                stale=False,
                events=events,
                finished=True,
                grid=self.grid,
                played=list(self.stepper.events),
            )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _ensure_idle(self) -> None:
        if self.animation_in_progress:
            logger.warning("grid edit refused: run %d still animating", self.stepper.run_id)
            raise AnimationInProgress(self.stepper.run_id)

    def _random_cell(self, rng: random.Random, avoid: Coord) -> Coord:
        while True:
            cell = (rng.randrange(self.rows), rng.randrange(self.cols))
            if cell != avoid:
                return cell
