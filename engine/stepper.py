"""
stepper.py — Animation Playback Engine
======================================
The Stepper owns the one animation that may be in flight.  It buffers the
RenderEvents of a run, remembers when the run started, and hands out the
events whose offset has come due every time it is ticked.

State machine:
    IDLE     →  start()           →  PLAYING
    PLAYING  →  (all events sent) →  FINISHED
    any      →  start()           →  PLAYING  (new run, old events dropped)
    any      →  reset()/cancel()  →  IDLE

Cancellation:
  Every start() bumps `run_id`.  Events of a previous run are discarded
  on the spot, and callers polling with an old run id are told they are
  stale, so nothing from an abandoned animation is ever painted.

Thread safety:
  Not thread-safe.  Drive it from a single thread (the Flask dev server's
  request handling for a single user, or a UI main loop).
"""

import logging
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional

from engine.scheduler import RenderEvent

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        events      : Every RenderEvent of the current run, in schedule order.
        cursor      : Index of the next event not yet handed out.
        run_id      : Increments on every start(); 0 means nothing has run.
        on_event    : Optional callback(RenderEvent) fired for each delivered event.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        on_event: Optional[Callable[[RenderEvent], None]] = None,
    ):
        self._clock:      Callable[[], float] = clock
        self._started_at: float               = 0.0
        self.events:      List[RenderEvent]   = []
        self.cursor:      int                 = 0
        self.run_id:      int                 = 0
        self.state:       StepperState        = StepperState.IDLE
        self.on_event:    Optional[Callable[[RenderEvent], None]] = on_event

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, events: Iterable[RenderEvent]) -> int:
        """Load a fresh run, dropping whatever was still pending."""
        if self.is_animating:
            logger.info("run %d cancelled with %d events pending", self.run_id, self.pending)
        self.events      = list(events)
        self.cursor      = 0
        self.run_id     += 1
        self._started_at = self._clock()
        self.state       = StepperState.PLAYING if self.events else StepperState.FINISHED
        return self.run_id

    def cancel(self) -> None:
        """Drop pending events; the run id stays so stale pollers are detected."""
        self.events = []
        self.cursor = 0
        self.state  = StepperState.IDLE

    def reset(self) -> None:
        self.cancel()
        self.run_id = 0

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / poll handler)
    # ------------------------------------------------------------------
    def tick(self) -> List[RenderEvent]:
        """Return (and consume) every event whose offset has elapsed."""
        if self.state != StepperState.PLAYING:
            return []
        now_ms = self.elapsed_ms
        due = []
        while self.cursor < len(self.events) and self.events[self.cursor].offset_ms <= now_ms:
            due.append(self.events[self.cursor])
            self.cursor += 1
        if self.cursor >= len(self.events):
            self.state = StepperState.FINISHED
        self._notify(due)
        return due

    def jump_to_end(self) -> List[RenderEvent]:
        """Hand out every remaining event at once."""
        if self.state != StepperState.PLAYING:
            return []
        rest = self.events[self.cursor:]
        self.cursor = len(self.events)
        self.state  = StepperState.FINISHED
        self._notify(rest)
        return rest

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def elapsed_ms(self) -> float:
        return (self._clock() - self._started_at) * 1000

    @property
    def duration_ms(self) -> int:
        return self.events[-1].offset_ms if self.events else 0

    @property
    def pending(self) -> int:
        return len(self.events) - self.cursor

    @property
    def is_animating(self) -> bool:
        """True while the run still has events scheduled in the future."""
        if self.state != StepperState.PLAYING:
            return False
        return self.elapsed_ms < self.duration_ms

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    def is_stale(self, run_id: int) -> bool:
        return run_id != self.run_id

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _notify(self, events: List[RenderEvent]) -> None:
        if self.on_event:
            for ev in events:
                self.on_event(ev)
