"""
engine/
-------
Scheduling, playback & session layer.

    from engine import Board, Stepper, schedule_search_animation
"""

from engine.scheduler import (
    AnimationDelays,
    DEFAULT_DELAYS,
    RenderEvent,
    schedule_search_animation,
    schedule_maze_animation,
    schedule_grid_snapshot,
)
from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics
from engine.board    import Board, RunOutcome, PlaybackFrame, AnimationInProgress

__all__ = [
    "AnimationDelays",
    "DEFAULT_DELAYS",
    "RenderEvent",
    "schedule_search_animation",
    "schedule_maze_animation",
    "schedule_grid_snapshot",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "Board",
    "RunOutcome",
    "PlaybackFrame",
    "AnimationInProgress",
]
