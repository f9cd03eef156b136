"""
engine/
-------
Recording, session & playback layer.

    from engine import TracerSession, PlaybackController, run_trace
"""

from engine.clock      import Scheduler, ThreadingScheduler, ManualScheduler
from engine.playback   import (PlaybackController, PlaybackState, PlaybackStatus,
                               SPEED_PRESETS, MIN_SPEED_MS, MAX_SPEED_MS, DEFAULT_SPEED_MS)
from engine.recorder   import Recorder, RunMetrics, record
from engine.validation import ValidationError
from engine.runner     import run_trace
from engine.session    import TracerSession
from engine.inputs     import generate_array, generate_search_input, generate_graph

__all__ = [
    "Scheduler", "ThreadingScheduler", "ManualScheduler",
    "PlaybackController", "PlaybackState", "PlaybackStatus",
    "SPEED_PRESETS", "MIN_SPEED_MS", "MAX_SPEED_MS", "DEFAULT_SPEED_MS",
    "Recorder", "RunMetrics", "record",
    "ValidationError",
    "run_trace",
    "TracerSession",
    "generate_array", "generate_search_input", "generate_graph",
]
