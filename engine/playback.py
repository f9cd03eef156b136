"""
playback.py — Timed Playback Controller
=========================================
Turns a finished Trace into an animation by moving an index through its
snapshots.  The presentation layer only ever reads `current_snapshot()`
and `status()` and sends commands.

State machine:
    any      →  load(trace)     →  STOPPED (index 0)
    STOPPED  →  play()          →  PLAYING     (from 0 again if at the end)
    PLAYING  →  tick            →  PLAYING, index + 1
    PLAYING  →  tick to last    →  PAUSED
    any      →  pause()         →  PAUSED
    any      →  step_forward() / step_backward() / goto()  →  PAUSED
    any      →  reset()         →  PAUSED (index 0)

Timer:
  Ticks come from an injected Scheduler (see engine.clock).  Each
  scheduled tick carries the generation number current when it was
  scheduled; cancelling bumps the generation, so a tick that fires after
  load / pause / reset / a step is a no-op even if the scheduler could
  not cancel it in time.

  set_speed() while PLAYING leaves the pending tick alone; the new
  interval is used from the next tick scheduled after it.

Thread safety:
  With ThreadingScheduler ticks arrive on a timer thread, so every public
  method takes the controller's re-entrant lock.  `on_change` runs under
  that lock and may call back into the controller.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from algorithms.snapshot import Snapshot, Trace
from engine.clock import Scheduler, ThreadingScheduler, TimerHandle


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED  = "paused"


# ---------------------------------------------------------------------------
# Speed (milliseconds between ticks)
# ---------------------------------------------------------------------------
MIN_SPEED_MS     = 100
MAX_SPEED_MS     = 900
DEFAULT_SPEED_MS = 500

SPEED_PRESETS = {
    "slow":   900,
    "medium": 500,
    "fast":   100,
}


def clamp_speed(speed_ms) -> int:
    return int(max(MIN_SPEED_MS, min(MAX_SPEED_MS, speed_ms)))


@dataclass(frozen=True)
class PlaybackStatus:
    index:      int
    length:     int
    is_playing: bool
    state:      PlaybackState
    speed_ms:   int

    def to_dict(self) -> dict:
        return {
            "index":     self.index,
            "length":    self.length,
            "isPlaying": self.is_playing,
            "state":     self.state.value,
            "speed":     self.speed_ms,
        }


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        state     : Current PlaybackState.
        speed_ms  : Milliseconds between ticks while PLAYING.
        on_change : Optional callback(Snapshot) fired whenever the index changes
                    or a new trace is loaded.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        speed_ms: int = DEFAULT_SPEED_MS,
        on_change: Optional[Callable[[Snapshot], None]] = None,
    ):
        self._scheduler: Scheduler             = scheduler or ThreadingScheduler()
        self._lock                             = threading.RLock()
        self._trace:     Optional[Trace]       = None
        self._index:     int                   = 0
        self._pending:   Optional[TimerHandle] = None
        self._generation: int                  = 0
        self.state:      PlaybackState         = PlaybackState.STOPPED
        self.speed_ms:   int                   = clamp_speed(speed_ms)
        self.on_change = on_change

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, trace: Trace) -> None:
        """Replace the trace wholesale; always lands on STOPPED at index 0."""
        with self._lock:
            self._cancel_pending()
            self._trace = trace
            self._index = 0
            self.state  = PlaybackState.STOPPED
            logger.debug("loaded %s/%s trace with %d snapshot(s)", trace.kind, trace.algorithm, len(trace))
            self._notify()

    def close(self) -> None:
        """Cancel any pending tick; the controller stays usable."""
        with self._lock:
            self._cancel_pending()
            if self.state is PlaybackState.PLAYING:
                self.state = PlaybackState.PAUSED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        with self._lock:
            if self._trace is None or self.state is PlaybackState.PLAYING:
                return
            if self._index >= self._last:
                self._index = 0
                self._notify()
            if self._index >= self._last:
                self.state = PlaybackState.PAUSED
                return
            self.state = PlaybackState.PLAYING
            self._schedule()

    def pause(self) -> None:
        with self._lock:
            self._cancel_pending()
            if self._trace is not None:
                self.state = PlaybackState.PAUSED

    def toggle_play(self) -> None:
        with self._lock:
            if self.state is PlaybackState.PLAYING:
                self.pause()
            else:
                self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> None:
        with self._lock:
            self.goto(self._index + 1)

    def step_backward(self) -> None:
        with self._lock:
            self.goto(self._index - 1)

    def goto(self, index: int) -> None:
        """Jump to `index`, clamped to the trace, and pause there."""
        with self._lock:
            self._cancel_pending()
            if self._trace is None:
                return
            self.state = PlaybackState.PAUSED
            index = max(0, min(self._last, index))
            if index != self._index:
                self._index = index
                self._notify()

    def reset(self) -> None:
        with self._lock:
            self._cancel_pending()
            if self._trace is None:
                return
            self.state = PlaybackState.PAUSED
            if self._index != 0:
                self._index = 0
                self._notify()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed_ms: int) -> int:
        """Set the tick interval (clamped); returns the value actually used."""
        with self._lock:
            self.speed_ms = clamp_speed(speed_ms)
            return self.speed_ms

    def set_speed_preset(self, preset: str) -> int:
        return self.set_speed(SPEED_PRESETS.get(preset, DEFAULT_SPEED_MS))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def trace(self) -> Optional[Trace]:
        return self._trace

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    def current_snapshot(self) -> Optional[Snapshot]:
        with self._lock:
            if self._trace is None:
                return None
            return self._trace[self._index]

    def status(self) -> PlaybackStatus:
        with self._lock:
            return PlaybackStatus(
                index=self._index,
                length=len(self._trace) if self._trace is not None else 0,
                is_playing=self.is_playing,
                state=self.state,
                speed_ms=self.speed_ms,
            )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @property
    def _last(self) -> int:
        return len(self._trace) - 1 if self._trace is not None else 0

    def _schedule(self) -> None:
        generation = self._generation
        self._pending = self._scheduler.call_later(
            self.speed_ms / 1000.0, lambda: self._tick(generation)
        )

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self.state is not PlaybackState.PLAYING:
                return
            self._pending = None
            self._index += 1
            self._notify()
            if self.state is not PlaybackState.PLAYING or generation != self._generation:
                return
            if self._index >= self._last:
                self.state = PlaybackState.PAUSED
            else:
                self._schedule()

    def _notify(self) -> None:
        if self.on_change and self._trace is not None:
            self.on_change(self._trace[self._index])
