"""
clock.py — Injectable Timer Schedulers
========================================
The playback controller never sleeps or reads the wall clock itself.  It
asks a Scheduler to call it back later, and gets back a handle it can
cancel:

    handle = scheduler.call_later(0.5, tick)
    handle.cancel()

Two implementations:
    ThreadingScheduler – real time, one threading.Timer per call
    ManualScheduler    – virtual time; tests move it with advance(ms)
"""

import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple


class TimerHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        """Stop the callback from running, if it has not run yet."""


class Scheduler(ABC):
    """Interface: schedule `callback` to run once after `delay_seconds`."""

    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        pass


# ---------------------------------------------------------------------------
# Real time
# ---------------------------------------------------------------------------
class _ThreadingHandle(TimerHandle):
    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """Callbacks run on a daemon timer thread."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return _ThreadingHandle(timer)


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------
class _ManualHandle(TimerHandle):
    def __init__(self, deadline_ms: float, callback: Callable[[], None]):
        self.deadline_ms = deadline_ms
        self.callback    = callback
        self.cancelled   = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler for tests.  Nothing fires until advance() is
    called; callbacks then run on the caller's thread in deadline order
    (ties in scheduling order), including callbacks scheduled by earlier
    callbacks within the same advance window.
    """

    def __init__(self):
        self.now_ms: float = 0.0
        self._queue: List[Tuple[float, int, _ManualHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualHandle(self.now_ms + delay_seconds * 1000.0, callback)
        heapq.heappush(self._queue, (handle.deadline_ms, next(self._seq), handle))
        return handle

    def advance(self, ms: float) -> int:
        """Move virtual time forward by `ms`; returns the number of callbacks run."""
        until = self.now_ms + ms
        fired = 0
        while self._queue and self._queue[0][0] <= until + 1e-6:
            deadline, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now_ms = deadline
            handle.callback()
            fired += 1
        self.now_ms = until
        return fired

    @property
    def pending(self) -> int:
        """Number of scheduled, not cancelled callbacks."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)
