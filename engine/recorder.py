"""
recorder.py — Trace Recorder
==============================
Drains a tracer generator to completion and packages everything it
yielded, plus its return value, into an immutable Trace.

Usage:
    rec = Recorder()
    rec.start(kind="sorting", algorithm="bubble", generator=bubble_sort([5, 3, 8, 1]))
    trace = rec.run_to_completion()      # exhausts the generator
    metrics = rec.get_metrics()          # step count & wall time

or in one call:
    trace = record("sorting", "bubble", bubble_sort([5, 3, 8, 1]))

A Trace only exists once the generator has finished.  If the tracer
raises, the exception propagates and nothing it yielded is exposed.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Generator, List, Optional

from algorithms.snapshot import Snapshot, Trace


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    kind:         str   = ""
    algorithm:    str   = ""
    total_steps:  int   = 0          # number of snapshots yielded
    wall_time_ms: float = 0.0        # wall-clock time to run to completion

    def to_dict(self) -> dict:
        return dict(self.__dict__)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : The finished Trace (available after run_to_completion).
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.trace:   Optional[Trace]      = None
        self.metrics: Optional[RunMetrics] = None

        self._kind:      str = ""
        self._algorithm: str = ""
        self._generator: Optional[Generator[Snapshot, None, Any]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, kind: str, algorithm: str, generator: Generator[Snapshot, None, Any]) -> None:
        self._kind      = kind
        self._algorithm = algorithm
        self._generator = generator
        self.trace      = None
        self.metrics    = None

    def run_to_completion(self) -> Trace:
        """Exhaust the generator, collect every snapshot and the return value."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        snapshots: List[Snapshot] = []
        result: Any = None
        while True:
            try:
                snapshots.append(next(self._generator))
            except StopIteration as stop:
                result = stop.value
                break
        wall_ms = (time.monotonic() - started) * 1000
        self._generator = None

        if not snapshots:
            raise RuntimeError(f"{self._kind}/{self._algorithm} produced no snapshots")

        self.trace = Trace(
            kind=self._kind,
            algorithm=self._algorithm,
            snapshots=tuple(snapshots),
            result=result,
        )
        self.metrics = RunMetrics(
            kind=self._kind,
            algorithm=self._algorithm,
            total_steps=len(snapshots),
            wall_time_ms=round(wall_ms, 2),
        )
        logger.debug(
            "recorded %s/%s: %d snapshot(s) in %.2f ms",
            self._kind, self._algorithm, len(snapshots), wall_ms,
        )
        return self.trace

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics


def record(kind: str, algorithm: str, generator: Generator[Snapshot, None, Any]) -> Trace:
    rec = Recorder()
    rec.start(kind, algorithm, generator)
    return rec.run_to_completion()
