"""
Tests for the Recorder and the Trace it produces.
"""

import pytest

from algorithms.kruskal import kruskal
from algorithms.snapshot import ArraySnapshot
from algorithms.sorting import bubble_sort
from engine import Recorder, record


def three_steps():
    for i in range(3):
        yield ArraySnapshot.of([i], status=f"step {i}")
    return "done"


def no_steps():
    return "nothing"
    yield  # pragma: no cover


def fails_halfway():
    yield ArraySnapshot.of([1], status="ok")
    raise ValueError("tracer bug")


class TestRecorder:

    def test_collects_snapshots_and_return_value(self):
        trace = record("sorting", "demo", three_steps())
        assert len(trace) == 3
        assert [s.status for s in trace] == ["step 0", "step 1", "step 2"]
        assert trace.result == "done"
        assert trace.final is trace[2]

    def test_metrics(self):
        rec = Recorder()
        rec.start("sorting", "bubble", bubble_sort([3, 1, 2]))
        trace = rec.run_to_completion()
        metrics = rec.get_metrics()
        assert metrics.total_steps == len(trace)
        assert metrics.wall_time_ms >= 0
        assert metrics.to_dict()["algorithm"] == "bubble"

    def test_requires_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_generator_is_consumed_once(self):
        rec = Recorder()
        rec.start("sorting", "demo", three_steps())
        rec.run_to_completion()
        with pytest.raises(RuntimeError):
            rec.run_to_completion()

    def test_empty_trace_is_an_error(self):
        with pytest.raises(RuntimeError):
            record("sorting", "demo", no_steps())

    def test_tracer_exception_propagates(self):
        rec = Recorder()
        rec.start("sorting", "demo", fails_halfway())
        with pytest.raises(ValueError):
            rec.run_to_completion()
        assert rec.trace is None


class TestTraceJson:

    def test_sorting_trace_dict(self):
        data = record("sorting", "bubble", bubble_sort([2, 1])).to_dict()
        assert data["kind"] == "sorting"
        assert data["algorithm"] == "bubble"
        assert data["result"] == (1, 2)
        assert data["steps"][0] == {
            "kind": "array",
            "array": [{"value": 2, "highlighted": False}, {"value": 1, "highlighted": False}],
            "status": data["steps"][0]["status"],
        }
        assert "found" not in data

    def test_graph_result_serialises(self, sample_graph):
        data = record("graph", "kruskal", kruskal(sample_graph)).to_dict()
        assert data["result"]["total_weight"] == 19
        assert data["steps"][-1]["kind"] == "graph"
