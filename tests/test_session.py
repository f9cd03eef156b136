"""
Tests for TracerSession: committed structures and the session graph.
"""

import pytest

from algorithms.snapshot import HeapSnapshot
from engine import TracerSession, ValidationError
from structures import STRUCTURES, get_operation, inorder_values, level_order


SEED_BST = [10, 25, 40, 50, 60, 75, 90]


class TestStructures:

    def test_seeds(self, session):
        assert inorder_values(session.tree("bst")) == SEED_BST
        assert session.tree("heap").value == 90

    def test_insert_commits(self, session):
        trace = session.apply("bst", "insert", 30)
        assert trace.kind == "bst"
        assert trace.algorithm == "insert"
        assert trace.result is True
        assert 30 in inorder_values(session.tree("bst"))

    def test_search_does_not_commit(self, session):
        before = session.tree("bst")
        trace = session.apply("bst", "search", 60)
        assert trace.result is True
        assert session.tree("bst") is before

    def test_committed_tree_is_clean(self, session):
        """Highlights live in snapshots only, never in the stored tree."""
        session.apply("bst", "search", 60)
        session.apply("bst", "insert", 30)
        assert not any(node.highlighted or node.found for _, node in level_order(session.tree("bst")))

    def test_operation_keys_are_normalised(self, session):
        trace = session.apply("Heap", "extractMax")
        assert trace.algorithm == "extract_max"
        assert trace.result == 90
        assert session.tree("heap").value == 70
        session.apply("heap", "extract-max")
        assert session.tree("heap").value == 60

    def test_string_values_are_parsed(self, session):
        session.apply("heap", "insert", " 95 ")
        assert session.tree("heap").value == 95

    @pytest.mark.parametrize("structure, operation, value", [
        ("tree", "insert", 1),
        ("bst", "rotate", 1),
        ("bst", "insert", None),
        ("bst", "insert", "abc"),
        ("heap", "insert", ""),
        (None, "insert", 1),
    ])
    def test_rejected_input_leaves_tree_untouched(self, session, structure, operation, value):
        before = {key: session.tree(key) for key in ("bst", "heap")}
        with pytest.raises(ValidationError):
            session.apply(structure, operation, value)
        assert {key: session.tree(key) for key in ("bst", "heap")} == before

    def test_failing_operation_commits_nothing(self, session, monkeypatch):
        def boom(root, value):
            yield session.snapshot("bst", "about to fail")
            raise RuntimeError("tracer failure")

        monkeypatch.setattr(STRUCTURES["bst"].operations["insert"], "fn", boom)
        before = session.tree("bst")
        with pytest.raises(RuntimeError):
            session.apply("bst", "insert", 1)
        assert session.tree("bst") is before

    def test_reset(self, session):
        session.apply("bst", "clear")
        assert session.tree("bst") is None
        trace = session.reset("bst")
        assert len(trace) == 1
        assert trace.algorithm == "reset"
        assert trace.final.status == "Binary Search Tree reset to its initial state"
        assert inorder_values(session.tree("bst")) == SEED_BST

    def test_snapshot_of_committed_structure(self, session):
        snap = session.snapshot("heap")
        assert isinstance(snap, HeapSnapshot)
        assert snap.root is session.tree("heap")

    def test_operation_registry(self):
        assert get_operation("bst", "search").commits is False
        assert get_operation("heap", "extract_max").needs_value is False
        assert get_operation("heap", "search") is None
        assert get_operation("avl", "insert") is None

    def test_sessions_are_independent(self):
        a, b = TracerSession(), TracerSession()
        a.apply("heap", "clear")
        assert a.tree("heap") is None
        assert b.tree("heap").value == 90


class TestSessionGraph:

    def test_graph_run_defaults_to_session_graph(self, session):
        trace = session.run("graph", "bfs")
        assert trace.result.order == (0, 1, 2, 3, 4, 5)

    def test_set_graph(self, session):
        session.set_graph({"nodes": [0, 1], "edges": [[0, 1, 3]]})
        trace = session.run("graph", "dijkstra", params={"start": 0})
        assert trace.result.distances == {0: 0, 1: 3}

    def test_set_graph_rejects_bad_input(self, session):
        with pytest.raises(ValidationError):
            session.set_graph({"nodes": [0, 2], "edges": []})
        assert session.graph.node_count() == 6

    def test_generate_and_reset_graph(self, session):
        generated = session.generate_graph(num_nodes=7, seed=3)
        assert session.graph is generated
        assert generated.node_count() == 7
        session.reset_graph()
        assert session.graph.edge_count() == 8

    def test_stateless_kinds_ignore_session_graph(self, session):
        trace = session.run("sorting", "bubble", [3, 1, 2])
        assert trace.result == (1, 2, 3)

    def test_run_graph_commits_on_success(self, session):
        trace = session.run_graph("bfs", {"nodes": [0, 1, 2], "edges": [[0, 1], [1, 2]]})
        assert trace.result.order == (0, 1, 2)
        assert session.graph.node_count() == 3

    @pytest.mark.parametrize("algorithm, params", [
        ("bogus", None),
        ("bfs", {"start": 7}),
        ("dijkstra", None),
    ])
    def test_run_graph_failure_keeps_session_graph(self, session, algorithm, params):
        raw = {"nodes": [0, 1], "edges": [[0, 1, -4]]}
        before = session.graph
        with pytest.raises(ValidationError):
            session.run_graph(algorithm, raw, params)
        assert session.graph is before
        assert session.graph.node_count() == 6


class TestMetrics:

    def test_none_before_any_run(self, session):
        assert session.metrics is None

    def test_run_records_metrics(self, session):
        trace = session.run("sorting", "bubble", [3, 1, 2])
        assert session.metrics.kind == "sorting"
        assert session.metrics.algorithm == "bubble"
        assert session.metrics.total_steps == len(trace)

    def test_apply_records_metrics(self, session):
        trace = session.apply("heap", "insert", 95)
        assert session.metrics.algorithm == "insert"
        assert session.metrics.total_steps == len(trace)

    def test_reset_records_a_single_step(self, session):
        session.reset("bst")
        assert session.metrics.to_dict()["total_steps"] == 1

    def test_rejected_run_keeps_previous_metrics(self, session):
        session.run("sorting", "bubble", [3, 1, 2])
        before = session.metrics
        with pytest.raises(ValidationError):
            session.run("sorting", "bogo", [1])
        assert session.metrics is before
