"""
session.py — Tracer Session
=============================
Holds the state that outlives a single trace: the current BST, the
current max-heap and the current graph.  Nothing in the engine is
global; two sessions never see each other's structures.

    session = TracerSession()
    trace = session.apply("bst", "insert", 30)     # traced, then committed
    trace = session.apply("bst", "search", 30)     # traced, never committed
    session.reset("bst")                           # back to the seed tree

Lifecycle of a structure operation:  Idle → Tracing → Committed.  The
operation's generator runs to completion first; only then is its
resulting tree swapped in.  A rejected or failing operation leaves the
current tree untouched.
"""

import logging
import threading
from typing import Any, Dict, Generator, List, Mapping, Optional

from algorithms.snapshot import BstSnapshot, HeapSnapshot, Trace, TreeNode, TreeSnapshot
from engine.inputs import generate_graph
from engine.recorder import Recorder, RunMetrics
from engine.runner import run_trace
from engine.validation import ValidationError, normalise_key, parse_graph, parse_tree_value
from graph import Graph
from structures import STRUCTURES, get_structure


logger = logging.getLogger(__name__)

SNAPSHOT_TYPES = {"bst": BstSnapshot, "heap": HeapSnapshot}


def _committing(generator: Generator, box: List[Optional[TreeNode]]) -> Generator:
    """Pass `generator` through, stash the tree it returns in `box`, return its outcome."""
    new_root, outcome = yield from generator
    box.append(new_root)
    return outcome


class TracerSession:
    """
    Attributes:
        graph : The graph graph-tracers run on when no graph is supplied.
        trees : {"bst": root, "heap": root}, the committed structures.
        metrics : RunMetrics of the most recent run, apply or reset.
    """

    def __init__(self, graph: Optional[Graph] = None):
        self._lock = threading.RLock()
        self.graph: Graph = graph if graph is not None else Graph.sample()
        self.trees: Dict[str, Optional[TreeNode]] = {key: info.seed() for key, info in STRUCTURES.items()}
        self.metrics: Optional[RunMetrics] = None

    # ------------------------------------------------------------------
    # Stateless tracers
    # ------------------------------------------------------------------
    def run(
        self,
        kind: str,
        algorithm: str,
        input: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Trace:
        """run_trace(), with graph tracers defaulting to the session's graph."""
        if kind == "graph" and input is None:
            input = self.graph
        recorder = Recorder()
        trace = run_trace(kind, algorithm, input, params, recorder=recorder)
        self.metrics = recorder.get_metrics()
        return trace

    def run_graph(self, algorithm: str, raw: Any, params: Optional[Mapping[str, Any]] = None) -> Trace:
        """Run a graph tracer on `raw`; the graph replaces the session graph only if the run succeeds."""
        with self._lock:
            graph = parse_graph(raw)
            trace = self.run("graph", algorithm, graph, params)
            self.graph = graph
            logger.info("session graph replaced: %r", graph)
            return trace

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------
    def set_graph(self, raw: Any) -> Graph:
        with self._lock:
            self.graph = parse_graph(raw)
            logger.info("session graph replaced: %r", self.graph)
            return self.graph

    def generate_graph(self, num_nodes: Optional[int] = None, seed: Optional[int] = None) -> Graph:
        with self._lock:
            self.graph = generate_graph(num_nodes=num_nodes, seed=seed)
            logger.info("session graph generated: %r", self.graph)
            return self.graph

    def reset_graph(self) -> Graph:
        with self._lock:
            self.graph = Graph.sample()
            logger.info("session graph reset to the sample graph")
            return self.graph

    # ------------------------------------------------------------------
    # Structures
    # ------------------------------------------------------------------
    def tree(self, structure: str) -> Optional[TreeNode]:
        return self.trees[self._structure(structure).key]

    def snapshot(self, structure: str, status: str = "") -> TreeSnapshot:
        """The committed structure as a single, highlight-free snapshot."""
        key = self._structure(structure).key
        return SNAPSHOT_TYPES[key](root=self.trees[key], status=status)

    def apply(self, structure: str, operation: str, value: Any = None) -> Trace:
        """Trace `operation` on the current structure and commit the result."""
        info = self._structure(structure)
        op_key = normalise_key(operation, "Operation")
        op = info.operations.get(op_key)
        if op is None:
            raise ValidationError(f"Unknown {info.label} operation: {operation!r}")
        parsed = parse_tree_value(value, required=op.needs_value)

        with self._lock:
            box: List[Optional[TreeNode]] = []
            recorder = Recorder()
            recorder.start(info.key, op.key, _committing(op.fn(self.trees[info.key], parsed), box))
            trace = recorder.run_to_completion()
            self.metrics = recorder.get_metrics()
            if op.commits:
                self.trees[info.key] = box[0]
                logger.info("%s %s(%s) committed: result=%r", info.key, op.key, parsed, trace.result)
            return trace

    def reset(self, structure: str) -> Trace:
        """Restore the seed structure; the returned trace shows it."""
        info = self._structure(structure)
        with self._lock:
            self.trees[info.key] = info.seed()
            logger.info("%s reset to its seed", info.key)
            snap = self.snapshot(info.key, f"{info.label} reset to its initial state")
            self.metrics = RunMetrics(kind=info.key, algorithm="reset", total_steps=1)
            return Trace(kind=info.key, algorithm="reset", snapshots=(snap,))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _structure(self, structure: str):
        info = get_structure(normalise_key(structure, "Structure"))
        if info is None:
            raise ValidationError(f"Unknown structure: {structure!r}")
        return info
