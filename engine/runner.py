"""
runner.py — Synchronous Trace Runner
======================================
`run_trace(kind, algorithm, input, params)` is the single entry point for
the stateless tracers (sorting, searching, graph).  It validates and
parses the input, picks the generator from the registry and records it
to completion.

    run_trace("sorting",   "bubble", [5, 3, 8, 1])
    run_trace("searching", "binary", "1, 3, 5, 8", {"target": 5})
    run_trace("graph",     "prim",   Graph.sample(), {"start": 0})

Any ValidationError is raised before the tracer is started.
"""

import logging
from typing import Any, Mapping, Optional

from algorithms import KINDS, get_algorithm
from algorithms.snapshot import Trace
from engine.recorder import Recorder
from engine.validation import (
    ValidationError, normalise_key, parse_graph, parse_start_node, parse_target, parse_values,
)


logger = logging.getLogger(__name__)


def run_trace(
    kind: str,
    algorithm: str,
    input: Any = None,
    params: Optional[Mapping[str, Any]] = None,
    recorder: Optional[Recorder] = None,
) -> Trace:
    """Pass a `recorder` to read its metrics afterwards."""
    params = params or {}
    if kind not in KINDS:
        raise ValidationError(f"Unknown trace kind: {kind!r}")

    key = normalise_key(algorithm, "Algorithm")
    info = get_algorithm(key, kind)
    if info is None:
        raise ValidationError(f"Unknown {kind} algorithm: {algorithm!r}")

    if kind == "sorting":
        generator = info.fn(parse_values(input))

    elif kind == "searching":
        values = parse_values(input)
        generator = info.fn(values, parse_target(params.get("target")))

    else:
        graph = parse_graph(input)
        start = parse_start_node(params.get("start"), graph)
        if not info.supports_negative and graph.has_negative_edges():
            raise ValidationError(f"{info.label} does not support negative edge weights")
        generator = info.fn(graph, start)

    logger.debug("running %s/%s", kind, key)
    recorder = recorder or Recorder()
    recorder.start(kind, key, generator)
    return recorder.run_to_completion()
