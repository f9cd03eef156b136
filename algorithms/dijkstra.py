"""
dijkstra.py — Dijkstra's Shortest Path
========================================
Min-heap Dijkstra over directed (source→target) edges with non-negative
weights.  Snapshots are emitted when:
  1. A node is finalized (popped with its settled distance)
  2. An edge relaxation improves a neighbour's distance
  3. The run ends: the shortest-path tree is highlighted and the status
     lists every distance, "∞" for unreachable nodes

Stale heap entries (lazy deletion) are skipped silently.  Negative
weights are rejected by input validation before this generator starts.
"""

import heapq
from typing import Dict, Generator, List, Optional, Set, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms.snapshot import GraphFrame, GraphSnapshot, ShortestPaths


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start):",                          # 0
    "    dist ← {v: ∞};  dist[start] ← 0",                   # 1
    "    pq ← [(0, start)]",                                 # 2
    "    while pq is not empty:",                            # 3
    "        (d, u) ← pq.pop_min()",                         # 4
    "        if u finalized: continue",                      # 5
    "        finalize(u)",                                   # 6
    "        for (v, w) in adj(u):",                         # 7
    "            if d + w < dist[v]:",                       # 8
    "                dist[v] ← d + w;  pq.push((dist[v], v))",  # 9
]


def _format_distances(graph: Graph, dist: Dict[int, Optional[int]]) -> str:
    return ", ".join(
        f"{nid}({'∞' if dist[nid] is None else dist[nid]})" for nid in graph.nodes
    )


def dijkstra(graph: Graph, start: int) -> Generator[GraphSnapshot, None, ShortestPaths]:
    """
    Yields:
        GraphSnapshot – start, each finalization, each improving relaxation, final.

    Returns:
        ShortestPaths with None for every node unreachable from `start`.
    """
    frame = GraphFrame(graph)
    dist:      Dict[int, Optional[int]] = {nid: None for nid in graph.nodes}
    via_edge:  Dict[int, int]           = {}
    finalized: Set[int]                 = set()
    pq:        List[Tuple[int, int]]    = [(0, start)]
    dist[start] = 0

    yield frame.build(f"Starting Dijkstra from node {start}", current=[start])

    while pq:
        d, u = heapq.heappop(pq)
        if u in finalized:
            continue
        finalized.add(u)
        frame.mark(u, NodeState.VISITED)
        yield frame.build(f"Visiting node {u} (distance {d})", current=[u])

        for v, edge_idx in graph.neighbours(u):
            if v in finalized:
                continue
            candidate = d + graph.edges[edge_idx].weight
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                via_edge[v] = edge_idx
                heapq.heappush(pq, (candidate, v))
                yield frame.build(
                    f"Updated distance to node {v} = {candidate}",
                    current=[u],
                    considered=[edge_idx],
                )

    for node, edge_idx in via_edge.items():
        if node in finalized:
            frame.mark_edge(edge_idx, EdgeState.HIGHLIGHTED)

    yield frame.build(f"Dijkstra complete. Distances: {_format_distances(graph, dist)}")
    return ShortestPaths(source=start, distances=dist)
