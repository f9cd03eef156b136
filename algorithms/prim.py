"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows a vertex set from the start node.  Each round scans every
(included vertex, incident edge) pair, edges read as undirected, for the
lightest edge crossing the cut.  Included vertices are scanned in the
order they joined and a strict `<` keeps the first edge found on ties.

If no edge crosses the cut before every vertex is included, the trace
ends with a "disconnected" snapshot and `MSTResult.connected` is False.
"""

from typing import Generator, List, Optional, Set, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms.snapshot import GraphFrame, GraphSnapshot, MSTResult


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                          # 0
    "    tree ← {start}",                               # 1
    "    while |tree| < |V|:",                          # 2
    "        (u, v, w) ← lightest edge leaving tree",    # 3
    "        if none: graph is disconnected",            # 4
    "        tree.add(v);  mst.add((u, v, w))",          # 5
]


def prim(graph: Graph, start: int) -> Generator[GraphSnapshot, None, MSTResult]:
    frame = GraphFrame(graph)
    adj   = graph.undirected_adjacency()
    included:     List[int] = [start]
    included_set: Set[int]  = {start}
    accepted:     List[int] = []
    total = 0

    frame.mark(start, NodeState.INCLUDED)
    yield frame.build(f"Starting Prim's algorithm from node {start}", current=[start])

    while len(included) < graph.node_count():
        best: Optional[Tuple[int, int, int]] = None     # (weight, edge_idx, new node)
        for u in included:
            for v, edge_idx in adj[u]:
                if v in included_set:
                    continue
                weight = graph.edges[edge_idx].weight
                if best is None or weight < best[0]:
                    best = (weight, edge_idx, v)

        if best is None:
            yield frame.build("Graph is disconnected. Cannot complete MST.")
            return MSTResult(total_weight=total, edges=tuple(accepted), connected=False)

        weight, edge_idx, v = best
        edge = graph.edges[edge_idx]
        label = f"{edge.source}-{edge.target}"
        yield frame.build(
            f"Considering edge {label} with weight {weight}",
            considered=[edge_idx],
        )

        included.append(v)
        included_set.add(v)
        accepted.append(edge_idx)
        total += weight
        frame.mark(v, NodeState.INCLUDED)
        frame.mark_edge(edge_idx, EdgeState.HIGHLIGHTED)
        yield frame.build(
            f"Added edge {label} to MST (weight: {weight}, total: {total})",
            current=[v],
        )

    yield frame.build(f"Prim's MST algorithm complete. Total MST weight: {total}")
    return MSTResult(total_weight=total, edges=tuple(accepted), connected=True)
