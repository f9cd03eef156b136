"""
kruskal.py — Kruskal's Minimum Spanning Tree
==============================================
Edges are read as undirected and sorted ascending by weight; `sorted` is
stable, so equal weights keep their input order.  A disjoint-set
union with path-compressed `find` rejects edges that would close a
cycle.

Every edge gets two snapshots: "Considering …" and then "Added …" or
"Rejected …".  On a disconnected graph the result is a spanning forest
and `MSTResult.connected` is False; that is an outcome, not an error.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph, NodeState, EdgeState
from algorithms.snapshot import GraphFrame, GraphSnapshot, MSTResult


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                          # 0
    "    sort edges by weight",                     # 1
    "    for (u, v, w) in edges:",                  # 2
    "        if find(u) != find(v):",               # 3
    "            union(u, v);  mst.add((u, v, w))",  # 4
]


class DisjointSet:
    """Union-find over node ids."""

    def __init__(self, items):
        self.parent: Dict[int, int] = {item: item for item in items}

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_a] = root_b
        return True


def kruskal(graph: Graph, start: Optional[int] = None) -> Generator[GraphSnapshot, None, MSTResult]:
    """`start` is accepted for a uniform signature and ignored."""
    frame = GraphFrame(graph)
    dsu   = DisjointSet(graph.nodes)
    order = sorted(range(len(graph.edges)), key=lambda i: graph.edges[i].weight)
    accepted: List[int] = []
    total = 0

    yield frame.build(f"Starting Kruskal's algorithm: {len(order)} edge(s) sorted by weight")

    for edge_idx in order:
        edge = graph.edges[edge_idx]
        label = f"{edge.source}-{edge.target}"
        yield frame.build(
            f"Considering edge {label} with weight {edge.weight}",
            considered=[edge_idx],
        )
        if dsu.union(edge.source, edge.target):
            accepted.append(edge_idx)
            total += edge.weight
            frame.mark_edge(edge_idx, EdgeState.HIGHLIGHTED)
            frame.mark(edge.source, NodeState.INCLUDED)
            frame.mark(edge.target, NodeState.INCLUDED)
            yield frame.build(f"Added edge {label} to MST (weight: {edge.weight}, total: {total})")
        else:
            yield frame.build(
                f"Rejected edge {label} - would create a cycle",
                considered=[edge_idx],
            )

    connected = len(accepted) == max(graph.node_count() - 1, 0)
    if connected:
        for nid in graph.nodes:
            frame.mark(nid, NodeState.INCLUDED)
        yield frame.build(f"Kruskal's MST algorithm complete. Total MST weight: {total}")
    else:
        yield frame.build(
            f"Kruskal's MST algorithm complete. Graph is disconnected; "
            f"spanning forest weight: {total}"
        )
    return MSTResult(total_weight=total, edges=tuple(accepted), connected=connected)
