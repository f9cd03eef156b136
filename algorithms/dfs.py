"""
dfs.py — Depth-First Search
============================
Recursive, pre-order DFS over directed (source→target) edges.  Same
snapshot granularity as BFS: one snapshot per visit and one per
outgoing-edge exploration.  Tree edges end up HIGHLIGHTED.

Recursion depth is bounded by the node count, which input validation
caps well below the interpreter's recursion limit.
"""

from typing import Generator, List, Set

from graph import Graph, NodeState, EdgeState
from algorithms.snapshot import GraphFrame, GraphSnapshot, TraversalResult


PSEUDOCODE: List[str] = [
    "def DFS(node):",                          # 0
    "    visited.add(node)",                   # 1
    "    for neighbour in adj(node):",         # 2
    "        if neighbour not visited:",       # 3
    "            DFS(neighbour)",              # 4
]


def dfs(graph: Graph, start: int) -> Generator[GraphSnapshot, None, TraversalResult]:
    frame = GraphFrame(graph)
    visited: Set[int] = set()
    order:   List[int] = []

    yield frame.build(f"Starting DFS from node {start}", current=[start])
    yield from _visit(graph, frame, start, visited, order)

    yield frame.build(f"DFS complete. Visit order: {', '.join(map(str, order))}")
    return TraversalResult(order=tuple(order))


def _visit(
    graph: Graph,
    frame: GraphFrame,
    node: int,
    visited: Set[int],
    order: List[int],
) -> Generator[GraphSnapshot, None, None]:
    visited.add(node)
    order.append(node)
    frame.mark(node, NodeState.VISITED)
    yield frame.build(f"Visiting node {node}", current=[node])

    for nbr, edge_idx in graph.neighbours(node):
        if nbr in visited:
            yield frame.build(
                f"Exploring edge from {node} to {nbr} (already visited)",
                current=[node],
                considered=[edge_idx],
            )
            continue
        yield frame.build(
            f"Exploring edge from {node} to {nbr}",
            current=[node],
            considered=[edge_idx],
        )
        frame.mark_edge(edge_idx, EdgeState.HIGHLIGHTED)
        yield from _visit(graph, frame, nbr, visited, order)
