"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over directed (source→target) edges.  Yields a
GraphSnapshot at every meaningful event:
  1. Start         →  start node marked VISITED and shown CURRENT
  2. Dequeue       →  the node being processed shown CURRENT
  3. Discovery     →  discovery edge shown CONSIDERED for one snapshot,
                      then kept HIGHLIGHTED as part of the BFS tree
  4. Final         →  visit order in the status line

Returns a TraversalResult with the dequeue order.
"""

from collections import deque
from typing import Generator, List

from graph import Graph, NodeState, EdgeState
from algorithms.snapshot import GraphFrame, GraphSnapshot, TraversalResult


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                   # 0
    "    queue ← [start];  visited ← {start}",   # 1
    "    while queue is not empty:",             # 2
    "        node ← queue.dequeue()",            # 3
    "        for neighbour in adj(node):",       # 4
    "            if neighbour not visited:",     # 5
    "                visited.add(neighbour)",    # 6
    "                queue.enqueue(neighbour)",  # 7
]


def bfs(graph: Graph, start: int) -> Generator[GraphSnapshot, None, TraversalResult]:
    """
    Args:
        graph : The graph to traverse.
        start : Starting node id; must exist in `graph`.

    Yields:
        GraphSnapshot – one per start / dequeue / discovery event.
    """
    frame   = GraphFrame(graph)
    queue   = deque([start])
    visited = {start}
    order: List[int] = []

    frame.mark(start, NodeState.VISITED)
    yield frame.build(f"Starting BFS from node {start}", current=[start])

    while queue:
        node = queue.popleft()
        order.append(node)
        yield frame.build(f"Processing node {node}", current=[node])

        for nbr, edge_idx in graph.neighbours(node):
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(nbr)
            frame.mark(nbr, NodeState.VISITED)
            yield frame.build(
                f"Discovered node {nbr} from {node}",
                current=[nbr],
                considered=[edge_idx],
            )
            frame.mark_edge(edge_idx, EdgeState.HIGHLIGHTED)

    yield frame.build(f"BFS complete. Visit order: {', '.join(map(str, order))}")
    return TraversalResult(order=tuple(order))
