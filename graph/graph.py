"""
graph.py — Graph Container & Generator
=======================================
The input every graph tracer runs on.

Responsibilities:
  1. Node & edge construction               (add_node / add_edge)
  2. Adjacency queries                      (neighbours, undirected_adjacency)
  3. Graph factories                        (sample, generate_random)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Node ids are integers kept in insertion order; that order is the
    order nodes appear in every snapshot.
  - Edges live in a list and are identified by their index, so snapshots
    can carry per-edge state even when two edges join the same nodes.
  - `_adj[node_id] → [(neighbour_id, edge_index)]` is maintained
    incrementally and follows edges source→target only.
"""

import random
from typing import Dict, List, Optional, Tuple

from graph.edge import Edge


# The 6-node weighted graph the visualizer opens with.
SAMPLE_EDGES: List[Tuple[int, int, int]] = [
    (0, 1, 4),
    (0, 2, 2),
    (1, 2, 5),
    (1, 3, 10),
    (2, 4, 3),
    (3, 5, 7),
    (4, 3, 4),
    (4, 5, 6),
]


class Graph:
    """
    Attributes:
        nodes : [node_id, …] in insertion order
        edges : [Edge, …]; an edge's index is its identity
        _adj  : {node_id: [(neighbour_id, edge_index), …]}  (directed)
    """

    def __init__(self):
        self.nodes: List[int]                        = []
        self.edges: List[Edge]                       = []
        self._adj:  Dict[int, List[Tuple[int, int]]] = {}

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    def add_node(self, node_id: int) -> int:
        if node_id not in self._adj:
            self.nodes.append(node_id)
            self._adj[node_id] = []
        return node_id

    def add_edge(self, source: int, target: int, weight: int = 1) -> Edge:
        """Append a directed edge; both endpoints are created if missing."""
        self.add_node(source)
        self.add_node(target)
        edge = Edge(source=source, target=target, weight=weight)
        self.edges.append(edge)
        self._adj[source].append((target, len(self.edges) - 1))
        return edge

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def has_node(self, node_id: int) -> bool:
        return node_id in self._adj

    def neighbours(self, node_id: int) -> List[Tuple[int, int]]:
        """[(neighbour_id, edge_index)] following edges source→target, in edge order."""
        return list(self._adj.get(node_id, []))

    def undirected_adjacency(self) -> Dict[int, List[Tuple[int, int]]]:
        """
        Adjacency for algorithms that treat edges as undirected.

        Every edge is listed under both endpoints, keyed by its index, so
        parallel and antiparallel edges all stay visible.  A self-loop is
        listed once.
        """
        adj: Dict[int, List[Tuple[int, int]]] = {nid: [] for nid in self.nodes}
        for idx, edge in enumerate(self.edges):
            adj[edge.source].append((edge.target, idx))
            if edge.target != edge.source:
                adj[edge.target].append((edge.source, idx))
        return adj

    def get_edge_between(self, a: int, b: int) -> Optional[int]:
        """Index of the first edge a→b, or None."""
        for nbr, idx in self._adj.get(a, []):
            if nbr == b:
                return idx
        return None

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [{"id": nid} for nid in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(nd["id"] if isinstance(nd, dict) else nd)
        for ed in data.get("edges", []):
            e = Edge.from_dict(ed)
            g.add_edge(e.source, e.target, e.weight)
        return g

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def sample(cls) -> "Graph":
        """The fixed 6-node weighted graph (MST weight 19)."""
        g = cls()
        for nid in range(6):
            g.add_node(nid)
        for source, target, weight in SAMPLE_EDGES:
            g.add_edge(source, target, weight)
        return g

    @classmethod
    def generate_random(
        cls,
        num_nodes: Optional[int] = None,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
    ) -> "Graph":
        """
        Random connected weighted graph.

        A ring backbone i→i+1 (closed by n-1→0) guarantees connectivity;
        the edge count is then topped up to a random target between n and
        n·(n-1)/2 with shuffled extra pairs.  With no `num_nodes` the size
        is drawn from 5..10.
        """
        rng = random.Random(seed)
        n = num_nodes if num_nodes is not None else rng.randint(5, 10)

        g = cls()
        for nid in range(n):
            g.add_node(nid)
        if n < 2:
            return g

        for i in range(n - 1):
            g.add_edge(i, i + 1, rng.randint(*weight_range))
        if n > 2:
            g.add_edge(n - 1, 0, rng.randint(*weight_range))

        max_edges = n * (n - 1) // 2
        target_count = rng.randint(min(n, max_edges), max_edges)

        taken = {frozenset((e.source, e.target)) for e in g.edges}
        candidates = [
            (i, j)
            for i in range(n)
            for j in range(i + 1, n)
            if frozenset((i, j)) not in taken
        ]
        rng.shuffle(candidates)
        while len(g.edges) < target_count and candidates:
            i, j = candidates.pop()
            g.add_edge(i, j, rng.randint(*weight_range))

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
