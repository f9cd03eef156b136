"""
edge.py — Graph Edge
====================
Connects two nodes and carries an integer weight.

Design decisions:
  - `source` and `target` are node ids, NOT node objects, which keeps edges
    hashable and trivially serialisable.
  - Edges are stored as directed source→target pairs.  BFS / DFS /
    Dijkstra follow them that way; Kruskal / Prim read them as undirected.
  - An edge's identity inside a graph is its position in `Graph.edges`;
    two edges may connect the same pair of nodes.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Edge State Enum: visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    NORMAL      = "normal"        # thin, neutral grey
    CONSIDERED  = "considered"    # transient: the edge examined in this snapshot only
    HIGHLIGHTED = "highlighted"   # traversal tree / shortest-path tree / MST edge


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Integer cost (default 1).
    """

    source: int
    target: int
    weight: int = 1

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(source=data["source"], target=data["target"], weight=data.get("weight", 1))

    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"
