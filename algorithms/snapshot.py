"""
snapshot.py — Trace Snapshots
==============================
Every tracer is a generator that yields snapshots.  A snapshot is a
frozen-in-time picture of everything the renderer needs for one frame,
plus a `status` line describing the action that was just taken.

Three shapes exist:

    • ArraySnapshot  – sorting & searching (values + per-cell highlight)
    • TreeSnapshot   – BST / max-heap, as a tagged variant:
                         BstSnapshot  over BstNode  (has `found`)
                         HeapSnapshot over HeapNode (no `found`)
    • GraphSnapshot  – node states + edge states

Design decisions:
  - Everything here is a frozen dataclass and every sequence is a tuple,
    so a snapshot can never be changed after it has been yielded.  Tree
    snapshots share untouched subtrees with each other; that is safe
    precisely because nodes are immutable.
  - `GraphFrame` is the one mutable piece: a scratch-pad graph tracers
    keep between yields and stamp snapshots out of.
  - Outcomes (search index, distances, MST weight …) are the tracer
    generator's *return* value and end up in `Trace.result`.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, Iterator, Optional, Tuple, Union

from graph import Graph, NodeState, EdgeState


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ArrayItem:
    value:       int
    highlighted: bool = False

    def to_dict(self) -> dict:
        return {"value": self.value, "highlighted": self.highlighted}


@dataclass(frozen=True)
class ArraySnapshot:
    kind: ClassVar[str] = "array"

    items:  Tuple[ArrayItem, ...]
    status: str = ""

    @classmethod
    def of(cls, values: Iterable[int], highlights: Iterable[int] = (), status: str = "") -> "ArraySnapshot":
        """Build a snapshot from raw values, highlighting the given indices."""
        marked = set(highlights)
        return cls(
            items=tuple(ArrayItem(v, i in marked) for i, v in enumerate(values)),
            status=status,
        )

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(item.value for item in self.items)

    @property
    def highlighted_indices(self) -> Tuple[int, ...]:
        return tuple(i for i, item in enumerate(self.items) if item.highlighted)

    def to_dict(self) -> dict:
        return {
            "kind":   self.kind,
            "array":  [item.to_dict() for item in self.items],
            "status": self.status,
        }


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TreeNode:
    """
    One node of a binary tree.  A node's identity is its left/right path
    from the root, not the object itself.
    """

    value:       int
    highlighted: bool                 = False
    left:        Optional["TreeNode"] = None
    right:       Optional["TreeNode"] = None

    def to_dict(self) -> dict:
        return {
            "value":       self.value,
            "highlighted": self.highlighted,
            "left":        self.left.to_dict() if self.left else None,
            "right":       self.right.to_dict() if self.right else None,
        }


@dataclass(frozen=True)
class HeapNode(TreeNode):
    pass


@dataclass(frozen=True)
class BstNode(TreeNode):
    found: bool = False

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["found"] = self.found
        return data


@dataclass(frozen=True)
class TreeSnapshot:
    kind: ClassVar[str] = "tree"

    root:   Optional[TreeNode]
    status: str = ""

    def to_dict(self) -> dict:
        return {
            "kind":   self.kind,
            "tree":   self.root.to_dict() if self.root else None,
            "status": self.status,
        }


@dataclass(frozen=True)
class BstSnapshot(TreeSnapshot):
    kind: ClassVar[str] = "bst"


@dataclass(frozen=True)
class HeapSnapshot(TreeSnapshot):
    kind: ClassVar[str] = "heap"


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphNodeView:
    id:    int
    state: NodeState = NodeState.UNVISITED

    def to_dict(self) -> dict:
        return {"id": self.id, "state": self.state.value}


@dataclass(frozen=True)
class GraphEdgeView:
    source: int
    target: int
    weight: int
    state:  EdgeState = EdgeState.NORMAL

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "state":  self.state.value,
        }


@dataclass(frozen=True)
class GraphSnapshot:
    kind: ClassVar[str] = "graph"

    nodes:  Tuple[GraphNodeView, ...]
    edges:  Tuple[GraphEdgeView, ...]
    status: str = ""

    def node_state(self, node_id: int) -> NodeState:
        for node in self.nodes:
            if node.id == node_id:
                return node.state
        raise KeyError(node_id)

    def edges_in(self, state: EdgeState) -> Tuple[int, ...]:
        """Indices of the edges currently in `state`."""
        return tuple(i for i, e in enumerate(self.edges) if e.state is state)

    def to_dict(self) -> dict:
        return {
            "kind":   self.kind,
            "nodes":  [n.to_dict() for n in self.nodes],
            "edges":  [e.to_dict() for e in self.edges],
            "status": self.status,
        }


Snapshot = Union[ArraySnapshot, TreeSnapshot, GraphSnapshot]


# ---------------------------------------------------------------------------
# GraphFrame: mutable scratch-pad graph tracers build snapshots from
# ---------------------------------------------------------------------------
class GraphFrame:
    """
    Holds the persistent node / edge states of a graph trace.

    Usage inside a tracer generator:
        frame = GraphFrame(graph)
        frame.mark(0, NodeState.VISITED)
        yield frame.build("Processing node 0", current=[0])
        frame.mark_edge(3, EdgeState.HIGHLIGHTED)

    `current` and `considered` passed to build() only colour that one
    snapshot; they are never written back into the frame.
    """

    def __init__(self, graph: Graph):
        self._graph = graph
        self.node_states: Dict[int, NodeState] = {nid: NodeState.UNVISITED for nid in graph.nodes}
        self.edge_states: Dict[int, EdgeState] = {i: EdgeState.NORMAL for i in range(len(graph.edges))}

    def mark(self, node_id: int, state: NodeState) -> None:
        self.node_states[node_id] = state

    def mark_edge(self, edge_index: int, state: EdgeState) -> None:
        self.edge_states[edge_index] = state

    def build(
        self,
        status: str,
        current: Iterable[int] = (),
        considered: Iterable[int] = (),
    ) -> GraphSnapshot:
        current_nodes = set(current)
        considered_edges = set(considered)
        return GraphSnapshot(
            nodes=tuple(
                GraphNodeView(nid, NodeState.CURRENT if nid in current_nodes else self.node_states[nid])
                for nid in self._graph.nodes
            ),
            edges=tuple(
                GraphEdgeView(
                    e.source,
                    e.target,
                    e.weight,
                    EdgeState.CONSIDERED if i in considered_edges else self.edge_states[i],
                )
                for i, e in enumerate(self._graph.edges)
            ),
            status=status,
        )


# ---------------------------------------------------------------------------
# Outcomes: what a tracer generator returns
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraversalResult:
    order: Tuple[int, ...]          # nodes in visit order

    def to_dict(self) -> dict:
        return {"order": list(self.order)}


@dataclass(frozen=True)
class ShortestPaths:
    source:    int
    distances: Dict[int, Optional[int]] = field(default_factory=dict)   # None = unreachable

    def to_dict(self) -> dict:
        return {
            "source":    self.source,
            "distances": [{"node": n, "distance": d} for n, d in self.distances.items()],
        }


@dataclass(frozen=True)
class MSTResult:
    total_weight: int
    edges:        Tuple[int, ...]   # indices into graph.edges, in acceptance order
    connected:    bool

    def to_dict(self) -> dict:
        return {
            "total_weight": self.total_weight,
            "edges":        list(self.edges),
            "connected":    self.connected,
        }


# ---------------------------------------------------------------------------
# Trace: the full, finished output of one run
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Trace:
    """
    Attributes:
        kind      : "sorting" | "searching" | "graph" | "bst" | "heap"
        algorithm : Registry key or structure operation, e.g. "merge", "insert".
        snapshots : Non-empty tuple of snapshots, all of one shape.
        result    : Outcome of the run.  For searching: the index found, or
                    None for "not found" (-1 in to_dict()).
    """

    kind:      str
    algorithm: str
    snapshots: Tuple[Snapshot, ...]
    result:    Any = None

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self.snapshots[index]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots)

    @property
    def final(self) -> Snapshot:
        return self.snapshots[-1]

    def to_dict(self) -> dict:
        data = {
            "kind":      self.kind,
            "algorithm": self.algorithm,
            "steps":     [s.to_dict() for s in self.snapshots],
            "result":    self.result.to_dict() if hasattr(self.result, "to_dict") else self.result,
        }
        if self.kind == "searching":
            data["found"]  = self.result is not None
            data["result"] = -1 if self.result is None else self.result
        return data
