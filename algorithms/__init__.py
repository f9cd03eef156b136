"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every tracer the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, kind, fn, pseudocode, …),
        "bfs":    AlgoInfo(…, kind="graph", needs_start=True, …),
        …
    }

`kind` groups tracers by input and snapshot shape:
    sorting   – fn(values)              → ArraySnapshot trace
    searching – fn(values, target)      → ArraySnapshot trace, returns index | None
    graph     – fn(graph, start)        → GraphSnapshot trace

Adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.sorting   import (bubble_sort, insertion_sort, selection_sort,
                                  merge_sort, quick_sort, heap_sort,
                                  PSEUDOCODE as _sort_pc)
from algorithms.searching import linear_search, binary_search, PSEUDOCODE as _search_pc
from algorithms.bfs       import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs       import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra  import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.kruskal   import kruskal  as _kruskal,  PSEUDOCODE as _kru_pc
from algorithms.prim      import prim     as _prim,     PSEUDOCODE as _prim_pc


KINDS = ("sorting", "searching", "graph")


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    kind:              str                    # "sorting" | "searching" | "graph"
    fn:                Callable               # the generator function
    pseudocode:        List[str] = field(default_factory=list)
    tags:              List[str] = field(default_factory=list)
    needs_start:       bool      = False      # graph tracers that grow from a start node
    supports_negative: bool      = True       # can handle negative edge weights?
    complexity_time:   str       = ""
    complexity_space:  str       = ""
    description:       str       = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "kind":             self.kind,
            "tags":             list(self.tags),
            "needs_start":      self.needs_start,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # -- sorting --
    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", kind="sorting", fn=bubble_sort,
        pseudocode=_sort_pc["bubble"], tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", kind="sorting", fn=insertion_sort,
        pseudocode=_sort_pc["insertion"], tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grows a sorted prefix by sliding each new key left into place.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", kind="sorting", fn=selection_sort,
        pseudocode=_sort_pc["selection"], tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted suffix and swaps it to the front.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", kind="sorting", fn=merge_sort,
        pseudocode=_sort_pc["merge"], tags=["comparison", "stable", "divide-and-conquer"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, sorts each, and merges the sorted runs.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", kind="sorting", fn=quick_sort,
        pseudocode=_sort_pc["quick"], tags=["comparison", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts each side.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", kind="sorting", fn=heap_sort,
        pseudocode=_sort_pc["heap"], tags=["comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max heap, then repeatedly moves the max to the end.",
    ),

    # -- searching --
    "linear": AlgoInfo(
        key="linear", label="Linear Search", kind="searching", fn=linear_search,
        pseudocode=_search_pc["linear"], tags=["unsorted"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element in order until the target is found.",
    ),

    "binary": AlgoInfo(
        key="binary", label="Binary Search", kind="searching", fn=binary_search,
        pseudocode=_search_pc["binary"], tags=["sorted"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the sorted search window on every comparison.",
    ),

    # -- graph --
    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", kind="graph", fn=_bfs, pseudocode=_bfs_pc,
        tags=["traversal", "directed"], needs_start=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", kind="graph", fn=_dfs, pseudocode=_dfs_pc,
        tags=["traversal", "directed"], needs_start=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep along each edge before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", kind="graph", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path", "directed"], needs_start=True,
        supports_negative=False,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily finalizes the closest node. Optimal for non-negative weights.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", kind="graph", fn=_kruskal, pseudocode=_kru_pc,
        tags=["weighted", "mst", "undirected"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Adds the lightest edge that does not close a cycle.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", kind="graph", fn=_prim, pseudocode=_prim_pc,
        tags=["weighted", "mst", "undirected"], needs_start=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows one tree by the lightest edge crossing the cut.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str, kind: Optional[str] = None) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key (restricted to `kind` when given), or None."""
    info = REGISTRY.get(key)
    if info is None or (kind is not None and info.kind != kind):
        return None
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_kind(kind: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.kind == kind]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "KINDS",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_kind",
    "algorithms_by_tag",
]
