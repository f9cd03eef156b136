"""
node.py — Graph Node States
============================
Nodes in a traced graph are plain integer ids; the only thing that
changes between snapshots is the state below, which maps 1-to-1 with
the visual encoding palette.

Within one trace a node only ever moves forward through
UNVISITED → VISITED / INCLUDED.  CURRENT is a per-snapshot overlay that
marks the node the algorithm is touching right now.
"""

from enum import Enum


class NodeState(Enum):
    UNVISITED = "unvisited"   # default grey
    CURRENT   = "current"     # the node being handled in this snapshot only
    VISITED   = "visited"     # traversal / shortest-path algorithms
    INCLUDED  = "included"    # part of the spanning tree (Kruskal / Prim)
