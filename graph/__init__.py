"""
graph/
-----
Graph input model.  Public API:

    from graph import Graph, Edge
    from graph import NodeState, EdgeState
"""

from graph.node  import NodeState
from graph.edge  import Edge,  EdgeState
from graph.graph import Graph, SAMPLE_EDGES

__all__ = [
    "NodeState",
    "Edge",      "EdgeState",
    "Graph",     "SAMPLE_EDGES",
]
