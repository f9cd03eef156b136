"""
validation.py — Input Parsing & Validation
============================================
Everything user-supplied passes through here before a tracer starts, so
malformed input is rejected wholesale and no partial trace ever exists.

Numeric input is accepted as a list of ints or as a comma / whitespace
separated string, optionally wrapped in brackets ("[5, 3, 8]").  Booleans,
non-integral floats, blanks and non-numeric tokens are rejected.
"""

import re
from typing import Any, List, Optional

from graph import Graph


MAX_ARRAY_LENGTH = 100
MAX_GRAPH_NODES  = 50

_SEPARATORS = re.compile(r"[,\s]+")
_CAMEL      = re.compile(r"(?<=[a-z0-9])([A-Z])")


class ValidationError(ValueError):
    """Malformed input, raised before any snapshot is produced."""


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------
def _to_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool):
        raise ValidationError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise ValidationError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text)
        except ValueError:
            raise ValidationError(f"{what} must be an integer, got {raw!r}") from None
    raise ValidationError(f"{what} must be an integer, got {type(raw).__name__}")


def parse_target(raw: Any) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("Target value is required")
    return _to_int(raw, "Target")


def parse_tree_value(raw: Any, required: bool = True) -> Optional[int]:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        if required:
            raise ValidationError("A value is required for this operation")
        return None
    return _to_int(raw, "Value")


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
def parse_values(raw: Any) -> List[int]:
    """Non-empty list of ints, at most MAX_ARRAY_LENGTH long."""
    if raw is None:
        raise ValidationError("Array is required")
    if isinstance(raw, str):
        text = raw.strip()
        if text.startswith("[") and text.endswith("]"):
            text = text[1:-1]
        tokens = [t for t in _SEPARATORS.split(text) if t]
        values = [_to_int(t, "Array element") for t in tokens]
    elif isinstance(raw, (list, tuple)):
        values = [_to_int(v, "Array element") for v in raw]
    else:
        raise ValidationError(f"Array must be a list or a comma separated string, got {type(raw).__name__}")

    if not values:
        raise ValidationError("Array must contain at least one number")
    if len(values) > MAX_ARRAY_LENGTH:
        raise ValidationError(f"Array may hold at most {MAX_ARRAY_LENGTH} numbers, got {len(values)}")
    return values


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
def _edge_fields(raw: Any):
    if isinstance(raw, dict):
        if "source" not in raw or "target" not in raw:
            raise ValidationError(f"Edge needs a source and a target: {raw!r}")
        return raw["source"], raw["target"], raw.get("weight", 1)
    if isinstance(raw, (list, tuple)) and len(raw) in (2, 3):
        return raw[0], raw[1], raw[2] if len(raw) == 3 else 1
    raise ValidationError(f"Malformed edge: {raw!r}")


def _node_id(raw: Any) -> Any:
    if isinstance(raw, dict):
        if "id" not in raw:
            raise ValidationError(f"Node needs an id: {raw!r}")
        return raw["id"]
    return raw


def parse_graph(raw: Any) -> Graph:
    """
    Accepts {"nodes": [...], "edges": [...]} where nodes are ints or
    {"id": int} and edges are {"source", "target", "weight"} dicts or
    [source, target, weight] lists.  Node ids must be exactly 0..n-1.
    """
    if isinstance(raw, Graph):
        return raw
    if not isinstance(raw, dict):
        raise ValidationError("Graph must be an object with 'nodes' and 'edges'")

    raw_nodes = raw.get("nodes") or []
    if not isinstance(raw_nodes, list) or not raw_nodes:
        raise ValidationError("Graph must have at least one node")
    if len(raw_nodes) > MAX_GRAPH_NODES:
        raise ValidationError(f"Graph may have at most {MAX_GRAPH_NODES} nodes, got {len(raw_nodes)}")

    ids = [_to_int(_node_id(n), "Node id") for n in raw_nodes]
    if sorted(ids) != list(range(len(ids))):
        raise ValidationError(f"Node ids must be 0..{len(ids) - 1} with no repeats")

    graph = Graph()
    for nid in ids:
        graph.add_node(nid)

    raw_edges = raw.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValidationError("Graph 'edges' must be a list")
    for raw_edge in raw_edges:
        source, target, weight = _edge_fields(raw_edge)
        source = _to_int(source, "Edge source")
        target = _to_int(target, "Edge target")
        weight = _to_int(weight, "Edge weight")
        if not graph.has_node(source) or not graph.has_node(target):
            raise ValidationError(f"Edge {source}-{target} references a node that does not exist")
        graph.add_edge(source, target, weight)
    return graph


def parse_start_node(raw: Any, graph: Graph) -> int:
    """Defaults to the graph's first node."""
    if graph.node_count() == 0:
        raise ValidationError("Graph has no nodes")
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return graph.nodes[0]
    start = _to_int(raw, "Start node")
    if not graph.has_node(start):
        raise ValidationError(f"Start node {start} is not in the graph")
    return start


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------
def normalise_key(raw: Any, what: str = "Key") -> str:
    """'extractMax' / 'extract-max' / 'Extract Max' → 'extract_max'."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(f"{what} is required")
    text = _CAMEL.sub(r"_\1", raw.strip())
    return re.sub(r"[\s\-]+", "_", text).lower()


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------
def parse_speed(raw: Any, presets: Optional[dict] = None) -> int:
    """Milliseconds per tick, or the name of a preset ("slow", "medium", "fast")."""
    if isinstance(raw, str) and presets and raw.strip().lower() in presets:
        return presets[raw.strip().lower()]
    if raw is None:
        raise ValidationError("Speed is required")
    return _to_int(raw, "Speed")


def parse_index(raw: Any) -> int:
    if raw is None:
        raise ValidationError("Index is required")
    return _to_int(raw, "Index")


def parse_optional_int(raw: Any, what: str) -> Optional[int]:
    if raw is None:
        return None
    return _to_int(raw, what)
