"""
structures/__init__.py — Structure Operation Registry
=======================================================
The persistent tree structures and the operations that trace them.

    from structures import STRUCTURES, get_operation

STRUCTURES is a dict:
    {
        "bst":  StructureInfo(key, label, seed, snapshot_kind, operations={…}),
        "heap": …,
    }

Every operation is `fn(root, value) → generator` that yields tree
snapshots and returns `(new_root, outcome)`.  `commits` is False only for
read-only operations (BST search), whose returned root is discarded.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from structures import bst, heap
from structures.tree import (
    from_level_order, inorder_values, is_complete, is_valid_bst, is_valid_heap,
    level_order, node_at, replace_at, size,
)


# ---------------------------------------------------------------------------
# Metadata cards
# ---------------------------------------------------------------------------
@dataclass
class StructureOp:
    key:         str
    label:       str
    fn:          Callable
    needs_value: bool = True
    commits:     bool = True

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "label":       self.label,
            "needs_value": self.needs_value,
            "commits":     self.commits,
        }


@dataclass
class StructureInfo:
    key:        str
    label:      str
    seed:       Callable
    operations: Dict[str, StructureOp] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "key":        self.key,
            "label":      self.label,
            "operations": [op.to_dict() for op in self.operations.values()],
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
STRUCTURES: Dict[str, StructureInfo] = {

    "bst": StructureInfo(
        key="bst", label="Binary Search Tree", seed=bst.seed,
        operations={
            "insert": StructureOp("insert", "Insert", bst.insert),
            "search": StructureOp("search", "Search", bst.search, commits=False),
            "delete": StructureOp("delete", "Delete", bst.delete),
            "clear":  StructureOp("clear",  "Clear",  bst.clear, needs_value=False),
        },
    ),

    "heap": StructureInfo(
        key="heap", label="Max Heap", seed=heap.seed,
        operations={
            "insert":      StructureOp("insert",      "Insert",      heap.insert),
            "extract_max": StructureOp("extract_max", "Extract Max", heap.extract_max, needs_value=False),
            "clear":       StructureOp("clear",       "Clear",       heap.clear, needs_value=False),
        },
    ),
}


def get_structure(key: str) -> Optional[StructureInfo]:
    return STRUCTURES.get(key)


def get_operation(structure: str, operation: str) -> Optional[StructureOp]:
    """Return the StructureOp, or None when either key is unknown."""
    info = STRUCTURES.get(structure)
    if info is None:
        return None
    return info.operations.get(operation)


def list_structures() -> List[StructureInfo]:
    return list(STRUCTURES.values())


__all__ = [
    "StructureOp",
    "StructureInfo",
    "STRUCTURES",
    "get_structure",
    "get_operation",
    "list_structures",
    "from_level_order",
    "inorder_values",
    "is_complete",
    "is_valid_bst",
    "is_valid_heap",
    "level_order",
    "node_at",
    "replace_at",
    "size",
]
