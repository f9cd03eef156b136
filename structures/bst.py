"""
bst.py — Binary Search Tree Tracer
===================================
Insert / search / delete / clear on a persistent BST of BstNode.

Each operation is a generator:

    new_root, outcome = yield from bst.insert(root, 30)

It yields BstSnapshot frames and returns the tree to commit together with
the operation's outcome (True when something was inserted / found /
deleted).  The input root is never modified; search returns it as is.

Ordering is strict: left < node < right.  Inserting a value that is
already present highlights the existing node and leaves the tree alone.
"""

from typing import Generator, Optional, Tuple

from algorithms.snapshot import BstNode, BstSnapshot
from structures.tree import Path, child, mark, node_at, replace_at, set_value, side_name


BstTrace = Generator[BstSnapshot, None, Tuple[Optional[BstNode], bool]]


def seed() -> BstNode:
    """50 / (25: 10, 40) / (75: 60, 90)."""
    return BstNode(
        value=50,
        left=BstNode(value=25, left=BstNode(value=10), right=BstNode(value=40)),
        right=BstNode(value=75, left=BstNode(value=60), right=BstNode(value=90)),
    )


def _frame(root: Optional[BstNode], status: str, paths=(), found: Optional[Path] = None) -> BstSnapshot:
    return BstSnapshot(root=mark(root, paths, found), status=status)


def _descend(root: BstNode, value: int) -> Generator[BstSnapshot, None, Path]:
    """
    Walk from the root towards `value`, one "comparing" frame per node.
    Returns the path of the matching node, or the empty child slot where
    `value` would go.
    """
    path = ""
    node = root
    while node is not None:
        if value == node.value:
            yield _frame(root, f"Comparing {value} with {node.value}: match", [path])
            return path
        side = "L" if value < node.value else "R"
        direction = "left" if side == "L" else "right"
        yield _frame(root, f"Comparing {value} with {node.value}: going {direction}", [path])
        path += side
        node = child(node, side)
    return path


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert(root: Optional[BstNode], value: int) -> BstTrace:
    if root is None:
        new_root = BstNode(value=value)
        yield _frame(new_root, f"Tree is empty, {value} becomes the root", [""])
        return new_root, True

    path = yield from _descend(root, value)
    existing = node_at(root, path)
    if existing is not None:
        yield _frame(root, f"{value} already exists in the tree, nothing inserted", [path])
        return root, False

    new_root = replace_at(root, path, BstNode(value=value))
    parent = node_at(root, path[:-1])
    yield _frame(
        new_root,
        f"Inserted {value} as {side_name(path)} child of {parent.value}",
        [path],
    )
    return new_root, True


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def search(root: Optional[BstNode], value: int) -> BstTrace:
    if root is None:
        yield _frame(None, f"Tree is empty, {value} not found")
        return None, False

    path = yield from _descend(root, value)
    if node_at(root, path) is not None:
        yield _frame(root, f"Found {value}", found=path)
        return root, True

    yield _frame(root, f"{value} not found in the tree")
    return root, False


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------
def delete(root: Optional[BstNode], value: int) -> BstTrace:
    if root is None:
        yield _frame(None, f"Tree is empty, {value} not found")
        return None, False

    path = yield from _descend(root, value)
    target = node_at(root, path)
    if target is None:
        yield _frame(root, f"{value} not found in the tree, nothing deleted")
        return root, False

    yield _frame(root, f"Found {value}, deleting it", found=path)

    if target.left is None and target.right is None:
        new_root = replace_at(root, path, None)
        parent_paths = [path[:-1]] if path else []
        yield _frame(new_root, f"Deleted leaf {value}", parent_paths)

    elif target.left is None or target.right is None:
        only = target.left if target.left is not None else target.right
        new_root = replace_at(root, path, only)
        yield _frame(
            new_root,
            f"Node {value} has one child; spliced {only.value} into its place",
            [path],
        )

    else:
        succ_path = path + "R"
        while node_at(root, succ_path + "L") is not None:
            succ_path += "L"
        successor = node_at(root, succ_path)
        yield _frame(
            root,
            f"Node {value} has two children; in-order successor is {successor.value}",
            [path, succ_path],
        )
        new_root = set_value(root, path, successor.value)
        yield _frame(new_root, f"Replaced {value} with successor {successor.value}", [path])
        # the successor has no left child, so it is removed by splicing its right subtree
        new_root = replace_at(new_root, succ_path, successor.right)
        yield _frame(
            new_root,
            f"Removed successor {successor.value} from the right subtree",
            [path],
        )

    yield _frame(new_root, f"Deleted {value}")
    return new_root, True


# ---------------------------------------------------------------------------
# Clear
# ---------------------------------------------------------------------------
def clear(root: Optional[BstNode], value: Optional[int] = None) -> BstTrace:
    yield _frame(root, "Clearing the tree")
    yield _frame(None, "Tree cleared")
    return None, True
