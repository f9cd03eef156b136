"""
tree.py — Persistent Binary-Tree Helpers
=========================================
Pure functions over the frozen TreeNode dataclasses.  Nothing here ever
mutates a node: every "change" returns a new root that reallocates only
the nodes on the path to the change (copy-on-path) and shares every
other subtree with the old root.

Positions are addressed by path strings from the root: "" is the root,
"L" its left child, "LR" the right child of that, and so on.  This is the
same positional identity the snapshots use.

Committed trees are kept "clean" (no highlighted / found flags).  `mark`
relies on that: it copies only the marked paths and shares the rest.
"""

from dataclasses import replace
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Type

from algorithms.snapshot import TreeNode, BstNode


Path = str


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------
def child(node: TreeNode, side: str) -> Optional[TreeNode]:
    return node.left if side == "L" else node.right


def node_at(root: Optional[TreeNode], path: Path) -> Optional[TreeNode]:
    """The node at `path`, or None when the path leaves the tree."""
    node = root
    for side in path:
        if node is None:
            return None
        node = child(node, side)
    return node


def side_name(path: Path) -> str:
    return "left" if path[-1] == "L" else "right"


# ---------------------------------------------------------------------------
# Copy-on-path updates
# ---------------------------------------------------------------------------
def replace_at(root: Optional[TreeNode], path: Path, subtree: Optional[TreeNode]) -> Optional[TreeNode]:
    """
    Return a new root with the subtree at `path` replaced by `subtree`
    (None removes it).  The parent of `path` must exist.
    """
    if not path:
        return subtree
    if root is None:
        raise KeyError(f"no node on path {path!r}")
    side, rest = path[0], path[1:]
    if side == "L":
        return replace(root, left=replace_at(root.left, rest, subtree))
    return replace(root, right=replace_at(root.right, rest, subtree))


def set_value(root: TreeNode, path: Path, value: int) -> TreeNode:
    node = node_at(root, path)
    if node is None:
        raise KeyError(f"no node on path {path!r}")
    return replace_at(root, path, replace(node, value=value))


def swap_values(root: TreeNode, a: Path, b: Path) -> TreeNode:
    va, vb = node_at(root, a).value, node_at(root, b).value
    return set_value(set_value(root, a, vb), b, va)


def mark(
    root: Optional[TreeNode],
    paths: Iterable[Path] = (),
    found: Optional[Path] = None,
) -> Optional[TreeNode]:
    """Copy of a clean tree with `paths` highlighted and `found` flagged (BST only)."""
    for path in paths:
        node = node_at(root, path)
        if node is not None:
            root = replace_at(root, path, replace(node, highlighted=True))
    if found is not None:
        node = node_at(root, found)
        if isinstance(node, BstNode):
            root = replace_at(root, found, replace(node, found=True, highlighted=True))
    return root


def clean(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Copy of `root` with every highlighted / found flag cleared."""
    if root is None:
        return None
    changes = {"highlighted": False, "left": clean(root.left), "right": clean(root.right)}
    if isinstance(root, BstNode):
        changes["found"] = False
    return replace(root, **changes)


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def level_order(root: Optional[TreeNode]) -> List[Tuple[Path, TreeNode]]:
    """[(path, node)] in breadth-first order, left before right."""
    if root is None:
        return []
    out: List[Tuple[Path, TreeNode]] = []
    queue = [("", root)]
    while queue:
        path, node = queue.pop(0)
        out.append((path, node))
        if node.left is not None:
            queue.append((path + "L", node.left))
        if node.right is not None:
            queue.append((path + "R", node.right))
    return out


def inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield from inorder(root.left)
    yield root
    yield from inorder(root.right)


def inorder_values(root: Optional[TreeNode]) -> List[int]:
    return [node.value for node in inorder(root)]


def size(root: Optional[TreeNode]) -> int:
    return 0 if root is None else 1 + size(root.left) + size(root.right)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def from_level_order(values: Sequence[int], node_cls: Type[TreeNode]) -> Optional[TreeNode]:
    """Complete binary tree whose breadth-first reading is `values`."""
    def build(i: int) -> Optional[TreeNode]:
        if i >= len(values):
            return None
        return node_cls(value=values[i], left=build(2 * i + 1), right=build(2 * i + 2))
    return build(0)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------
def is_valid_heap(root: Optional[TreeNode]) -> bool:
    """Every node's value is ≥ both children's values (max-heap order)."""
    for _, node in level_order(root):
        for kid in (node.left, node.right):
            if kid is not None and kid.value > node.value:
                return False
    return True


def is_complete(root: Optional[TreeNode]) -> bool:
    """Every level full except possibly the last, which is filled from the left."""
    seen_gap = False
    queue = [root] if root is not None else []
    while queue:
        node = queue.pop(0)
        for kid in (node.left, node.right):
            if kid is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(kid)
    return True


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Strict ordering: left subtree < node < right subtree, everywhere."""
    values = inorder_values(root)
    return all(values[i] < values[i + 1] for i in range(len(values) - 1))
