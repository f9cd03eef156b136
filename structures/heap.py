"""
heap.py — Binary Max-Heap Tracer
=================================
Insert / extract-max / clear on a max-heap stored as a complete binary
tree of linked HeapNode objects (not an array).

Because there is no array, positions are found by breadth-first scan:
  - insertion slot : the first node in level order with a free child;
                     its left slot if free, else its right slot
  - last node      : the final node in level order, which is the
                     rightmost node of the bottom level

Each operation is a generator yielding HeapSnapshot frames and returning
`(new_root, outcome)`; the outcome is the inserted value for insert and
the extracted maximum (None on an empty heap) for extract-max.  Every
trace ends with a frame that has no highlights.
"""

from typing import Generator, Optional, Tuple

from algorithms.snapshot import HeapNode, HeapSnapshot
from structures.tree import Path, from_level_order, level_order, mark, node_at, replace_at, \
    set_value, side_name, swap_values


HeapTrace = Generator[HeapSnapshot, None, Tuple[Optional[HeapNode], Optional[int]]]


def seed() -> HeapNode:
    """90 / (70: 30, 50) / (60: 20, 40)."""
    return from_level_order([90, 70, 60, 30, 50, 20, 40], HeapNode)


def _frame(root: Optional[HeapNode], status: str, paths=()) -> HeapSnapshot:
    return HeapSnapshot(root=mark(root, paths), status=status)


def insertion_slot(root: HeapNode) -> Path:
    """Path of the empty child slot the next value goes into."""
    for path, node in level_order(root):
        if node.left is None:
            return path + "L"
        if node.right is None:
            return path + "R"
    raise AssertionError("a finite tree always has an empty slot")


def last_node(root: HeapNode) -> Path:
    return level_order(root)[-1][0]


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert(root: Optional[HeapNode], value: int) -> HeapTrace:
    if root is None:
        new_root = HeapNode(value=value)
        yield _frame(new_root, f"Heap is empty, {value} becomes the root", [""])
        yield _frame(new_root, f"Inserted {value}")
        return new_root, value

    slot = insertion_slot(root)
    parent_path = slot[:-1]
    yield _frame(
        root,
        f"Found insertion position as {side_name(slot)} child of node {node_at(root, parent_path).value}",
        [parent_path],
    )

    tree = replace_at(root, slot, HeapNode(value=value))
    yield _frame(tree, f"Placed {value} in the new leaf", [slot])

    path = slot
    while path:
        parent_path = path[:-1]
        current, parent = node_at(tree, path).value, node_at(tree, parent_path).value
        if current <= parent:
            yield _frame(tree, f"Heap property satisfied: {current} ≤ parent {parent}", [path])
            break
        yield _frame(tree, f"Comparing {current} with parent {parent}", [path, parent_path])
        tree = swap_values(tree, path, parent_path)
        yield _frame(tree, f"Swapped {current} with parent {parent}", [parent_path])
        path = parent_path

    yield _frame(tree, f"Inserted {value}, heap property maintained")
    return tree, value


# ---------------------------------------------------------------------------
# Extract-max
# ---------------------------------------------------------------------------
def extract_max(root: Optional[HeapNode], value: Optional[int] = None) -> HeapTrace:
    if root is None:
        yield _frame(None, "Heap is empty, nothing to extract")
        return None, None

    maximum = root.value
    yield _frame(root, f"Maximum value is {maximum} (at root)", [""])

    if root.left is None and root.right is None:
        yield _frame(None, f"Extracted max value {maximum}, heap is now empty")
        return None, maximum

    last_path = last_node(root)
    last_value = node_at(root, last_path).value
    yield _frame(root, f"Found last node with value {last_value}", [last_path])

    tree = set_value(replace_at(root, last_path, None), "", last_value)
    yield _frame(tree, f"Replaced root with last node value {last_value}, removed last node", [""])

    path = ""
    while True:
        node = node_at(tree, path)
        children = [(path + side, kid) for side, kid in (("L", node.left), ("R", node.right)) if kid is not None]
        if not children:
            break
        larger_path, larger = children[0]
        if len(children) == 2 and children[1][1].value > larger.value:
            larger_path, larger = children[1]

        yield _frame(
            tree,
            f"Comparing {node.value} with larger child {larger.value}",
            [path, larger_path],
        )
        if larger.value <= node.value:
            yield _frame(tree, f"Heap property satisfied: {node.value} ≥ {larger.value}", [path])
            break
        tree = swap_values(tree, path, larger_path)
        yield _frame(tree, f"Swapped {node.value} with {larger.value}", [larger_path])
        path = larger_path

    yield _frame(tree, f"Extracted max value {maximum}, heap property maintained")
    return tree, maximum


# ---------------------------------------------------------------------------
# Clear
# ---------------------------------------------------------------------------
def clear(root: Optional[HeapNode], value: Optional[int] = None) -> HeapTrace:
    yield _frame(root, "Clearing the heap")
    yield _frame(None, "Heap cleared")
    return None, None
