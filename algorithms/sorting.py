"""
sorting.py — Sorting Tracers
=============================
Six generator-based sorts.  Each one yields an ArraySnapshot at every
comparison and every swap / placement, with the indices involved
highlighted, and returns the sorted values as a tuple.

Every trace opens with the untouched input (no highlights, status
"Start: …") and closes with the sorted array (no highlights, status
"Sorted …").

Design decisions:
  - The tracers work on a private list copy; the caller's sequence is
    never touched.
  - Insertion sort moves the key with adjacent swaps rather than shifts,
    so every intermediate snapshot is still a permutation of the input.
  - Merge sort emits one extra "Merged [l..r]" snapshot after every
    merge so the viewer sees each merged run as a whole.
  - Quick sort uses the Lomuto scheme (last element is the pivot).
"""

from typing import Dict, Generator, Iterable, List, Sequence, Tuple

from algorithms.snapshot import ArraySnapshot


SortTrace = Generator[ArraySnapshot, None, Tuple[int, ...]]


# ---------------------------------------------------------------------------
# Pseudocode: one list per algorithm
# ---------------------------------------------------------------------------
PSEUDOCODE: Dict[str, List[str]] = {
    "bubble": [
        "for i in 0 .. n-2:",
        "    for j in 0 .. n-i-2:",
        "        if a[j] > a[j+1]: swap(a[j], a[j+1])",
    ],
    "insertion": [
        "for i in 1 .. n-1:",
        "    j ← i",
        "    while j > 0 and a[j-1] > a[j]:",
        "        swap(a[j-1], a[j]);  j ← j - 1",
    ],
    "selection": [
        "for i in 0 .. n-2:",
        "    m ← index of min(a[i .. n-1])",
        "    swap(a[i], a[m])",
    ],
    "merge": [
        "def sort(l, r):",
        "    if l < r:",
        "        m ← (l + r) / 2",
        "        sort(l, m);  sort(m+1, r)",
        "        merge(a[l..m], a[m+1..r])",
    ],
    "quick": [
        "def sort(lo, hi):",
        "    if lo < hi:",
        "        p ← partition(lo, hi)     # pivot = a[hi]",
        "        sort(lo, p-1);  sort(p+1, hi)",
    ],
    "heap": [
        "for i in n/2-1 .. 0:  sift_down(i, n)     # build max heap",
        "for end in n-1 .. 1:",
        "    swap(a[0], a[end])",
        "    sift_down(0, end)",
    ],
}


def _snap(arr: Sequence[int], highlights: Iterable[int], status: str) -> ArraySnapshot:
    return ArraySnapshot.of(arr, highlights, status)


def _start(arr: Sequence[int], label: str) -> ArraySnapshot:
    return _snap(arr, (), f"Start: {label} on {len(arr)} element(s)")


def _done(arr: Sequence[int]) -> ArraySnapshot:
    return _snap(arr, (), "Sorted in ascending order")


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
def bubble_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    n = len(arr)
    yield _start(arr, "bubble sort")

    for i in range(n - 1):
        for j in range(n - i - 1):
            yield _snap(arr, (j, j + 1), f"Comparing {arr[j]} and {arr[j + 1]}")
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                yield _snap(arr, (j, j + 1), f"Swapped {arr[j + 1]} and {arr[j]}")
        yield _snap(arr, (n - i - 1,), f"{arr[n - i - 1]} is in its final position")

    yield _done(arr)
    return tuple(arr)


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def insertion_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    yield _start(arr, "insertion sort")

    for i in range(1, len(arr)):
        yield _snap(arr, (i,), f"Inserting key {arr[i]} into the sorted prefix")
        j = i
        while j > 0:
            yield _snap(arr, (j - 1, j), f"Comparing {arr[j - 1]} and {arr[j]}")
            if arr[j - 1] <= arr[j]:
                break
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            yield _snap(arr, (j - 1, j), f"Moved {arr[j]} right, key now at index {j - 1}")
            j -= 1
        yield _snap(arr, (j,), f"Placed key {arr[j]} at index {j}")

    yield _done(arr)
    return tuple(arr)


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
def selection_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    n = len(arr)
    yield _start(arr, "selection sort")

    for i in range(n - 1):
        min_idx = i
        yield _snap(arr, (i,), f"Finding the minimum for position {i}")
        for j in range(i + 1, n):
            yield _snap(arr, (min_idx, j), f"Comparing current minimum {arr[min_idx]} with {arr[j]}")
            if arr[j] < arr[min_idx]:
                min_idx = j
        yield _snap(arr, (i, min_idx), f"Minimum is {arr[min_idx]} at index {min_idx}")
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield _snap(arr, (i, min_idx), f"Swapped {arr[i]} into position {i}")
        else:
            yield _snap(arr, (i,), f"{arr[i]} is already in position {i}")

    yield _done(arr)
    return tuple(arr)


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------
def merge_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    yield _start(arr, "merge sort")
    if arr:
        yield from _merge_sort(arr, 0, len(arr) - 1)
    yield _done(arr)
    return tuple(arr)


def _merge_sort(arr: List[int], left: int, right: int) -> Generator[ArraySnapshot, None, None]:
    if left >= right:
        return
    mid = (left + right) // 2
    yield _snap(arr, (left, right), f"Dividing [{left}..{right}] at {mid}")
    yield from _merge_sort(arr, left, mid)
    yield from _merge_sort(arr, mid + 1, right)
    yield from _merge(arr, left, mid, right)


def _merge(arr: List[int], left: int, mid: int, right: int) -> Generator[ArraySnapshot, None, None]:
    lhs = arr[left:mid + 1]
    rhs = arr[mid + 1:right + 1]
    yield _snap(arr, (left, right), f"Merging [{left}..{mid}] with [{mid + 1}..{right}]")

    i = j = 0
    k = left
    while i < len(lhs) and j < len(rhs):
        yield _snap(arr, (k,), f"Comparing {lhs[i]} and {rhs[j]}")
        if lhs[i] <= rhs[j]:
            arr[k] = lhs[i]
            i += 1
        else:
            arr[k] = rhs[j]
            j += 1
        yield _snap(arr, (k,), f"Placed {arr[k]} at index {k}")
        k += 1

    for rest in (lhs[i:], rhs[j:]):
        for value in rest:
            arr[k] = value
            yield _snap(arr, (k,), f"Placed remaining {value} at index {k}")
            k += 1

    yield _snap(arr, range(left, right + 1), f"Merged [{left}..{right}]")


# ---------------------------------------------------------------------------
# Quick sort
# ---------------------------------------------------------------------------
def quick_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    yield _start(arr, "quick sort")
    yield from _quick_sort(arr, 0, len(arr) - 1)
    yield _done(arr)
    return tuple(arr)


def _quick_sort(arr: List[int], low: int, high: int) -> Generator[ArraySnapshot, None, None]:
    if low >= high:
        return
    pivot_idx = yield from _partition(arr, low, high)
    yield from _quick_sort(arr, low, pivot_idx - 1)
    yield from _quick_sort(arr, pivot_idx + 1, high)


def _partition(arr: List[int], low: int, high: int) -> Generator[ArraySnapshot, None, int]:
    pivot = arr[high]
    yield _snap(arr, (high,), f"Pivot {pivot} selected for [{low}..{high}]")

    boundary = low - 1
    for j in range(low, high):
        yield _snap(arr, (j, high), f"Comparing {arr[j]} with pivot {pivot}")
        if arr[j] < pivot:
            boundary += 1
            arr[boundary], arr[j] = arr[j], arr[boundary]
            yield _snap(arr, (boundary, j), f"Swapped {arr[boundary]} below the boundary")

    boundary += 1
    arr[boundary], arr[high] = arr[high], arr[boundary]
    yield _snap(
        arr,
        (boundary,),
        f"Pivot {pivot} placed at index {boundary}; partition boundary at {boundary}",
    )
    return boundary


# ---------------------------------------------------------------------------
# Heap sort
# ---------------------------------------------------------------------------
def heap_sort(values: Sequence[int]) -> SortTrace:
    arr = list(values)
    n = len(arr)
    yield _start(arr, "heap sort")

    for i in range(n // 2 - 1, -1, -1):
        yield _snap(arr, (i,), f"Build phase: heapify subtree at index {i}")
        yield from _sift_down(arr, i, n)
    yield _snap(arr, (), "Max heap built")

    for end in range(n - 1, 0, -1):
        yield _snap(arr, (0, end), f"Extract phase: moving max {arr[0]} to index {end}")
        arr[0], arr[end] = arr[end], arr[0]
        yield _snap(arr, (end,), f"{arr[end]} is in its final position")
        yield from _sift_down(arr, 0, end)

    yield _done(arr)
    return tuple(arr)


def _sift_down(arr: List[int], root: int, size: int) -> Generator[ArraySnapshot, None, None]:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size:
                yield _snap(arr, (largest, child), f"Comparing {arr[largest]} and {arr[child]}")
                if arr[child] > arr[largest]:
                    largest = child
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        yield _snap(arr, (root, largest), f"Swapped {arr[root]} up over {arr[largest]}")
        root = largest


# ---------------------------------------------------------------------------
# Key → tracer
# ---------------------------------------------------------------------------
SORTERS = {
    "bubble":    bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge":     merge_sort,
    "quick":     quick_sort,
    "heap":      heap_sort,
}
