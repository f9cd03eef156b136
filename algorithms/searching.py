"""
searching.py — Searching Tracers
=================================
Linear and binary search as snapshot generators.  The generator's return
value is the authoritative result: the matching index, or None when the
target is not present.  The last snapshot's highlight is only a visual
hint.

Binary search needs ascending input.  When it gets anything else it
sorts a private copy, says so in the opening status, and traces over
that copy; the caller's sequence is left as it was.  The returned index
refers to the sorted copy in that case.
"""

from typing import Dict, Generator, List, Optional, Sequence

from algorithms.snapshot import ArraySnapshot


SearchTrace = Generator[ArraySnapshot, None, Optional[int]]


PSEUDOCODE: Dict[str, List[str]] = {
    "linear": [
        "for i in 0 .. n-1:",
        "    if a[i] == target: return i",
        "return NOT FOUND",
    ],
    "binary": [
        "low ← 0;  high ← n-1",
        "while low <= high:",
        "    mid ← (low + high) / 2",
        "    if a[mid] == target: return mid",
        "    if a[mid] < target: low ← mid + 1",
        "    else: high ← mid - 1",
        "return NOT FOUND",
    ],
}


def _is_sorted(values: Sequence[int]) -> bool:
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


# ---------------------------------------------------------------------------
# Linear search
# ---------------------------------------------------------------------------
def linear_search(values: Sequence[int], target: int) -> SearchTrace:
    arr = list(values)
    yield ArraySnapshot.of(arr, (), f"Start: linear search for {target}")

    for i, value in enumerate(arr):
        yield ArraySnapshot.of(arr, (i,), f"Checking element at index {i}")
        if value == target:
            yield ArraySnapshot.of(arr, (i,), f"Found target at index {i}")
            return i

    yield ArraySnapshot.of(arr, (), "Target not found in array")
    return None


# ---------------------------------------------------------------------------
# Binary search
# ---------------------------------------------------------------------------
def binary_search(values: Sequence[int], target: int) -> SearchTrace:
    arr = list(values)
    if _is_sorted(arr):
        yield ArraySnapshot.of(arr, (), f"Start: binary search for {target}")
    else:
        arr.sort()
        yield ArraySnapshot.of(
            arr, (), f"Start: input was not sorted, searching a sorted copy for {target}"
        )

    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        window = (low, mid, high)
        yield ArraySnapshot.of(
            arr, window, f"Checking mid element at index {mid} (low={low}, high={high})"
        )
        if arr[mid] == target:
            yield ArraySnapshot.of(arr, (mid,), f"Found target at index {mid}")
            return mid
        if arr[mid] < target:
            yield ArraySnapshot.of(arr, window, "Target is greater, moving to right half")
            low = mid + 1
        else:
            yield ArraySnapshot.of(arr, window, "Target is smaller, moving to left half")
            high = mid - 1

    yield ArraySnapshot.of(arr, (), "Target not found in array")
    return None


SEARCHERS = {
    "linear": linear_search,
    "binary": binary_search,
}
