"""
Tests for the sorting tracers.

Every algorithm runs over the same corpus of inputs; the scenario tests
check the phases each algorithm is required to show.
"""

from collections import Counter

import pytest

from algorithms.sorting import SORTERS, bubble_sort, heap_sort, merge_sort, quick_sort
from engine.recorder import record


CORPUS = [
    [5, 3, 8, 1],
    [1],
    [2, 1],
    [3, 3, 1, 2, 2],
    [-5, 0, 7, -2],
    list(range(10, 0, -1)),
    [1, 2, 3, 4, 5],
    [42, 17, 42, 8, 99, -3, 17],
]


class TestEverySorter:
    """Properties that hold for all six algorithms on every input."""

    @pytest.mark.parametrize("key", sorted(SORTERS))
    @pytest.mark.parametrize("values", CORPUS)
    def test_final_snapshot_is_sorted(self, key, values):
        """Final snapshot values equal the sorted input."""
        trace = record("sorting", key, SORTERS[key](values))
        assert list(trace.final.values) == sorted(values)
        assert trace.result == tuple(sorted(values))

    @pytest.mark.parametrize("key", sorted(SORTERS))
    @pytest.mark.parametrize("values", CORPUS)
    def test_first_and_last_snapshots(self, key, values):
        """Trace opens with the raw input and closes with no highlights."""
        trace = record("sorting", key, SORTERS[key](values))
        first, last = trace[0], trace.final
        assert list(first.values) == values
        assert first.highlighted_indices == ()
        assert first.status.startswith("Start")
        assert last.highlighted_indices == ()
        assert last.status.startswith("Sorted")

    @pytest.mark.parametrize("key", sorted(SORTERS))
    @pytest.mark.parametrize("values", CORPUS)
    def test_length_is_constant(self, key, values):
        """No snapshot adds or drops elements."""
        trace = record("sorting", key, SORTERS[key](values))
        assert all(len(s.items) == len(values) for s in trace)

    @pytest.mark.parametrize("key", ["bubble", "insertion", "selection", "quick", "heap"])
    @pytest.mark.parametrize("values", CORPUS)
    def test_swap_based_sorts_stay_permutations(self, key, values):
        """In-place swap sorts never show a value that is not in the input."""
        trace = record("sorting", key, SORTERS[key](values))
        expected = Counter(values)
        assert all(Counter(s.values) == expected for s in trace)

    @pytest.mark.parametrize("key", sorted(SORTERS))
    def test_input_is_not_mutated(self, key):
        """The caller's list is left untouched."""
        values = [4, 1, 3, 2]
        record("sorting", key, SORTERS[key](values))
        assert values == [4, 1, 3, 2]

    @pytest.mark.parametrize("key", sorted(SORTERS))
    def test_every_snapshot_has_status(self, key):
        """Each snapshot describes the action just taken."""
        trace = record("sorting", key, SORTERS[key]([3, 1, 2]))
        assert all(s.status for s in trace)


class TestScenarios:
    """Algorithm-specific phases."""

    def test_bubble_sort_example(self):
        """[5, 3, 8, 1] bubble sorts to [1, 3, 5, 8]."""
        trace = record("sorting", "bubble", bubble_sort([5, 3, 8, 1]))
        assert trace.final.values == (1, 3, 5, 8)

    def test_bubble_highlights_compared_pair(self):
        """The first comparison highlights indices 0 and 1."""
        trace = record("sorting", "bubble", bubble_sort([5, 3, 8, 1]))
        assert trace[1].highlighted_indices == (0, 1)
        assert trace[1].status == "Comparing 5 and 3"

    def test_merge_sort_shows_each_merged_run(self):
        """Every merge ends with a snapshot of the merged, sorted run."""
        trace = record("sorting", "merge", merge_sort([5, 3, 8, 1]))
        merged = [s for s in trace if s.status.startswith("Merged")]
        assert [s.status for s in merged] == ["Merged [0..1]", "Merged [2..3]", "Merged [0..3]"]
        assert merged[0].values[:2] == (3, 5)
        assert merged[1].values[2:] == (1, 8)
        assert merged[2].values == (1, 3, 5, 8)
        assert merged[2].highlighted_indices == (0, 1, 2, 3)

    def test_quick_sort_shows_pivot_and_boundary(self):
        """Partitioning starts with the pivot and ends at the boundary."""
        trace = record("sorting", "quick", quick_sort([5, 3, 8, 1]))
        statuses = [s.status for s in trace]
        assert "Pivot 1 selected for [0..3]" in statuses
        placed = [s for s in trace if "partition boundary" in s.status]
        assert placed
        assert placed[0].status.startswith("Pivot 1 placed at index 0")
        assert placed[0].highlighted_indices == (0,)

    def test_heap_sort_build_then_extract(self):
        """Build-phase snapshots all come before the max-heap snapshot, extraction after."""
        trace = record("sorting", "heap", heap_sort([4, 10, 3, 5, 1]))
        statuses = [s.status for s in trace]
        built = statuses.index("Max heap built")
        assert all(i < built for i, st in enumerate(statuses) if st.startswith("Build phase"))
        assert all(i > built for i, st in enumerate(statuses) if st.startswith("Extract phase"))

        heap = trace[built].values
        assert all(
            heap[i] >= heap[c]
            for i in range(len(heap))
            for c in (2 * i + 1, 2 * i + 2)
            if c < len(heap)
        )
