import random

import pytest

from algokit.sorting import (
    bubble_sort,
    bucket_sort,
    dutch_flag_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quicksort_comparisons,
    quicksort_first_pivot,
    quicksort_hoare,
    quicksort_lomuto,
    quicksort_random_pivot,
    selection_sort,
    selection_sort_passes,
)

SAMPLES = [
    [],
    [7],
    [10, 80, 34, 5, 89, 22, 19, 7],
    [12, 11, 13, 5, 6],
    [13, 32, 43, 14, 25],
    [10, 7, 8, 9, 1, 5],
    [2, 2, 2, 2],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, -1, 0, -7, 3, 9, -1],
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(25)]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_fixed_samples(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert quicksort_first_pivot(sample) == expected
    assert quicksort_hoare(sample) == expected
    assert quicksort_lomuto(sample) == expected
    assert heap_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quicksort_random_pivot(sample) == expected


def test_sorts_random_lists():
    for sample in _random_lists():
        expected = sorted(sample)
        assert bubble_sort(sample) == expected
        assert insertion_sort(sample) == expected
        assert selection_sort(sample) == expected
        assert quicksort_first_pivot(sample) == expected
        assert quicksort_hoare(sample) == expected
        assert quicksort_lomuto(sample) == expected
        assert heap_sort(sample) == expected
        assert merge_sort(sample) == expected
        assert quicksort_random_pivot(sample) == expected


def test_input_is_not_modified():
    sample = [4, 1, 3, 2]
    original = list(sample)
    results = [
        bubble_sort(sample),
        insertion_sort(sample),
        selection_sort(sample),
        quicksort_first_pivot(sample),
        quicksort_hoare(sample),
        quicksort_lomuto(sample),
        heap_sort(sample),
        merge_sort(sample),
        quicksort_random_pivot(sample),
    ]
    assert sample == original
    assert all(result == [1, 2, 3, 4] for result in results)


def test_accepts_any_iterable():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quicksort_first_pivot(iter((3, 1, 2))) == [1, 2, 3]
    assert quicksort_hoare(iter((3, 1, 2))) == [1, 2, 3]
    assert quicksort_lomuto(iter((3, 1, 2))) == [1, 2, 3]
    assert heap_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quicksort_random_pivot(iter((3, 1, 2))) == [1, 2, 3]


def test_random_pivot_with_seeded_rng():
    data = [9, 4, 7, 1, 8, 2, 2, 6]
    assert quicksort_random_pivot(data, random.Random(0)) == sorted(data)


def test_selection_passes_snapshots():
    data = [13, 32, 43, 14, 25]
    passes = list(selection_sort_passes(data))
    assert len(passes) == len(data) - 1
    assert passes[-1] == sorted(data)
    for number, snapshot in enumerate(passes, start=1):
        assert snapshot[:number] == sorted(data)[:number]
        assert sorted(snapshot) == sorted(data)


def test_selection_passes_empty_for_short_input():
    assert list(selection_sort_passes([1])) == []


def test_quicksort_comparisons_sorted_result():
    for sample in _random_lists():
        result, count = quicksort_comparisons(sample)
        assert result == sorted(sample)
        assert count >= max(len(sample) - 1, 0)


def test_quicksort_comparisons_trivial_inputs():
    assert quicksort_comparisons([]) == ([], 0)
    assert quicksort_comparisons([4]) == ([4], 0)


def test_quicksort_comparisons_worst_case_is_quadratic():
    n = 12
    result, count = quicksort_comparisons(range(n))
    assert result == list(range(n))
    assert count == n * (n - 1) // 2


def test_bucket_sort_source_example():
    values = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(values) == sorted(values)


def test_bucket_sort_random():
    rng = random.Random(7)
    values = [rng.random() for _ in range(50)]
    assert bucket_sort(values) == sorted(values)


@pytest.mark.parametrize("bad", [[0.5, 1.0], [-0.1, 0.2]])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort(bad)


def test_dutch_flag_sort_source_example():
    data = [0, 1, 2, 0, 1, 2, 1, 2, 0, 0, 2, 1]
    assert dutch_flag_sort(data) == sorted(data)


def test_dutch_flag_sort_rejects_other_values():
    with pytest.raises(ValueError):
        dutch_flag_sort([0, 3, 1])