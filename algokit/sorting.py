"""Classic in-memory sorting algorithms.

Every function takes an iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Any, Protocol


class _RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    data = list(items)
    for end in range(len(data) - 1, 0, -1):
        for j in range(end):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _selection_passes(data: list[Any]) -> Iterator[list[Any]]:
    for i in range(len(data) - 1):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
        yield list(data)


def selection_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield a snapshot of the list after each pass of selection sort."""
    yield from _selection_passes(list(items))


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by selecting the smallest remaining element on each pass."""
    data = list(items)
    for _ in _selection_passes(data):
        pass
    return data


def _first_pivot(data: list[Any], first: int, last: int) -> None:
    if first >= last:
        return
    pivot = first
    i, j = first, last
    while i < j:
        while data[i] <= data[pivot] and i < last:
            i += 1
        while data[j] > data[pivot]:
            j -= 1
        if i < j:
            data[i], data[j] = data[j], data[i]
    data[pivot], data[j] = data[j], data[pivot]
    _first_pivot(data, first, j - 1)
    _first_pivot(data, j + 1, last)


def quicksort_first_pivot(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the first element of each range as the pivot."""
    data = list(items)
    _first_pivot(data, 0, len(data) - 1)
    return data


def _lomuto_partition(data: list[Any], low: int, high: int, strict: bool) -> int:
    pivot = data[high]
    index = low
    for j in range(low, high):
        if data[j] < pivot or (not strict and data[j] == pivot):
            data[index], data[j] = data[j], data[index]
            index += 1
    data[index], data[high] = data[high], data[index]
    return index


def quicksort_random_pivot(
    items: Iterable[Any], rng: _RandomSource | None = None
) -> list[Any]:
    """Quicksort choosing a random pivot in each range.

    ``rng`` needs a ``randrange`` method; the ``random`` module is used
    when it is not given.
    """
    source: Any = random if rng is None else rng
    data = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            chosen = source.randrange(low, high + 1)
            data[high], data[chosen] = data[chosen], data[high]
            split = _lomuto_partition(data, low, high, strict=True)
            sort(low, split - 1)
            sort(split + 1, high)

    sort(0, len(data) - 1)
    return data


def _hoare_partition(data: list[Any], low: int, high: int) -> int:
    pivot = data[low]
    i, j = low + 1, high
    while True:
        while i <= high and data[i] < pivot:
            i += 1
        while data[j] > pivot:
            j -= 1
        if i >= j:
            break
        data[i], data[j] = data[j], data[i]
        i += 1
        j -= 1
    data[low], data[j] = data[j], data[low]
    return j


def quicksort_hoare(items: Iterable[Any]) -> list[Any]:
    """Quicksort with a two-pointer partition around the first element."""
    data = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            split = _hoare_partition(data, low, high)
            sort(low, split - 1)
            sort(split + 1, high)

    sort(0, len(data) - 1)
    return data


def quicksort_lomuto(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as the pivot."""
    data = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            split = _lomuto_partition(data, low, high, strict=False)
            sort(low, split - 1)
            sort(split + 1, high)

    sort(0, len(data) - 1)
    return data


def quicksort_comparisons(items: Iterable[Any]) -> tuple[list[Any], int]:
    """Sort with first-element-pivot quicksort and count comparisons.

    Each partition of a range ``p..q`` is charged ``q - p`` comparisons.
    Returns the sorted list and the total count.
    """
    data = list(items)
    count = 0

    def partition(p: int, q: int) -> int:
        pivot = data[p]
        i = p
        for j in range(p + 1, q + 1):
            if data[j] <= pivot:
                i += 1
                data[i], data[j] = data[j], data[i]
        data[p], data[i] = data[i], data[p]
        return i

    def sort(p: int, q: int) -> None:
        nonlocal count
        if p < q:
            count += q - p
            r = partition(p, q)
            sort(p, r - 1)
            sort(r + 1, q)

    sort(0, len(data) - 1)
    return data, count


def _sift_down(data: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    data = list(items)
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, i)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    data = list(items)
    if len(data) <= 1:
        return data
    middle = (len(data) + 1) // 2
    left = merge_sort(data[:middle])
    right = merge_sort(data[middle:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per value.

    Raises ValueError for a value outside that range.
    """
    data = list(values)
    n = len(data)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def dutch_flag_sort(items: Iterable[int]) -> list[int]:
    """Sort a sequence made only of 0, 1 and 2 in a single pass.

    Raises ValueError if any other value is present.
    """
    data = list(items)
    low, mid, high = 0, 0, len(data) - 1
    while mid <= high:
        value = data[mid]
        if value == 0:
            data[low], data[mid] = data[mid], data[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            data[mid], data[high] = data[high], data[mid]
            high -= 1
        else:
            raise ValueError(f"dutch flag sort accepts only 0, 1 and 2, got {value!r}")
    return data