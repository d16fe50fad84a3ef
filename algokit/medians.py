"""Medians of sorted integer sequences.

An even count gives the average of the two middle values, truncated toward
zero.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def _halve(total: int) -> int:
    return total // 2 if total >= 0 else -(-total // 2)


def median_of_sorted(values: Iterable[int]) -> int:
    """Return the median of a sorted sequence; raises ValueError when empty."""
    data: Sequence[int] = list(values)
    n = len(data)
    if n == 0:
        raise ValueError("median of an empty sequence")
    if n % 2 == 0:
        return _halve(data[n // 2 - 1] + data[n // 2])
    return data[n // 2]


def median_equal_length(first: Iterable[int], second: Iterable[int]) -> int:
    """Return the median of two sorted sequences of the same length.

    Works by discarding halves in logarithmically many steps. Raises
    ValueError if the sequences are empty or differ in length.
    """
    a, b = list(first), list(second)
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    if not a:
        raise ValueError("median of empty sequences")
    while True:
        n = len(a)
        if n == 1:
            return _halve(a[0] + b[0])
        if n == 2:
            return _halve(max(a[0], b[0]) + min(a[1], b[1]))
        m1, m2 = median_of_sorted(a), median_of_sorted(b)
        if m1 == m2:
            return m1
        if m1 > m2:
            a, b = b, a
        if n % 2 == 0:
            start, size = n // 2 - 1, n - n // 2 + 1
        else:
            start, size = n // 2, n - n // 2
        a, b = a[start : start + size], b[:size]


def median_merged(first: Iterable[int], second: Iterable[int]) -> int:
    """Return the median of two sorted sequences of any lengths by merging them.

    Raises ValueError if both are empty.
    """
    return median_of_sorted(heapq.merge(first, second))