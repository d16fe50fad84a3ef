"""Problems over contiguous runs and subsequences of number sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def kadane(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, allowing the empty run.

    The result is therefore never below zero.
    """
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    iterator = iter(values)
    try:
        best = current = next(iterator)
    except StopIteration:
        raise ValueError("sequence must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    data: Sequence[int] = list(values)
    lengths: list[int] = []
    for i, value in enumerate(data):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if data[j] < value), default=0)
        )
    return max(lengths, default=0)


def max_profit(prices: Iterable[int]) -> int:
    """Return the profit from buying before every rise and selling after it."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))