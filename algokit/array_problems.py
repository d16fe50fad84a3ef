"""Assorted problems over integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Any


def atm_order(amounts: Iterable[int], limit: int) -> list[int]:
    """Return the 1-based order in which people leave an ATM queue.

    Each person withdraws at most ``limit`` per turn and rejoins the back of
    the queue until done; a person needing fewer turns leaves earlier, and
    ties leave in queue order.
    """
    if limit < 1:
        raise ValueError("limit must be positive")
    turns = [-(-amount // limit) for amount in amounts]
    return [i + 1 for i in sorted(range(len(turns)), key=lambda i: (turns[i], i))]


def _readers_needed(pages: Sequence[int], most: int) -> int:
    readers, load = 1, 0
    for count in pages:
        load += count
        if load > most:
            readers += 1
            load = count
    return readers


def min_max_pages(pages: Iterable[int], students: int) -> int:
    """Return the smallest possible largest page count any student reads.

    Each student reads a consecutive run of books. Raises ValueError when
    there are no books or no students.
    """
    books = list(pages)
    if not books:
        raise ValueError("there must be at least one book")
    if students < 1:
        raise ValueError("there must be at least one student")
    low, high = max(books), sum(books)
    answer = high
    while low <= high:
        middle = (low + high) // 2
        if _readers_needed(books, middle) <= students:
            answer = middle
            high = middle - 1
        else:
            low = middle + 1
    return answer


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Return the least gap between largest and smallest packet handed out
    when each of ``students`` gets one packet."""
    sizes = sorted(packets)
    if not 1 <= students <= len(sizes):
        raise ValueError("students must be between one and the number of packets")
    return min(
        high - low for low, high in zip(sizes, sizes[students - 1 :])
    )


def majority_element(values: Iterable[Any]) -> Any | None:
    """Return an element occurring more than a third of the time, or None.

    When two elements qualify, the one found first by the vote is returned.
    """
    data = list(values)
    first = second = None
    count1 = count2 = 0
    for value in data:
        if count1 and value == first:
            count1 += 1
        elif count2 and value == second:
            count2 += 1
        elif count1 == 0:
            first, count1 = value, 1
        elif count2 == 0:
            second, count2 = value, 1
        else:
            count1 -= 1
            count2 -= 1
    threshold = len(data) // 3
    for candidate, votes in ((first, count1), (second, count2)):
        if votes and data.count(candidate) > threshold:
            return candidate
    return None


def merge_sorted(arrays: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge several sorted sequences into one sorted list."""
    return list(heapq.merge(*arrays))


def minimize_height_difference(heights: Iterable[int], k: int) -> int:
    """Return the least possible gap between tallest and shortest after each
    height is raised or lowered by ``k``; no height may go below zero."""
    data = sorted(heights)
    if not data:
        raise ValueError("heights must not be empty")
    best = data[-1] - data[0]
    for lower, upper in zip(data, data[1:]):
        if upper < k:
            continue
        shortest = min(upper - k, data[0] + k)
        tallest = max(lower + k, data[-1] - k)
        best = min(best, tallest - shortest)
    return best


def trapped_water(heights: Iterable[int]) -> int:
    """Return how much rain water is held between bars of the given heights."""
    bars = list(heights)
    left, right = 0, len(bars) - 1
    left_max = right_max = 0
    total = 0
    while left <= right:
        if bars[left] <= bars[right]:
            if bars[left] > left_max:
                left_max = bars[left]
            else:
                total += left_max - bars[left]
            left += 1
        else:
            if bars[right] > right_max:
                right_max = bars[right]
            else:
                total += right_max - bars[right]
            right -= 1
    return total


def swap_with_next_but_one(values: Iterable[Any]) -> list[Any]:
    """Return a copy where, in order from the front, each element is swapped
    with the one two places after it."""
    result = list(values)
    for i in range(len(result) - 2):
        result[i], result[i + 2] = result[i + 2], result[i]
    return result