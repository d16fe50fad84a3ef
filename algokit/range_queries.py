"""Range-sum structures: Fenwick tree, segment tree and prefix-sum tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


class FenwickTree:
    """A binary indexed tree over positions ``1..size``, all starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to position ``index`` (1-based)."""
        if not 1 <= index <= self.size:
            raise IndexError("index out of range")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the total of positions ``1..index``; index 0 gives 0."""
        if not 0 <= index <= self.size:
            raise IndexError("index out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


class SegmentTree:
    """A sum segment tree over a fixed-length sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._tree = [0] * (4 * max(len(self._values), 1))
        if self._values:
            self._build(0, 0, len(self._values))

    def _build(self, node: int, lo: int, hi: int) -> None:
        if hi - lo < 2:
            self._tree[node] = self._values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid)
        self._build(2 * node + 2, mid, hi)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def update(self, position: int, value: int) -> None:
        """Set the element at ``position`` to ``value``."""
        if not 0 <= position < len(self._values):
            raise IndexError("position out of range")
        difference = value - self._values[position]
        node, lo, hi = 0, 0, len(self._values)
        while True:
            self._tree[node] += difference
            if hi - lo < 2:
                break
            mid = (lo + hi) // 2
            if position < mid:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid
        self._values[position] = value

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the elements in the half-open range [left, right)."""
        if not 0 <= left <= right <= len(self._values):
            raise IndexError("range out of bounds")
        return self._query(left, right, 0, 0, len(self._values))

    def _query(self, left: int, right: int, node: int, lo: int, hi: int) -> int:
        if left >= hi or right <= lo:
            return 0
        if left <= lo and right >= hi:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._query(left, right, 2 * node + 1, lo, mid) + self._query(
            left, right, 2 * node + 2, mid, hi
        )

    def __len__(self) -> int:
        return len(self._values)


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values``."""
    return list(accumulate(values))


def prefix_sums_2d(grid: Iterable[Iterable[int]]) -> list[list[int]]:
    """Return a table whose cell (i, j) totals the grid's rectangle from (0, 0).

    Raises ValueError if the rows differ in length.
    """
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    table: list[list[int]] = []
    for row in rows:
        above = table[-1] if table else [0] * len(row)
        table.append([total + up for total, up in zip(accumulate(row), above)])
    return table


def range_sum(psum: Sequence[int], start: int, stop: int) -> int:
    """Return the total of the original values at ``start..stop`` inclusive."""
    if not 0 <= start <= stop < len(psum):
        raise IndexError("range out of bounds")
    return psum[stop] - (psum[start - 1] if start > 0 else 0)


def range_sum_2d(
    psum: Sequence[Sequence[int]], top: int, left: int, bottom: int, right: int
) -> int:
    """Return the total of the rectangle with inclusive corners (top, left)
    and (bottom, right), given a table from ``prefix_sums_2d``."""
    if not (0 <= top <= bottom < len(psum) and 0 <= left <= right < len(psum[0])):
        raise IndexError("rectangle out of bounds")
    total = psum[bottom][right]
    if top > 0:
        total -= psum[top - 1][right]
    if left > 0:
        total -= psum[bottom][left - 1]
    if top > 0 and left > 0:
        total += psum[top - 1][left - 1]
    return total