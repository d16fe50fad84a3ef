"""Disjoint-set forest with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Partition of the items ``0..size-1`` into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        if not 0 <= item < len(self._parent):
            raise IndexError("item out of range")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the sets of two items; return False if they were already joined."""
        a, b = self.find(first), self.find(second)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True