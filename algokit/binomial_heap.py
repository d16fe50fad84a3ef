"""A mergeable min-priority queue built from a forest of binomial trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class _Node:
    key: Any
    degree: int = 0
    parent: _Node | None = None
    child: _Node | None = None
    sibling: _Node | None = None


def _chain(head: _Node | None) -> Iterator[_Node]:
    node = head
    while node is not None:
        yield node
        node = node.sibling


def _relink(nodes: list[_Node]) -> _Node | None:
    for node, following in zip(nodes, nodes[1:]):
        node.sibling = following
    if nodes:
        nodes[-1].sibling = None
        return nodes[0]
    return None


def _merge_roots(first: _Node | None, second: _Node | None) -> _Node | None:
    merged = list(
        heapq.merge(
            list(_chain(first)), list(_chain(second)), key=lambda node: node.degree
        )
    )
    return _relink(merged)


def _link(child: _Node, parent: _Node) -> None:
    child.parent = parent
    child.sibling = parent.child
    parent.child = child
    parent.degree += 1


def _union(first: _Node | None, second: _Node | None) -> _Node | None:
    head = _merge_roots(first, second)
    if head is None:
        return None
    previous: _Node | None = None
    current = head
    following = current.sibling
    while following is not None:
        if current.degree != following.degree or (
            following.sibling is not None
            and following.sibling.degree == current.degree
        ):
            previous, current = current, following
        elif current.key <= following.key:
            current.sibling = following.sibling
            _link(following, current)
        else:
            if previous is None:
                head = following
            else:
                previous.sibling = following
            _link(current, following)
            current = following
        following = current.sibling
    return head


class BinomialHeap:
    """A min-heap supporting insertion, extraction, key decrease and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._head = _union(self._head, _Node(key))
        self._size += 1

    def _min_root(self) -> _Node:
        if self._head is None:
            raise IndexError("heap is empty")
        best = self._head
        for node in _chain(self._head.sibling):
            if node.key < best.key:
                best = node
        return best

    def minimum(self) -> Any:
        """Return the smallest key; raises IndexError when empty."""
        return self._min_root().key

    def _remove_root(self, root: _Node) -> None:
        remaining = [node for node in _chain(self._head) if node is not root]
        children = list(_chain(root.child))
        for child in children:
            child.parent = None
        children.reverse()
        self._head = _union(_relink(remaining), _relink(children))
        self._size -= 1

    def extract_min(self) -> Any:
        """Remove and return the smallest key; raises IndexError when empty."""
        root = self._min_root()
        self._remove_root(root)
        return root.key

    def _find(self, key: Any) -> _Node | None:
        pending = list(_chain(self._head))
        while pending:
            node = pending.pop()
            if node.key == key:
                return node
            pending.extend(_chain(node.child))
        return None

    def _locate(self, key: Any) -> _Node:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    def decrease_key(self, key: Any, new_key: Any) -> None:
        """Replace ``key`` with the smaller ``new_key``.

        Raises KeyError if ``key`` is absent and ValueError if ``new_key``
        is greater than it.
        """
        node = self._locate(key)
        if new_key > node.key:
            raise ValueError("new key is greater than the current one")
        node.key = new_key
        parent = node.parent
        while parent is not None and node.key < parent.key:
            node.key, parent.key = parent.key, node.key
            node, parent = parent, parent.parent

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raises KeyError if it is absent."""
        node = self._locate(key)
        parent = node.parent
        while parent is not None:
            node.key, parent.key = parent.key, node.key
            node, parent = parent, parent.parent
        self._remove_root(node)

    def roots(self) -> list[Any]:
        """Return the keys at the roots of the trees, in order of degree."""
        return [node.key for node in _chain(self._head)]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinomialHeap(roots={self.roots()!r}, size={self._size})"