"""Binary search trees stored in arrays and in linked nodes, with traversal,
reconstruction and analysis helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.key!r})"


class ArrayBinarySearchTree:
    """A binary search tree laid out in a fixed array.

    The root lives at slot 1 and the children of slot ``i`` at ``2*i`` and
    ``2*i + 1``. Smaller keys go left; equal or larger keys go right.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least two")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity

    def insert(self, key: Any) -> None:
        """Place ``key``; raises OverflowError if its slot is past the array."""
        if key is None:
            raise ValueError("None cannot be stored as a key")
        slot = 1
        while slot < self.capacity:
            current = self._slots[slot]
            if current is None:
                self._slots[slot] = key
                return
            slot = 2 * slot if current > key else 2 * slot + 1
        raise OverflowError("tree is too deep for its capacity")

    def _occupied(self, slot: int) -> bool:
        return slot < self.capacity and self._slots[slot] is not None

    def inorder(self) -> list[Any]:
        """Return the keys in sorted (in-order) sequence."""
        result: list[Any] = []
        pending: list[int] = []
        slot = 1
        while pending or self._occupied(slot):
            while self._occupied(slot):
                pending.append(slot)
                slot *= 2
            slot = pending.pop()
            result.append(self._slots[slot])
            slot = 2 * slot + 1
        return result


def bst_insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` into the search tree at ``root`` and return the root.

    Smaller keys go left; equal or larger keys go right.
    """
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if node.key > key:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the keys of the tree in left, node, right order."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.key)
        node = node.right
    return result


def _preorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the keys of the tree in node, left, right order."""
    return [node.key for node in _preorder_nodes(root)]


def build_tree(
    preorder_keys: Iterable[Any], inorder_keys: Iterable[Any]
) -> TreeNode | None:
    """Rebuild a binary tree from its pre-order and in-order key sequences.

    Raises ValueError if the sequences differ in length or do not describe
    the same tree.
    """
    pre = list(preorder_keys)
    ino = list(inorder_keys)
    if len(pre) != len(ino):
        raise ValueError("traversals must have the same length")
    keys = iter(pre)

    def build(start: int, stop: int) -> TreeNode | None:
        if start >= stop:
            return None
        key = next(keys)
        split = max(
            (j for j in range(start, stop) if ino[j] == key), default=None
        )
        if split is None:
            raise ValueError(f"key {key!r} not found where the in-order expects it")
        node = TreeNode(key)
        node.left = build(start, split)
        node.right = build(split + 1, stop)
        return node

    return build(0, len(ino))


def is_bst(root: TreeNode | None, lower: Any = None, upper: Any = None) -> bool:
    """Return True if every key lies strictly between its ancestors' bounds.

    ``lower`` and ``upper`` bound the whole tree; None means unbounded.
    Duplicate keys make the tree not a search tree.
    """
    pending = [(root, lower, upper)]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if (low is not None and not node.key > low) or (
            high is not None and not node.key < high
        ):
            return False
        pending.append((node.left, low, node.key))
        pending.append((node.right, node.key, high))
    return True


def tree_size(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def largest_bst_size(root: TreeNode | None) -> int:
    """Return the node count of the largest subtree that is a search tree."""
    if root is None:
        return 0
    if is_bst(root):
        return tree_size(root)
    return max(largest_bst_size(root.left), largest_bst_size(root.right))


def lowest_common_ancestor(
    root: TreeNode | None, first: Any, second: Any
) -> TreeNode | None:
    """Return the node where the search paths to ``first`` and ``second`` split.

    For keys present in the search tree this is their lowest common
    ancestor. Returns None for an empty tree.
    """
    node = root
    while node is not None:
        if node.key > first and node.key > second:
            node = node.left
        elif node.key < first and node.key < second:
            node = node.right
        else:
            break
    return node