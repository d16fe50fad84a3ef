"""Singly linked lists, with cycle detection and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class ListNode(Generic[T]):
    """One node of a singly linked list."""

    value: T
    next: ListNode[T] | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class SinglyLinkedList(Generic[T]):
    """A singly linked list with positional insertion and deletion.

    Positions are zero-based, as with Python lists.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.head: ListNode[T] | None = None
        self._size = 0
        tail: ListNode[T] | None = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, index: int) -> ListNode[T]:
        node = self.head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_first(self, value: T) -> None:
        """Put ``value`` at the front of the list."""
        self.head = ListNode(value, self.head)
        self._size += 1

    def append(self, value: T) -> None:
        """Put ``value`` at the end of the list."""
        if self.head is None:
            self.insert_first(value)
            return
        self._node_at(self._size - 1).next = ListNode(value)
        self._size += 1

    def insert_at(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at index ``position``.

        Raises IndexError unless ``0 <= position <= len(self)``.
        """
        if not 0 <= position <= self._size:
            raise IndexError("insert position out of range")
        if position == 0:
            self.insert_first(value)
            return
        previous = self._node_at(position - 1)
        previous.next = ListNode(value, previous.next)
        self._size += 1

    def pop_first(self) -> T:
        """Remove and return the first value; raises IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.value

    def pop_last(self) -> T:
        """Remove and return the last value; raises IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self._size == 1:
            return self.pop_first()
        previous = self._node_at(self._size - 2)
        node = previous.next
        assert node is not None
        previous.next = None
        self._size -= 1
        return node.value

    def delete_at(self, position: int) -> T:
        """Remove and return the value at index ``position``.

        Raises IndexError when the position is past the end of the list.
        """
        if not 0 <= position < self._size:
            raise IndexError("position exceeds linked list")
        if position == 0:
            return self.pop_first()
        previous = self._node_at(position - 1)
        node = previous.next
        assert node is not None
        previous.next = node.next
        self._size -= 1
        return node.value

    def remove(self, value: T) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        previous: ListNode[T] | None = None
        node = self.head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def find(self, value: T) -> int:
        """Return the index of the first node holding ``value``, or -1."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return -1

    def __iter__(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"SinglyLinkedList({items!r})"


def has_cycle(head: ListNode[Any] | None) -> bool:
    """Return True if following ``next`` from ``head`` loops back on itself.

    Uses Floyd's slow and fast pointers.
    """
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_list(head: ListNode[T] | None) -> ListNode[T] | None:
    """Reverse a chain of nodes in place and return its new head."""
    previous: ListNode[T] | None = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous, current = current, following
    return previous