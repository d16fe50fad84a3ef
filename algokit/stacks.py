"""Last-in, first-out stacks backed by a bounded list or by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class StackEmptyError(IndexError):
    """Raised when an item is taken from or looked up on an empty stack."""


class StackFullError(OverflowError):
    """Raised when an item is pushed onto a stack that has no room left."""


class ArrayStack(Generic[T]):
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least one")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top; raises StackFullError when at capacity."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raises StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r}, capacity={self.capacity})"


@dataclass
class _Node(Generic[T]):
    value: T
    below: _Node[T] | None = None


class LinkedStack(Generic[T]):
    """An unbounded stack made of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item; raises StackEmptyError when empty."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def clear(self) -> None:
        """Remove every item."""
        self._top = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        items: list[Any] = list(self)
        return f"LinkedStack({items!r})"