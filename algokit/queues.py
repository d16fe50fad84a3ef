"""First-in, first-out queues: linear, circular and built from two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from algokit.stacks import ArrayStack, StackFullError

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when an item is taken from or looked up on an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item is added to a queue that has no room left."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least one")


class LinearQueue(Generic[T]):
    """A bounded queue whose slots are not reused until it has been emptied.

    Every enqueue takes the next slot; dequeued slots stay spent, so the
    queue reports itself full after ``capacity`` enqueues even if some
    items were taken out since. Emptying the queue frees all slots again.
    """

    def __init__(self, capacity: int = 10) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back; raises QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raises QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return item

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the back."""
        return iter(self._slots[self._front :])


class CircularQueue(Generic[T]):
    """A bounded queue on a ring of ``capacity`` slots."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._head = 0
        self._count = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back; raises QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._head + self._count) % self.capacity] = item
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raises QueueEmptyError when empty."""
        item = self.front()
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return item

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._head]  # type: ignore[return-value]

    def back(self) -> T:
        """Return the item at the back without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[(self._head + self._count - 1) % self.capacity]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the back."""
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % self.capacity]  # type: ignore[misc]


class TwoStackQueue(Generic[T]):
    """A queue kept in one bounded stack, using a second to reach its bottom."""

    def __init__(self, capacity: int = 10) -> None:
        _check_capacity(capacity)
        self._inbox: ArrayStack[T] = ArrayStack(capacity)
        self._spare: ArrayStack[T] = ArrayStack(capacity)

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back; raises QueueFullError when the stack is full."""
        try:
            self._inbox.push(item)
        except StackFullError as error:
            raise QueueFullError("queue is full") from error

    def dequeue(self) -> T:
        """Remove and return the oldest item; raises QueueEmptyError when empty."""
        if self._inbox.is_empty():
            raise QueueEmptyError("queue is empty")
        while not self._inbox.is_empty():
            self._spare.push(self._inbox.pop())
        item = self._spare.pop()
        while not self._spare.is_empty():
            self._inbox.push(self._spare.pop())
        return item

    def is_empty(self) -> bool:
        return self._inbox.is_empty()

    def __len__(self) -> int:
        return len(self._inbox)