import pytest

from algokit.queues import (
    CircularQueue,
    LinearQueue,
    QueueEmptyError,
    QueueFullError,
    TwoStackQueue,
)


@pytest.mark.parametrize("make", [LinearQueue, CircularQueue, TwoStackQueue])
def test_items_leave_in_arrival_order(make):
    queue = make()
    arrivals = [10, 100, 1000]
    for item in arrivals:
        queue.enqueue(item)
    assert [queue.dequeue() for _ in arrivals] == arrivals
    assert queue.is_empty()


@pytest.mark.parametrize("make", [LinearQueue, CircularQueue, TwoStackQueue])
def test_dequeue_on_empty_raises(make):
    with pytest.raises(QueueEmptyError):
        make().dequeue()


@pytest.mark.parametrize("make", [LinearQueue, CircularQueue, TwoStackQueue])
def test_non_positive_capacity_rejected(make):
    with pytest.raises(ValueError):
        make(0)


def test_linear_queue_full_after_capacity_enqueues():
    queue = LinearQueue(10)
    for item in range(10):
        queue.enqueue(item)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(10)


def test_linear_queue_does_not_reuse_spent_slots():
    queue = LinearQueue(3)
    for item in (1, 2, 3):
        queue.enqueue(item)
    assert queue.dequeue() == 1
    assert len(queue) == 2
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert list(queue) == [2, 3]


def test_linear_queue_resets_once_emptied():
    queue = LinearQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    queue.dequeue()
    queue.dequeue()
    assert not queue.is_full()
    queue.enqueue("c")
    queue.enqueue("d")
    assert list(queue) == ["c", "d"]


def test_circular_queue_wraps_around():
    queue = CircularQueue(5)
    for item in (11, 0, -3, 6):
        queue.enqueue(item)
    assert list(queue) == [11, 0, -3, 6]
    assert queue.dequeue() == 11
    assert queue.dequeue() == 0
    for item in (2, 3, 5):
        queue.enqueue(item)
    assert list(queue) == [-3, 6, 2, 3, 5]
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(8)


def test_circular_queue_front_and_back():
    queue = CircularQueue(5)
    queue.enqueue(4)
    queue.enqueue(5)
    queue.enqueue(6)
    queue.dequeue()
    assert queue.front() == 5
    assert queue.back() == 6
    assert len(queue) == 2


def test_circular_queue_front_and_back_on_empty_raise():
    queue = CircularQueue()
    with pytest.raises(QueueEmptyError):
        queue.front()
    with pytest.raises(QueueEmptyError):
        queue.back()


def test_circular_queue_many_cycles_keep_order():
    queue = CircularQueue(3)
    taken = []
    for item in range(20):
        queue.enqueue(item)
        if len(queue) == 3:
            taken.append(queue.dequeue())
    taken.extend(queue.dequeue() for _ in range(len(queue)))
    assert taken == list(range(20))


def test_two_stack_queue_full_at_capacity():
    queue = TwoStackQueue(10)
    for item in range(10):
        queue.enqueue(item)
    with pytest.raises(QueueFullError):
        queue.enqueue(10)
    assert len(queue) == 10


def test_two_stack_queue_interleaved_operations():
    queue = TwoStackQueue()
    queue.enqueue(10)
    queue.enqueue(100)
    assert queue.dequeue() == 10
    queue.enqueue(1000)
    assert queue.dequeue() == 100
    assert queue.dequeue() == 1000
    assert len(queue) == 0