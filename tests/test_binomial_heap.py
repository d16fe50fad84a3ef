import pytest

from algokit.binomial_heap import BinomialHeap


def drain(heap):
    return [heap.extract_min() for _ in range(len(heap))]


@pytest.mark.parametrize(
    "values",
    [[5], [3, 1, 2], [10, 4, 7, 1, 9, 2, 8], [5, 5, 1, 5, 3, 3], list(range(20, 0, -1))],
)
def test_extracting_everything_gives_sorted_order(values):
    heap = BinomialHeap(values)
    assert len(heap) == len(values)
    assert drain(heap) == sorted(values)
    assert len(heap) == 0


@pytest.mark.parametrize("count", range(1, 17))
def test_root_count_matches_binary_representation(count):
    heap = BinomialHeap(range(count))
    assert len(heap.roots()) == bin(count).count("1")


def test_minimum_does_not_remove():
    heap = BinomialHeap([7, 3, 9])
    assert heap.minimum() == 3
    assert len(heap) == 3
    assert heap.extract_min() == 3
    assert heap.minimum() == 7


def test_empty_heap_raises():
    heap = BinomialHeap()
    with pytest.raises(IndexError):
        heap.minimum()
    with pytest.raises(IndexError):
        heap.extract_min()


def test_decrease_key_moves_to_front():
    heap = BinomialHeap([5, 3, 8, 6, 4])
    heap.decrease_key(8, 1)
    assert heap.minimum() == 1
    assert drain(heap) == [1, 3, 4, 5, 6]


def test_decrease_key_errors():
    heap = BinomialHeap([5, 3])
    with pytest.raises(KeyError):
        heap.decrease_key(99, 0)
    with pytest.raises(ValueError):
        heap.decrease_key(5, 10)


def test_delete_removes_one_key():
    values = [4, 7, 1, 9, 12, 2, 6]
    heap = BinomialHeap(values)
    heap.delete(7)
    heap.delete(1)
    remaining = sorted(v for v in values if v not in (7, 1))
    assert drain(heap) == remaining


def test_delete_missing_key_raises():
    heap = BinomialHeap([1, 2])
    with pytest.raises(KeyError):
        heap.delete(3)
    assert len(heap) == 2


def test_interleaved_operations_keep_order():
    heap = BinomialHeap()
    for value in [9, 2, 7]:
        heap.insert(value)
    first = heap.extract_min()
    for value in [1, 8]:
        heap.insert(value)
    assert [first, *drain(heap)] == [2, 1, 7, 8, 9]