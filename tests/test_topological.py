from itertools import permutations

import pytest

from algokit.topological import (
    CycleError,
    has_cycle,
    lexicographic_topological_order,
    topological_order,
)

DAG = [[2, 3], [3, 4], [5], [5], [], []]
CYCLIC = [[1], [2], [0], []]


def _respects_edges(order, graph):
    position = {v: i for i, v in enumerate(order)}
    return all(position[u] < position[v] for u in range(len(graph)) for v in graph[u])


def test_topological_order_is_valid_permutation():
    order = topological_order(DAG)
    assert sorted(order) == list(range(len(DAG)))
    assert _respects_edges(order, DAG)


def test_topological_order_starts_with_sources_in_index_order():
    order = topological_order(DAG)
    assert order[:2] == [0, 1]


def test_topological_order_raises_on_cycle():
    with pytest.raises(CycleError):
        topological_order(CYCLIC)


def test_has_cycle():
    assert has_cycle(CYCLIC) is True
    assert has_cycle(DAG) is False
    assert has_cycle([[0]]) is True


def test_empty_graph():
    assert topological_order([]) == []
    assert has_cycle([]) is False


def test_lexicographic_order_is_smallest_valid_order():
    graph = [[], [0], [0, 1], [1]]
    order = lexicographic_topological_order(graph)
    assert _respects_edges(order, graph)
    valid = [list(p) for p in permutations(range(4)) if _respects_edges(p, graph)]
    assert order == min(valid)


def test_lexicographic_order_on_dag_is_valid():
    order = lexicographic_topological_order(DAG)
    assert sorted(order) == list(range(len(DAG)))
    assert _respects_edges(order, DAG)


def test_lexicographic_order_raises_on_cycle():
    with pytest.raises(CycleError):
        lexicographic_topological_order(CYCLIC)


def test_edge_target_out_of_range():
    with pytest.raises(IndexError):
        topological_order([[3]])


def test_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        topological_order(CYCLIC)