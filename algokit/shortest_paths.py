"""Single-source and all-pairs shortest paths on weighted graphs.

Vertices are ``0..vertex_count-1`` and edges are ``(u, v, weight)`` triples.
Unreachable vertices have a distance of None.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

Edge = tuple[int, int, int]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


def _validated(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    checked: list[Edge] = []
    for u, v, weight in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"edge ({u}, {v}) has an endpoint out of range")
        checked.append((u, v, weight))
    return checked


def _check_source(vertex_count: int, source: int) -> None:
    if not 0 <= source < vertex_count:
        raise IndexError("source vertex out of range")


def dijkstra(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[int | None]:
    """Return the shortest distance from ``source`` to every vertex.

    Edges are undirected. Raises ValueError for a negative weight.
    """
    edge_list = _validated(vertex_count, edges)
    _check_source(vertex_count, source)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edge_list:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    distances: list[int | None] = [None] * vertex_count
    heap = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distances[vertex] is not None:
            continue
        distances[vertex] = distance
        for neighbour, weight in adjacency[vertex]:
            if distances[neighbour] is None:
                heapq.heappush(heap, (distance + weight, neighbour))
    return distances


def _improves(distances: list[int | None], u: int, v: int, weight: int) -> bool:
    start, end = distances[u], distances[v]
    return start is not None and (end is None or start + weight < end)


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[int | None]:
    """Return the shortest distance from ``source`` along directed edges.

    Negative weights are allowed. Raises NegativeCycleError if a negative
    cycle can be reached from the source.
    """
    edge_list = _validated(vertex_count, edges)
    _check_source(vertex_count, source)
    distances: list[int | None] = [None] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edge_list:
            if _improves(distances, u, v, weight):
                distances[v] = distances[u] + weight  # type: ignore[operator]
                changed = True
        if not changed:
            break
    if any(_improves(distances, u, v, weight) for u, v, weight in edge_list):
        raise NegativeCycleError("negative cycle present")
    return distances


def floyd_warshall(
    vertex_count: int, edges: Iterable[Edge]
) -> list[list[int | None]]:
    """Return the matrix of shortest distances between all pairs of vertices.

    Edges are directed; of parallel edges the lightest counts. Raises
    NegativeCycleError if the graph holds a negative cycle.
    """
    edge_list = _validated(vertex_count, edges)
    table: list[list[float]] = [
        [0 if i == j else math.inf for j in range(vertex_count)]
        for i in range(vertex_count)
    ]
    for u, v, weight in edge_list:
        if weight < table[u][v]:
            table[u][v] = weight
    for via, via_row in enumerate(table):
        for row in table:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for target, onward in enumerate(via_row):
                if to_via + onward < row[target]:
                    row[target] = to_via + onward
    if any(row[i] < 0 for i, row in enumerate(table)):
        raise NegativeCycleError("negative cycle present")
    return [
        [None if value == math.inf else int(value) for value in row] for row in table
    ]