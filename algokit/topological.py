"""Topological ordering of directed graphs with Kahn's algorithm.

Graphs are adjacency lists: ``graph[v]`` lists the vertices that ``v`` has
edges to, and the vertices are ``0..len(graph)-1``.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

Graph = Sequence[Iterable[int]]


class CycleError(ValueError):
    """Raised when a graph with a cycle is asked for a topological order."""


def _in_degrees(graph: Graph) -> list[int]:
    degrees = [0] * len(graph)
    for neighbours in graph:
        for target in neighbours:
            if not 0 <= target < len(graph):
                raise IndexError(f"edge target {target} out of range")
            degrees[target] += 1
    return degrees


def _kahn_fifo(graph: Graph) -> list[int]:
    degrees = _in_degrees(graph)
    queue = deque(v for v, degree in enumerate(degrees) if degree == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in graph[vertex]:
            degrees[target] -= 1
            if degrees[target] == 0:
                queue.append(target)
    return order


def topological_order(graph: Graph) -> list[int]:
    """Return the vertices so that every edge points forward.

    Ready vertices are taken first come, first served. Raises CycleError if
    the graph has a cycle.
    """
    order = _kahn_fifo(graph)
    if len(order) != len(graph):
        raise CycleError("graph has a cycle")
    return order


def has_cycle(graph: Graph) -> bool:
    """Return True if the directed graph contains a cycle."""
    return len(_kahn_fifo(graph)) != len(graph)


def lexicographic_topological_order(graph: Graph) -> list[int]:
    """Return the smallest topological order, always taking the lowest ready
    vertex next. Raises CycleError if the graph has a cycle."""
    degrees = _in_degrees(graph)
    ready = [v for v, degree in enumerate(degrees) if degree == 0]
    heapq.heapify(ready)
    order: list[int] = []
    while ready:
        vertex = heapq.heappop(ready)
        order.append(vertex)
        for target in graph[vertex]:
            degrees[target] -= 1
            if degrees[target] == 0:
                heapq.heappush(ready, target)
    if len(order) != len(graph):
        raise CycleError("graph has a cycle")
    return order