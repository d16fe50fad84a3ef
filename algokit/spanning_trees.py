"""Minimum spanning trees with Kruskal's and Prim's algorithms.

Vertices are ``0..vertex_count-1`` and edges are undirected ``(u, v, weight)``
triples. Each function returns the total weight and the chosen edges in the
order they were taken.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algokit.disjoint_set import DisjointSet

Edge = tuple[int, int, int]


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Return the cost and edges of a minimum spanning forest.

    Edges are considered by weight, then by endpoints; an edge joining two
    already connected vertices is skipped.
    """
    forest = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    cost = 0
    for weight, u, v in sorted((w, u, v) for u, v, w in edges):
        if forest.union(u, v):
            chosen.append((u, v, weight))
            cost += weight
    return cost, chosen


def prim(vertex_count: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Return the cost and edges of a minimum spanning tree grown from vertex 0.

    Each chosen edge is ``(tree_vertex, new_vertex, weight)``. Raises
    ValueError if the graph is not connected.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(f"edge ({u}, {v}) has an endpoint out of range")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    if vertex_count == 0:
        return 0, []
    in_tree = [False] * vertex_count
    heap: list[tuple[int, int, int]] = [(0, 0, -1)]
    chosen: list[Edge] = []
    cost = 0
    while heap:
        weight, vertex, parent = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        if parent >= 0:
            chosen.append((parent, vertex, weight))
            cost += weight
        for neighbour, edge_weight in adjacency[vertex]:
            if not in_tree[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour, vertex))
    if not all(in_tree):
        raise ValueError("graph is not connected")
    return cost, chosen