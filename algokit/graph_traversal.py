"""Breadth-first and depth-first traversals, bipartite checks, transitive
closure and connected regions on a grid.

Graphs are adjacency lists: ``graph[v]`` is an iterable of the neighbours of
vertex ``v``, and the vertices are ``0..len(graph)-1``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Graph = Sequence[Iterable[int]]

_GRID_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def undirected_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Build adjacency lists for an undirected graph.

    Each vertex lists its neighbours with the most recently added edge
    first. Raises ValueError for a negative count and IndexError for an
    endpoint outside ``0..vertex_count-1``.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        if not (0 <= src < vertex_count and 0 <= dest < vertex_count):
            raise IndexError(f"edge ({src}, {dest}) has an endpoint out of range")
        adjacency[src].append(dest)
        adjacency[dest].append(src)
    for neighbours in adjacency:
        neighbours.reverse()
    return adjacency


def _bfs(graph: Graph, start: int, visited: set[int]) -> list[int]:
    visited.add(start)
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def _dfs(graph: Graph, start: int, visited: set[int]) -> list[int]:
    visited.add(start)
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()
    return order


def _dfs_stack(graph: Graph, start: int, visited: set[int]) -> list[int]:
    visited.add(start)
    stack = [start]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return order


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError("start vertex out of range")


def bfs_order(graph: Graph, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_start(graph, start)
    return _bfs(graph, start, set())


def count_reachable(graph: Graph, start: int) -> int:
    """Return how many vertices are reachable from ``start``, itself included."""
    return len(bfs_order(graph, start))


def bfs_all(graph: Graph) -> list[int]:
    """Visit every vertex breadth-first, starting a new search at each
    unvisited vertex in index order."""
    visited: set[int] = set()
    order: list[int] = []
    for vertex in range(len(graph)):
        if vertex not in visited:
            order.extend(_bfs(graph, vertex, visited))
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order."""
    _check_start(graph, start)
    return _dfs(graph, start, set())


def dfs_recursive_all(graph: Graph) -> list[int]:
    """Visit every vertex depth-first, descending into each neighbour as soon
    as it is met, starting a new search at each unvisited vertex."""
    visited: set[int] = set()
    order: list[int] = []
    for vertex in range(len(graph)):
        if vertex not in visited:
            order.extend(_dfs(graph, vertex, visited))
    return order


def dfs_stack_all(graph: Graph) -> list[int]:
    """Visit every vertex with an explicit stack.

    Neighbours are marked when pushed, so each vertex is pushed once and the
    last neighbour pushed is visited next.
    """
    visited: set[int] = set()
    order: list[int] = []
    for vertex in range(len(graph)):
        if vertex not in visited:
            order.extend(_dfs_stack(graph, vertex, visited))
    return order


def is_bipartite(matrix: Sequence[Sequence[int]], source: int = 0) -> bool:
    """Return True if the component of ``source`` in an adjacency matrix can
    be two-coloured.

    A self-loop makes the graph not bipartite. Raises ValueError if the
    matrix is not square.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise IndexError("source vertex out of range")
    colour: list[int | None] = [None] * n
    colour[source] = 1
    queue = deque([source])
    while queue:
        u = queue.popleft()
        if matrix[u][u]:
            return False
        for v, edge in enumerate(matrix[u]):
            if not edge:
                continue
            if colour[v] is None:
                colour[v] = 1 - colour[u]  # type: ignore[operator]
                queue.append(v)
            elif colour[v] == colour[u]:
                return False
    return True


def transitive_closure(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[bool]]:
    """Return the reachability matrix of a directed graph.

    Entry (i, j) is True when j can be reached from i; every vertex reaches
    itself.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        if not (0 <= src < vertex_count and 0 <= dest < vertex_count):
            raise IndexError(f"edge ({src}, {dest}) has an endpoint out of range")
        adjacency[src].append(dest)
    closure: list[list[bool]] = []
    for vertex in range(vertex_count):
        reachable = _dfs(adjacency, vertex, set())
        row = [False] * vertex_count
        for target in reachable:
            row[target] = True
        closure.append(row)
    return closure


class GridMap:
    """A rows-by-cols grid of weights, all zero at first.

    Cells are addressed as ``(row, col)`` with zero-based indices.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._cells = [[0] * cols for _ in range(rows)]

    def _check(self, cell: tuple[int, int]) -> tuple[int, int]:
        row, col = cell
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell {cell!r} is outside the grid")
        return row, col

    def __getitem__(self, cell: tuple[int, int]) -> int:
        row, col = self._check(cell)
        return self._cells[row][col]

    def __setitem__(self, cell: tuple[int, int], weight: int) -> None:
        row, col = self._check(cell)
        self._cells[row][col] = weight

    def _region(self, start: tuple[int, int], seen: set[tuple[int, int]]) -> set[tuple[int, int]]:
        region = {start}
        seen.add(start)
        stack = [start]
        while stack:
            row, col = stack.pop()
            for d_row, d_col in _GRID_STEPS:
                r, c = row + d_row, col + d_col
                if (
                    0 <= r < self.rows
                    and 0 <= c < self.cols
                    and self._cells[r][c]
                    and (r, c) not in seen
                ):
                    seen.add((r, c))
                    region.add((r, c))
                    stack.append((r, c))
        return region

    def regions(self) -> list[set[tuple[int, int]]]:
        """Return the groups of non-zero cells joined up, down, left or right.

        Regions are ordered by their first cell in row-major order.
        """
        seen: set[tuple[int, int]] = set()
        found: list[set[tuple[int, int]]] = []
        for row in range(self.rows):
            for col in range(self.cols):
                if self._cells[row][col] and (row, col) not in seen:
                    found.append(self._region((row, col), seen))
        return found