"""Flood fill on a grid, spreading to all eight neighbouring cells."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

_STEPS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def flood_fill(
    grid: Iterable[Iterable[Any]], row: int, col: int, replacement: Any
) -> list[list[Any]]:
    """Return a copy of ``grid`` with the region holding (row, col) recoloured.

    The region is every cell of the starting cell's value reachable through
    horizontal, vertical or diagonal steps. The input is not modified.
    Raises IndexError if the starting cell is outside the grid.
    """
    cells = [list(line) for line in grid]
    if not (0 <= row < len(cells) and 0 <= col < len(cells[row])):
        raise IndexError("start cell is outside the grid")
    target = cells[row][col]
    if target == replacement:
        return cells
    cells[row][col] = replacement
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        for d_row, d_col in _STEPS:
            nr, nc = r + d_row, c + d_col
            if 0 <= nr < len(cells) and 0 <= nc < len(cells[nr]) and cells[nr][nc] == target:
                cells[nr][nc] = replacement
                queue.append((nr, nc))
    return cells