"""Placing non-attacking queens on a square board."""

from __future__ import annotations

from collections.abc import Collection, Iterator

_DIRECTIONS = ((1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1))


def is_queen_safe(
    queens: Collection[tuple[int, int]], size: int, row: int, col: int
) -> bool:
    """Return True if no other queen in ``queens`` attacks the cell (row, col)."""
    for d_row, d_col in _DIRECTIONS:
        r, c = row + d_row, col + d_col
        while 0 <= r < size and 0 <= c < size:
            if (r, c) in queens:
                return False
            r += d_row
            c += d_col
    return True


def n_queens_solutions(size: int) -> Iterator[list[tuple[int, int]]]:
    """Yield every placement of ``size`` non-attacking queens.

    Each solution is a list of (row, col) cells in row-major order, and the
    solutions come in lexicographic order of those cells. Raises ValueError
    for a negative size.
    """
    if size < 0:
        raise ValueError("board size must not be negative")
    placed: list[tuple[int, int]] = []

    def place(row: int) -> Iterator[list[tuple[int, int]]]:
        if row == size:
            yield list(placed)
            return
        for col in range(size):
            if is_queen_safe(placed, size, row, col):
                placed.append((row, col))
                yield from place(row + 1)
                placed.pop()

    yield from place(0)