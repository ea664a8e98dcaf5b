"""Backtracking drills: string interleavings and the N-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator


def _interleave(a: str, b: str) -> Iterator[str]:
    if not a or not b:
        yield a + b
        return
    take_a = (a[0], a[1:], b)
    take_b = (b[0], a, b[1:])
    # The smaller next character is tried first; ties favour the second string.
    order = (take_a, take_b) if a[0] < b[0] else (take_b, take_a)
    for head, rest_a, rest_b in order:
        for tail in _interleave(rest_a, rest_b):
            yield head + tail


def interleavings(a: str, b: str) -> list[str]:
    """Return every interleaving of ``a`` and ``b`` that keeps each string's order.

    At each step the branch that takes the smaller next character is explored
    first, so strings of distinct characters come out in lexicographic order.
    """
    return list(_interleave(a, b))


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Return all placements of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each solution is a tuple giving the queen's column for every row, and the
    solutions are listed in the order a row-by-row search finds them.
    An empty list means the board has no solution.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")

    solutions: list[tuple[int, ...]] = []
    placed: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            col != other_col and abs(row - other_row) != abs(col - other_col)
            for other_row, other_col in enumerate(placed)
        )

    def place(row: int) -> None:
        if row == n:
            solutions.append(tuple(placed))
            return
        for col in range(n):
            if safe(row, col):
                placed.append(col)
                place(row + 1)
                placed.pop()

    place(0)
    return solutions