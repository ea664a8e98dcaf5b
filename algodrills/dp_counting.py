"""Counting drills solved by dynamic programming, all modulo ``MOD``."""

from __future__ import annotations

import math
from collections.abc import Iterable

MOD = 1_000_000_007

DOMINO_HARD_LIMIT = 10**6
BINARY_STRING_LIMIT = 10**5 + 1
DICE_SUM_LIMIT = 10**5
BINOMIAL_LIMIT = 2000


def _check_range(name: str, value: int, low: int, high: int | None = None) -> None:
    if value < low or (high is not None and value > high):
        bound = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise ValueError(f"{name} must be {bound}, got {value}")


def domino_arrangements_easy(n: int) -> int:
    """Count arrangements where f(0..4) = 1 and f(n) = f(n-1) + f(n-5)."""
    _check_range("n", n, 0)
    window = [1, 1, 1, 1, 1]
    if n < 5:
        return 1
    for _ in range(5, n + 1):
        window = window[1:] + [(window[-1] + window[0]) % MOD]
    return window[-1]


def domino_arrangements_hard(n: int) -> int:
    """Count arrangements where f(n) = f(n-1) + f(n-2) + 8 f(n-5), f(0) = f(1) = 1."""
    _check_range("n", n, 0, DOMINO_HARD_LIMIT)
    values = [1, 1]
    for i in range(2, n + 1):
        current = values[i - 1] + values[i - 2]
        if i >= 5:
            current += 8 * values[i - 5]
        values.append(current % MOD)
    return values[n]


def binary_strings_without_adjacent_ones(n: int) -> int:
    """Count binary strings of length ``n`` with no two adjacent ones."""
    _check_range("n", n, 1, BINARY_STRING_LIMIT)
    ending_zero, ending_one = 1, 1
    for _ in range(n - 1):
        ending_zero, ending_one = (ending_zero + ending_one) % MOD, ending_zero
    return (ending_zero + ending_one) % MOD


def factorial_mod(n: int) -> int:
    """Return ``n!`` modulo ``MOD``."""
    _check_range("n", n, 0)
    result = 1
    for i in range(2, n + 1):
        result = result * i % MOD
    return result


def _validated(values: Iterable[int], k: int) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    if any(v < 0 for v in items):
        raise ValueError("values must not be negative")
    _check_range("k", k, 0)
    return items


def count_subsets_with_sum(values: Iterable[int], k: int) -> int:
    """Count subsets of ``values`` (by position) whose sum is ``k``, modulo ``MOD``.

    A target of 0 always counts exactly one subset, the empty one.
    """
    first, *rest = _validated(values, k)
    counts = [1] + [0] * k
    if first <= k:
        counts[first] = 1
    for value in rest:
        counts = [
            c if j == 0 or j < value else (c + counts[j - value]) % MOD
            for j, c in enumerate(counts)
        ]
    return counts[k]


def has_subset_sum(values: Iterable[int], k: int) -> bool:
    """Tell whether some subset of ``values`` sums to ``k``."""
    first, *rest = _validated(values, k)
    reachable = [True] + [False] * k
    if first <= k:
        reachable[first] = True
    for value in rest:
        reachable = [
            r or (j >= value and reachable[j - value])
            for j, r in enumerate(reachable)
        ]
    return reachable[k]


def decode_ways(s: str) -> int:
    """Count ways to split a digit string into letter codes, modulo ``MOD``.

    A pair of digits may be read together when it starts with '1', or with '2'
    followed by a digit below '6'.
    """
    after_next, after = 1, 1  # ways for the suffixes starting two and one places on
    next_char = None
    for ch in reversed(s):
        if next_char is None:
            current = after
        else:
            current = after
            if ch == "1" or (ch == "2" and next_char < "6"):
                current = (current + after_next) % MOD
        after_next, after = after, current
        next_char = ch
    return after


def dice_roll_sequences(n: int) -> int:
    """Count ordered sequences of six-sided die rolls summing to ``n``, modulo ``MOD``."""
    _check_range("n", n, 0, DICE_SUM_LIMIT)
    window = [1]
    for _ in range(n):
        window = (window + [sum(window) % MOD])[-6:]
    return window[-1]


def matrix_paths(rows: int, cols: int, blocked: Iterable[tuple[int, int]] = ()) -> int:
    """Count paths from the top-left to the bottom-right cell, modulo ``MOD``.

    A step goes down, right or diagonally down-right, and never onto a blocked cell.
    """
    _check_range("rows", rows, 1)
    _check_range("cols", cols, 1)
    walls = {(r, c) for r, c in blocked}
    for r, c in walls:
        if not (0 <= r < rows and 0 <= c < cols):
            raise ValueError(f"blocked cell {(r, c)} lies outside the grid")
    if (rows - 1, cols - 1) in walls:
        return 0

    below = [0] * (cols + 1)
    for r in reversed(range(rows)):
        current = [0] * (cols + 1)
        for c in reversed(range(cols)):
            if (r, c) in walls:
                continue
            if r == rows - 1 and c == cols - 1:
                current[c] = 1
            else:
                current[c] = (below[c] + current[c + 1] + below[c + 1]) % MOD
        below = current
    return below[0]


def binomial_mod(n: int, r: int) -> int:
    """Return ``C(n, r)`` modulo ``MOD`` for ``0 <= n, r <= 2000``; zero when ``r > n``."""
    _check_range("n", n, 0, BINOMIAL_LIMIT)
    _check_range("r", r, 0, BINOMIAL_LIMIT)
    return math.comb(n, r) % MOD