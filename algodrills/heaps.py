"""Heap drills: running median, k-th smallest and rod joining."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def running_medians(values: Iterable[int]) -> list[int]:
    """Return the lower median of every prefix of ``values``."""
    lower: list[int] = []  # max-heap of the smaller half, stored negated
    upper: list[int] = []  # min-heap of the larger half
    medians: list[int] = []
    for value in values:
        if lower and value > -lower[0]:
            heapq.heappush(upper, value)
        else:
            heapq.heappush(lower, -value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        if len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        medians.append(-lower[0])
    return medians


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value, counting from 1."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    return heapq.nsmallest(k, items)[-1]


def min_rod_connection_cost(lengths: Iterable[int]) -> int:
    """Return the least total cost of joining rods, each join costing the joined length."""
    heap = list(lengths)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        total += joined
        heapq.heappush(heap, joined)
    return total