"""Optimisation drills solved by dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate

DIE_FACES = 6
PAINT_COLOURS = 3


def _rectangular(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one cell")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def max_apples(grid: Sequence[Sequence[int]]) -> int:
    """Return the best total collected walking right or down from the top-left
    to the bottom-right cell."""
    first, *rest = _rectangular(grid)
    previous = list(accumulate(first))
    for row in rest:
        current: list[int] = []
        for value, above in zip(row, previous):
            current.append(value + (above if not current else max(above, current[-1])))
        previous = current
    return previous[-1]


def max_sum_no_double_skip(values: Iterable[int]) -> int:
    """Return the best sum of chosen values when two neighbours may not both be skipped."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    taken, skipped = items[0], 0
    for value in items[1:]:
        taken, skipped = value + max(taken, skipped), taken
    return max(taken, skipped)


def min_job_time(
    first_machine: Sequence[int], second_machine: Sequence[int], switch_cost: int
) -> int:
    """Return the least time to run jobs in order on two machines.

    Each job takes the time its machine lists for it; moving to the other
    machine between jobs costs ``switch_cost``.
    """
    if len(first_machine) != len(second_machine):
        raise ValueError("both machines must list a time for every job")
    if not first_machine:
        raise ValueError("there must be at least one job")
    on_first, on_second = first_machine[0], second_machine[0]
    for a, b in zip(first_machine[1:], second_machine[1:]):
        on_first, on_second = (
            a + min(on_first, switch_cost + on_second),
            b + min(on_second, switch_cost + on_first),
        )
    return min(on_first, on_second)


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the best total value of ``(weight, value)`` items fitting in ``capacity``.

    Each item is used at most once; an empty choice is worth 0.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    pairs = [(int(w), int(v)) for w, v in items]
    if any(w < 0 for w, _ in pairs):
        raise ValueError("item weights must not be negative")
    if not pairs:
        return 0
    (weight, value), *rest = pairs
    previous = [value if j >= weight else 0 for j in range(capacity + 1)]
    best = max(0, max(previous))
    for weight, value in rest:
        current = [0] + [
            max(previous[j], value + previous[j - weight]) if j >= weight else previous[j]
            for j in range(1, capacity + 1)
        ]
        best = max(best, max(current))
        previous = current
    return best


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def min_cost_dice_rolls(n: int, costs: Sequence[int]) -> int:
    """Return the least cost of die rolls summing to ``n``.

    ``costs[f - 1]`` is the price of rolling face ``f``.
    """
    if len(costs) != DIE_FACES:
        raise ValueError(f"costs must list {DIE_FACES} faces, got {len(costs)}")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    best = [0]
    for total in range(1, n + 1):
        best.append(
            min(
                best[total - face] + cost
                for face, cost in enumerate(costs, start=1)
                if face <= total
            )
        )
    return best[n]


def min_painting_cost(costs: Iterable[Sequence[int]]) -> int:
    """Return the least cost to paint a row of houses, neighbours in different colours.

    Each entry of ``costs`` gives one house's price for each of the three colours.
    """
    houses = [list(house) for house in costs]
    if not houses:
        raise ValueError("there must be at least one house")
    if any(len(house) != PAINT_COLOURS for house in houses):
        raise ValueError(f"every house must list {PAINT_COLOURS} colour costs")
    previous = houses[0]
    for house in houses[1:]:
        previous = [
            price + min(p for other, p in enumerate(previous) if other != colour)
            for colour, price in enumerate(house)
        ]
    return min(previous)


def max_wrapping_path(grid: Sequence[Sequence[int]]) -> int:
    """Return the best sum of a left-to-right path through the grid.

    The path starts in any row of the first column and each step moves one
    column right into the same row or a neighbouring one; the top and bottom
    rows count as neighbours.
    """
    rows = _rectangular(grid)
    height = len(rows)
    columns = list(zip(*rows))
    best = list(columns[0])
    for column in columns[1:]:
        best = [
            value + max(best[r - 1], best[r], best[(r + 1) % height])
            for r, value in enumerate(column)
        ]
    return max(best)


def max_problem_points(problems: Sequence[tuple[int, int]]) -> int:
    """Return the most points from ``(points, skip)`` problems taken in order.

    Solving a problem earns its points and forces the next ``skip`` problems
    to be passed over. The last problem's points always count when reached.
    """
    items = [(int(p), int(s)) for p, s in problems]
    if not items:
        raise ValueError("there must be at least one problem")
    if any(s < 0 for _, s in items):
        raise ValueError("skip counts must not be negative")
    count = len(items)
    best = [0] * count
    best[-1] = items[-1][0]
    for i in range(count - 2, -1, -1):
        points, skip = items[i]
        following = i + 1 + skip
        solved = points + (best[following] if following < count else 0)
        best[i] = max(solved, best[i + 1])
    return best[0]