"""Binary-search drills."""

from __future__ import annotations


def integer_cube_root(a: int) -> int:
    """Return the integer cube root of ``a`` found by binary search.

    The search looks for ``m`` with ``abs(a) // m // m == m`` and keeps the sign
    of ``a``. When no such ``m`` is met along the search path the result is 0.
    """
    if a == 0:
        return 0
    magnitude = abs(a)
    low, high = 1, magnitude
    while low <= high:
        mid = (low + high) // 2
        quotient = magnitude // mid // mid
        if quotient == mid:
            return mid if a > 0 else -mid
        if quotient < mid:
            high = mid - 1
        else:
            low = mid + 1
    return 0