"""A binary trie for finding the largest XOR of two values."""

from __future__ import annotations

from collections.abc import Iterable


class XorTrie:
    """A trie over the low ``bits`` bits of non-negative integers."""

    def __init__(self, bits: int) -> None:
        if bits < 1:
            raise ValueError(f"bits must be at least 1, got {bits}")
        self.bits = bits
        self._root: list[list | None] = [None, None]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _check(self, value: int) -> None:
        if value < 0 or value.bit_length() > self.bits:
            raise ValueError(f"{value} does not fit in {self.bits} unsigned bits")

    def _bits_of(self, value: int) -> list[int]:
        return [(value >> i) & 1 for i in reversed(range(self.bits))]

    def insert(self, value: int) -> None:
        """Add ``value`` to the trie."""
        self._check(value)
        node = self._root
        for bit in self._bits_of(value):
            if node[bit] is None:
                node[bit] = [None, None]
            node = node[bit]
        self._size += 1

    def best_xor(self, value: int) -> int:
        """Return the largest ``value ^ x`` over the values ``x`` in the trie."""
        self._check(value)
        if not self._size:
            raise ValueError("the trie holds no values")
        node = self._root
        result = 0
        for bit in self._bits_of(value):
            result <<= 1
            if node[1 - bit] is not None:
                result |= 1
                node = node[1 - bit]
            else:
                node = node[bit]
        return result


def max_pair_xor(values: Iterable[int]) -> int:
    """Return the largest XOR of two of ``values`` (a value may pair with itself).

    An empty input gives 0.
    """
    items = list(values)
    if not items:
        return 0
    if any(v < 0 for v in items):
        raise ValueError("values must not be negative")
    trie = XorTrie(max(1, max(v.bit_length() for v in items)))
    for value in items:
        trie.insert(value)
    return max(trie.best_xor(value) for value in items)