"""Classic algorithm exercises: backtracking, search, dynamic programming,
graphs, heaps, binary search trees and an XOR trie."""

__version__ = "0.1.0"