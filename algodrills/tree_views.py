"""Views of a binary search tree: levels, sides, columns and diagonals."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator

from algodrills.bst import BinarySearchTree, Node


def _levels(tree: BinarySearchTree) -> list[list[Node]]:
    levels: list[list[Node]] = []
    level = [tree.root] if tree.root is not None else []
    while level:
        levels.append(level)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _walk(tree: BinarySearchTree) -> Iterator[tuple[Node, int, int, int]]:
    """Yield ``(node, level, column, diagonal)`` in node, left, right order."""
    stack = [(tree.root, 0, 0, 0)] if tree.root is not None else []
    while stack:
        node, level, column, diagonal = stack.pop()
        yield node, level, column, diagonal
        if node.right is not None:
            stack.append((node.right, level + 1, column + 1, diagonal + 1))
        if node.left is not None:
            stack.append((node.left, level + 1, column - 1, diagonal))


def level_order(tree: BinarySearchTree) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    return [[node.value for node in level] for level in _levels(tree)]


def left_view(tree: BinarySearchTree) -> list[int]:
    """Return the leftmost value of every level."""
    return [level[0].value for level in _levels(tree)]


def right_view(tree: BinarySearchTree) -> list[int]:
    """Return the rightmost value of every level."""
    return [level[-1].value for level in _levels(tree)]


def top_view(tree: BinarySearchTree) -> list[int]:
    """Return, column by column from the left, the value nearest the root.

    When two nodes of one column share the shallowest level, the one met
    first in a node, left, right walk is kept.
    """
    best: dict[int, tuple[int, int]] = {}
    for node, level, column, _ in _walk(tree):
        if column not in best or best[column][1] > level:
            best[column] = (node.value, level)
    return [best[column][0] for column in sorted(best)]


def vertical_order(tree: BinarySearchTree) -> list[list[int]]:
    """Return the values of each column from the left, each column sorted ascending."""
    columns: dict[int, list[int]] = defaultdict(list)
    for node, _, column, _ in _walk(tree):
        columns[column].append(node.value)
    return [sorted(columns[column]) for column in sorted(columns)]


def diagonal_order(tree: BinarySearchTree) -> list[list[int]]:
    """Return the values of each down-left diagonal, each sorted descending.

    The root's diagonal comes first; a right child starts the next diagonal.
    """
    diagonals: dict[int, list[int]] = defaultdict(list)
    for node, _, _, diagonal in _walk(tree):
        diagonals[diagonal].append(node.value)
    return [sorted(diagonals[d], reverse=True) for d in sorted(diagonals)]