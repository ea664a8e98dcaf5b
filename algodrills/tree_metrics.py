"""Measures over a binary search tree: diameter and best alternating sum."""

from __future__ import annotations

from algodrills.bst import BinarySearchTree, Node


def diameter(tree: BinarySearchTree) -> int:
    """Return the number of nodes on the longest path between two nodes.

    Only nodes with children are taken as turning points, so a tree of a
    single node, like an empty one, gives 0.
    """
    if tree.root is None:
        return 0
    best = 0
    depth: dict[int, int] = {}
    stack: list[tuple[Node, bool]] = [(tree.root, False)]
    while stack:
        node, expanded = stack.pop()
        children = [c for c in (node.left, node.right) if c is not None]
        if not children:
            depth[id(node)] = 1
            continue
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
            continue
        left = depth.pop(id(node.left), 0) if node.left is not None else 0
        right = depth.pop(id(node.right), 0) if node.right is not None else 0
        best = max(best, left + right + 1)
        depth[id(node)] = max(left, right) + 1
    return best


def max_alternating_sum(tree: BinarySearchTree) -> int:
    """Return the largest sum of values with no two chosen nodes in a parent-child pair.

    Negative nodes are never chosen, and a negative node's left subtree is
    passed over. Results are remembered per value, so equal values share one.
    A tree with no positive value gives 0.
    """
    root = tree.root
    if root is None or max(tree.preorder()) <= 0:
        return 0
    memo: dict[int, int] = {}

    def best(node: Node | None) -> int:
        if node is None:
            return 0
        if node.value < 0:
            return best(node.right)
        if node.left is None and node.right is None:
            return max(node.value, 0)
        if node.value in memo:
            return memo[node.value]
        skipped = best(node.left) + best(node.right)
        taken = node.value
        for child in (node.left, node.right):
            if child is not None:
                taken += best(child.left) + best(child.right)
        memo[node.value] = max(taken, skipped)
        return memo[node.value]

    return best(root)