"""Binary search tree drills: updates, traversals, trimming and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node holding a value and its two children."""

    value: int
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """An unbalanced binary search tree of integers.

    Equal values go to the right subtree unless ``duplicates_left`` is set,
    in which case they go to the left.
    """

    def __init__(self, values: Iterable[int] = (), duplicates_left: bool = False) -> None:
        self.root: Node | None = None
        self.duplicates_left = duplicates_left
        for value in values:
            self.insert(value)

    def _goes_left(self, node: Node, value: int) -> bool:
        if self.duplicates_left:
            return not node.value < value
        return node.value > value

    def insert(self, value: int) -> int:
        """Insert ``value`` and return the depth at which it was placed (root is 0)."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return 0
        node = self.root
        depth = 1
        while True:
            if self._goes_left(node, value):
                if node.left is None:
                    node.left = new
                    return depth
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return depth
                node = node.right
            depth += 1

    def _replace(self, parent: Node | None, on_left: bool, child: Node | None) -> None:
        if parent is None:
            self.root = child
        elif on_left:
            parent.left = child
        else:
            parent.right = child

    def delete(self, value: int) -> bool:
        """Remove one node holding ``value``; return whether one was found.

        A node with two children takes the smallest value of its right subtree,
        which is then removed from that subtree.
        """
        parent: Node | None = None
        on_left = False
        node = self.root
        while node is not None:
            if node.value > value:
                parent, on_left, node = node, True, node.left
            elif node.value < value:
                parent, on_left, node = node, False, node.right
            elif node.left is None or node.right is None:
                self._replace(parent, on_left, node.right if node.left is None else node.left)
                return True
            else:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.value = successor.value
                value = successor.value
                parent, on_left, node = node, False, node.right
        return False

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return len(self.preorder())

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order."""
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        reversed_order: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed_order[::-1]

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path; -1 when empty."""
        levels = -1
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in (node.left, node.right) if child]
        return levels

    def trim(self, low: int, high: int) -> None:
        """Drop every node whose value lies outside ``low..high``, keeping the rest ordered."""
        root = self.root
        while root is not None and not low <= root.value <= high:
            root = root.right if root.value < low else root.left
        self.root = root
        if root is None:
            return
        node: Node | None = root
        while node is not None:
            while node.left is not None and node.left.value < low:
                node.left = node.left.right
            node = node.left
        node = root
        while node is not None:
            while node.right is not None and node.right.value > high:
                node.right = node.right.left
            node = node.right

    def lowest_common_ancestor(self, a: int, b: int) -> int | None:
        """Return the value of the node where the search paths to ``a`` and ``b`` split.

        A node holding ``a`` or ``b`` on the way is the answer. Returns ``None``
        when the search falls off the tree.
        """
        smaller, larger = min(a, b), max(a, b)
        node = self.root
        while node is not None:
            if node.value in (a, b):
                return node.value
            if node.value < smaller:
                node = node.right
            elif node.value > larger:
                node = node.left
            else:
                return node.value
        return None

    def is_complete(self) -> bool:
        """Tell whether every level is full except the last, which fills from the left."""
        if self.root is None:
            return True
        queue = deque([self.root])
        gap_seen = False
        while queue:
            node = queue.popleft()
            if gap_seen and (node.left is not None or node.right is not None):
                return False
            if node.left is None and node.right is not None:
                return False
            if node.left is None or node.right is None:
                gap_seen = True
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return True

    def is_full(self) -> bool:
        """Tell whether every node has either no children or two."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if (node.left is None) != (node.right is None):
                return False
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return True