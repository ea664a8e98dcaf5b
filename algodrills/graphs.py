"""Graph drills: cycles, components, reachability, knight moves and islands."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]

_KNIGHT_MOVES = (
    (2, -1),
    (2, 1),
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (1, -2),
    (-1, 2),
    (1, 2),
)

_NEIGHBOURS_8 = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _checked_edges(n: int, edges: Iterable[Edge], first: int = 1) -> list[Edge]:
    if n < 0:
        raise ValueError(f"node count must not be negative, got {n}")
    pairs = [(int(u), int(v)) for u, v in edges]
    for u, v in pairs:
        if not (first <= u <= n and first <= v <= n):
            raise ValueError(f"edge {(u, v)} has a node outside {first}..{n}")
    return pairs


def _check_node(name: str, node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"{name} {node} is outside 1..{n}")


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, node: int) -> int:
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already one."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True

    def size_of(self, node: int) -> int:
        return self._size[self.find(node)]


def _component_sizes(n: int, edges: Iterable[Edge]) -> list[int]:
    sets = _DisjointSets(n + 1)
    for u, v in _checked_edges(n, edges):
        sets.union(u, v)
    roots = {sets.find(node) for node in range(1, n + 1)}
    return [sets.size_of(root) for root in roots]


def is_forest(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the undirected graph on nodes ``1..n`` has no cycle.

    A self-loop is a cycle; repeated edges between the same two nodes are not.
    """
    pairs = _checked_edges(n, edges)
    sets = _DisjointSets(n + 1)
    seen: set[frozenset[int]] = set()
    for u, v in pairs:
        if u == v:
            return False
        key = frozenset((u, v))
        if key in seen:
            continue
        seen.add(key)
        if not sets.union(u, v):
            return False
    return True


def has_undirected_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the undirected graph on nodes ``1..n`` contains a cycle."""
    return not is_forest(n, edges)


def has_directed_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the directed graph on nodes ``0..n`` contains a cycle."""
    pairs = _checked_edges(n, edges, first=0)
    successors: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in pairs:
        successors[u].append(v)

    unseen, active, done = 0, 1, 2
    state = [unseen] * (n + 1)
    for root in range(n + 1):
        if state[root] != unseen:
            continue
        state[root] = active
        stack = [(root, iter(successors[root]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if state[nxt] == active:
                    return True
                if state[nxt] == unseen:
                    state[nxt] = active
                    stack.append((nxt, iter(successors[nxt])))
                    break
            else:
                state[node] = done
                stack.pop()
    return False


def count_unreachable_pairs(n: int, edges: Iterable[Edge]) -> int:
    """Count unordered pairs of nodes in ``1..n`` with no path between them."""
    total = 0
    earlier = 0
    for size in _component_sizes(n, edges):
        total += size * earlier
        earlier += size
    return total


def count_components(n: int, edges: Iterable[Edge]) -> int:
    """Count the connected components of the undirected graph on nodes ``1..n``."""
    return len(_component_sizes(n, edges))


def knight_distance(
    rows: int, cols: int, start: tuple[int, int], target: tuple[int, int]
) -> int | None:
    """Return the fewest knight moves from ``start`` to ``target``.

    Squares are numbered from 1 in both directions. Returns ``None`` when the
    target is off the board or cannot be reached.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"board must be at least 1x1, got {rows}x{cols}")
    start = (int(start[0]), int(start[1]))
    target = (int(target[0]), int(target[1]))
    if start == target:
        return 0

    def on_board(square: tuple[int, int]) -> bool:
        return 1 <= square[0] <= rows and 1 <= square[1] <= cols

    if not on_board(start):
        raise ValueError(f"start {start} is off the {rows}x{cols} board")
    if not on_board(target):
        return None

    distance = {start: 0}
    queue = deque([start])
    while queue:
        square = queue.popleft()
        steps = distance[square] + 1
        for dr, dc in _KNIGHT_MOVES:
            nxt = (square[0] + dr, square[1] + dc)
            if not on_board(nxt) or nxt in distance:
                continue
            if nxt == target:
                return steps
            distance[nxt] = steps
            queue.append(nxt)
    return None


def count_islands(grid: Sequence[str | Sequence[int]]) -> int:
    """Count islands of land in a grid, cells touching by side or corner joining.

    Rows may be digit strings such as ``"0110"`` or sequences of integers.
    An island starts at a cell holding 1 and spreads through any non-zero cell.
    """
    cells = [[int(ch) for ch in row] for row in grid]
    if cells and any(len(row) != len(cells[0]) for row in cells):
        raise ValueError("grid rows must all have the same length")
    height = len(cells)
    width = len(cells[0]) if cells else 0

    islands = 0
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value != 1:
                continue
            islands += 1
            row[c] = 0
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc in _NEIGHBOURS_8:
                    nr, nc = cr + dr, cc + dc
                    if 0 <= nr < height and 0 <= nc < width and cells[nr][nc]:
                        cells[nr][nc] = 0
                        stack.append((nr, nc))
    return islands


def is_path(n: int, edges: Iterable[Edge], source: int, target: int) -> bool:
    """Tell whether ``source`` and ``target`` are joined in the undirected graph."""
    pairs = _checked_edges(n, edges)
    _check_node("source", source, n)
    _check_node("target", target, n)
    if source == target:
        return True
    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in pairs:
        neighbours[u].append(v)
        neighbours[v].append(u)
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in neighbours[node]:
            if nxt in visited:
                continue
            if nxt == target:
                return True
            visited.add(nxt)
            queue.append(nxt)
    return False