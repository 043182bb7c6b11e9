"""Connectivity, closeness and traversal order on undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Adjacency lists indexed 1..n; index 0 is unused."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _distances(adjacency: list[list[int]], source: int) -> dict[int, int]:
    distance = {source: 0}
    queue = deque([source])
    while queue:
        here = queue.popleft()
        for nxt in adjacency[here]:
            if nxt not in distance:
                distance[nxt] = distance[here] + 1
                queue.append(nxt)
    return distance


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among vertices 1..n."""
    adjacency = _adjacency(n, edges)
    seen: set[int] = set()
    components = 0
    for vertex in range(1, n + 1):
        if vertex in seen:
            continue
        components += 1
        seen.update(_distances(adjacency, vertex))
    return components


def kevin_bacon(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """The person with the smallest sum of distances to everyone else.

    Ties go to the smallest number. The graph must be connected.
    """
    if n < 1:
        raise ValueError("there must be at least one person")
    adjacency = _adjacency(n, edges)
    best_person = 0
    best_total = None
    for person in range(1, n + 1):
        distance = _distances(adjacency, person)
        if len(distance) != n:
            raise ValueError("graph is not connected")
        total = sum(distance.values())
        if best_total is None or total < best_total:
            best_person, best_total = person, total
    return best_person


def dfs_order(graph: Mapping[int, Iterable[int]], start: int) -> list[int]:
    """Depth-first visiting order from ``start``, smaller neighbours first."""
    order: list[int] = []
    seen: set[int] = set()
    stack = [iter([start])]
    while stack:
        for vertex in stack[-1]:
            if vertex not in seen:
                seen.add(vertex)
                order.append(vertex)
                stack.append(iter(sorted(graph.get(vertex, ()))))
                break
        else:
            stack.pop()
    return order