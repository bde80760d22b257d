"""Graph and grid traversal problems."""

from __future__ import annotations

from collections import deque
from typing import Iterable

_POSITION_LIMIT = 100_000


def _adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    graph: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for u, v in edges:
        for end in (u, v):
            if not 1 <= end <= vertex_count:
                raise ValueError(f"vertex {end} is outside 1..{vertex_count}")
        graph[u].append(v)
        graph[v].append(u)
    return graph


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")


def _reach(graph: list[list[int]], start: int, visited: set[int]) -> list[int]:
    visited.add(start)
    order = [start]
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in graph[current]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def count_worm_groups(
    width: int, height: int, cabbages: Iterable[tuple[int, int]]
) -> int:
    """Count 4-connected groups of cabbages planted at ``(x, y)`` in a field."""
    remaining: set[tuple[int, int]] = set()
    for x, y in cabbages:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        remaining.add((x, y))

    groups = 0
    while remaining:
        groups += 1
        queue = deque([remaining.pop()])
        while queue:
            x, y = queue.popleft()
            for cell in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if cell in remaining:
                    remaining.remove(cell)
                    queue.append(cell)
    return groups


def count_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count connected components of an undirected graph on vertices 1..n."""
    graph = _adjacency(vertex_count, edges)
    visited: set[int] = set()
    components = 0
    for vertex in range(1, vertex_count + 1):
        if vertex not in visited:
            _reach(graph, vertex, visited)
            components += 1
    return components


def dfs_order(
    vertex_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Depth-first visit order from ``start``, smaller neighbours first."""
    graph = _adjacency(vertex_count, edges)
    _check_vertex(start, vertex_count)
    for neighbours in graph:
        neighbours.sort()

    visited = {start}
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()
    return order


def bfs_order(
    vertex_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Breadth-first visit order from ``start``, smaller neighbours first."""
    graph = _adjacency(vertex_count, edges)
    _check_vertex(start, vertex_count)
    for neighbours in graph:
        neighbours.sort()
    return _reach(graph, start, set())


def hide_and_seek(start: int, target: int) -> int:
    """Fewest seconds to walk from ``start`` to ``target`` by steps of -1, +1 or x2."""
    for position in (start, target):
        if not 0 <= position <= _POSITION_LIMIT:
            raise ValueError(f"position {position} is outside 0..{_POSITION_LIMIT}")

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        position, elapsed = queue.popleft()
        if position == target:
            return elapsed
        for following in (position - 1, position + 1, position * 2):
            if 0 <= following <= _POSITION_LIMIT and following not in seen:
                seen.add(following)
                queue.append((following, elapsed + 1))
    raise ValueError(f"position {target} cannot be reached")


def infected_count(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """How many computers besides computer 1 catch the worm from it."""
    if vertex_count < 1:
        raise ValueError("the network needs at least one computer")
    graph = _adjacency(vertex_count, edges)
    return len(_reach(graph, 1, set())) - 1