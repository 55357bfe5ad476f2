"""Graph traversal and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    source: int
    target: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when shortest distances are unbounded because of a negative cycle."""


class Graph:
    """A directed graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | tuple], source: int
) -> list[float]:
    """Return shortest distances from ``source``; unreachable vertices get inf.

    Raises NegativeCycleError if a reachable negative cycle exists.
    """
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} out of range")
    edge_list = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    dist = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            candidate = dist[edge.source] + edge.weight
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                changed = True
        if not changed:
            break
    for edge in edge_list:
        if dist[edge.source] + edge.weight < dist[edge.target]:
            raise NegativeCycleError("graph contains a negative cycle")
    return dist


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances over an adjacency matrix.

    A zero entry means there is no edge. Unreachable vertices get inf.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise IndexError(f"source {source} out of range")
    if any(weight < 0 for row in matrix for weight in row):
        raise ValueError("weights must not be negative")
    dist = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not done[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist