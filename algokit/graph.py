"""Graph traversal, shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} outside the range 0..{count - 1}")


class UndirectedGraph:
    """An unweighted undirected graph over vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + "".join(f"{n} " for n in neighbours)
            for vertex, neighbours in enumerate(self._adjacency)
        )

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in insertion order."""
        _check_vertex(vertex, len(self))
        return list(self._adjacency[vertex])

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        _check_vertex(u, len(self))
        _check_vertex(v, len(self))
        self._adjacency[v].append(u)
        self._adjacency[u].append(v)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, len(self))
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        _check_vertex(start, len(self))
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order


class WeightedGraph:
    """An undirected graph with non-negative edge weights."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [
            [] for _ in range(vertex_count)
        ]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` with an edge of the given weight."""
        _check_vertex(u, len(self))
        _check_vertex(v, len(self))
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def shortest_distances(self, start: int) -> list[float]:
        """Return the distance from ``start`` to every vertex; math.inf if unreachable."""
        _check_vertex(start, len(self))
        dist: list[float] = [math.inf] * len(self)
        dist[start] = 0
        queue = [(0, start)]
        while queue:
            d, u = heapq.heappop(queue)
            if d > dist[u]:
                continue
            for v, weight in self._adjacency[u]:
                candidate = d + weight
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(queue, (candidate, v))
        return dist


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    sets = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen