"""Undirected or directed graphs with breadth-first search and shortest paths."""

from __future__ import annotations

from bisect import insort_right
from collections import deque

INF = -1
"""Distance reported for a vertex that the last search did not reach."""

NIL = 0
"""Parent or source reported when there is none."""


class GraphError(ValueError):
    """Raised when a graph operation is called without its precondition."""


class Graph:
    """A graph on the vertices ``1..order`` with sorted adjacency lists.

    After :meth:`bfs` the graph remembers, for every vertex, its parent in the
    breadth-first tree and its distance from the search source.
    """

    def __init__(self, order: int) -> None:
        self._order = order
        self._size = 0
        self._source = NIL
        self._adjacent: list[list[int]] = [[] for _ in range(order + 1)]
        self._parent = [NIL] * (order + 1)
        self._distance = [INF] * (order + 1)

    def __str__(self) -> str:
        """One line per vertex: ``u: `` and each neighbour followed by a space."""
        return "".join(
            f"{u}: " + "".join(f"{v} " for v in self._adjacent[u]) + "\n"
            for u in range(1, self._order + 1)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self._order}, size={self._size})"

    # Access ---------------------------------------------------------------

    def order(self) -> int:
        """Number of vertices."""
        return self._order

    def size(self) -> int:
        """Number of edges, an undirected edge counting once."""
        return self._size

    def source(self) -> int:
        """Source of the most recent search, or ``NIL`` if none has run."""
        return self._source

    def neighbors(self, u: int) -> list[int]:
        """The vertices adjacent to ``u``, in increasing order."""
        self._check_vertex("neighbors", u)
        return list(self._adjacent[u])

    def parent(self, u: int) -> int:
        """Parent of ``u`` in the last breadth-first tree, or ``NIL``."""
        self._check_vertex("parent", u)
        return self._parent[u]

    def distance(self, u: int) -> int:
        """Distance of ``u`` from the last source, or ``INF`` if unreached."""
        self._check_vertex("distance", u)
        return self._distance[u]

    def path(self, u: int) -> list[int]:
        """A shortest path from the source to ``u``, or ``[NIL]`` if none exists."""
        self._check_vertex("path", u)
        if self._source == NIL:
            raise GraphError("calling path() with the source vertex undefined")
        route = []
        vertex = u
        while vertex != self._source:
            if self._parent[vertex] == NIL:
                return [NIL]
            route.append(vertex)
            vertex = self._parent[vertex]
        route.append(self._source)
        route.reverse()
        return route

    # Manipulation ---------------------------------------------------------

    def make_null(self) -> None:
        """Remove every edge and forget the results of the last search."""
        for u in range(1, self._order + 1):
            self._adjacent[u].clear()
            self._parent[u] = NIL
            self._distance[u] = INF
        self._size = 0

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` by an undirected edge."""
        self._check_vertex("add_edge", u)
        self._check_vertex("add_edge", v)
        self.add_arc(u, v)
        self.add_arc(v, u)
        self._size -= 1

    def add_arc(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._check_vertex("add_arc", u)
        self._check_vertex("add_arc", v)
        insort_right(self._adjacent[u], v)
        self._size += 1

    def bfs(self, s: int) -> None:
        """Run a breadth-first search from ``s``."""
        self._check_vertex("bfs", s)
        self._parent = [NIL] * (self._order + 1)
        self._distance = [INF] * (self._order + 1)
        self._source = s
        self._distance[s] = 0
        queue = deque([s])
        while queue:
            x = queue.popleft()
            for y in self._adjacent[x]:
                if self._distance[y] == INF:
                    self._distance[y] = self._distance[x] + 1
                    self._parent[y] = x
                    queue.append(y)

    def _check_vertex(self, operation: str, u: int) -> None:
        if not 1 <= u <= self._order:
            raise GraphError(f"calling {operation}() on out of bound vertex {u}")