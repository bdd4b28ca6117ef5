"""Directed graphs with depth-first search, transposition and copying."""

from __future__ import annotations

import copy as _copy
from bisect import bisect_left
from enum import Enum
from typing import Iterable

UNDEF = -1
"""Discover or finish time of a vertex that no search has reached."""

NIL = 0
"""Parent reported when there is none."""


class GraphError(ValueError):
    """Raised when a graph operation is called without its precondition."""


class _Color(Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


class Digraph:
    """A directed graph on the vertices ``1..order`` with sorted adjacency lists.

    After :meth:`dfs` the graph remembers each vertex's parent in the
    depth-first forest and its discover and finish times.
    """

    def __init__(self, order: int) -> None:
        self._order = order
        self._size = 0
        self._adjacent: list[list[int]] = [[] for _ in range(order + 1)]
        self._color = [_Color.WHITE] * (order + 1)
        self._parent = [NIL] * (order + 1)
        self._discover = [UNDEF] * (order + 1)
        self._finish = [UNDEF] * (order + 1)

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
        """Number of arcs, an undirected edge counting once."""
        return self._size

    def neighbors(self, u: int) -> list[int]:
        """The heads of the arcs leaving ``u``, in increasing order."""
        self._check_vertex("neighbors", u)
        return list(self._adjacent[u])

    def parent(self, u: int) -> int:
        """Parent of ``u`` in the last depth-first forest, or ``NIL``."""
        self._check_vertex("parent", u)
        return self._parent[u]

    def discover(self, u: int) -> int:
        """Discover time of ``u`` in the last search, or ``UNDEF``."""
        self._check_vertex("discover", u)
        return self._discover[u]

    def finish(self, u: int) -> int:
        """Finish time of ``u`` in the last search, or ``UNDEF``."""
        self._check_vertex("finish", u)
        return self._finish[u]

    # Manipulation ---------------------------------------------------------

    def add_arc(self, u: int, v: int) -> None:
        """Add an arc from ``u`` to ``v``; an existing arc is left as it is."""
        self._check_vertex("add_arc", u)
        self._check_vertex("add_arc", v)
        heads = self._adjacent[u]
        position = bisect_left(heads, v)
        if position < len(heads) and heads[position] == v:
            return
        heads.insert(position, v)
        self._size += 1

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` by arcs in both directions, counted as one edge."""
        self._check_vertex("add_edge", u)
        self._check_vertex("add_edge", v)
        self.add_arc(u, v)
        self.add_arc(v, u)
        self._size -= 1

    def dfs(self, vertices: Iterable[int]) -> list[int]:
        """Search depth-first, starting trees in the order of ``vertices``.

        ``vertices`` must hold as many vertices as the graph has. Returns the
        vertices reached, in decreasing order of finish time.
        """
        order = list(vertices)
        if len(order) != self._order:
            raise GraphError("calling dfs() with a vertex list whose length is not the order")
        for x in order:
            self._check_vertex("dfs", x)
        for u in range(1, self._order + 1):
            self._color[u] = _Color.WHITE
            self._parent[u] = NIL

        time = 0
        finished: list[int] = []
        for root in order:
            if self._color[root] is not _Color.WHITE:
                continue
            time += 1
            self._discover[root] = time
            self._color[root] = _Color.GRAY
            stack = [(root, iter(self._adjacent[root]))]
            while stack:
                x, heads = stack[-1]
                for y in heads:
                    if self._color[y] is _Color.WHITE:
                        self._parent[y] = x
                        time += 1
                        self._discover[y] = time
                        self._color[y] = _Color.GRAY
                        stack.append((y, iter(self._adjacent[y])))
                        break
                else:
                    stack.pop()
                    self._color[x] = _Color.BLACK
                    time += 1
                    self._finish[x] = time
                    finished.append(x)
        finished.reverse()
        return finished

    # Other ----------------------------------------------------------------

    def transpose(self) -> Digraph:
        """A new graph with every arc reversed."""
        reversed_graph = Digraph(self._order)
        for u in range(1, self._order + 1):
            for v in self._adjacent[u]:
                reversed_graph.add_arc(v, u)
        return reversed_graph

    def copy(self) -> Digraph:
        """A new graph with the same arcs and search results."""
        duplicate = _copy.copy(self)
        duplicate._adjacent = [list(heads) for heads in self._adjacent]
        duplicate._color = list(self._color)
        duplicate._parent = list(self._parent)
        duplicate._discover = list(self._discover)
        duplicate._finish = list(self._finish)
        return duplicate

    def _check_vertex(self, operation: str, u: int) -> None:
        if not 1 <= u <= self._order:
            raise GraphError(f"calling {operation}() on out of bound vertex {u}")