"""Graph with external vertex ids renamed to dense internal indices."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from os import PathLike

from .reader import GraphFormatError, GraphReader

MAX_VERTEX_NUMBER = 2**32 - 1

_MISSING_VERTEX = "One of the vertices (s, t) doesn't exist."


class VertexNotFoundError(LookupError):
    """Raised when a queried vertex is not part of the graph."""


class Graph:
    """Adjacency-list graph; undirected unless ``directed`` is set.

    External vertex ids are mapped to internal indices ``0..n-1`` in the
    order in which they first appear in the edge list. Repeated edges are
    stored once.
    """

    def __init__(
        self,
        vertices: int,
        edges: Iterable[tuple[Hashable, Hashable]] = (),
        directed: bool = False,
    ) -> None:
        if vertices > MAX_VERTEX_NUMBER:
            raise ValueError(f"The number of vertices is limited by {MAX_VERTEX_NUMBER}")
        if vertices < 0:
            raise ValueError("The number of vertices cannot be negative")
        self._directed = directed
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]
        self._renaming: dict[Hashable, int] = {}

        seen: set[tuple[int, int]] = set()
        for source, target in edges:
            a = self._rename(source)
            b = self._rename(target)
            if (a, b) in seen:
                continue
            seen.add((a, b))
            self._adjacency[a].append(b)
            if not directed:
                seen.add((b, a))
                self._adjacency[b].append(a)

    def _rename(self, vertex: Hashable) -> int:
        internal = self._renaming.get(vertex)
        if internal is None:
            internal = len(self._renaming)
            if internal >= len(self._adjacency):
                raise GraphFormatError(
                    f"More distinct vertices than the declared {len(self._adjacency)}"
                )
            self._renaming[vertex] = internal
        return internal

    @classmethod
    def from_file(cls, path: str | PathLike[str], ignore_direction: bool = False) -> Graph:
        """Load a graph from a file of the form ``n m d|u`` followed by edge pairs."""
        with GraphReader(path) as reader:
            vertices, edge_count, direction = reader.read_header()
            directed = direction == "d" and not ignore_direction
            pairs = ((reader.read_int(), reader.read_int()) for _ in range(edge_count))
            return cls(vertices, pairs, directed)

    @property
    def vertex_count(self) -> int:
        """Number of vertices declared for the graph."""
        return len(self._adjacency)

    @property
    def is_directed(self) -> bool:
        """Whether edges are stored in one direction only."""
        return self._directed

    def internal_name(self, vertex: Hashable) -> int | None:
        """Internal index of an external vertex id, or None if unknown."""
        return self._renaming.get(vertex)

    def resolve(self, s: Hashable, t: Hashable, internal: bool = False) -> tuple[int, int]:
        """Return internal indices of ``s`` and ``t``, validating both."""
        if internal:
            n = self.vertex_count
            if not (isinstance(s, int) and isinstance(t, int) and 0 <= s < n and 0 <= t < n):
                raise VertexNotFoundError(_MISSING_VERTEX)
            return s, t
        s_internal = self.internal_name(s)
        t_internal = self.internal_name(t)
        if s_internal is None or t_internal is None:
            raise VertexNotFoundError(_MISSING_VERTEX)
        return s_internal, t_internal

    def adjacent(self, vertex: int) -> Sequence[int]:
        """Neighbours of an internal vertex, in insertion order."""
        return self._adjacency[vertex]

    def degree(self, vertex: int) -> int:
        """Number of stored neighbours of an internal vertex."""
        return len(self._adjacency[vertex])

    def shortest_distance(self, s: Hashable, t: Hashable, internal: bool = False) -> int | None:
        """Exact BFS distance from ``s`` to ``t``; None when ``t`` is unreachable."""
        source, target = self.resolve(s, t, internal)
        if source == target:
            return 0
        dist = {source: 0}
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for u in self._adjacency[v]:
                if u not in dist:
                    dist[u] = dist[v] + 1
                    if u == target:
                        return dist[u]
                    queue.append(u)
        return None