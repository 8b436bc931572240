"""Approximate shortest-path distances using precomputed landmarks."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Hashable

from .graph import Graph
from .selection import SelectionMethod, choose_landmarks


def _bfs_distances(graph: Graph, source: int) -> dict[int, int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for u in graph.adjacent(v):
            if u not in dist:
                dist[u] = dist[v] + 1
                queue.append(u)
    return dist


def _bfs_parents(graph: Graph, source: int) -> dict[int, int]:
    # The landmark itself gets a parent too once one of its neighbours is
    # expanded; walks towards the landmark stop before reaching it anyway.
    parents: dict[int, int] = {}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for u in graph.adjacent(v):
            if u not in parents:
                parents[u] = v
                queue.append(u)
    return parents


class LandmarksBasic:
    """Estimate d(s, t) as the minimum over landmarks l of d(l, s) + d(l, t)."""

    def __init__(
        self,
        graph: Graph,
        method: str | SelectionMethod,
        k: int,
        m: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self._landmarks = tuple(choose_landmarks(graph, method, k, m, rng))
        self._distances = [_bfs_distances(graph, landmark) for landmark in self._landmarks]

    @property
    def landmarks(self) -> tuple[int, ...]:
        """Internal indices of the chosen landmarks."""
        return self._landmarks

    def approximate_distance(
        self, graph: Graph, s: Hashable, t: Hashable, internal: bool = False
    ) -> int | None:
        """Upper bound on the distance; None when no landmark reaches both."""
        if s == t:
            return 0
        source, target = graph.resolve(s, t, internal)
        candidates = [
            dist[source] + dist[target]
            for dist in self._distances
            if source in dist and target in dist
        ]
        return min(candidates, default=None)


class LandmarksBFS:
    """Estimate d(s, t) by BFS restricted to landmark shortest-path-tree paths."""

    def __init__(
        self,
        graph: Graph,
        method: str | SelectionMethod,
        k: int,
        m: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self._landmarks = tuple(choose_landmarks(graph, method, k, m, rng))
        self._trees = [_bfs_parents(graph, landmark) for landmark in self._landmarks]

    @property
    def landmarks(self) -> tuple[int, ...]:
        """Internal indices of the chosen landmarks."""
        return self._landmarks

    def _tree_path(self, vertex: int, index: int) -> list[int]:
        parents = self._trees[index]
        if vertex not in parents:
            return []
        landmark = self._landmarks[index]
        path = []
        v = vertex
        while v != landmark:
            v = parents[v]
            path.append(v)
        return path

    def approximate_distance(
        self, graph: Graph, s: Hashable, t: Hashable, internal: bool = False
    ) -> int | None:
        """Upper bound on the distance; None when the restricted search fails."""
        if s == t:
            return 0
        source, target = graph.resolve(s, t, internal)
        allowed = {source, target}
        for index in range(len(self._landmarks)):
            allowed.update(self._tree_path(source, index))
            allowed.update(self._tree_path(target, index))

        dist = {source: 0}
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for u in graph.adjacent(v):
                if u in allowed and u not in dist:
                    dist[u] = dist[v] + 1
                    queue.append(u)
                if u == target:
                    return dist[u]
        return dist.get(target)