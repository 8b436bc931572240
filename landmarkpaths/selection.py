"""Strategies for choosing landmark vertices of a graph."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from enum import Enum

from .graph import Graph


class SelectionMethod(str, Enum):
    """Available landmark selection strategies."""

    HIGHEST_DEGREE = "highest-degree"
    BEST_COVERAGE = "best-coverage"
    RANDOM = "random"


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _clamp(graph: Graph, k: int) -> int:
    if k < 0:
        raise ValueError("The number of landmarks cannot be negative")
    return min(k, graph.vertex_count)


def _partition(graph: Graph, items: list[int], lo: int, hi: int, rng: random.Random) -> int:
    pick = rng.randint(lo, hi)
    items[pick], items[hi] = items[hi], items[pick]
    pivot = graph.degree(items[hi])
    left, right = lo, hi - 1
    while left <= right:
        while left <= hi and graph.degree(items[left]) > pivot:
            left += 1
        while right >= lo and graph.degree(items[right]) < pivot:
            right -= 1
        if left <= right:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
    items[left], items[hi] = items[hi], items[left]
    return left


def kth_by_degree(
    graph: Graph, vertices: Iterable[int], k: int, rng: random.Random | None = None
) -> list[int]:
    """Reorder vertices so that position ``k`` holds its rank by descending degree.

    Every vertex before position ``k`` has a degree no smaller, every vertex
    after it a degree no larger. A new list is returned.
    """
    rng = _rng(rng)
    items = list(vertices)
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        pos = _partition(graph, items, lo, hi, rng)
        if pos > k:
            hi = pos - 1
        elif pos == k:
            break
        else:
            lo = pos + 1
    return items


def bfs_path(graph: Graph, s: int, t: int) -> list[int]:
    """Shortest path between internal vertices as ``[t, ..., s]``; empty if none."""
    parents: dict[int, int] = {}
    queue = deque([s])
    while queue and t not in parents:
        v = queue.popleft()
        for u in graph.adjacent(v):
            if u not in parents:
                parents[u] = v
                queue.append(u)
                if u == t:
                    break
    if t not in parents:
        return []
    path = []
    v = t
    while v != s:
        path.append(v)
        v = parents[v]
    path.append(v)
    return path


def highest_degree_selection(
    graph: Graph, k: int, rng: random.Random | None = None
) -> list[int]:
    """The ``k`` vertices of highest degree, in no particular order."""
    k = _clamp(graph, k)
    if k == 0:
        return []
    ordered = kth_by_degree(graph, range(graph.vertex_count), k - 1, rng)
    return ordered[:k]


def best_coverage_selection(
    graph: Graph, m: int, k: int, rng: random.Random | None = None
) -> tuple[list[int], int]:
    """Greedily choose landmarks covering the most of ``m`` random shortest paths.

    Returns the landmarks and how many of them were chosen from paths; the
    rest are filled in by highest degree once no uncovered path remains.
    """
    k = _clamp(graph, k)
    if k == 0:
        return [], 0
    rng = _rng(rng)
    n = graph.vertex_count

    paths: list[list[int]] = []
    for _ in range(m):
        s = rng.randrange(n)
        t = rng.randrange(n)
        if s == t:
            t = (t + 1) % n
        path = bfs_path(graph, s, t)
        if path:
            paths.append(path)

    path_indices: dict[int, set[int]] = {}
    for index, path in enumerate(paths):
        for v in path:
            path_indices.setdefault(v, set()).add(index)

    landmarks: list[int] = []
    for _ in range(k):
        best_count = 0
        best_vertex = -1
        for vertex, indices in path_indices.items():
            if best_count < len(indices):
                best_count = len(indices)
                best_vertex = vertex
        if best_count == 0:
            from_paths = len(landmarks)
            chosen = set(landmarks)
            remaining = [v for v in range(n) if v not in chosen]
            rest = k - from_paths
            ordered = kth_by_degree(graph, remaining, rest - 1, rng)
            landmarks.extend(ordered[:rest])
            return landmarks, from_paths
        landmarks.append(best_vertex)
        for index in path_indices[best_vertex]:
            for v in paths[index]:
                if v != best_vertex:
                    path_indices[v].discard(index)
        path_indices[best_vertex].clear()
    return landmarks, len(landmarks)


def random_selection(graph: Graph, k: int, rng: random.Random | None = None) -> list[int]:
    """``k`` distinct vertices chosen uniformly at random."""
    k = _clamp(graph, k)
    if k == 0:
        return []
    vertices = list(range(graph.vertex_count))
    _rng(rng).shuffle(vertices)
    return vertices[:k]


def choose_landmarks(
    graph: Graph,
    method: str | SelectionMethod,
    k: int,
    m: int = 0,
    rng: random.Random | None = None,
) -> list[int]:
    """Select landmarks with the method named by ``method``."""
    try:
        selected = SelectionMethod(method)
    except ValueError:
        options = ", ".join(item.value for item in SelectionMethod)
        raise ValueError(
            f"Unknown landmark selection method, available options: {options}"
        ) from None
    if selected is SelectionMethod.HIGHEST_DEGREE:
        return highest_degree_selection(graph, k, rng)
    if selected is SelectionMethod.BEST_COVERAGE:
        return best_coverage_selection(graph, m, k, rng)[0]
    return random_selection(graph, k, rng)