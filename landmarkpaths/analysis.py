"""Connected-component statistics for adjacency-list graph files."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .reader import GraphFormatError


@dataclass
class AdjacencyGraph:
    """A graph read from ``i: neighbours`` lines.

    ``adjacency`` holds every listed edge in both directions (repeated when
    the input lists it twice); ``directed_adjacency`` holds the edges as
    listed and is only present for directed input.
    """

    nodes: int
    edges: int
    directed: bool
    adjacency: list[list[int]]
    directed_adjacency: list[list[int]] | None


@dataclass(frozen=True)
class ComponentSummary:
    """Components of a graph: their number, the largest size and a 0-based label per vertex."""

    count: int
    largest: int
    labels: tuple[int, ...]


def _to_int(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise GraphFormatError(f"Expected an integer, got {token!r}") from None
    if value < 0:
        raise GraphFormatError(f"Expected a non-negative integer, got {token!r}")
    return value


def read_adjacency_list(stream: TextIO) -> AdjacencyGraph:
    """Read a header ``n m d|u`` and one ``i: neighbours`` line per vertex.

    Vertices are numbered by the order of their lines; the label before the
    colon is not used.
    """
    lines = stream.read().splitlines()
    if not lines:
        raise GraphFormatError("Wrong file format.")
    header = lines[0].split()
    if len(header) < 2:
        raise GraphFormatError("Wrong file format.")
    nodes = _to_int(header[0])
    edges = _to_int(header[1])
    directed = len(header) > 2 and header[2].startswith("d")

    adjacency: list[list[int]] = [[] for _ in range(nodes)]
    directed_adjacency = [[] for _ in range(nodes)] if directed else None

    vertex_lines = (line for line in lines[1:] if ":" in line)
    for vertex, line in enumerate(vertex_lines):
        if vertex >= nodes:
            raise GraphFormatError(f"More vertex lines than the declared {nodes}")
        for token in line.split(":", 1)[1].split():
            neighbour = _to_int(token)
            if neighbour >= nodes:
                raise GraphFormatError(f"Vertex {neighbour} is out of range")
            adjacency[neighbour].append(vertex)
            adjacency[vertex].append(neighbour)
            if directed_adjacency is not None:
                directed_adjacency[vertex].append(neighbour)

    return AdjacencyGraph(nodes, edges, directed, adjacency, directed_adjacency)


def reverse_adjacency(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Adjacency lists with every edge turned around."""
    reversed_lists: list[list[int]] = [[] for _ in adjacency]
    for vertex, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            reversed_lists[neighbour].append(vertex)
    return reversed_lists


def _summary(labels: list[int], count: int) -> ComponentSummary:
    largest = max(Counter(labels).values(), default=0)
    return ComponentSummary(count, largest, tuple(labels))


def weakly_connected_components(adjacency: Sequence[Sequence[int]]) -> ComponentSummary:
    """Components found by BFS over adjacency lists that hold both directions."""
    labels = [-1] * len(adjacency)
    count = 0
    for root in range(len(adjacency)):
        if labels[root] != -1:
            continue
        labels[root] = count
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for neighbour in adjacency[vertex]:
                if labels[neighbour] == -1:
                    labels[neighbour] = count
                    queue.append(neighbour)
        count += 1
    return _summary(labels, count)


def _finish_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    visited = [False] * len(adjacency)
    order: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def strongly_connected_components(adjacency: Sequence[Sequence[int]]) -> ComponentSummary:
    """Strongly connected components of a directed graph (Kosaraju)."""
    order = _finish_order(adjacency)
    reversed_lists = reverse_adjacency(adjacency)
    labels = [-1] * len(adjacency)
    count = 0
    for root in reversed(order):
        if labels[root] != -1:
            continue
        labels[root] = count
        stack = [root]
        while stack:
            vertex = stack.pop()
            for neighbour in reversed_lists[vertex]:
                if labels[neighbour] == -1:
                    labels[neighbour] = count
                    stack.append(neighbour)
        count += 1
    return _summary(labels, count)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="adjacency-list file: 'n m d|u' then 'i: neighbours' lines")
    parser.add_argument("--wcc", action="store_true", help="also report weak components")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as stream:
            graph = read_adjacency_list(stream)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    if graph.directed_adjacency is not None:
        strong = strongly_connected_components(graph.directed_adjacency)
        print(f"number of SCC: {strong.count}")
        print(f"Nodes in largest SCC: {strong.largest}")
    if args.wcc:
        weak = weakly_connected_components(graph.adjacency)
        print(f"number of WCC: {weak.count}")
        print(f"Nodes in largest WCC: {weak.largest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())