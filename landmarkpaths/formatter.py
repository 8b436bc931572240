"""Convert an edge-list graph file into adjacency lists and a renaming key."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import TextIO

from .reader import GraphFormatError


@dataclass
class FormattedGraph:
    """An edge list renamed to dense indices.

    ``adjacency`` holds every edge in both directions; ``adjacency_directed``
    holds the edges as given and is only present for directed input.
    ``renamed[i]`` is the external id of internal vertex ``i``; slots for
    vertices that never appeared stay 0.
    """

    nodes: int
    edges: int
    edges_directed: int
    directed: bool
    adjacency: list[list[int]]
    adjacency_directed: list[list[int]] | None
    renamed: list[int]


def _to_int(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise GraphFormatError(f"Expected an integer, got {token!r}") from None
    if value < 0:
        raise GraphFormatError(f"Expected a non-negative integer, got {token!r}")
    return value


def read_edge_list(stream: TextIO) -> FormattedGraph:
    """Read ``n m d|u`` followed by ``m`` vertex pairs."""
    tokens = stream.read().split()
    if len(tokens) < 3:
        raise GraphFormatError("Wrong file format.")
    nodes = _to_int(tokens[0])
    edge_count = _to_int(tokens[1])
    directed = tokens[2].startswith("d")
    edge_tokens = tokens[3:]
    if len(edge_tokens) < 2 * edge_count:
        raise GraphFormatError(
            f"Expected {edge_count} edges, found {len(edge_tokens) // 2}"
        )

    renamed = [0] * nodes
    renaming: dict[int, int] = {}

    def rename(vertex: int) -> int:
        internal = renaming.get(vertex)
        if internal is None:
            internal = len(renaming)
            if internal >= nodes:
                raise GraphFormatError(f"More distinct vertices than the declared {nodes}")
            renaming[vertex] = internal
            renamed[internal] = vertex
        return internal

    adjacency: list[list[int]] = [[] for _ in range(nodes)]
    neighbours: list[set[int]] = [set() for _ in range(nodes)]
    adjacency_directed: list[list[int]] | None = None
    directed_neighbours: list[set[int]] = []
    if directed:
        adjacency_directed = [[] for _ in range(nodes)]
        directed_neighbours = [set() for _ in range(nodes)]

    edges = 0
    edges_directed = 0
    pairs = zip(edge_tokens[0 : 2 * edge_count : 2], edge_tokens[1 : 2 * edge_count : 2])
    for first, second in pairs:
        a = rename(_to_int(first))
        b = rename(_to_int(second))
        if b not in neighbours[a]:
            neighbours[a].add(b)
            adjacency[a].append(b)
            edges += 1
        if a not in neighbours[b]:
            neighbours[b].add(a)
            adjacency[b].append(a)
        if adjacency_directed is not None and b not in directed_neighbours[a]:
            directed_neighbours[a].add(b)
            adjacency_directed[a].append(b)
            edges_directed += 1

    return FormattedGraph(
        nodes=nodes,
        edges=edges,
        edges_directed=edges_directed,
        directed=directed,
        adjacency=adjacency,
        adjacency_directed=adjacency_directed,
        renamed=renamed,
    )


def write_adjacency_list(
    adjacency: Sequence[Sequence[int]],
    nodes: int,
    edges: int,
    directed: bool,
    out: TextIO,
) -> None:
    """Write a header ``n m d|u`` and one ``i: neighbours`` line per vertex."""
    out.write(f"{nodes} {edges} {'d' if directed else 'u'}\n")
    for index, neighbours in enumerate(adjacency):
        out.write(f"{index}: {' '.join(map(str, neighbours))}\n")


def write_key(renamed: Sequence[int], out: TextIO) -> None:
    """Write one ``internal: external`` line per vertex."""
    for index, external in enumerate(renamed):
        out.write(f"{index}: {external}\n")


def format_file(path: str | PathLike[str]) -> list[Path]:
    """Convert ``path`` and return the files written next to it.

    The last four characters of the path (its extension) are replaced by
    ``_adj_undirected.txt``, ``_adj_directed.txt`` (directed input only) and
    ``_key.txt``.
    """
    text_path = str(path)
    if len(text_path) <= 4:
        raise ValueError(f"Path too short to strip an extension: {text_path!r}")
    base = text_path[:-4]
    with open(path, encoding="utf-8") as stream:
        graph = read_edge_list(stream)

    written: list[Path] = []
    undirected_path = Path(base + "_adj_undirected.txt")
    with open(undirected_path, "w", encoding="utf-8", newline="\n") as out:
        write_adjacency_list(graph.adjacency, graph.nodes, graph.edges, False, out)
    written.append(undirected_path)

    if graph.adjacency_directed is not None:
        directed_path = Path(base + "_adj_directed.txt")
        with open(directed_path, "w", encoding="utf-8", newline="\n") as out:
            write_adjacency_list(
                graph.adjacency_directed, graph.nodes, graph.edges_directed, True, out
            )
        written.append(directed_path)

    key_path = Path(base + "_key.txt")
    with open(key_path, "w", encoding="utf-8", newline="\n") as out:
        write_key(graph.renamed, out)
    written.append(key_path)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="edge-list file: 'n m d|u' followed by vertex pairs")
    args = parser.parse_args(argv)
    try:
        format_file(args.path)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())