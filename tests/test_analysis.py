import io
from collections import Counter

import pytest

from landmarkpaths.analysis import (
    main,
    read_adjacency_list,
    reverse_adjacency,
    strongly_connected_components,
    weakly_connected_components,
)
from landmarkpaths.reader import GraphFormatError

DIRECTED_TEXT = "3 2 d\n0: 1\n1: 2\n2: \n"


def _symmetric(pairs, n):
    adjacency = [[] for _ in range(n)]
    for a, b in pairs:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def test_read_directed_adjacency_list():
    graph = read_adjacency_list(io.StringIO(DIRECTED_TEXT))
    assert graph.directed
    assert graph.nodes == 3
    assert graph.edges == 2
    assert graph.directed_adjacency == [[1], [2], []]
    assert graph.adjacency == [[1], [0, 2], [1]]


def test_read_undirected_has_no_directed_view():
    graph = read_adjacency_list(io.StringIO("2 1 u\n0: 1\n1: \n"))
    assert not graph.directed
    assert graph.directed_adjacency is None
    assert 1 in graph.adjacency[0]
    assert 0 in graph.adjacency[1]


def test_read_rejects_out_of_range_neighbour():
    with pytest.raises(GraphFormatError):
        read_adjacency_list(io.StringIO("2 1 d\n0: 5\n1: \n"))


def test_read_rejects_extra_lines():
    with pytest.raises(GraphFormatError):
        read_adjacency_list(io.StringIO("1 0 u\n0: \n1: \n"))


def test_reverse_adjacency_turns_every_edge():
    adjacency = [[1, 2], [2], [0], []]
    reversed_lists = reverse_adjacency(adjacency)
    forward = {(a, b) for a, nbrs in enumerate(adjacency) for b in nbrs}
    backward = {(b, a) for a, nbrs in enumerate(reversed_lists) for b in nbrs}
    assert forward == backward
    twice = reverse_adjacency(reversed_lists)
    assert [sorted(n) for n in twice] == [sorted(n) for n in adjacency]


def test_weak_components():
    pairs = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]
    summary = weakly_connected_components(_symmetric(pairs, 7))
    assert summary.count == 3
    for a, b in pairs:
        assert summary.labels[a] == summary.labels[b]
    assert summary.labels[0] != summary.labels[3]
    sizes = Counter(summary.labels)
    assert sum(sizes.values()) == 7
    assert summary.largest == max(sizes.values())
    assert set(summary.labels) == set(range(summary.count))


def test_strong_components_cycle_with_tail():
    adjacency = [[1], [2], [0, 3], []]
    summary = strongly_connected_components(adjacency)
    assert summary.labels[0] == summary.labels[1] == summary.labels[2]
    assert summary.labels[3] != summary.labels[0]
    assert summary.largest == 3
    assert summary.count == len(set(summary.labels))


def test_strong_components_of_path_are_singletons():
    adjacency = [[1], [2], [3], [4], []]
    summary = strongly_connected_components(adjacency)
    assert summary.count == len(adjacency)
    assert summary.largest == 1


def test_strong_components_refine_weak_ones():
    adjacency = [[1], [0, 2], [], [4], []]
    strong = strongly_connected_components(adjacency)
    weak = weakly_connected_components(_symmetric(
        [(a, b) for a, nbrs in enumerate(adjacency) for b in nbrs], len(adjacency)
    ))
    assert strong.count >= weak.count
    for a in range(len(adjacency)):
        for b in range(len(adjacency)):
            if strong.labels[a] == strong.labels[b]:
                assert weak.labels[a] == weak.labels[b]


def test_empty_graph():
    summary = strongly_connected_components([])
    assert summary.labels == ()
    assert summary.count == summary.largest == len(summary.labels)


def test_main_prints_scc(tmp_path, capsys):
    path = tmp_path / "adj.txt"
    path.write_text(DIRECTED_TEXT, encoding="utf-8")
    assert main([str(path), "--wcc"]) == 0
    graph = read_adjacency_list(io.StringIO(DIRECTED_TEXT))
    strong = strongly_connected_components(graph.directed_adjacency)
    weak = weakly_connected_components(graph.adjacency)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"number of SCC: {strong.count}",
        f"Nodes in largest SCC: {strong.largest}",
        f"number of WCC: {weak.count}",
        f"Nodes in largest WCC: {weak.largest}",
    ]


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1