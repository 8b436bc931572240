import math
import random

import pytest

from landmarkpaths.benchmark import BenchmarkResult, evaluate, main
from landmarkpaths.graph import Graph
from landmarkpaths.landmarks import LandmarksBasic, LandmarksBFS


def _path_graph(n):
    return Graph(n, [(i, i + 1) for i in range(n - 1)])


@pytest.mark.parametrize("cls", [LandmarksBasic, LandmarksBFS])
def test_exact_estimator_has_zero_error(cls):
    graph = _path_graph(6)
    est = cls(graph, "highest-degree", 6, rng=random.Random(0))
    result = evaluate(graph, est, 50, random.Random(1))
    assert result.mae == 0
    assert result.mape == 0
    assert result.evaluated + result.skipped == 50


def test_errors_are_non_negative():
    graph = Graph(
        8, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7), (7, 0)]
    )
    est = LandmarksBasic(graph, "random", 1, rng=random.Random(2))
    result = evaluate(graph, est, 200, random.Random(3))
    assert result.mae >= 0
    assert result.mape >= 0
    assert result.seconds >= 0


def test_reproducible_with_seed():
    graph = _path_graph(10)
    est = LandmarksBasic(graph, "random", 2, rng=random.Random(4))
    first = evaluate(graph, est, 100, random.Random(5))
    second = evaluate(graph, est, 100, random.Random(5))
    assert (first.evaluated, first.skipped, first.mae, first.mape) == (
        second.evaluated,
        second.skipped,
        second.mae,
        second.mape,
    )


def test_unreachable_pairs_are_skipped():
    graph = Graph(4, [(0, 1), (2, 3)])
    est = LandmarksBasic(graph, "highest-degree", 4, rng=random.Random(6))
    result = evaluate(graph, est, 100, random.Random(7))
    assert result.skipped > 0
    assert result.evaluated + result.skipped == 100


def test_all_skipped_gives_nan():
    graph = Graph(2, [])
    est = LandmarksBasic(graph, "random", 0)
    result = evaluate(graph, est, 20, random.Random(8))
    assert isinstance(result, BenchmarkResult)
    assert result.evaluated + result.skipped == 20
    assert math.isnan(result.mape)


def test_invalid_arguments():
    graph = _path_graph(3)
    est = LandmarksBasic(graph, "random", 1)
    with pytest.raises(ValueError):
        evaluate(graph, est, 0)
    with pytest.raises(ValueError):
        evaluate(Graph(0, []), est, 5)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("5 4 u\n0 1\n1 2\n2 3\n3 4\n")
    code = main([str(path), "--k", "5", "--method", "highest-degree",
                 "--samples", "10", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "File loaded for:" in out
    assert "MAE: 0.0" in out


def test_main_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "absent.txt")])
    assert code == 1
    assert capsys.readouterr().err.strip() != ""