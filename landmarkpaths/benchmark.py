"""Measure the error of a landmark estimator against exact BFS distances."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .graph import Graph
from .landmarks import LandmarksBasic, LandmarksBFS
from .selection import SelectionMethod


class DistanceEstimator(Protocol):
    def approximate_distance(
        self, graph: Graph, s: Hashable, t: Hashable, internal: bool = False
    ) -> int | None: ...


@dataclass(frozen=True)
class BenchmarkResult:
    """Errors of an estimator over random vertex pairs.

    ``mae`` is the mean of (approximate - exact) over evaluated pairs and
    ``mape`` the mean of that difference divided by the exact distance over
    pairs with a positive exact distance. Pairs where either distance is
    unknown are counted in ``skipped``.
    """

    evaluated: int
    skipped: int
    mae: float
    mape: float
    seconds: float


def evaluate(
    graph: Graph,
    estimator: DistanceEstimator,
    samples: int = 500,
    rng: random.Random | None = None,
) -> BenchmarkResult:
    """Compare the estimator with exact distances on random internal pairs."""
    if samples <= 0:
        raise ValueError("samples must be positive")
    if graph.vertex_count == 0:
        raise ValueError("The graph has no vertices")
    rng = rng if rng is not None else random.Random()
    n = graph.vertex_count

    errors: list[int] = []
    relative: list[float] = []
    skipped = 0
    start = time.perf_counter()
    for _ in range(samples):
        u = rng.randrange(n)
        v = rng.randrange(n)
        approx = estimator.approximate_distance(graph, u, v, internal=True)
        exact = graph.shortest_distance(u, v, internal=True)
        if approx is None or exact is None:
            skipped += 1
            continue
        errors.append(approx - exact)
        if exact > 0:
            relative.append((approx - exact) / exact)
    seconds = time.perf_counter() - start

    mae = sum(errors) / len(errors) if errors else math.nan
    mape = sum(relative) / len(relative) if relative else math.nan
    return BenchmarkResult(len(errors), skipped, mae, mape, seconds)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="graph file: 'n m d|u' followed by edge pairs")
    parser.add_argument("--algorithm", choices=("bfs", "basic"), default="bfs")
    parser.add_argument(
        "--method",
        choices=[item.value for item in SelectionMethod],
        default=SelectionMethod.BEST_COVERAGE.value,
    )
    parser.add_argument("-k", "--k", type=int, default=300, help="number of landmarks")
    parser.add_argument("-m", "--m", type=int, default=1000, help="paths for best-coverage")
    parser.add_argument("--samples", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        start = time.perf_counter()
        graph = Graph.from_file(args.path)
        print(f"File loaded for: {time.perf_counter() - start:.6f}s")
        cls = LandmarksBFS if args.algorithm == "bfs" else LandmarksBasic
        estimator = cls(graph, args.method, args.k, args.m, rng)
        result = evaluate(graph, estimator, args.samples, rng)
    except (OSError, ValueError, LookupError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Loop worked for: {result.seconds:.6f}s")
    print(f"MAE: {result.mae}")
    print(f"MAPE: {result.mape}")
    return 0


if __name__ == "__main__":
    sys.exit(main())