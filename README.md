# landmarkpaths

Approximate shortest-path distances in large, unweighted graphs with
landmark-based methods, plus command-line tools for preparing graph files and
reporting their connected components. Pure Python, no dependencies.

## Installation

```
pip install .
```

## Graph file format

The file starts with the number of vertices, the number of edges and a
direction flag (`d` for directed, `u` for undirected). Then come the edges as
pairs of non-negative integers:

```
4 3 u
10 20
20 30
30 40
```

`landmarkpaths.reader.GraphReader` treats any byte that is not a decimal
digit as a separator, so spaces, tabs, newlines and commas all work; the
direction flag is the first letter after the two header numbers. A file that
runs out of numbers raises `GraphFormatError`.

Vertex ids are renamed to internal indices `0 .. n-1` in order of first
appearance. Repeated edges are stored once. More distinct ids than the
declared vertex count raise `GraphFormatError`.

## Usage

```python
import random

from landmarkpaths.graph import Graph
from landmarkpaths.landmarks import LandmarksBasic, LandmarksBFS

graph = Graph.from_file("network.txt")   # ignore_direction=True loads a directed file as undirected

exact = graph.shortest_distance(10, 40)  # None if 40 is unreachable from 10

rng = random.Random(0)
basic = LandmarksBasic(graph, "highest-degree", k=20, rng=rng)
bfs = LandmarksBFS(graph, "best-coverage", k=20, m=500, rng=rng)

upper_bound = basic.approximate_distance(graph, 10, 40)
estimate = bfs.approximate_distance(graph, 10, 40)
```

A `Graph` can also be built in memory: `Graph(4, [(10, 20), (20, 30)])`, with
`directed=True` to keep edges one-way. It exposes `vertex_count`,
`is_directed`, `internal_name(vertex)`, `adjacent(vertex)` and
`degree(vertex)`.

Pass `internal=True` to query with the internal `0 .. n-1` indices instead of
the ids from the file. Unknown vertices raise `VertexNotFoundError`.

- `LandmarksBasic` precomputes BFS distances from each landmark and returns
  the minimum of `d(l, s) + d(l, t)` over landmarks reaching both vertices, or
  `None` if there is none.
- `LandmarksBFS` keeps a BFS shortest-path tree per landmark and runs a BFS
  from `s` restricted to `s`, `t` and the tree paths from them to the
  landmarks; it returns `None` if that search does not reach `t`.

Both report the chosen landmarks in their `landmarks` property.

### Landmark selection

`landmarkpaths.selection` provides the methods named by `SelectionMethod`:

- `highest-degree` (`highest_degree_selection`) picks the vertices with the
  most neighbours;
- `best-coverage` (`best_coverage_selection`) samples `m` random shortest
  paths and greedily picks the vertices lying on the most uncovered ones,
  topping up with highest-degree vertices; it also returns how many landmarks
  came from paths;
- `random` (`random_selection`) picks vertices uniformly at random.

`choose_landmarks(graph, method, k, m, rng)` dispatches by name and raises
`ValueError` for an unknown method. `k` is capped at the number of vertices.

### Measuring accuracy

`landmarkpaths.benchmark.evaluate(graph, estimator, samples, rng)` compares an
estimator with exact BFS distances on random pairs and returns a
`BenchmarkResult` with `evaluated`, `skipped`, `mae`, `mape` and `seconds`.

## Command-line tools

Measure the error of a landmark estimator:

```
landmarkpaths-benchmark network.txt --algorithm bfs --method best-coverage -k 300 -m 1000 --samples 500 --seed 1
```

Renumber an edge list and write its adjacency lists and renaming key next to
the input. The last four characters of the path are replaced, giving
`network_adj_undirected.txt`, `network_adj_directed.txt` (directed input only)
and `network_key.txt`:

```
landmarkpaths-format network.txt
```

Report strongly connected components of a directed adjacency-list file (the
format written above), and with `--wcc` weakly connected components too:

```
landmarkpaths-analyze network_adj_directed.txt --wcc
```

Each tool prints its options with `--help`.

## Not included

There is no graphical interface; the package is a library and the three
commands above. Landmark preprocessing runs on a single thread.