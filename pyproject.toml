[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "landmarkpaths"
version = "0.1.0"
description = "Approximate shortest-path distances in large unweighted graphs using landmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "shortest-path", "landmarks", "bfs", "approximation", "connected-components"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
landmarkpaths-benchmark = "landmarkpaths.benchmark:main"
landmarkpaths-format = "landmarkpaths.formatter:main"
landmarkpaths-analyze = "landmarkpaths.analysis:main"

[tool.hatch.build.targets.wheel]
packages = ["landmarkpaths"]

[tool.pytest.ini_options]
addopts = "-ra"
