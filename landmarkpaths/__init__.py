"""Landmark-based approximate shortest-path distances, graph file conversion and component analysis."""

__version__ = "0.1.0"
__all__ = ["reader", "graph", "selection", "landmarks", "benchmark", "formatter", "analysis"]