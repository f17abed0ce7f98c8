"""Topology metrics: average shortest-path length and clustering coefficient."""

from src.metrics.adjacency import build_adjacency, is_symmetric
from src.metrics.clustering import average_clustering, local_clustering
from src.metrics.engine import compute_graph_metrics, compute_metrics
from src.metrics.path_length import average_path_length, bfs_distances
from src.metrics.types import MetricsRecord

__all__ = [
    "MetricsRecord",
    "average_clustering",
    "average_path_length",
    "bfs_distances",
    "build_adjacency",
    "compute_graph_metrics",
    "compute_metrics",
    "is_symmetric",
    "local_clustering",
]
