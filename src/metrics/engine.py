"""Metrics engine: node/edge snapshot in, MetricsRecord out.

Adjacency is rebuilt on every call; nothing is cached between calls, so
metrics always reflect exactly the edge set passed in.
"""

import logging
from collections.abc import Iterable, Sequence

from src.graph.types import Graph
from src.metrics.adjacency import build_adjacency
from src.metrics.clustering import average_clustering
from src.metrics.path_length import average_path_length
from src.metrics.types import MetricsRecord

log = logging.getLogger(__name__)


def compute_metrics(
    nodes: Sequence[int], edges: Iterable[tuple[int, int]]
) -> MetricsRecord:
    """Compute average path length and clustering coefficient.

    Args:
        nodes: Node ids. An empty sequence is valid and yields zeros.
        edges: Undirected (a, b) pairs over those ids.

    Returns:
        MetricsRecord for the snapshot.
    """
    if len(nodes) == 0:
        return MetricsRecord(average_path_length=0.0, clustering_coefficient=0.0)

    adjacency = build_adjacency(nodes, edges)
    record = MetricsRecord(
        average_path_length=average_path_length(nodes, adjacency),
        clustering_coefficient=average_clustering(nodes, adjacency),
    )
    log.debug(
        "Metrics for %d nodes: L=%.4f C=%.4f",
        len(nodes),
        record.average_path_length,
        record.clustering_coefficient,
    )
    return record


def compute_graph_metrics(graph: Graph) -> MetricsRecord:
    """compute_metrics() on a generated Graph."""
    return compute_metrics(graph.nodes, graph.edges)
