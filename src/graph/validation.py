"""Structural validation and sparse-matrix views of generated graphs.

The generator guarantees a simple undirected graph: no self-loops, no two
edges sharing an unordered endpoint pair, every endpoint a valid node id.
validate_graph() re-checks those guarantees and reports every violation
rather than stopping at the first.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from src.graph.types import Graph, edge_key

log = logging.getLogger(__name__)


def validate_graph(graph: Graph) -> list[str]:
    """Validate a graph against the simple-undirected-graph invariants.

    Checks:
    1. Node ids are exactly 0..n-1 in ascending order
    2. Every edge endpoint is a valid node id
    3. No self-loops
    4. No duplicate unordered endpoint pairs

    Args:
        graph: Graph to check.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    n = len(graph.nodes)

    if graph.nodes != tuple(range(n)):
        errors.append("Node ids are not 0..n-1 in ascending order")
    if n != graph.n:
        errors.append(f"Node count {n} does not match n={graph.n}")

    seen: set[tuple[int, int]] = set()
    for a, b in graph.edges:
        if not (0 <= a < n and 0 <= b < n):
            errors.append(f"Edge ({a}, {b}) has an endpoint outside [0, {n})")
            continue
        if a == b:
            errors.append(f"Self-loop at node {a}")
            continue
        key = edge_key(a, b)
        if key in seen:
            errors.append(f"Duplicate edge {key}")
        seen.add(key)

    return errors


def degree_sequence(graph: Graph) -> np.ndarray:
    """Degree of every node, indexed by node id."""
    degrees = np.zeros(graph.n, dtype=np.int64)
    for a, b in graph.edges:
        degrees[a] += 1
        degrees[b] += 1
    return degrees


def to_sparse_adjacency(graph: Graph) -> scipy.sparse.csr_matrix:
    """Symmetric 0/1 adjacency matrix of the graph (n x n)."""
    n = graph.n
    if not graph.edges:
        return scipy.sparse.csr_matrix((n, n), dtype=np.float64)
    src, dst = zip(*graph.edges)
    rows = np.concatenate([src, dst])
    cols = np.concatenate([dst, src])
    data = np.ones(len(rows), dtype=np.float64)
    adj = scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))
    # Duplicate entries would sum; clip back to binary
    adj.data[:] = np.minimum(adj.data, 1.0)
    return adj


def count_components(graph: Graph) -> int:
    """Number of connected components (isolated nodes count as one each)."""
    if graph.n == 0:
        return 0
    n_components, _ = connected_components(
        to_sparse_adjacency(graph), directed=False
    )
    log.debug("Graph n=%d has %d components", graph.n, n_components)
    return int(n_components)
