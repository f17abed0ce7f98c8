"""Local and network-average clustering coefficient.

The network average divides by the total node count, including nodes of
degree < 2 whose local coefficient is undefined. Those nodes add nothing
to the sum but still count in the denominator, so leaves and isolated
nodes pull the average down. This differs from the networkx convention
of averaging only over eligible nodes.
"""

from collections.abc import Sequence


def local_clustering(node: int, adjacency: dict[int, list[int]]) -> float | None:
    """Fraction of neighbor pairs of ``node`` that are themselves adjacent.

    Returns:
        None when the node has fewer than two neighbors.
    """
    neighbors = adjacency[node]
    k = len(neighbors)
    if k < 2:
        return None

    triangles = 0
    for i in range(k):
        n1_neighbors = adjacency[neighbors[i]]
        for j in range(i + 1, k):
            if neighbors[j] in n1_neighbors:
                triangles += 1

    return triangles / (k * (k - 1) / 2)


def average_clustering(
    nodes: Sequence[int], adjacency: dict[int, list[int]]
) -> float:
    """Sum of local coefficients over degree >= 2 nodes, over all nodes."""
    if not nodes:
        return 0.0
    total = 0.0
    for node in nodes:
        local = local_clustering(node, adjacency)
        if local is not None:
            total += local
    return total / len(nodes)
