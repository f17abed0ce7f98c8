"""Neighbor-list adjacency built fresh from a node/edge snapshot."""

from collections.abc import Iterable, Sequence


def build_adjacency(
    nodes: Sequence[int], edges: Iterable[tuple[int, int]]
) -> dict[int, list[int]]:
    """Map every node to its neighbors, in edge order.

    Each undirected edge (a, b) appends b to a's list and a to b's list.
    Nodes with no edges map to an empty list.
    """
    adjacency: dict[int, list[int]] = {node: [] for node in nodes}
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def is_symmetric(adjacency: dict[int, list[int]]) -> bool:
    """True if v is a neighbor of u exactly when u is a neighbor of v."""
    for u, neighbors in adjacency.items():
        for v in neighbors:
            if u not in adjacency.get(v, ()):
                return False
    return True
