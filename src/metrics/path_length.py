"""Average shortest-path length via breadth-first search from every node.

Each unordered pair (s, t) is counted once, from the smaller id. Pairs with
no connecting path are left out of both the sum and the count instead of
contributing an infinite distance, so on a disconnected graph the result
is the mean over reachable pairs only.
"""

from collections import deque
from collections.abc import Sequence


def bfs_distances(source: int, adjacency: dict[int, list[int]]) -> dict[int, int]:
    """Hop distance from source to every node reachable from it.

    Args:
        source: Start node.
        adjacency: Node -> neighbor list mapping.

    Returns:
        Dict node -> distance, including source itself at distance 0.
    """
    distances = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, ()):
            if v not in distances:
                distances[v] = distances[u] + 1
                queue.append(v)
    return distances


def average_path_length(
    nodes: Sequence[int], adjacency: dict[int, list[int]]
) -> float:
    """Mean shortest-path length over reachable unordered node pairs.

    Returns:
        0.0 when no pair is reachable (empty graph, single node, or all
        nodes isolated).
    """
    total = 0
    count = 0
    for source in sorted(nodes):
        for target, dist in bfs_distances(source, adjacency).items():
            if target > source:
                total += dist
                count += 1
    return total / count if count > 0 else 0.0
