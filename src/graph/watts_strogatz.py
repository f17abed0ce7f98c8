"""Watts-Strogatz small-world graph generator.

Builds a regular ring lattice in which every node is joined to its k/2
nearest neighbours on each side, then perturbs it in one of two ways:

1. Rewire (Watts & Strogatz 1998): each lattice edge keeps its source and,
   with probability p, moves its target to a uniformly random node.
2. Add (Newman & Watts 1999): for each lattice edge, with probability p a
   new shortcut is added from the same source to a random node.

Target selection is rejection sampling bounded at max_attempts draws; when
the bound is hit the perturbation for that edge is skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from src.graph.types import Graph, PerturbationMode, edge_key
from src.reproducibility.seed import make_rng

if TYPE_CHECKING:
    from src.config.experiment import ExperimentConfig

log = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when generation parameters violate the generator's contract."""


def validate_parameters(
    n: int, k: int, p: float, mode: PerturbationMode | str
) -> PerturbationMode:
    """Check generation parameters and resolve the perturbation mode.

    Args:
        n: Number of nodes.
        k: Initial lattice degree (even, 2 <= k <= n - 1).
        p: Rewiring/addition probability in [0, 1].
        mode: "rewire" or "add" (or the enum member).

    Returns:
        The resolved PerturbationMode.

    Raises:
        InvalidParameterError: On any violation. Values are never clamped.
    """
    for name, value in (("n", n), ("k", k)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidParameterError(
                f"{name} must be an integer, got {value!r}"
            )
    if n < 2:
        raise InvalidParameterError(f"n must be >= 2, got {n}")
    if k % 2 != 0:
        raise InvalidParameterError(f"k must be even, got {k}")
    if k < 2:
        raise InvalidParameterError(f"k must be >= 2, got {k}")
    if k > n - 1:
        raise InvalidParameterError(f"k ({k}) must be <= n - 1 ({n - 1})")
    if not 0.0 <= p <= 1.0:
        raise InvalidParameterError(f"p must be in [0, 1], got {p}")
    try:
        return PerturbationMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in PerturbationMode)
        raise InvalidParameterError(
            f"mode must be one of {{{valid}}}, got {mode!r}"
        ) from None


def build_ring_lattice(
    n: int, k: int
) -> tuple[list[tuple[int, int]], set[tuple[int, int]]]:
    """Build the regular ring lattice.

    For each node i ascending and each offset j in [1, k/2] ascending, adds
    edge (i, (i + j) mod n) unless the unordered pair is already present.

    Returns:
        (edges, keys): edges in creation order and their canonical key set.
    """
    edges: list[tuple[int, int]] = []
    keys: set[tuple[int, int]] = set()
    for i in range(n):
        for j in range(1, k // 2 + 1):
            target = (i + j) % n
            key = edge_key(i, target)
            if key not in keys:
                edges.append((i, target))
                keys.add(key)
    return edges, keys


def _resolve_max_attempts(max_attempts: int | None, n: int) -> int:
    """Default the per-edge draw budget to n and reject budgets below one."""
    if max_attempts is None:
        return n
    if max_attempts < 1:
        raise InvalidParameterError(
            f"max_attempts must be >= 1, got {max_attempts}"
        )
    return max_attempts


def _draw_target(
    source: int,
    n: int,
    keys: set[tuple[int, int]],
    rng: np.random.Generator,
    max_attempts: int,
) -> int | None:
    """Draw a node that is neither source nor already adjacent to it."""
    for _ in range(max_attempts):
        candidate = int(rng.integers(0, n))
        if candidate != source and edge_key(source, candidate) not in keys:
            return candidate
    return None


def rewire_edges(
    edges: list[tuple[int, int]],
    keys: set[tuple[int, int]],
    n: int,
    p: float,
    rng: np.random.Generator,
    max_attempts: int | None = None,
) -> int:
    """Rewire lattice edges in place (classic Watts-Strogatz).

    Every edge is visited once in list order. With probability p its target
    is replaced by a node drawn uniformly from [0, n) that is neither the
    source nor already connected to it, checked against the current key set.
    The rewired edge keeps its position in ``edges``.

    Args:
        edges: Edge list, mutated in place.
        keys: Canonical key set, kept in sync with ``edges``.
        n: Number of nodes.
        p: Rewiring probability.
        rng: Random source.
        max_attempts: Draws allowed per edge (defaults to n).

    Returns:
        Number of edges whose rewiring was skipped after exhausting draws.
    """
    max_attempts = _resolve_max_attempts(max_attempts, n)
    skipped = 0

    for idx in range(len(edges)):
        if rng.random() >= p:
            continue
        source, old_target = edges[idx]
        new_target = _draw_target(source, n, keys, rng, max_attempts)
        if new_target is None:
            skipped += 1
            log.debug(
                "Rewire of edge (%d, %d) skipped after %d attempts",
                source,
                old_target,
                max_attempts,
            )
            continue
        keys.discard(edge_key(source, old_target))
        keys.add(edge_key(source, new_target))
        edges[idx] = (source, new_target)

    return skipped


def add_shortcuts(
    edges: list[tuple[int, int]],
    keys: set[tuple[int, int]],
    n: int,
    p: float,
    rng: np.random.Generator,
    max_attempts: int | None = None,
) -> int:
    """Add shortcut edges (Newman-Watts variant), appending to ``edges``.

    Iterates over a snapshot of the edges present on entry, so shortcuts
    added during the pass are never themselves visited. With probability p
    a new edge from the visited edge's source to a random free node is
    appended.

    Returns:
        Number of shortcuts skipped after exhausting draws.
    """
    max_attempts = _resolve_max_attempts(max_attempts, n)
    skipped = 0

    for source, _ in list(edges):
        if rng.random() >= p:
            continue
        new_target = _draw_target(source, n, keys, rng, max_attempts)
        if new_target is None:
            skipped += 1
            log.debug(
                "Shortcut from node %d skipped after %d attempts",
                source,
                max_attempts,
            )
            continue
        edges.append((source, new_target))
        keys.add(edge_key(source, new_target))

    return skipped


def generate_watts_strogatz(
    n: int,
    k: int,
    p: float,
    mode: PerturbationMode | str = PerturbationMode.REWIRE,
    rng: np.random.Generator | None = None,
    max_attempts: int | None = None,
) -> Graph:
    """Generate a small-world graph.

    Args:
        n: Number of nodes (>= 2).
        k: Initial lattice degree (even, 2 <= k <= n - 1).
        p: Perturbation probability in [0, 1].
        mode: "rewire" or "add".
        rng: Random source. A fresh unseeded generator is used if None;
            pass a seeded one for reproducible graphs.
        max_attempts: Target draws allowed per perturbed edge (defaults to n).

    Returns:
        The generated Graph.

    Raises:
        InvalidParameterError: If parameters are invalid. Raised before any
            generation work.
    """
    resolved_mode = validate_parameters(n, k, p, mode)
    max_attempts = _resolve_max_attempts(max_attempts, n)
    if rng is None:
        rng = make_rng(None)

    edges, keys = build_ring_lattice(n, k)
    lattice_size = len(edges)

    if resolved_mode is PerturbationMode.REWIRE:
        skipped = rewire_edges(edges, keys, n, p, rng, max_attempts)
    else:
        skipped = add_shortcuts(edges, keys, n, p, rng, max_attempts)

    log.info(
        "Generated %s graph (n=%d, k=%d, p=%.4f): %d lattice edges, "
        "%d final edges, %d skipped",
        resolved_mode.value,
        n,
        k,
        p,
        lattice_size,
        len(edges),
        skipped,
    )

    return Graph(
        nodes=tuple(range(n)),
        edges=tuple(edges),
        n=n,
        k=k,
        p=p,
        mode=resolved_mode,
        n_skipped=skipped,
    )


def generate_from_config(config: ExperimentConfig) -> Graph:
    """Generate the graph described by an ExperimentConfig.

    Seeds a numpy Generator from ``config.seed`` so the same config always
    yields the same graph.
    """
    rng = make_rng(config.seed)
    return generate_watts_strogatz(
        config.graph.n,
        config.graph.k,
        config.graph.p,
        config.graph.mode,
        rng=rng,
    )
