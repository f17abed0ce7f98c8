"""Graph data structures for Watts-Strogatz generation and analysis."""

from dataclasses import dataclass
from enum import Enum


class PerturbationMode(str, Enum):
    """How the ring lattice is perturbed after construction."""

    REWIRE = "rewire"  # classic Watts-Strogatz: move an edge endpoint
    ADD = "add"  # Newman-Watts: add shortcuts, keep lattice edges


def edge_key(a: int, b: int) -> tuple[int, int]:
    """Canonical key for the unordered edge {a, b}."""
    return (a, b) if a < b else (b, a)


@dataclass(frozen=True, slots=True)
class Graph:
    """Immutable undirected graph produced by a single generation call.

    Edges are stored as (source, target) integer pairs in the order the
    generator produced them: lattice edges first in creation order, with
    rewired edges keeping their original slot and added shortcuts appended.
    """

    nodes: tuple[int, ...]
    edges: tuple[tuple[int, int], ...]
    n: int
    k: int
    p: float
    mode: PerturbationMode
    n_skipped: int = 0  # perturbations dropped after exhausting retries

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def edge_keys(self) -> set[tuple[int, int]]:
        """Set of canonical (min, max) keys for every edge."""
        return {edge_key(a, b) for a, b in self.edges}
