"""Reproducibility infrastructure: explicit random sources and code provenance tracking."""

from src.reproducibility.seed import make_rng, spawn_seeds
from src.reproducibility.git_hash import get_git_hash

__all__ = [
    "make_rng",
    "spawn_seeds",
    "get_git_hash",
]
