"""Graph generation module for Watts-Strogatz small-world networks."""

from src.graph.types import Graph, PerturbationMode, edge_key
from src.graph.validation import (
    count_components,
    degree_sequence,
    to_sparse_adjacency,
    validate_graph,
)
from src.graph.watts_strogatz import (
    InvalidParameterError,
    add_shortcuts,
    build_ring_lattice,
    generate_from_config,
    generate_watts_strogatz,
    rewire_edges,
    validate_parameters,
)

__all__ = [
    "Graph",
    "InvalidParameterError",
    "PerturbationMode",
    "add_shortcuts",
    "build_ring_lattice",
    "count_components",
    "degree_sequence",
    "edge_key",
    "generate_from_config",
    "generate_watts_strogatz",
    "rewire_edges",
    "to_sparse_adjacency",
    "validate_graph",
    "validate_parameters",
]
