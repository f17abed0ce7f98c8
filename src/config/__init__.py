"""Experiment configuration system with frozen, hashable, serializable dataclasses."""

from src.config.experiment import (
    ExperimentConfig,
    GraphConfig,
    SweepConfig,
    clamp_graph_config,
)
from src.config.defaults import ANCHOR_CONFIG
from src.config.hashing import config_hash, graph_config_hash, full_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "ExperimentConfig",
    "GraphConfig",
    "SweepConfig",
    "ANCHOR_CONFIG",
    "clamp_graph_config",
    "config_hash",
    "graph_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
