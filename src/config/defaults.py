"""Anchor configuration: the single source of truth for default experiment parameters."""

from src.config.experiment import ExperimentConfig

# Anchor config with the interactive app's defaults:
# n=40, k=4, p=0.2, mode="rewire", seed=42, no sweep.
ANCHOR_CONFIG = ExperimentConfig()
