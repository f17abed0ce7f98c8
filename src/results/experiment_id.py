"""Experiment ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from src.config.experiment import ExperimentConfig


def generate_experiment_id(config: ExperimentConfig) -> str:
    """Generate a scannable experiment ID from config parameters.

    Format: n{n}_k{k}_p{p}_{mode}_s{seed}_{YYYYMMDD}_{HHMMSS}_{micros}
    Example: n40_k4_p0.2_rewire_s42_20260224_143012_000512
    """
    ts = datetime.now(timezone.utc)
    g = config.graph
    return (
        f"n{g.n}_k{g.k}_p{g.p:g}_{g.mode}_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S_%f')}"
    )
