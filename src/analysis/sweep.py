"""Probability sweep: how L and C change as p goes from lattice to random.

For each p in the sweep, n_trials graphs are generated with independent
child seeds and their metrics averaged. Values are also normalized by the
p = 0 ring lattice, L(p)/L(0) and C(p)/C(0), which is the form of the
classic Watts-Strogatz figure: clustering stays high while path length
collapses over a wide range of small p.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from src.config.experiment import ExperimentConfig, SweepConfig
from src.graph.validation import count_components
from src.graph.watts_strogatz import generate_watts_strogatz
from src.metrics.engine import compute_graph_metrics
from src.metrics.types import MetricsRecord
from src.reproducibility.seed import make_rng, spawn_seeds

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SweepPoint:
    """Trial-averaged metrics at one probability value."""

    p: float
    average_path_length: float
    clustering_coefficient: float
    normalized_path_length: float  # L(p) / L(0)
    normalized_clustering: float  # C(p) / C(0)
    connected_fraction: float  # share of trials that formed one component


def _normalize(value: float, baseline: float) -> float:
    return value / baseline if baseline > 0 else 0.0


def lattice_baseline(n: int, k: int) -> MetricsRecord:
    """Metrics of the unperturbed ring lattice for (n, k)."""
    lattice = generate_watts_strogatz(n, k, 0.0, rng=make_rng(0))
    return compute_graph_metrics(lattice)


def run_p_sweep(config: ExperimentConfig) -> list[SweepPoint]:
    """Average metrics over trials for every p in the sweep.

    Uses config.graph for n, k and mode; config.sweep (or SweepConfig()
    defaults when absent) for the p grid and trial count. Trial seeds are
    spawned from config.seed, the same seeds being reused across p values
    so curves differ only in p.

    Returns:
        One SweepPoint per p value, in sweep order.
    """
    sweep = config.sweep if config.sweep is not None else SweepConfig()
    n, k, mode = config.graph.n, config.graph.k, config.graph.mode

    baseline = lattice_baseline(n, k)
    trial_seeds = spawn_seeds(config.seed, sweep.n_trials)
    log.info(
        "Sweeping %d p values x %d trials (n=%d, k=%d, mode=%s); "
        "lattice L0=%.4f C0=%.4f",
        len(sweep.p_values),
        sweep.n_trials,
        n,
        k,
        mode,
        baseline.average_path_length,
        baseline.clustering_coefficient,
    )

    points: list[SweepPoint] = []
    for p in sweep.p_values:
        path_lengths = np.empty(sweep.n_trials)
        clustering = np.empty(sweep.n_trials)
        connected = np.empty(sweep.n_trials, dtype=bool)

        for trial, seed in enumerate(trial_seeds):
            graph = generate_watts_strogatz(n, k, p, mode, rng=make_rng(seed))
            metrics = compute_graph_metrics(graph)
            path_lengths[trial] = metrics.average_path_length
            clustering[trial] = metrics.clustering_coefficient
            connected[trial] = count_components(graph) == 1

        mean_l = float(path_lengths.mean())
        mean_c = float(clustering.mean())
        point = SweepPoint(
            p=float(p),
            average_path_length=mean_l,
            clustering_coefficient=mean_c,
            normalized_path_length=_normalize(
                mean_l, baseline.average_path_length
            ),
            normalized_clustering=_normalize(
                mean_c, baseline.clustering_coefficient
            ),
            connected_fraction=float(connected.mean()),
        )
        log.debug(
            "p=%.4g: L=%.4f C=%.4f connected=%.2f",
            p,
            mean_l,
            mean_c,
            point.connected_fraction,
        )
        points.append(point)

    return points


def sweep_to_dict(points: list[SweepPoint]) -> list[dict[str, Any]]:
    """Convert sweep points to JSON-ready dicts for result.json."""
    return [asdict(point) for point in points]
