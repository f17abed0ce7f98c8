#!/usr/bin/env python3
"""Entry point for running small-world network experiments.

Chains all pipeline stages into a single executable command:
graph generation -> metrics -> probability sweep (optional) ->
result.json -> figures.

Usage:
    python run_experiment.py
    python run_experiment.py --config config.json
    python run_experiment.py --n 100 --k 6 --p 0.05 --mode add --sweep
    python run_experiment.py --config config.json --dry-run --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from src.config import (
    ANCHOR_CONFIG,
    ExperimentConfig,
    SweepConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
)
from src.results import generate_experiment_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.2f}s")
    log.info("Completed: %s in %.2fs", name, elapsed)


def run_pipeline(config: ExperimentConfig, results_dir: str = "results") -> Path:
    """Execute the full experiment pipeline.

    Args:
        config: Validated experiment configuration.
        results_dir: Base directory for results output.

    Returns:
        Path to the output directory.
    """
    from src.analysis import run_p_sweep, sweep_to_dict
    from src.graph import count_components, generate_from_config, validate_graph
    from src.metrics import compute_graph_metrics
    from src.results import write_result
    from src.visualization import render_all

    pipeline_start = time.monotonic()

    with stage_timer("Graph Generation"):
        graph = generate_from_config(config)
        errors = validate_graph(graph)
        if errors:
            raise RuntimeError("Generated graph is invalid: " + "; ".join(errors))
        n_components = count_components(graph)
        log.info(
            "Graph: %d nodes, %d edges, %d components, %d skipped perturbations",
            graph.n,
            graph.num_edges,
            n_components,
            graph.n_skipped,
        )

    with stage_timer("Metrics"):
        metrics = compute_graph_metrics(graph)
        print(f"  Average path length:    {metrics.average_path_length:.4f}")
        print(f"  Clustering coefficient: {metrics.clustering_coefficient:.4f}")

    result_metrics = {
        "scalars": {
            **metrics.to_dict(),
            "num_edges": graph.num_edges,
            "num_components": n_components,
            "skipped_perturbations": graph.n_skipped,
        }
    }

    if config.sweep is not None:
        with stage_timer("Probability Sweep"):
            points = run_p_sweep(config)
            result_metrics["sweep"] = sweep_to_dict(points)
            log.info("Sweep complete: %d points", len(points))

    with stage_timer("Write Result JSON"):
        experiment_id = write_result(
            config, result_metrics, results_dir=results_dir
        )
        output_dir = Path(results_dir) / experiment_id
        log.info("result.json written to %s", output_dir)

    figures: list[Path] = []
    if config.sweep is not None:
        with stage_timer("Visualization"):
            figures = render_all(output_dir)
            log.info("Generated %d figure files", len(figures))

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Pipeline complete in {total_elapsed:.2f}s")
    print(f"  Experiment: {experiment_id}")
    print(f"  Output:     {output_dir}")
    print(f"  Result:     {output_dir / 'result.json'}")
    print(f"  Figures:    {len(figures)} files")
    print(f"{'=' * 60}")

    return output_dir


def build_config(args: argparse.Namespace) -> ExperimentConfig:
    """Load the config file (or the anchor config) and apply CLI overrides."""
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"config file not found: {config_path}")
        config = config_from_json(config_path.read_text())
    else:
        config = ANCHOR_CONFIG

    graph_overrides = {
        name: getattr(args, name)
        for name in ("n", "k", "p", "mode")
        if getattr(args, name) is not None
    }
    graph = replace(config.graph, **graph_overrides)

    sweep = config.sweep
    if args.sweep and sweep is None:
        sweep = SweepConfig()
    if args.trials is not None:
        sweep = replace(sweep or SweepConfig(), n_trials=args.trials)

    seed = args.seed if args.seed is not None else config.seed
    # Rebuilding via replace() re-runs __post_init__ validation
    return replace(config, graph=graph, sweep=sweep, seed=seed)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a Watts-Strogatz network and compute its metrics"
    )
    parser.add_argument("--config", type=str, help="Path to experiment config JSON file")
    parser.add_argument("--n", type=int, help="Number of nodes")
    parser.add_argument("--k", type=int, help="Initial lattice degree (even)")
    parser.add_argument("--p", type=float, help="Rewiring / shortcut probability")
    parser.add_argument("--mode", choices=["rewire", "add"], help="Perturbation mode")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Run the probability sweep with default settings if the config has none",
    )
    parser.add_argument("--trials", type=int, help="Trials per p value in the sweep")
    parser.add_argument(
        "--results-dir", type=str, default="results", help="Base output directory"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show pipeline plan without running the experiment",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    experiment_id = generate_experiment_id(config)
    print(f"Experiment ID: {experiment_id}")
    print(f"Config hash:   {full_config_hash(config)}")
    print(f"Graph hash:    {graph_config_hash(config)}")
    print()
    print(f"Graph:    n={config.graph.n}, k={config.graph.k}, "
          f"p={config.graph.p}, mode={config.graph.mode}")
    if config.sweep is not None:
        print(f"Sweep:    {len(config.sweep.p_values)} p values, "
              f"{config.sweep.n_trials} trials each")
    print(f"Seed:     {config.seed}")

    if args.dry_run:
        print(f"\nPipeline plan for experiment {experiment_id}:")
        print(f"  1. Graph generation: n={config.graph.n}, k={config.graph.k}, "
              f"p={config.graph.p}, mode={config.graph.mode}")
        print(f"  2. Metrics: average path length + clustering coefficient")
        if config.sweep is not None:
            print(f"  3. Sweep: p in {list(config.sweep.p_values)}")
            print(f"  4. Visualization: sweep figure to figures/")
        print(f"\nOutput: {args.results_dir}/{experiment_id}/")
        print(f"\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(config, results_dir=args.results_dir)
    except Exception:
        log.exception("Pipeline failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
