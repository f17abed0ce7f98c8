"""Orchestrator: render all figures for a single experiment.

Reads result.json, calls the plot functions that have data, and saves to
results/{experiment_id}/figures/ as PNG + SVG.
"""

import json
import logging
from pathlib import Path
from typing import Any

from src.visualization.style import apply_style, save_figure

log = logging.getLogger(__name__)


def load_result_data(result_dir: str | Path) -> dict[str, Any]:
    """Load result.json from an experiment directory.

    Returns:
        Dict with keys:
        - result: The parsed result.json dict
        - scalars: metrics.scalars (or empty dict)
        - sweep: metrics.sweep (or empty list)
    """
    result_dir = Path(result_dir)
    with open(result_dir / "result.json") as f:
        result = json.load(f)

    metrics = result.get("metrics", {})
    return {
        "result": result,
        "scalars": metrics.get("scalars", {}),
        "sweep": metrics.get("sweep", []),
    }


def render_all(result_dir: str | Path) -> list[Path]:
    """Generate all figures for a single experiment.

    Each plot type is wrapped in try/except so one failure doesn't block
    the others.

    Args:
        result_dir: Path to results/{experiment_id}/ directory.

    Returns:
        List of paths to generated figure files.
    """
    apply_style()

    result_dir = Path(result_dir)
    data = load_result_data(result_dir)
    figures_dir = result_dir / "figures"
    generated_files: list[Path] = []

    if data["sweep"]:
        try:
            from src.visualization.sweep import plot_sweep

            fig = plot_sweep(data["sweep"])
            paths = save_figure(fig, figures_dir, "sweep")
            generated_files.extend(paths)
            log.info("Generated: sweep")
        except Exception as e:
            log.warning("Failed to generate sweep: %s", e)
    else:
        log.info("No sweep data in %s, skipping sweep figure", result_dir)

    return generated_files
