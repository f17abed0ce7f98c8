"""Normalized path length and clustering against p (the Watts-Strogatz figure).

Plots L(p)/L(0) and C(p)/C(0) on a log-scaled p axis. Points at p = 0
cannot be placed on a log axis and are dropped; they are 1.0 by definition.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from src.visualization.style import (
    CLUSTERING_COLOR,
    CONNECTED_COLOR,
    PATH_LENGTH_COLOR,
    REFERENCE_COLOR,
)


def plot_sweep(points: Sequence[Mapping[str, Any]]) -> plt.Figure:
    """Plot sweep curves from result.json sweep entries.

    Creates a figure with two subplots:
    - Left: normalized L(p)/L(0) and C(p)/C(0) vs p (log x)
    - Right: raw average path length and clustering vs p (log x), with the
      share of connected trials when available

    Args:
        points: Dicts with keys p, average_path_length, clustering_coefficient,
            normalized_path_length, normalized_clustering and optionally
            connected_fraction.

    Returns:
        The matplotlib Figure.

    Raises:
        ValueError: If no point has p > 0.
    """
    positive = sorted((pt for pt in points if pt["p"] > 0), key=lambda pt: pt["p"])
    if not positive:
        raise ValueError("Sweep has no points with p > 0 to plot on a log axis")

    p = np.array([pt["p"] for pt in positive])
    norm_l = np.array([pt["normalized_path_length"] for pt in positive])
    norm_c = np.array([pt["normalized_clustering"] for pt in positive])
    raw_l = np.array([pt["average_path_length"] for pt in positive])
    raw_c = np.array([pt["clustering_coefficient"] for pt in positive])

    fig, (ax_norm, ax_raw) = plt.subplots(1, 2, figsize=(14, 5))

    ax_norm.plot(
        p, norm_l, color=PATH_LENGTH_COLOR, marker="o", markersize=4,
        linewidth=1.5, label="L(p) / L(0)",
    )
    ax_norm.plot(
        p, norm_c, color=CLUSTERING_COLOR, marker="s", markersize=4,
        linewidth=1.5, label="C(p) / C(0)",
    )
    ax_norm.axhline(1.0, color=REFERENCE_COLOR, linestyle="--", alpha=0.7)
    ax_norm.set_xscale("log")
    ax_norm.set_ylim(0, 1.05)
    ax_norm.set_xlabel("p")
    ax_norm.set_ylabel("Normalized value")
    ax_norm.set_title("Small-world transition")
    ax_norm.legend(fontsize=8)

    ax_raw.plot(
        p, raw_l, color=PATH_LENGTH_COLOR, marker="o", markersize=4,
        linewidth=1.5, label="Average path length",
    )
    ax_raw.set_xscale("log")
    ax_raw.set_xlabel("p")
    ax_raw.set_ylabel("Average path length", color=PATH_LENGTH_COLOR)

    ax_c = ax_raw.twinx()
    ax_c.plot(
        p, raw_c, color=CLUSTERING_COLOR, marker="s", markersize=4,
        linewidth=1.5, label="Clustering coefficient",
    )
    if all("connected_fraction" in pt for pt in positive):
        connected = np.array([pt["connected_fraction"] for pt in positive])
        ax_c.plot(
            p, connected, color=CONNECTED_COLOR, linestyle=":",
            linewidth=1.2, label="Connected fraction",
        )
    ax_c.set_ylim(0, 1.05)
    ax_c.set_ylabel("Clustering / fraction", color=CLUSTERING_COLOR)
    ax_c.grid(False)
    ax_raw.set_title("Raw metrics")

    lines = ax_raw.get_lines() + ax_c.get_lines()
    ax_raw.legend(lines, [line.get_label() for line in lines], fontsize=8)

    fig.tight_layout()
    return fig
