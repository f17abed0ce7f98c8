"""Visualization module: style, sweep figure, and render orchestrator."""

from src.visualization.render import load_result_data, render_all
from src.visualization.style import apply_style, save_figure
from src.visualization.sweep import plot_sweep

__all__ = [
    "apply_style",
    "load_result_data",
    "plot_sweep",
    "render_all",
    "save_figure",
]
