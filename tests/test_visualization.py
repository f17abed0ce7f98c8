"""Tests for the visualization module.

Tests cover: style application, dual-format save, palette constants,
the sweep figure, and the render orchestrator.
"""

import json

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


SWEEP_POINTS = [
    {
        "p": 0.0,
        "average_path_length": 5.0,
        "clustering_coefficient": 0.5,
        "normalized_path_length": 1.0,
        "normalized_clustering": 1.0,
        "connected_fraction": 1.0,
    },
    {
        "p": 0.01,
        "average_path_length": 3.0,
        "clustering_coefficient": 0.48,
        "normalized_path_length": 0.6,
        "normalized_clustering": 0.96,
        "connected_fraction": 1.0,
    },
    {
        "p": 1.0,
        "average_path_length": 2.0,
        "clustering_coefficient": 0.05,
        "normalized_path_length": 0.4,
        "normalized_clustering": 0.1,
        "connected_fraction": 0.8,
    },
]


# ── Style and Save Tests ──────────────────────────────────────────────


def test_apply_style_sets_whitegrid():
    """apply_style() sets seaborn whitegrid and the sweep-figure rcParams."""
    from src.visualization.style import apply_style

    apply_style()
    assert plt.rcParams["savefig.dpi"] == 300
    assert plt.rcParams["axes.grid"] is True
    assert plt.rcParams["savefig.bbox"] == "tight"
    assert plt.rcParams["svg.fonttype"] == "none"


def test_save_figure_creates_png_and_svg(tmp_path):
    """save_figure creates both PNG and SVG, closes figure."""
    from src.visualization.style import save_figure

    fig, ax = plt.subplots()
    ax.plot([1, 2, 3], [1, 2, 3])
    fig_num = fig.number

    png_path, svg_path = save_figure(fig, tmp_path / "sub", "test_plot")

    assert png_path.exists()
    assert svg_path.exists()
    assert png_path.stat().st_size > 0
    assert fig_num not in plt.get_fignums()


def test_palette_colors_are_rgb():
    from src.visualization.style import CLUSTERING_COLOR, PALETTE, PATH_LENGTH_COLOR

    assert len(PALETTE) >= 8
    for color in (CLUSTERING_COLOR, PATH_LENGTH_COLOR):
        assert len(color) >= 3
        assert all(0 <= c <= 1 for c in color[:3])


# ── Sweep Figure ──────────────────────────────────────────────────────


def test_plot_sweep_returns_figure():
    from src.visualization.sweep import plot_sweep

    fig = plot_sweep(SWEEP_POINTS)
    assert isinstance(fig, plt.Figure)
    # normalized axis, raw axis, and its twin
    assert len(fig.axes) == 3
    assert fig.axes[0].get_xscale() == "log"
    # p = 0 is dropped from the log axis
    line = fig.axes[0].get_lines()[0]
    assert list(line.get_xdata()) == [0.01, 1.0]
    plt.close(fig)


def test_plot_sweep_without_connected_fraction():
    from src.visualization.sweep import plot_sweep

    points = [{k: v for k, v in pt.items() if k != "connected_fraction"} for pt in SWEEP_POINTS]
    fig = plot_sweep(points)
    assert len(fig.axes[2].get_lines()) == 1
    plt.close(fig)


def test_plot_sweep_requires_positive_p():
    from src.visualization.sweep import plot_sweep

    with pytest.raises(ValueError, match="p > 0"):
        plot_sweep(SWEEP_POINTS[:1])


# ── Render Orchestrator ───────────────────────────────────────────────


def _write_result(result_dir, sweep):
    result_dir.mkdir(parents=True, exist_ok=True)
    metrics = {"scalars": {"average_path_length": 2.0, "clustering_coefficient": 0.3}}
    if sweep is not None:
        metrics["sweep"] = sweep
    (result_dir / "result.json").write_text(json.dumps({"metrics": metrics}))


def test_render_all_writes_sweep_figure(tmp_path):
    from src.visualization.render import render_all

    _write_result(tmp_path, SWEEP_POINTS)
    files = render_all(tmp_path)
    names = sorted(p.name for p in files)
    assert names == ["sweep.png", "sweep.svg"]
    assert (tmp_path / "figures" / "sweep.png").exists()


def test_render_all_without_sweep(tmp_path):
    from src.visualization.render import render_all

    _write_result(tmp_path, None)
    assert render_all(tmp_path) == []


def test_render_all_logs_plot_failure(tmp_path, caplog):
    """A failing plot is logged and does not raise."""
    from src.visualization.render import render_all

    _write_result(tmp_path, SWEEP_POINTS[:1])
    files = render_all(tmp_path)
    assert files == []
    assert "Failed to generate sweep" in caplog.text


def test_load_result_data(tmp_path):
    from src.visualization.render import load_result_data

    _write_result(tmp_path, SWEEP_POINTS)
    data = load_result_data(tmp_path)
    assert data["scalars"]["clustering_coefficient"] == 0.3
    assert len(data["sweep"]) == 3
