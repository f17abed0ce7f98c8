"""Figure theme and output helpers for sweep plots.

Curves are colored by metric: path length, clustering, and the share of
connected trials each get a fixed entry of seaborn's colorblind palette so
the same quantity looks the same across every figure.
"""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns

PALETTE = sns.color_palette("colorblind", n_colors=8)
PATH_LENGTH_COLOR = PALETTE[0]
CLUSTERING_COLOR = PALETTE[3]
CONNECTED_COLOR = PALETTE[2]
REFERENCE_COLOR = (0.5, 0.5, 0.5)

FIGURE_FORMATS = ("png", "svg")
RASTER_DPI = 300

# Sized for two log-x panels side by side.
_RC_OVERRIDES = {
    "figure.figsize": (10, 4),
    "figure.dpi": 120,
    "savefig.dpi": RASTER_DPI,
    "savefig.bbox": "tight",
    "lines.linewidth": 1.5,
    "lines.markersize": 5,
    "legend.frameon": False,
    "svg.fonttype": "none",
}


def apply_style() -> None:
    """Switch matplotlib to the project theme. Safe to call repeatedly."""
    sns.set_theme(context="paper", style="whitegrid", palette=PALETTE, rc=_RC_OVERRIDES)


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, Path]:
    """Write ``fig`` to ``output_dir/name.png`` and ``name.svg`` and close it.

    Returns:
        (png_path, svg_path)
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = [output_dir / f"{name}.{fmt}" for fmt in FIGURE_FORMATS]
    try:
        for path in paths:
            fig.savefig(path, dpi=RASTER_DPI if path.suffix == ".png" else "figure")
    finally:
        plt.close(fig)
    png_path, svg_path = paths
    return png_path, svg_path
