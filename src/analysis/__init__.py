"""Analysis module: metric curves across the lattice-to-random transition."""

from src.analysis.sweep import (
    SweepPoint,
    lattice_baseline,
    run_p_sweep,
    sweep_to_dict,
)

__all__ = [
    "SweepPoint",
    "lattice_baseline",
    "run_p_sweep",
    "sweep_to_dict",
]
