"""Explicit random sources for reproducible graph generation.

Nothing in the project draws from a process-wide RNG: every generator call
receives a numpy Generator built here, and sweeps derive per-trial seeds
from the experiment seed.
"""

import numpy as np


def make_rng(seed: int | None) -> np.random.Generator:
    """Explicit random source to inject into the generator.

    None gives an unseeded Generator drawing OS entropy.
    """
    return np.random.default_rng(seed)


def spawn_seeds(seed: int, count: int) -> list[int]:
    """Derive ``count`` independent child seeds from a master seed.

    Uses numpy's SeedSequence so sweep trials do not share streams.
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [int(child.generate_state(1)[0]) for child in children]
