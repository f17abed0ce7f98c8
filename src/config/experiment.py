"""Experiment configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

from src.graph.watts_strogatz import validate_parameters

# Slider bounds of the interactive control panel (caller-side UX only)
N_MIN = 10
N_MAX = 100


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Watts-Strogatz generation parameters."""

    n: int = 40  # number of nodes
    k: int = 4  # initial lattice degree (even)
    p: float = 0.2  # rewiring / shortcut probability
    mode: str = "rewire"  # "rewire" or "add"


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Probability sweep: metrics averaged over n_trials graphs per p value."""

    p_values: tuple[float, ...] = (
        0.0, 0.0001, 0.0003, 0.001, 0.003, 0.01, 0.03, 0.1, 0.3, 1.0,
    )
    n_trials: int = 5


@dataclass(frozen=True, slots=True)
class ExperimentConfig:
    """Top-level experiment configuration composing all sub-configs.

    All fields are frozen and typed. Parameter validation runs in
    __post_init__ to reject invalid configurations early.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    sweep: SweepConfig | None = None
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        validate_parameters(
            self.graph.n, self.graph.k, self.graph.p, self.graph.mode
        )
        if self.sweep is not None:
            if not self.sweep.p_values:
                raise ValueError("sweep.p_values must not be empty")
            bad = [p for p in self.sweep.p_values if not 0.0 <= p <= 1.0]
            if bad:
                raise ValueError(f"sweep.p_values outside [0, 1]: {bad}")
            if self.sweep.n_trials < 1:
                raise ValueError(
                    f"sweep.n_trials must be >= 1, got {self.sweep.n_trials}"
                )


def clamp_graph_config(
    n: int, k: int, p: float, mode: str = "rewire"
) -> GraphConfig:
    """Coerce raw control values into a valid GraphConfig.

    Mirrors the interactive controls: n is held to the slider range,
    k is capped at n - 1 and rounded down to an even value (minimum 2),
    and p is clipped to [0, 1]. The generator itself never clamps.
    """
    n = min(max(int(n), N_MIN), N_MAX)
    k = min(int(k), n - 1)
    k = max(k - k % 2, 2)
    p = min(max(p, 0.0), 1.0)
    return GraphConfig(n=n, k=k, p=p, mode=mode)
