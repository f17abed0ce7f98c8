"""Metric record returned by the metrics engine."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class MetricsRecord:
    """Topology summary of one graph snapshot."""

    average_path_length: float = 0.0  # mean hops over reachable pairs
    clustering_coefficient: float = 0.0  # in [0, 1]

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
