"""Result schema validation, writing, and experiment ID generation."""

from src.results.schema import validate_result, write_result, load_result
from src.results.experiment_id import generate_experiment_id

__all__ = [
    "validate_result",
    "write_result",
    "load_result",
    "generate_experiment_id",
]
