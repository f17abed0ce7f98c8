"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required fields
and types before writing result.json files. Only metrics are persisted; the
generated graph itself is never written out.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.config.experiment import ExperimentConfig
from src.config.hashing import full_config_hash, graph_config_hash
from src.reproducibility.git_hash import get_git_hash
from src.results.experiment_id import generate_experiment_id

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "experiment_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_SCALAR_FIELDS = {"average_path_length", "clustering_coefficient"}

REQUIRED_SWEEP_FIELDS = {
    "p",
    "average_path_length",
    "clustering_coefficient",
    "normalized_path_length",
    "normalized_clustering",
}


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.

    Checks:
    - All required top-level fields are present
    - schema_version is a string, tags a list, config a dict
    - timestamp parses as ISO 8601
    - metrics.scalars holds numeric average_path_length and
      clustering_coefficient, the latter within [0, 1]
    - metrics.sweep, when present, is a list of points with required keys
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if "metrics" in result and not isinstance(metrics, dict):
        errors.append("metrics must be a dict")
        return errors
    if metrics is None:
        return errors

    scalars = metrics.get("scalars")
    if scalars is None:
        errors.append("metrics.scalars is required")
    elif not isinstance(scalars, dict):
        errors.append("metrics.scalars must be a dict")
    else:
        for name in sorted(REQUIRED_SCALAR_FIELDS - set(scalars)):
            errors.append(f"metrics.scalars missing field: {name}")
        for name in sorted(REQUIRED_SCALAR_FIELDS & set(scalars)):
            if not isinstance(scalars[name], (int, float)):
                errors.append(f"metrics.scalars.{name} must be a number")
            elif scalars[name] < 0:
                errors.append(f"metrics.scalars.{name} must be >= 0")
        cc = scalars.get("clustering_coefficient")
        if isinstance(cc, (int, float)) and cc > 1:
            errors.append("metrics.scalars.clustering_coefficient must be <= 1")

    # Optional sweep block
    sweep = metrics.get("sweep")
    if sweep is not None:
        if not isinstance(sweep, list):
            errors.append("metrics.sweep must be a list")
        else:
            for idx, point in enumerate(sweep):
                if not isinstance(point, dict):
                    errors.append(f"metrics.sweep[{idx}] must be a dict")
                    continue
                for name in sorted(REQUIRED_SWEEP_FIELDS - set(point)):
                    errors.append(f"metrics.sweep[{idx}] missing field: {name}")

    return errors


def write_result(
    config: ExperimentConfig,
    metrics: dict[str, Any],
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
) -> str:
    """Write result.json into results/{experiment_id}/.

    Args:
        config: The experiment configuration.
        metrics: Metrics dict (must include 'scalars' key, may include 'sweep').
        metadata: Optional additional metadata to merge into the metadata block.
        results_dir: Base directory for result output.

    Returns:
        The generated experiment_id string.

    Raises:
        ValueError: If the assembled result fails validation. Nothing is
            written in that case.
    """
    experiment_id = generate_experiment_id(config)

    result = {
        "schema_version": SCHEMA_VERSION,
        "experiment_id": experiment_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": metrics,
        "metadata": {
            "code_hash": get_git_hash(),
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            **(metadata or {}),
        },
    }

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    out_dir = Path(results_dir) / experiment_id
    out_dir.mkdir(parents=True, exist_ok=True)
    with open(out_dir / "result.json", "w") as f:
        json.dump(result, f, indent=2)

    return experiment_id


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return result
