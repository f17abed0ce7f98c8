"""Tests for the result schema validation, writing, and experiment ID generation."""

import json
import re
from dataclasses import replace

import pytest

from src.config import ANCHOR_CONFIG, GraphConfig
from src.results import validate_result, write_result, load_result, generate_experiment_id


class TestValidateResult:
    """validate_result accepts valid dicts and rejects invalid ones."""

    @pytest.fixture
    def valid_result(self):
        return {
            "schema_version": "1.0",
            "experiment_id": "n40_k4_p0.2_rewire_s42_20260224_120000_000000",
            "timestamp": "2026-02-24T12:00:00+00:00",
            "description": "test experiment",
            "tags": ["test"],
            "config": {"graph": {"n": 40}},
            "metrics": {
                "scalars": {
                    "average_path_length": 2.5,
                    "clustering_coefficient": 0.4,
                }
            },
        }

    def test_validate_result_valid(self, valid_result):
        assert validate_result(valid_result) == []

    def test_validate_result_missing_fields(self):
        errors = validate_result({"schema_version": "1.0"})
        assert any("Missing required" in e for e in errors)

    def test_validate_result_missing_scalars(self, valid_result):
        valid_result["metrics"] = {"sweep": []}
        errors = validate_result(valid_result)
        assert any("scalars" in e for e in errors)

    def test_validate_result_missing_scalar_field(self, valid_result):
        del valid_result["metrics"]["scalars"]["clustering_coefficient"]
        errors = validate_result(valid_result)
        assert any("clustering_coefficient" in e for e in errors)

    def test_validate_result_clustering_above_one(self, valid_result):
        valid_result["metrics"]["scalars"]["clustering_coefficient"] = 1.5
        errors = validate_result(valid_result)
        assert any("<= 1" in e for e in errors)

    def test_validate_result_negative_path_length(self, valid_result):
        valid_result["metrics"]["scalars"]["average_path_length"] = -1.0
        errors = validate_result(valid_result)
        assert any(">= 0" in e for e in errors)

    def test_validate_result_non_numeric_scalar(self, valid_result):
        valid_result["metrics"]["scalars"]["average_path_length"] = "long"
        errors = validate_result(valid_result)
        assert any("must be a number" in e for e in errors)

    def test_validate_result_bad_timestamp(self, valid_result):
        valid_result["timestamp"] = "yesterday"
        errors = validate_result(valid_result)
        assert any("ISO 8601" in e for e in errors)

    def test_validate_result_bad_tags(self, valid_result):
        valid_result["tags"] = "test"
        assert "tags must be a list" in validate_result(valid_result)

    def test_validate_result_sweep_ok(self, valid_result):
        valid_result["metrics"]["sweep"] = [
            {
                "p": 0.1,
                "average_path_length": 2.0,
                "clustering_coefficient": 0.3,
                "normalized_path_length": 0.5,
                "normalized_clustering": 0.8,
            }
        ]
        assert validate_result(valid_result) == []

    def test_validate_result_sweep_missing_field(self, valid_result):
        valid_result["metrics"]["sweep"] = [{"p": 0.1}]
        errors = validate_result(valid_result)
        assert any("metrics.sweep[0] missing field" in e for e in errors)

    def test_validate_result_sweep_not_list(self, valid_result):
        valid_result["metrics"]["sweep"] = {"p": 0.1}
        assert "metrics.sweep must be a list" in validate_result(valid_result)


class TestWriteResult:
    """write_result writes a valid result.json and load_result reads it back."""

    @pytest.fixture
    def metrics(self):
        return {
            "scalars": {
                "average_path_length": 3.1,
                "clustering_coefficient": 0.42,
                "num_edges": 80,
            }
        }

    def test_write_and_load(self, tmp_path, metrics):
        experiment_id = write_result(ANCHOR_CONFIG, metrics, results_dir=tmp_path)
        result_path = tmp_path / experiment_id / "result.json"
        assert result_path.exists()

        result = load_result(result_path)
        assert result["experiment_id"] == experiment_id
        assert result["metrics"]["scalars"]["num_edges"] == 80
        assert result["config"]["graph"]["n"] == 40
        assert "config_hash" in result["metadata"]
        assert "graph_config_hash" in result["metadata"]
        assert "code_hash" in result["metadata"]

    def test_extra_metadata_merged(self, tmp_path, metrics):
        experiment_id = write_result(
            ANCHOR_CONFIG, metrics, metadata={"note": "hi"}, results_dir=tmp_path
        )
        result = load_result(tmp_path / experiment_id / "result.json")
        assert result["metadata"]["note"] == "hi"

    def test_invalid_metrics_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="validation failed"):
            write_result(ANCHOR_CONFIG, {"scalars": {}}, results_dir=tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "result.json"
        path.write_text(json.dumps({"schema_version": "1.0"}))
        with pytest.raises(ValueError):
            load_result(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_result(tmp_path / "nope.json")


class TestExperimentId:
    """Experiment IDs encode the generation parameters."""

    def test_format(self):
        experiment_id = generate_experiment_id(ANCHOR_CONFIG)
        assert re.match(r"^n40_k4_p0\.2_rewire_s42_\d{8}_\d{6}_\d{6}$", experiment_id)

    def test_mode_and_probability(self):
        cfg = replace(ANCHOR_CONFIG, graph=GraphConfig(n=100, k=6, p=0.05, mode="add"), seed=7)
        assert generate_experiment_id(cfg).startswith("n100_k6_p0.05_add_s7_")
