"""Tests for evaluate command."""

import json

from click.testing import CliRunner
import pandas as pd
import pytest

from clone_classifier.commands import evaluate as evaluate_module
from clone_classifier.commands.evaluate import evaluate
from clone_classifier.core.config import load_config


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


class TestEvaluate:
    """Tests for evaluating a dataset."""

    def test_evaluate(self, runner, dataset_file):
        result = runner.invoke(evaluate, [str(dataset_file)])

        assert result.exit_code == 0
        assert "Evaluating line matcher (lcs) on 3 pairs" in result.output
        assert "Evaluation Summary" in result.output
        assert "Confusion Matrix" in result.output
        assert "Per-Class Metrics" in result.output

    def test_limit(self, runner, dataset_file):
        result = runner.invoke(evaluate, [str(dataset_file), "-n", "1"])

        assert result.exit_code == 0
        assert "100.0%" in result.output

    def test_csv_export(self, runner, dataset_file, tmp_path):
        misclassified = tmp_path / "out" / "misclassified.csv"
        metrics = tmp_path / "out" / "metrics.csv"

        result = runner.invoke(
            evaluate,
            [
                str(dataset_file),
                "--misclassified-csv",
                str(misclassified),
                "--metrics-csv",
                str(metrics),
            ],
        )

        assert result.exit_code == 0
        assert "Misclassified pairs saved" in result.output

        df = pd.read_csv(misclassified)
        assert list(df["pair_id"]) == ["mislabelled"]
        assert list(df["predicted"]) == ["T1"]

        metrics_df = pd.read_csv(metrics)
        assert list(metrics_df["class"]) == ["T1", "T2", "T3", "FP"]

    def test_progress(self, runner, dataset_file):
        result = runner.invoke(evaluate, [str(dataset_file), "--progress"])

        assert result.exit_code == 0

    def test_nonexistent_file(self, runner):
        result = runner.invoke(evaluate, ["nonexistent.json"])

        assert result.exit_code != 0

    def test_matrix_csv(self, runner, dataset_file, tmp_path):
        matrix = tmp_path / "matrix.csv"

        result = runner.invoke(evaluate, [str(dataset_file), "--matrix-csv", str(matrix)])

        assert result.exit_code == 0
        assert "Confusion matrix saved" in result.output

        df = pd.read_csv(matrix, index_col="truth")
        assert list(df.index) == ["T1", "T2", "T3", "FP"]
        assert list(df.columns) == ["T1", "T2", "T3", "FP"]
        assert df.loc["FP", "T1"] == 1
        assert df.loc["T2", "T2"] == 1
        assert int(df.values.sum()) == 2

    def test_config_loaded_once(self, runner, dataset_file, tmp_path, monkeypatch):
        """Test matching and evaluation settings come from one config load."""
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps({"matching": {"matcher": "token"}, "evaluation": {"limit": 1}})
        )
        loads = []

        def counting_load_config(path=None):
            loads.append(path)
            return load_config(path)

        monkeypatch.setattr(evaluate_module, "load_config", counting_load_config)

        result = runner.invoke(evaluate, [str(dataset_file), "--config", str(config_file)])

        assert result.exit_code == 0
        assert loads == [config_file]
        assert "Evaluating token matcher" in result.output
        assert "100.0%" in result.output
