"""Tests for MLflow tracking helpers that do not need a tracking server."""

import mlflow

from regression_lab.evaluation import ComparisonTable, EvaluationRecord
from regression_lab.utils import mlflow_tracking


def test_tracking_uri_honors_env(monkeypatch):
    monkeypatch.setenv("MLFLOW_TRACKING_URI", "file:///tmp/elsewhere")
    assert mlflow_tracking.get_tracking_uri() == "file:///tmp/elsewhere"


def test_tracking_uri_default(monkeypatch):
    monkeypatch.delenv("MLFLOW_TRACKING_URI", raising=False)
    uri = mlflow_tracking.get_tracking_uri()
    assert uri.startswith("file://")
    assert uri.endswith("mlruns")


def test_metric_key_replaces_unsafe_characters():
    assert mlflow_tracking.metric_key("ols_5", "test_rmse") == "ols_5.test_rmse"
    assert mlflow_tracking.metric_key("ridge(0.4)", "train_rmse") == "ridge_0.4_.train_rmse"


def test_comparison_metrics():
    table = ComparisonTable([EvaluationRecord("ols_1", "-3.00 X + 1.00", 0.9, 1.1, 3.0)])
    assert mlflow_tracking.comparison_metrics(table) == {
        "ols_1.train_rmse": 0.9,
        "ols_1.test_rmse": 1.1,
        "ols_1.sum_abs_weights": 3.0,
    }


def test_setup_mlflow_sets_the_given_store(tmp_path):
    uri = (tmp_path / "mlruns").as_uri()
    assert mlflow_tracking.setup_mlflow(uri) == uri
    assert mlflow.get_tracking_uri() == uri


def test_get_or_create_experiment_reuses_existing(tmp_path):
    mlflow_tracking.setup_mlflow((tmp_path / "mlruns").as_uri())
    created = mlflow_tracking.get_or_create_experiment("walkthrough_test")
    assert mlflow_tracking.get_or_create_experiment("walkthrough_test") == created
    assert mlflow.get_experiment(created).name == "walkthrough_test"
