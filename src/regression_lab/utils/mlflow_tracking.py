"""MLflow helpers for walkthrough runs: tracking target, experiment, metric keys."""

from __future__ import annotations

import logging
import os
import re

import mlflow

from regression_lab.config import ARTIFACTS_DIR
from regression_lab.evaluation.harness import ComparisonTable

log = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_\-./ ]")
RECORD_METRICS = ("train_rmse", "test_rmse", "sum_abs_weights")


def get_tracking_uri() -> str:
    """``MLFLOW_TRACKING_URI`` if set, else a file store under the artifacts dir."""
    default = (ARTIFACTS_DIR / "mlruns").resolve().as_uri()
    return os.getenv("MLFLOW_TRACKING_URI", default)


def setup_mlflow(tracking_uri: str | None = None) -> str:
    """Point MLflow at ``tracking_uri`` (or the resolved default) and return it."""
    resolved = tracking_uri or get_tracking_uri()
    mlflow.set_tracking_uri(resolved)
    log.debug("MLflow tracking URI: %s", resolved)
    return resolved


def get_or_create_experiment(experiment_name: str) -> str:
    """Return the id of ``experiment_name`` on the active tracking store.

    The experiment is created on first use. Call ``setup_mlflow`` beforehand to
    choose the store.
    """
    experiment = mlflow.get_experiment_by_name(experiment_name)
    if experiment is not None:
        log.info("Using experiment %s (id %s)", experiment_name, experiment.experiment_id)
        return experiment.experiment_id
    experiment_id = mlflow.create_experiment(experiment_name)
    log.info("Created experiment %s (id %s)", experiment_name, experiment_id)
    return experiment_id


def metric_key(model_name: str, metric: str) -> str:
    """MLflow-safe metric key such as ``ols_5.test_rmse``."""
    return f"{_UNSAFE_KEY_CHARS.sub('_', model_name)}.{metric}"


def comparison_metrics(table: ComparisonTable) -> dict[str, float]:
    return {
        metric_key(record.name, metric): getattr(record, metric)
        for record in table
        for metric in RECORD_METRICS
    }
