"""Resampled grid search over the regularization penalty."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.model_selection import GridSearchCV, KFold

from regression_lab.config.experiments import TuningSpec
from regression_lab.data.synthetic import TARGET
from regression_lab.models.linear import FittedModel, build_estimator, from_estimator

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TuningResult:
    name: str
    best_penalty: float
    model: FittedModel
    grid_results: pd.DataFrame
    n_resamples: int


def bootstrap_resamples(
    n: int, times: int, seed: int | None = None
) -> list[tuple[np.ndarray, np.ndarray]]:
    """Draw ``times`` bootstrap resamples of ``n`` rows.

    Each resample pairs the in-bag row indices (drawn with replacement) with
    the out-of-bag rows used for assessment. Resamples that leave no row
    out-of-bag cannot be scored and are dropped.
    """
    if n < 2:
        raise ValueError(f"Need at least 2 rows to bootstrap, got {n}")
    rng = np.random.default_rng(seed)
    splits = []
    for _ in range(times):
        in_bag = rng.integers(0, n, size=n)
        out_of_bag = np.setdiff1d(np.arange(n), in_bag)
        if out_of_bag.size == 0:
            log.warning("Dropping bootstrap resample with empty out-of-bag set")
            continue
        splits.append((in_bag, out_of_bag))
    if not splits:
        raise ValueError("All bootstrap resamples had empty out-of-bag sets")
    return splits


def make_resamples(spec: TuningSpec, n: int) -> list[tuple[np.ndarray, np.ndarray]]:
    if spec.resampling == "bootstrap":
        return bootstrap_resamples(n, spec.n_resamples, spec.seed)
    elif spec.resampling == "kfold":
        if spec.n_resamples > n:
            raise ValueError(
                f"Cannot make {spec.n_resamples} folds from {n} training rows"
            )
        kf = KFold(n_splits=spec.n_resamples, shuffle=True, random_state=spec.seed)
        return list(kf.split(np.arange(n)))
    else:
        raise ValueError(f"Unknown resampling strategy: {spec.resampling}")


def tune_penalty(spec: TuningSpec, train: pd.DataFrame) -> TuningResult:
    """Pick the penalty with the lowest mean resampled RMSE and refit on ``train``.

    Args:
        spec: Model family, predictors, penalty grid and resampling scheme.
        train: Training rows; test rows must never be passed here.

    Returns:
        The winning penalty, the refit model and the per-penalty RMSE table.
    """
    base = spec.base_spec()
    x = train[list(spec.features)]
    y = train[TARGET]
    resamples = make_resamples(spec, len(train))

    log.info(
        "Tuning %s over %d penalties with %d %s resamples",
        spec.name,
        len(spec.grid),
        len(resamples),
        spec.resampling,
    )
    search = GridSearchCV(
        build_estimator(base),
        param_grid={"alpha": list(spec.grid)},
        scoring="neg_root_mean_squared_error",
        cv=resamples,
        refit=True,
    )
    search.fit(x, y)

    cv = search.cv_results_
    grid_results = pd.DataFrame(
        {
            "penalty": np.asarray(cv["param_alpha"], dtype=float),
            "mean_rmse": -cv["mean_test_score"],
            "std_rmse": cv["std_test_score"],
            "rank": cv["rank_test_score"],
        }
    )
    best_penalty = float(search.best_params_["alpha"])
    log.info("Best penalty for %s: %s", spec.name, best_penalty)

    model = from_estimator(
        base.with_penalty(best_penalty), search.best_estimator_, penalty=best_penalty
    )
    return TuningResult(
        name=spec.name,
        best_penalty=best_penalty,
        model=model,
        grid_results=grid_results,
        n_resamples=len(resamples),
    )
