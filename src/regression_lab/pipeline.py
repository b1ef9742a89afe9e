"""End-to-end regression walkthrough.

Sections, in order:

1. generate the synthetic data and split it,
2. fit OLS on ``X`` alone,
3. fit OLS on growing predictor subsets ``X`` .. ``X..X5``,
4. fit ridge and lasso at fixed penalties on all five predictors,
5. pick the ridge and lasso penalties by resampled grid search and refit.

Every section keeps its own named field on ``WalkthroughResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from omegaconf import DictConfig

from regression_lab import plotting
from regression_lab.config.experiments import (
    DataConfig,
    data_config_from_cfg,
    model_spec_from_cfg,
    model_suite_from_cfg,
    tuning_spec_from_cfg,
)
from regression_lab.data.synthetic import (
    Split,
    correlation_matrix,
    generate_from_config,
    split_dataset,
)
from regression_lab.evaluation.harness import (
    ComparisonTable,
    EvaluationRecord,
    compare_models,
    evaluate_model,
)
from regression_lab.models.linear import FittedModel, fit_model, save_model
from regression_lab.models.tuning import TuningResult, tune_penalty

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkthroughResult:
    data_config: DataConfig
    dataset: pd.DataFrame
    split: Split
    simple_model: FittedModel
    simple_record: EvaluationRecord
    ols_table: ComparisonTable
    ridge_table: ComparisonTable
    lasso_table: ComparisonTable
    ridge_tuning: TuningResult
    lasso_tuning: TuningResult
    ridge_cv_table: ComparisonTable
    lasso_cv_table: ComparisonTable

    @property
    def comparison(self) -> ComparisonTable:
        """All section tables in walkthrough order."""
        return (
            self.ols_table.extend(self.ridge_table)
            .extend(self.lasso_table)
            .extend(self.ridge_cv_table)
            .extend(self.lasso_cv_table)
        )

    @property
    def correlations(self) -> pd.DataFrame:
        return correlation_matrix(self.dataset)


def run_walkthrough(cfg: DictConfig) -> WalkthroughResult:
    """Run every walkthrough section against a composed config."""
    data_config = data_config_from_cfg(cfg.data)
    dataset = generate_from_config(data_config)
    split = split_dataset(
        dataset,
        data_config.num_train,
        shuffle=data_config.shuffle,
        seed=data_config.seed,
    )

    log.info("Section: one-predictor OLS")
    simple_model = fit_model(model_spec_from_cfg("simple", cfg.models.simple), split.train)
    simple_record = evaluate_model(simple_model, split)

    log.info("Section: OLS with correlated predictors")
    ols_table = compare_models(model_suite_from_cfg(cfg.models.ols), split)

    log.info("Section: fixed-penalty ridge and lasso")
    ridge_table = compare_models(model_suite_from_cfg(cfg.models.ridge), split)
    lasso_table = compare_models(model_suite_from_cfg(cfg.models.lasso), split)

    log.info("Section: resampled penalty search")
    ridge_tuning = tune_penalty(
        tuning_spec_from_cfg("ridge_cv", cfg.tuning.ridge_cv), split.train
    )
    lasso_tuning = tune_penalty(
        tuning_spec_from_cfg("lasso_cv", cfg.tuning.lasso_cv), split.train
    )
    ridge_cv_table = ComparisonTable([evaluate_model(ridge_tuning.model, split)])
    lasso_cv_table = ComparisonTable([evaluate_model(lasso_tuning.model, split)])

    return WalkthroughResult(
        data_config=data_config,
        dataset=dataset,
        split=split,
        simple_model=simple_model,
        simple_record=simple_record,
        ols_table=ols_table,
        ridge_table=ridge_table,
        lasso_table=lasso_table,
        ridge_tuning=ridge_tuning,
        lasso_tuning=lasso_tuning,
        ridge_cv_table=ridge_cv_table,
        lasso_cv_table=lasso_cv_table,
    )


def export_walkthrough(
    result: WalkthroughResult,
    out_dir: Path,
    plots: bool = True,
    save_models: bool = False,
) -> list[Path]:
    """Write tables as CSV and charts as PNG under ``out_dir``.

    Returns:
        Paths of every file written.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    def _csv(df: pd.DataFrame, name: str, index: bool = False) -> None:
        path = out_dir / name
        df.to_csv(path, index=index)
        written.append(path)

    _csv(result.dataset, "dataset.csv")
    _csv(result.correlations, "correlations.csv", index=True)
    _csv(result.ols_table.to_frame(), "ols_comparison.csv")
    _csv(result.ridge_table.extend(result.lasso_table).to_frame(), "regularized_comparison.csv")
    _csv(result.ridge_tuning.grid_results, "ridge_cv_grid.csv")
    _csv(result.lasso_tuning.grid_results, "lasso_cv_grid.csv")
    _csv(result.comparison.to_frame(), "comparison.csv")

    if plots:
        figures = out_dir / "figures"
        charts = [
            (plotting.plot_data, (result.dataset,), "data.png"),
            (plotting.plot_fit, (result.simple_model, result.split.test), "simple_fit.png"),
            (plotting.plot_errors, (result.comparison,), "errors.png"),
            (plotting.plot_weights, (result.comparison,), "weights.png"),
            (plotting.plot_tuning, (result.ridge_tuning,), "ridge_cv.png"),
            (plotting.plot_tuning, (result.lasso_tuning,), "lasso_cv.png"),
        ]
        for plot, args, filename in charts:
            path = figures / filename
            plot(*args, output_path=path)
            written.append(path)

    if save_models:
        models_dir = out_dir / "models"
        for fitted in (result.simple_model, result.ridge_tuning.model, result.lasso_tuning.model):
            written.append(save_model(fitted, models_dir / f"{fitted.name}.joblib"))

    log.info("Wrote %d walkthrough artifacts to %s", len(written), out_dir)
    return written
