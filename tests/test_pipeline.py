"""End-to-end tests for the walkthrough sections and artifact export."""

import pandas as pd
import pytest

from regression_lab.config import load_config
from regression_lab.pipeline import export_walkthrough, run_walkthrough


@pytest.fixture
def result(quick_cfg):
    return run_walkthrough(quick_cfg)


def test_sections_have_distinct_results(result):
    assert [r.name for r in result.ols_table] == [f"ols_{k}" for k in range(1, 6)]
    assert [r.name for r in result.ridge_table] == ["ridge_5"]
    assert [r.name for r in result.lasso_table] == ["lasso_5"]
    assert [r.name for r in result.ridge_cv_table] == ["ridge_cv"]
    assert [r.name for r in result.lasso_cv_table] == ["lasso_cv"]
    assert result.simple_model.features == ("X",)
    assert result.split.sizes == (20, 180)


def test_comparison_is_walkthrough_ordered(result):
    names = [r.name for r in result.comparison]
    assert names == [
        "ols_1",
        "ols_2",
        "ols_3",
        "ols_4",
        "ols_5",
        "ridge_5",
        "lasso_5",
        "ridge_cv",
        "lasso_cv",
    ]


def test_tuned_models_use_selected_penalty(result):
    assert result.ridge_cv_table["ridge_cv"].penalty == result.ridge_tuning.best_penalty
    assert result.lasso_cv_table["lasso_cv"].penalty == result.lasso_tuning.best_penalty
    assert result.ridge_tuning.n_resamples == 5


def test_simple_fit_slope_near_truth(result):
    assert abs(result.simple_model.coefficients[0] + 3.0) <= 1.5


def test_elastic_net_models_group():
    cfg = load_config(["tuning=quick", "models=elastic_net"])
    result = run_walkthrough(cfg)
    assert result.lasso_table["lasso_5"].penalty == 0.02


def test_export_writes_tables_and_figures(result, tmp_path):
    written = export_walkthrough(result, tmp_path, plots=True, save_models=True)
    names = {p.relative_to(tmp_path).as_posix() for p in written}
    assert {
        "dataset.csv",
        "correlations.csv",
        "ols_comparison.csv",
        "regularized_comparison.csv",
        "ridge_cv_grid.csv",
        "lasso_cv_grid.csv",
        "comparison.csv",
        "figures/data.png",
        "figures/simple_fit.png",
        "figures/errors.png",
        "figures/weights.png",
        "figures/ridge_cv.png",
        "figures/lasso_cv.png",
        "models/ols_1.joblib",
        "models/ridge_cv.joblib",
        "models/lasso_cv.joblib",
    } == names
    assert all(p.exists() for p in written)

    comparison = pd.read_csv(tmp_path / "comparison.csv")
    assert len(comparison) == 9
    assert "Sum_of_Absolute_Weights" in comparison.columns


def test_export_without_plots(result, tmp_path):
    written = export_walkthrough(result, tmp_path, plots=False)
    assert not (tmp_path / "figures").exists()
    assert len(written) == 7
