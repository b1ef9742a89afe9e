"""Charts for the regression walkthrough.

Each function returns the matplotlib Figure. When ``output_path`` is given
the figure is also written there and closed.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.figure import Figure

from regression_lab.data.synthetic import TARGET, TRUE_TARGET
from regression_lab.evaluation.harness import ComparisonTable
from regression_lab.models.linear import FittedModel, format_equation
from regression_lab.models.tuning import TuningResult


def _finish(fig: Figure, output_path: Path | None) -> Figure:
    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
    return fig


def plot_data(frame: pd.DataFrame, output_path: Path | None = None) -> Figure:
    """Scatter of the noisy response with the noise-free line through it."""
    ordered = frame.sort_values("X")
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.scatter(frame["X"], frame[TARGET], color="black", alpha=0.6, label="y")
    ax.plot(ordered["X"], ordered[TRUE_TARGET], color="blue", linewidth=3, label="y_true")
    ax.set_xlabel("X")
    ax.set_ylabel("y")
    ax.set_title("Synthetic data")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _finish(fig, output_path)


def plot_fit(
    fitted: FittedModel,
    test: pd.DataFrame,
    output_path: Path | None = None,
) -> Figure:
    """Test rows against the fitted one-predictor line."""
    if fitted.features != ("X",):
        raise ValueError(f"plot_fit needs a model on X alone, got {fitted.features}")
    grid = pd.DataFrame({"X": np.linspace(test["X"].min(), test["X"].max(), 100)})
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.scatter(test["X"], test[TARGET], color="black", alpha=0.6, label="test")
    ax.plot(grid["X"], fitted.predict(grid), color="blue", linewidth=3, label=fitted.name)
    ax.set_xlabel("X")
    ax.set_ylabel("y")
    ax.set_title(f"Fit on test data: y = {format_equation(fitted)}")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _finish(fig, output_path)


def plot_errors(table: ComparisonTable, output_path: Path | None = None) -> Figure:
    """Train and test RMSE per model, in table order."""
    df = table.to_frame()
    positions = np.arange(len(df))
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(positions, df["Train_RMSE"], "o-", label="Train RMSE")
    ax.plot(positions, df["Test_RMSE"], "s--", label="Test RMSE")
    ax.set_xticks(positions)
    ax.set_xticklabels(df["Model"], rotation=30, ha="right")
    ax.set_ylabel("RMSE")
    ax.set_title("Train vs test error")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _finish(fig, output_path)


def plot_weights(table: ComparisonTable, output_path: Path | None = None) -> Figure:
    # symlog keeps all-zero lasso fits visible next to exploding OLS weights
    df = table.to_frame()
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(df["Model"], df["Sum_of_Absolute_Weights"], color="steelblue")
    ax.set_yscale("symlog", linthresh=1.0)
    ax.tick_params(axis="x", labelrotation=30)
    ax.set_ylabel("Sum of absolute weights (symlog scale)")
    ax.set_title("Model complexity")
    ax.grid(True, axis="y", alpha=0.3)
    return _finish(fig, output_path)


def plot_tuning(result: TuningResult, output_path: Path | None = None) -> Figure:
    """Mean resampled RMSE (with one standard deviation) against the penalty."""
    grid = result.grid_results.sort_values("penalty")
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.errorbar(
        grid["penalty"], grid["mean_rmse"], yerr=grid["std_rmse"], fmt="o-", capsize=4
    )
    ax.axvline(result.best_penalty, color="red", linestyle="--", label="selected")
    ax.set_xscale("log")
    ax.set_xlabel("Penalty")
    ax.set_ylabel(f"Resampled RMSE ({result.n_resamples} resamples)")
    ax.set_title(f"Penalty search: {result.name}")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return _finish(fig, output_path)
