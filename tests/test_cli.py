"""Tests for the typer CLI."""

import pandas as pd
from typer.testing import CliRunner

from regression_lab.cli import app

runner = CliRunner()


def test_generate_writes_csv(tmp_path):
    out = tmp_path / "data" / "synthetic.csv"
    result = runner.invoke(app, ["generate", str(out), "--seed", "3", "--num-instances", "40"])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(out)
    assert len(df) == 40
    assert "X5" in df.columns


def test_generate_rejects_bad_size(tmp_path):
    result = runner.invoke(app, ["generate", str(tmp_path / "x.csv"), "--num-instances", "1"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_correlations_prints_matrix():
    result = runner.invoke(app, ["correlations", "--num-instances", "50"])
    assert result.exit_code == 0, result.output
    assert "X5" in result.output


def test_walkthrough_runs_and_exports(tmp_path):
    result = runner.invoke(
        app,
        ["walkthrough", "tuning=quick", "--output-dir", str(tmp_path), "--no-plots"],
    )
    assert result.exit_code == 0, result.output
    assert "Selected penalties" in result.output
    assert "lasso_cv" in result.output
    assert (tmp_path / "comparison.csv").exists()


def test_walkthrough_bad_override_exits_nonzero(tmp_path):
    result = runner.invoke(
        app,
        ["walkthrough", "data.num_train=500", "--output-dir", str(tmp_path), "--no-plots"],
    )
    assert result.exit_code == 1
    assert "num_train" in result.output
