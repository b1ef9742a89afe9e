"""
CLI entrypoint for the regression walkthrough.

Usage:
    regression-lab [subcommand]

Subcommands:
    generate
    correlations
    walkthrough
"""

import logging
from pathlib import Path

import typer
from hydra.errors import HydraException
from typing_extensions import Annotated

from regression_lab.config import REPORTS_DIR, load_config
from regression_lab.data.synthetic import (
    correlation_matrix,
    generate_synthetic_data,
)
from regression_lab.pipeline import export_walkthrough, run_walkthrough

app = typer.Typer(help="Linear regression walkthrough: OLS, collinearity, ridge and lasso.")


@app.callback()
def _setup(
    verbose: Annotated[bool, typer.Option(help="Show progress logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING, format="%(message)s"
    )


@app.command()
def generate(
    output: Annotated[Path, typer.Argument(help="CSV file to write")],
    seed: Annotated[int, typer.Option(help="Random seed")] = 1,
    num_instances: Annotated[int, typer.Option(help="Number of rows to draw")] = 200,
) -> None:
    """Write a synthetic dataset to CSV."""
    try:
        df = generate_synthetic_data(seed=seed, num_instances=num_instances)
    except ValueError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)
    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)
    typer.echo(f"Wrote {len(df)} rows to {output}")


@app.command()
def correlations(
    seed: Annotated[int, typer.Option(help="Random seed")] = 1,
    num_instances: Annotated[int, typer.Option(help="Number of rows to draw")] = 200,
) -> None:
    """Print the predictor correlation matrix."""
    try:
        df = generate_synthetic_data(seed=seed, num_instances=num_instances)
    except ValueError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)
    typer.echo(correlation_matrix(df).round(4).to_string())


@app.command()
def walkthrough(
    overrides: Annotated[
        list[str] | None,
        typer.Argument(help="Hydra overrides, e.g. data.seed=7 tuning=quick"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(help="Directory for CSV and chart artifacts"),
    ] = None,
    plots: Annotated[bool, typer.Option(help="Render charts")] = True,
) -> None:
    """Run every walkthrough section and print the comparison table."""
    try:
        cfg = load_config(overrides)
        result = run_walkthrough(cfg)
    except (ValueError, HydraException) as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"One-predictor fit: y = {result.simple_record.equation}")
    typer.echo(
        f"Selected penalties: ridge={result.ridge_tuning.best_penalty}, "
        f"lasso={result.lasso_tuning.best_penalty}"
    )
    typer.echo(result.comparison.to_frame().to_string(index=False))

    out_dir = output_dir or REPORTS_DIR / cfg.experiment.name / f"seed_{cfg.data.seed}"
    written = export_walkthrough(result, out_dir, plots=plots)
    typer.echo(f"Wrote {len(written)} artifacts to {out_dir}")


if __name__ == "__main__":
    app()
