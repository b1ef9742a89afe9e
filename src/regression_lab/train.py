"""Hydra entry point running the walkthrough and logging it to MLflow.

Usage:
    python -m regression_lab.train
    python -m regression_lab.train data.seed=7 tuning=quick
    python -m regression_lab.train models=elastic_net
"""

import logging
from pathlib import Path

import hydra
import mlflow
from omegaconf import DictConfig, OmegaConf

from regression_lab.config import REPORTS_DIR
from regression_lab.pipeline import export_walkthrough, run_walkthrough
from regression_lab.utils.mlflow_tracking import (
    comparison_metrics,
    get_or_create_experiment,
    setup_mlflow,
)

log = logging.getLogger(__name__)


def resolve_output_dir(cfg: DictConfig) -> Path:
    if cfg.paths.get("output_dir"):
        return Path(cfg.paths.output_dir)
    return REPORTS_DIR / cfg.experiment.name / f"seed_{cfg.data.seed}"


@hydra.main(version_base=None, config_path="../../conf", config_name="config")
def main(cfg: DictConfig) -> None:
    setup_mlflow()

    exp_name = "Default"
    if "experiment" in cfg and cfg.experiment is not None:
        exp_name = cfg.experiment.get("name", "Default")

    experiment_id = get_or_create_experiment(exp_name)

    with mlflow.start_run(experiment_id=experiment_id, run_name=f"seed_{cfg.data.seed}"):
        mlflow.log_params(
            {
                "seed": cfg.data.seed,
                "num_instances": cfg.data.num_instances,
                "num_train": cfg.data.num_train,
                "ridge_grid": list(cfg.tuning.ridge_cv.grid),
                "lasso_grid": list(cfg.tuning.lasso_cv.grid),
                "resampling": cfg.tuning.ridge_cv.resampling,
            }
        )
        log.info("Config:\n%s", OmegaConf.to_yaml(cfg))

        result = run_walkthrough(cfg)

        mlflow.log_metrics(comparison_metrics(result.comparison))
        mlflow.log_metrics(
            {
                "ridge_cv.best_penalty": result.ridge_tuning.best_penalty,
                "lasso_cv.best_penalty": result.lasso_tuning.best_penalty,
            }
        )
        log.info("Comparison:\n%s", result.comparison.to_frame().to_string(index=False))

        out_dir = resolve_output_dir(cfg)
        export_walkthrough(
            result,
            out_dir,
            plots=cfg.export.plots,
            save_models=cfg.export.save_models,
        )
        mlflow.log_artifacts(str(out_dir))


if __name__ == "__main__":
    main()
