"""Configuration helpers for paths, environment-derived settings and Hydra."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from hydra import compose, initialize_config_dir
from omegaconf import DictConfig

# Load environment variables from .env file
load_dotenv()


def get_repo_root() -> Path:
    """Get the project's root directory."""
    return Path(__file__).resolve().parents[3]


def get_artifacts_root() -> Path:
    """
    Resolve the artifacts root from the REGRESSION_LAB_ARTIFACTS_DIR environment variable.
    Falls back to 'artifacts/' in the repo root if not set.
    """
    env_path = os.getenv("REGRESSION_LAB_ARTIFACTS_DIR")
    if env_path:
        return Path(env_path)
    return get_repo_root() / "artifacts"


# Define core paths
REPO_ROOT = get_repo_root()
CONF_DIR = REPO_ROOT / "conf"
ARTIFACTS_DIR = get_artifacts_root()
REPORTS_DIR = ARTIFACTS_DIR / "reports"
MODELS_DIR = ARTIFACTS_DIR / "models"


def load_config(
    overrides: Sequence[str] | None = None, config_name: str = "config"
) -> DictConfig:
    """Compose the Hydra config tree outside of ``@hydra.main``.

    Args:
        overrides: Hydra-style overrides, e.g. ``["data.seed=7"]``.
        config_name: Root config file name (without extension).

    Returns:
        The composed configuration.
    """
    with initialize_config_dir(config_dir=str(CONF_DIR), version_base=None):
        return compose(config_name=config_name, overrides=list(overrides or []))
