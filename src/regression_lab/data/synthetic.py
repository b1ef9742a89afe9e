"""Synthetic regression data with a chain of increasingly collinear predictors.

The base predictor ``X`` is uniform on ``[0, 1)`` and the response follows a
known line plus standard-normal noise. ``X2..X5`` are each half the previous
predictor plus small Gaussian noise, so every added predictor carries almost
no new information.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from regression_lab.config.experiments import PREDICTORS, DataConfig

log = logging.getLogger(__name__)

DEFAULT_NOISE_SCALES = (0.04, 0.02, 0.01, 0.005)
TARGET = "y"
TRUE_TARGET = "y_true"


@dataclass(frozen=True)
class Split:
    """Disjoint train/test partition of a synthetic dataset."""

    train: pd.DataFrame
    test: pd.DataFrame

    @property
    def sizes(self) -> tuple[int, int]:
        return len(self.train), len(self.test)


def _check_noise_scales(noise_scales: Sequence[float]) -> None:
    if len(noise_scales) != len(PREDICTORS) - 1:
        raise ValueError(
            f"Expected {len(PREDICTORS) - 1} noise scales, got {len(noise_scales)}"
        )
    if any(s < 0 for s in noise_scales):
        raise ValueError(f"Noise scales must be non-negative, got {list(noise_scales)}")
    if any(b > a for a, b in zip(noise_scales, noise_scales[1:])):
        raise ValueError(
            f"Noise scales must be non-increasing, got {list(noise_scales)}"
        )


def add_correlated_features(
    frame: pd.DataFrame,
    rng: np.random.Generator,
    noise_scales: Sequence[float] = DEFAULT_NOISE_SCALES,
) -> pd.DataFrame:
    """Append ``X2..X5``, each half the previous predictor plus Gaussian noise.

    Args:
        frame: Frame holding the base predictor column ``X``.
        rng: Generator that continues the stream used for ``X``.
        noise_scales: Standard deviation of the noise added at each level.

    Returns:
        A new frame with the four chained predictors inserted after ``X``.
    """
    _check_noise_scales(noise_scales)
    out = frame.copy()
    n = len(out)
    previous = out["X"].to_numpy()
    for position, (name, scale) in enumerate(zip(PREDICTORS[1:], noise_scales), 1):
        current = 0.5 * previous + rng.normal(0.0, scale, size=n)
        out.insert(position, name, current)
        previous = current
    return out


def generate_synthetic_data(
    seed: int = 1,
    num_instances: int = 200,
    slope: float = -3.0,
    intercept: float = 1.0,
    noise_scales: Sequence[float] = DEFAULT_NOISE_SCALES,
) -> pd.DataFrame:
    """Draw the full synthetic dataset.

    Columns are ``X, X2, X3, X4, X5, y_true, y``. Output is identical for
    identical arguments.
    """
    if num_instances < 2:
        raise ValueError(f"num_instances must be >= 2, got {num_instances}")
    rng = np.random.default_rng(seed)
    x = rng.uniform(0.0, 1.0, size=num_instances)
    y_true = slope * x + intercept
    y = y_true + rng.normal(0.0, 1.0, size=num_instances)
    frame = pd.DataFrame({"X": x, TRUE_TARGET: y_true, TARGET: y})
    frame = add_correlated_features(frame, rng, noise_scales)
    log.info(
        "Generated %d instances (seed=%d, y_true = %.2f X + %.2f)",
        num_instances,
        seed,
        slope,
        intercept,
    )
    return frame


def generate_from_config(cfg: DataConfig) -> pd.DataFrame:
    return generate_synthetic_data(
        seed=cfg.seed,
        num_instances=cfg.num_instances,
        slope=cfg.slope,
        intercept=cfg.intercept,
        noise_scales=cfg.noise_scales,
    )


def split_dataset(
    frame: pd.DataFrame,
    num_train: int,
    shuffle: bool = False,
    seed: int | None = None,
) -> Split:
    """Partition ``frame`` into ``num_train`` training rows and the rest.

    Without shuffling the first ``num_train`` rows train, matching the order
    the rows were drawn in.
    """
    if not 1 <= num_train < len(frame):
        raise ValueError(f"num_train must be in [1, {len(frame)}), got {num_train}")
    train, test = train_test_split(
        frame,
        train_size=num_train,
        shuffle=shuffle,
        random_state=seed if shuffle else None,
    )
    log.info("Split %d rows into %d train / %d test", len(frame), len(train), len(test))
    return Split(train=train, test=test)


def correlation_matrix(frame: pd.DataFrame) -> pd.DataFrame:
    """Pairwise Pearson correlation of the predictor columns present in ``frame``."""
    columns = [c for c in PREDICTORS if c in frame.columns]
    return frame[columns].corr()
