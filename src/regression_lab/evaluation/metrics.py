"""Error and complexity metrics for fitted linear models."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from sklearn.metrics import mean_squared_error


def rmse(actual, predicted) -> float:
    """Root-mean-squared error between two equal-length arrays."""
    return float(np.sqrt(mean_squared_error(actual, predicted)))


def sum_absolute_weights(coefficients: Iterable[float]) -> float:
    """L1 norm of the slope coefficients; the intercept is not included."""
    return float(np.abs(np.asarray(list(coefficients), dtype=float)).sum())
