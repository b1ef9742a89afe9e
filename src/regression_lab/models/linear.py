"""Linear model family: OLS, ridge, lasso and elastic net."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import joblib
import numpy as np
import pandas as pd
from sklearn.base import RegressorMixin
from sklearn.linear_model import ElasticNet, Lasso, LinearRegression, Ridge

from regression_lab.config.experiments import ModelSpec
from regression_lab.data.synthetic import TARGET

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittedModel:
    """Coefficients and intercept of a fitted model, plus the estimator behind them."""

    name: str
    features: tuple[str, ...]
    coefficients: tuple[float, ...]
    intercept: float
    penalty: float | None = None
    mixture: float | None = None
    estimator: RegressorMixin | None = field(default=None, compare=False, repr=False)

    @property
    def coef_map(self) -> dict[str, float]:
        return dict(zip(self.features, self.coefficients))

    def predict(self, frame: pd.DataFrame) -> np.ndarray:
        if self.estimator is None:
            raise ValueError(f"Model '{self.name}' has no estimator to predict with")
        return self.estimator.predict(frame[list(self.features)])


def build_estimator(spec: ModelSpec) -> RegressorMixin:
    """Factory mapping a spec to an unfitted scikit-learn estimator."""
    if spec.model_type == "linear_regression":
        return LinearRegression()
    elif spec.model_type == "ridge":
        return Ridge(alpha=spec.penalty)
    elif spec.model_type == "lasso":
        return Lasso(alpha=spec.penalty)
    elif spec.model_type == "elastic_net":
        return ElasticNet(alpha=spec.penalty, l1_ratio=spec.mixture)
    else:
        raise ValueError(f"Unknown model type: {spec.model_type}")


def _mixture_for(spec: ModelSpec) -> float | None:
    return {"ridge": 0.0, "lasso": 1.0}.get(spec.model_type, spec.mixture)


def from_estimator(
    spec: ModelSpec, estimator: RegressorMixin, penalty: float | None = None
) -> FittedModel:
    """Wrap an already-fitted estimator as a FittedModel."""
    if spec.model_type == "linear_regression":
        penalty = None
    elif penalty is None:
        penalty = spec.penalty
    return FittedModel(
        name=spec.name,
        features=spec.features,
        coefficients=tuple(float(c) for c in np.ravel(estimator.coef_)),
        intercept=float(estimator.intercept_),
        penalty=penalty,
        mixture=_mixture_for(spec),
        estimator=estimator,
    )


def fit_model(spec: ModelSpec, train: pd.DataFrame) -> FittedModel:
    """Fit ``spec`` on the training rows and return its FittedModel."""
    estimator = build_estimator(spec)
    estimator.fit(train[list(spec.features)], train[TARGET])
    fitted = from_estimator(spec, estimator)
    log.info("Fitted %s: %s", spec.name, format_equation(fitted))
    return fitted


def format_equation(fitted: FittedModel, precision: int = 2) -> str:
    """Human-readable equation, e.g. ``-2.95 X + 0.40 X2 + 1.02``."""
    terms = [f"{c:.{precision}f} {name}" for name, c in fitted.coef_map.items()]
    text = terms[0]
    for term in terms[1:] + [f"{fitted.intercept:.{precision}f}"]:
        if term.startswith("-"):
            text += f" - {term[1:]}"
        else:
            text += f" + {term}"
    return text


def save_model(fitted: FittedModel, path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(fitted, path)
    log.info("Model saved to %s", path)
    return path


def load_model(path: Path | str) -> FittedModel:
    fitted = joblib.load(path)
    if not isinstance(fitted, FittedModel):
        raise ValueError(f"{path} does not hold a FittedModel")
    return fitted
