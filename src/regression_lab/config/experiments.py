"""Typed model, tuning and data configurations built from the Hydra tree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from omegaconf import DictConfig, OmegaConf

PREDICTORS = ("X", "X2", "X3", "X4", "X5")

MODEL_TYPES = ("linear_regression", "ridge", "lasso", "elastic_net")
RESAMPLING_STRATEGIES = ("bootstrap", "kfold")


@dataclass(frozen=True)
class DataConfig:
    """Seeded recipe for the synthetic dataset and its train/test split."""

    seed: int = 1
    num_instances: int = 200
    num_train: int = 20
    slope: float = -3.0
    intercept: float = 1.0
    noise_scales: tuple[float, ...] = (0.04, 0.02, 0.01, 0.005)
    shuffle: bool = False

    def __post_init__(self) -> None:
        if self.num_instances < 2:
            raise ValueError(f"num_instances must be >= 2, got {self.num_instances}")
        if not 1 <= self.num_train < self.num_instances:
            raise ValueError(
                f"num_train must be in [1, {self.num_instances}), got {self.num_train}"
            )


@dataclass(frozen=True)
class ModelSpec:
    """A named model configuration: estimator family, predictors and penalty."""

    name: str
    model_type: str
    features: tuple[str, ...]
    penalty: float = 0.0
    mixture: float | None = None

    def __post_init__(self) -> None:
        if self.model_type not in MODEL_TYPES:
            raise ValueError(f"Unknown model type: {self.model_type}")
        _check_features(self.features)
        if self.model_type != "linear_regression" and self.penalty <= 0:
            raise ValueError(
                f"{self.model_type} model '{self.name}' needs a positive penalty, "
                f"got {self.penalty}"
            )
        if self.model_type == "elastic_net" and not (
            self.mixture is not None and 0 < self.mixture < 1
        ):
            raise ValueError(
                f"elastic_net model '{self.name}' needs 0 < mixture < 1, "
                f"got {self.mixture}"
            )

    def with_penalty(self, penalty: float) -> ModelSpec:
        return ModelSpec(
            name=self.name,
            model_type=self.model_type,
            features=self.features,
            penalty=penalty,
            mixture=self.mixture,
        )


@dataclass(frozen=True)
class TuningSpec:
    """A resampled grid search over the penalty of one model family."""

    name: str
    model_type: str
    features: tuple[str, ...]
    grid: tuple[float, ...]
    resampling: str = "bootstrap"
    n_resamples: int = 25
    seed: int = 1
    mixture: float | None = None

    def __post_init__(self) -> None:
        if self.model_type not in MODEL_TYPES or self.model_type == "linear_regression":
            raise ValueError(f"Cannot tune penalty for model type: {self.model_type}")
        _check_features(self.features)
        if not self.grid:
            raise ValueError(f"Tuning '{self.name}' has an empty penalty grid")
        if any(p <= 0 for p in self.grid):
            raise ValueError(f"Penalty grid must be positive, got {list(self.grid)}")
        if self.resampling not in RESAMPLING_STRATEGIES:
            raise ValueError(f"Unknown resampling strategy: {self.resampling}")
        if self.n_resamples < 2:
            raise ValueError(f"n_resamples must be >= 2, got {self.n_resamples}")

    def base_spec(self) -> ModelSpec:
        """Model spec at the first grid value; the search swaps the penalty."""
        return ModelSpec(
            name=self.name,
            model_type=self.model_type,
            features=self.features,
            penalty=self.grid[0],
            mixture=self.mixture,
        )


def _check_features(features: tuple[str, ...]) -> None:
    if not features:
        raise ValueError("A model needs at least one predictor")
    unknown = [f for f in features if f not in PREDICTORS]
    if unknown:
        raise ValueError(f"Unknown predictors: {', '.join(unknown)}")


def _as_dict(node: Any) -> dict:
    if isinstance(node, DictConfig):
        return OmegaConf.to_container(node, resolve=True)  # type: ignore[return-value]
    return dict(node)


def data_config_from_cfg(node: DictConfig | Mapping[str, Any]) -> DataConfig:
    params = _as_dict(node)
    if "noise_scales" in params:
        params["noise_scales"] = tuple(float(s) for s in params["noise_scales"])
    return DataConfig(**params)


def model_spec_from_cfg(name: str, node: DictConfig | Mapping[str, Any]) -> ModelSpec:
    params = _as_dict(node)
    return ModelSpec(
        name=params.get("name", name),
        model_type=params["type"],
        features=tuple(params["features"]),
        penalty=float(params.get("penalty", 0.0)),
        mixture=params.get("mixture"),
    )


def tuning_spec_from_cfg(
    name: str, node: DictConfig | Mapping[str, Any]
) -> TuningSpec:
    params = _as_dict(node)
    return TuningSpec(
        name=params.get("name", name),
        model_type=params["type"],
        features=tuple(params["features"]),
        grid=tuple(float(p) for p in params["grid"]),
        resampling=params.get("resampling", "bootstrap"),
        n_resamples=int(params.get("n_resamples", 25)),
        seed=int(params.get("seed", 1)),
        mixture=params.get("mixture"),
    )


def model_suite_from_cfg(node: DictConfig | Mapping[str, Any]) -> list[ModelSpec]:
    """Build an ordered list of ModelSpecs from a ``{key: spec}`` mapping."""
    return [model_spec_from_cfg(key, spec) for key, spec in _as_dict(node).items()]
