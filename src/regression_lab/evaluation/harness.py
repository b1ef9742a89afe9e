"""Side-by-side comparison of fitted models on a train/test split."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import pandas as pd

from regression_lab.config.experiments import ModelSpec
from regression_lab.data.synthetic import TARGET, Split
from regression_lab.evaluation.metrics import rmse, sum_absolute_weights
from regression_lab.models.linear import FittedModel, fit_model, format_equation

log = logging.getLogger(__name__)

TABLE_COLUMNS = [
    "Model",
    "Equation",
    "Train_RMSE",
    "Test_RMSE",
    "Sum_of_Absolute_Weights",
    "Penalty",
]


@dataclass(frozen=True)
class EvaluationRecord:
    name: str
    equation: str
    train_rmse: float
    test_rmse: float
    sum_abs_weights: float
    penalty: float | None = None

    def as_row(self) -> dict:
        return dict(
            zip(
                TABLE_COLUMNS,
                [
                    self.name,
                    self.equation,
                    self.train_rmse,
                    self.test_rmse,
                    self.sum_abs_weights,
                    self.penalty,
                ],
            )
        )


class ComparisonTable:
    """Append-only collection of EvaluationRecords.

    ``append`` and ``extend`` return a new table and leave this one untouched.
    """

    def __init__(self, records: Iterable[EvaluationRecord] = ()):
        self._records = tuple(records)

    def append(self, record: EvaluationRecord) -> ComparisonTable:
        return ComparisonTable(self._records + (record,))

    def extend(self, other: Iterable[EvaluationRecord]) -> ComparisonTable:
        return ComparisonTable(self._records + tuple(other))

    @property
    def records(self) -> tuple[EvaluationRecord, ...]:
        return self._records

    def __iter__(self) -> Iterator[EvaluationRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, name: str) -> EvaluationRecord:
        for record in self._records:
            if record.name == name:
                return record
        raise KeyError(name)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([r.as_row() for r in self._records], columns=TABLE_COLUMNS)


def evaluate_model(fitted: FittedModel, split: Split) -> EvaluationRecord:
    """Score a fitted model on both sides of the split."""
    record = EvaluationRecord(
        name=fitted.name,
        equation=format_equation(fitted),
        train_rmse=rmse(split.train[TARGET], fitted.predict(split.train)),
        test_rmse=rmse(split.test[TARGET], fitted.predict(split.test)),
        sum_abs_weights=sum_absolute_weights(fitted.coefficients),
        penalty=fitted.penalty,
    )
    log.info(
        "%s: train RMSE %.4f, test RMSE %.4f, sum |w| %.4f",
        record.name,
        record.train_rmse,
        record.test_rmse,
        record.sum_abs_weights,
    )
    return record


def compare_models(
    specs: Iterable[ModelSpec],
    split: Split,
    table: ComparisonTable | None = None,
) -> ComparisonTable:
    """Fit each spec on the training rows and append its record to ``table``."""
    table = table if table is not None else ComparisonTable()
    for spec in specs:
        table = table.append(evaluate_model(fit_model(spec, split.train), split))
    return table
