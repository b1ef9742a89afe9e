"""Model scoring and comparison tables."""

from .harness import (
    ComparisonTable,
    EvaluationRecord,
    compare_models,
    evaluate_model,
)
from .metrics import rmse, sum_absolute_weights

__all__ = [
    "ComparisonTable",
    "EvaluationRecord",
    "compare_models",
    "evaluate_model",
    "rmse",
    "sum_absolute_weights",
]
