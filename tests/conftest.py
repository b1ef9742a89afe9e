"""Shared fixtures for the regression walkthrough tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from regression_lab.config import load_config
from regression_lab.data.synthetic import generate_synthetic_data, split_dataset


@pytest.fixture
def dataset():
    """Default walkthrough data: seed 1, 200 rows."""
    return generate_synthetic_data(seed=1, num_instances=200)


@pytest.fixture
def split(dataset):
    """First 20 rows train, remaining 180 test."""
    return split_dataset(dataset, num_train=20)


@pytest.fixture
def quick_cfg():
    """Composed config with the five-fold penalty search."""
    return load_config(["tuning=quick"])
