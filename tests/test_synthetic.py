"""Tests for synthetic data generation, the correlated chain and splitting."""

import numpy as np
import pandas as pd
import pytest

from regression_lab.data.synthetic import (
    add_correlated_features,
    correlation_matrix,
    generate_synthetic_data,
    split_dataset,
)


def test_columns_and_length(dataset):
    assert list(dataset.columns) == ["X", "X2", "X3", "X4", "X5", "y_true", "y"]
    assert len(dataset) == 200


def test_same_seed_is_bit_for_bit_identical():
    first = generate_synthetic_data(seed=7, num_instances=50)
    second = generate_synthetic_data(seed=7, num_instances=50)
    pd.testing.assert_frame_equal(first, second, check_exact=True)


def test_different_seed_changes_data():
    first = generate_synthetic_data(seed=1, num_instances=50)
    second = generate_synthetic_data(seed=2, num_instances=50)
    assert not np.array_equal(first["X"].to_numpy(), second["X"].to_numpy())


def test_true_target_is_noise_free_line(dataset):
    np.testing.assert_allclose(dataset["y_true"], -3 * dataset["X"] + 1)
    assert (dataset["X"] >= 0).all() and (dataset["X"] < 1).all()


def test_noise_is_roughly_standard_normal(dataset):
    residual = dataset["y"] - dataset["y_true"]
    assert abs(residual.mean()) < 0.3
    assert 0.7 < residual.std() < 1.3


def test_custom_line():
    df = generate_synthetic_data(seed=3, num_instances=30, slope=2.0, intercept=-1.0)
    np.testing.assert_allclose(df["y_true"], 2.0 * df["X"] - 1.0)


def test_chain_halves_previous_predictor(dataset):
    for prev, cur in [("X", "X2"), ("X2", "X3"), ("X3", "X4"), ("X4", "X5")]:
        residual = dataset[cur] - 0.5 * dataset[prev]
        assert residual.abs().max() < 0.25


def test_consecutive_predictors_are_strongly_correlated(dataset):
    corr = correlation_matrix(dataset)
    for prev, cur in [("X", "X2"), ("X2", "X3"), ("X3", "X4"), ("X4", "X5")]:
        assert corr.loc[prev, cur] > 0.9
    assert list(corr.columns) == ["X", "X2", "X3", "X4", "X5"]


def test_zero_noise_chain_is_exact():
    base = pd.DataFrame({"X": [0.2, 0.4, 0.8]})
    out = add_correlated_features(base, np.random.default_rng(0), (0.0, 0.0, 0.0, 0.0))
    np.testing.assert_allclose(out["X5"], base["X"] / 16)
    assert "X2" not in base.columns


@pytest.mark.parametrize(
    "scales",
    [(0.04, 0.02, 0.01), (0.01, 0.02, 0.01, 0.005), (0.04, -0.01, 0.0, 0.0)],
)
def test_bad_noise_scales_raise(scales):
    with pytest.raises(ValueError):
        generate_synthetic_data(seed=1, num_instances=10, noise_scales=scales)


def test_too_few_instances_raises():
    with pytest.raises(ValueError, match="num_instances"):
        generate_synthetic_data(seed=1, num_instances=1)


def test_split_is_disjoint_and_complete(dataset, split):
    assert split.sizes == (20, 180)
    assert set(split.train.index).isdisjoint(split.test.index)
    assert set(split.train.index) | set(split.test.index) == set(dataset.index)


def test_split_without_shuffle_keeps_draw_order(dataset, split):
    pd.testing.assert_frame_equal(split.train, dataset.iloc[:20])
    pd.testing.assert_frame_equal(split.test, dataset.iloc[20:])


def test_shuffled_split_is_seeded(dataset):
    first = split_dataset(dataset, 20, shuffle=True, seed=5)
    second = split_dataset(dataset, 20, shuffle=True, seed=5)
    assert list(first.train.index) == list(second.train.index)
    assert list(first.train.index) != list(range(20))


@pytest.mark.parametrize("num_train", [0, 200, 250])
def test_split_rejects_bad_sizes(dataset, num_train):
    with pytest.raises(ValueError, match="num_train"):
        split_dataset(dataset, num_train)
