import numpy as np
import pytest

from generate_dataset_2d import Dataset2D, generate_dataset, validate_xy


def test_halves_are_labeled_and_placed_in_opposite_quadrants():
    ds = generate_dataset(100, 640, 480, seed=3)

    assert isinstance(ds, Dataset2D)
    assert len(ds) == 100
    assert ds.X.shape == (100, 2)
    assert np.issubdtype(ds.X.dtype, np.integer)

    positive, negative = ds.X[:50], ds.X[50:]
    np.testing.assert_array_equal(ds.y[:50], 1)
    np.testing.assert_array_equal(ds.y[50:], -1)

    assert positive[:, 0].min() >= 0 and positive[:, 0].max() < 320
    assert positive[:, 1].min() >= 0 and positive[:, 1].max() < 240
    assert negative[:, 0].min() >= 320 and negative[:, 0].max() < 640
    assert negative[:, 1].min() >= 240 and negative[:, 1].max() < 480


def test_seed_makes_generation_repeatable():
    first = generate_dataset(20, 640, 480, seed=11)
    second = generate_dataset(20, 640, 480, seed=11)
    np.testing.assert_array_equal(first.X, second.X)
    np.testing.assert_array_equal(first.y, second.y)


def test_accepts_random_state():
    rng = np.random.RandomState(5)
    ds = generate_dataset(4, 10, 10, seed=rng)
    assert ds.X.shape == (4, 2)


@pytest.mark.parametrize("count", [0, -2, 3, 99])
def test_count_must_be_positive_and_even(count):
    with pytest.raises(ValueError):
        generate_dataset(count, 640, 480)


def test_copy_is_independent():
    ds = generate_dataset(4, 640, 480, seed=0)
    clone = ds.copy()
    clone.X[0, 0] = -1
    assert ds.X[0, 0] != -1


def test_validate_xy_rejects_bad_labels():
    with pytest.raises(ValueError):
        validate_xy([[0, 0], [1, 1]], [1, 2])
