import numpy as np
import pytest

from solar_forecast.training.synthetic_data import generate_synthetic_data


def test_default_shapes_and_dtype():
    """Defaults give 100 samples of 5 features and 1 target."""
    X, y = generate_synthetic_data()

    assert X.shape == (100, 5)
    assert y.shape == (100, 1)
    assert X.dtype == np.float32
    assert y.dtype == np.float32


def test_seed_reproducible():
    X1, y1 = generate_synthetic_data(seed=3)
    X2, y2 = generate_synthetic_data(seed=3)

    np.testing.assert_array_equal(X1, X2)
    np.testing.assert_array_equal(y1, y2)


def test_unseeded_draws_differ():
    X1, _ = generate_synthetic_data()
    X2, _ = generate_synthetic_data()

    assert not np.array_equal(X1, X2)


def test_roughly_standard_normal():
    X, _ = generate_synthetic_data(num_samples=20000, seed=1)

    assert abs(float(X.mean())) < 0.05
    assert abs(float(X.std()) - 1.0) < 0.05


@pytest.mark.parametrize("samples, features, targets", [(0, 5, 1), (10, 0, 1), (10, 5, 0)])
def test_non_positive_sizes_rejected(samples, features, targets):
    with pytest.raises(ValueError):
        generate_synthetic_data(samples, features, targets)
