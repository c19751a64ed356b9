import numpy as np
import pytest
import torch

from solar_forecast.models.feedforward_model import FeedForwardModel

# Small params for quick tests
MODEL_PARAMS = {
    "input_size": 5,
    "hidden_size": 10,
    "output_size": 1,
    "learning_rate": 0.01,
    "batch_size": 32,
    "epochs": 3,
    "seed": 11,
}


def create_dummy_data(samples=40, input_size=5, output_size=1):
    rng = np.random.default_rng(0)
    X = rng.standard_normal((samples, input_size)).astype(np.float32)
    y = rng.standard_normal((samples, output_size)).astype(np.float32)
    return X, y


@pytest.fixture
def model():
    return FeedForwardModel(model_params=MODEL_PARAMS)

# === Test Case: TC20251019_FeedForward_001 ===
# Description : Test that the network has a 5 -> 10 (ReLU) -> 1 (linear) layout.
# Component   : solar_forecast/models/feedforward_model.py
# Category    : Unit
def test_architecture(model):
    net = model.model

    assert isinstance(net.hidden, torch.nn.Linear)
    assert (net.hidden.in_features, net.hidden.out_features) == (5, 10)
    assert isinstance(net.activation, torch.nn.ReLU)
    assert (net.output.in_features, net.output.out_features) == (10, 1)
    assert isinstance(model.optimizer, torch.optim.Adam)
    assert isinstance(model.criterion, torch.nn.MSELoss)

# === Test Case: TC20251019_FeedForward_002 ===
# Description : Test that get_params reflects the constructor params.
# Component   : solar_forecast/models/feedforward_model.py
# Category    : Unit
def test_model_initialization(model):
    returned_params = model.get_params()

    assert isinstance(returned_params, dict)
    for key in MODEL_PARAMS:
        assert returned_params[key] == MODEL_PARAMS[key]

# === Test Case: TC20251019_FeedForward_003 ===
# Description : Train on dummy data and ensure one loss per epoch and correctly shaped predictions.
# Component   : solar_forecast/models/feedforward_model.py
# Category    : Unit
def test_model_train_and_predict(model):
    X_train, y_train = create_dummy_data()

    history = model.train(X_train, y_train)

    assert len(history) == MODEL_PARAMS["epochs"]
    assert all(np.isfinite(loss) for loss in history)
    assert model.is_trained is True

    preds = model.predict(X_train[:3])
    assert isinstance(preds, np.ndarray)
    assert preds.shape == (3, MODEL_PARAMS["output_size"])


def test_predict_is_deterministic(model):
    """A fixed network gives the same output for the same input."""
    X_train, y_train = create_dummy_data()
    model.train(X_train, y_train)

    row = np.array([[30.0, 50.0, 5.0, 70.0, 12.0]], dtype=np.float32)
    first = model.predict(row)
    second = model.predict(row)

    np.testing.assert_array_equal(first, second)


def test_same_seed_same_network():
    X_train, y_train = create_dummy_data()
    row = X_train[:1]

    a = FeedForwardModel(MODEL_PARAMS)
    a.train(X_train, y_train)
    b = FeedForwardModel(MODEL_PARAMS)
    b.train(X_train, y_train)

    np.testing.assert_allclose(a.predict(row), b.predict(row), rtol=1e-6)


def test_seeded_model_leaves_global_rng_untouched():
    before = torch.get_rng_state()

    FeedForwardModel(MODEL_PARAMS)

    assert torch.equal(torch.get_rng_state(), before)


def test_train_rejects_wrong_feature_width(model):
    X_train, y_train = create_dummy_data(input_size=4)

    with pytest.raises(ValueError):
        model.train(X_train, y_train)


def test_train_rejects_mismatched_targets(model):
    X_train, _ = create_dummy_data(samples=10)
    _, y_train = create_dummy_data(samples=8)

    with pytest.raises(ValueError):
        model.train(X_train, y_train)


def test_default_params():
    model = FeedForwardModel()
    params = model.get_params()

    assert params["input_size"] == 5
    assert params["hidden_size"] == 10
    assert params["output_size"] == 1
    assert params["epochs"] == 10
    assert params["batch_size"] == 32
    assert params["learning_rate"] == 0.001
