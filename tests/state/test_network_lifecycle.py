import json
import threading

import pytest

from solar_forecast.models.feedforward_model import FeedForwardModel
from solar_forecast.state.network_lifecycle import NetworkLifecycleManager, NetworkStatus
from solar_forecast.utils.config_loader import NetworkParams, SyntheticDataConfig

from stubs import FailingModel, StubModel, make_lifecycle


def test_starts_unready():
    lifecycle = make_lifecycle(StubModel)

    assert lifecycle.status is NetworkStatus.UNREADY
    assert lifecycle.network is None
    assert lifecycle.failure_reason is None


def test_wait_before_start_raises():
    lifecycle = make_lifecycle(StubModel)

    with pytest.raises(RuntimeError, match="not been started"):
        lifecycle.wait_until_ready(timeout=1)


def test_fit_success_marks_ready():
    lifecycle = make_lifecycle(StubModel)

    future = lifecycle.start()
    status = lifecycle.wait_until_ready(timeout=10)

    assert status is NetworkStatus.READY
    assert lifecycle.network is future.result()
    assert lifecycle.network.trained_on == ((16, 5), (16, 1))
    lifecycle.shutdown()


def test_start_is_idempotent():
    lifecycle = make_lifecycle(StubModel)

    first = lifecycle.start()
    second = lifecycle.start()

    assert first is second
    lifecycle.wait_until_ready(timeout=10)
    lifecycle.shutdown()


def test_factory_receives_network_params():
    seen = {}

    def factory(params):
        seen.update(params)
        return StubModel(params)

    lifecycle = make_lifecycle(factory)
    lifecycle.start()
    lifecycle.wait_until_ready(timeout=10)
    lifecycle.shutdown()

    assert seen["input_size"] == 5
    assert seen["hidden_size"] == 10
    assert seen["epochs"] == 2


def test_fit_logs_model_params(caplog):
    lifecycle = make_lifecycle(StubModel)

    with caplog.at_level("INFO"):
        lifecycle.start()
        lifecycle.wait_until_ready(timeout=10)
    lifecycle.shutdown()

    assert "Fitting network with params:" in caplog.text
    assert "'epochs': 2" in caplog.text


def test_fit_failure_marks_failed_and_logs(tmp_path, caplog):
    lifecycle = make_lifecycle(FailingModel, tmp_path)

    with caplog.at_level("ERROR"):
        future = lifecycle.start()
        status = lifecycle.wait_until_ready(timeout=10)

    assert status is NetworkStatus.FAILED
    assert lifecycle.network is None
    assert "optimizer exploded" in lifecycle.failure_reason
    assert "Network fitting failed" in caplog.text

    # The exception stays observable on the future
    with pytest.raises(RuntimeError, match="optimizer exploded"):
        future.result()

    records = [json.loads(line) for line in (tmp_path / "errors.jsonl").read_text().splitlines()]
    assert records[0]["component"] == "network_lifecycle"
    assert records[0]["exception_type"] == "RuntimeError"
    lifecycle.shutdown()


def test_fit_runs_in_background():
    """start() returns while the fit is still running."""
    release = threading.Event()

    class BlockingModel(StubModel):
        def train(self, X, y):
            release.wait(timeout=10)
            return super().train(X, y)

    lifecycle = make_lifecycle(BlockingModel)
    lifecycle.start()

    assert lifecycle.wait_until_ready(timeout=0.05) is NetworkStatus.UNREADY

    release.set()
    assert lifecycle.wait_until_ready(timeout=10) is NetworkStatus.READY
    lifecycle.shutdown()


def test_real_network_fits_in_background():
    lifecycle = NetworkLifecycleManager(
        network_params=NetworkParams(seed=1),
        data_config=SyntheticDataConfig(seed=1),
    )
    lifecycle.start()

    assert lifecycle.wait_until_ready(timeout=60) is NetworkStatus.READY
    assert isinstance(lifecycle.network, FeedForwardModel)
    assert lifecycle.network.is_trained is True
    lifecycle.shutdown()
