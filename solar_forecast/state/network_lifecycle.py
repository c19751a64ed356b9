# solar_forecast/state/network_lifecycle.py
"""
Network Lifecycle Manager

Builds the production regressor once per session and fits it on synthetic
data in a background worker thread, so the dashboard stays interactive while
training runs. Callers read a readiness tag (UNREADY / READY / FAILED) or
wait on the returned future instead of guessing whether a network exists.
"""

from concurrent.futures import Future, ThreadPoolExecutor, wait
from enum import Enum
from threading import Lock
from typing import Callable, Optional

from solar_forecast.models.base_model import BaseModel
from solar_forecast.models.feedforward_model import FeedForwardModel
from solar_forecast.monitoring.error_logging import ErrorComponent, ErrorLogger
from solar_forecast.training.synthetic_data import generate_synthetic_data
from solar_forecast.utils.config_loader import NetworkParams, SyntheticDataConfig
from solar_forecast.utils.logger import get_logger

logger = get_logger(__name__)


class NetworkStatus(Enum):
    """Readiness of the session's network."""
    UNREADY = "unready"
    READY = "ready"
    FAILED = "failed"


class NetworkLifecycleManager:
    """
    Owns the single fitted network of a session.

    Attributes:
        network_params (NetworkParams): Architecture and training settings.
        data_config (SyntheticDataConfig): Shape and seed of the training draw.
        error_logger (ErrorLogger): Receives fit failures.
    """

    def __init__(
        self,
        network_params: Optional[NetworkParams] = None,
        data_config: Optional[SyntheticDataConfig] = None,
        model_factory: Callable[[dict], BaseModel] = FeedForwardModel,
        error_logger: Optional[ErrorLogger] = None,
    ) -> None:
        self.network_params = network_params or NetworkParams()
        self.data_config = data_config or SyntheticDataConfig()
        self.model_factory = model_factory
        self.error_logger = error_logger or ErrorLogger(component=ErrorComponent.NETWORK_LIFECYCLE)

        self._lock = Lock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional[Future] = None
        self._status = NetworkStatus.UNREADY
        self._network: Optional[BaseModel] = None
        self._failure_reason: Optional[str] = None

    # ==========================================================
    # Readiness
    # ==========================================================
    @property
    def status(self) -> NetworkStatus:
        with self._lock:
            return self._status

    @property
    def network(self) -> Optional[BaseModel]:
        """The fitted network, or None until fitting succeeds."""
        with self._lock:
            return self._network

    @property
    def failure_reason(self) -> Optional[str]:
        with self._lock:
            return self._failure_reason

    # ==========================================================
    # Lifecycle
    # ==========================================================
    def start(self) -> Future:
        """
        Launch build + fit in the background. Safe to call repeatedly;
        only the first call starts work.

        Returns:
            Future: Resolves to the fitted network, or raises the fit error.
        """
        with self._lock:
            if self._future is not None:
                return self._future

            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="network-fit")
            self._future = self._executor.submit(self._build_and_fit)
            logger.info("Background network fitting started.")
            return self._future

    def wait_until_ready(self, timeout: Optional[float] = None) -> NetworkStatus:
        """
        Block until the fit resolves or the timeout passes.

        Args:
            timeout (Optional[float]): Seconds to wait; None waits indefinitely.

        Returns:
            NetworkStatus: Status once waiting ends (UNREADY on timeout).

        Raises:
            RuntimeError: If start() was never called.
        """
        if self._future is None:
            raise RuntimeError("Network fitting has not been started.")

        wait([self._future], timeout=timeout)
        return self.status

    def shutdown(self) -> None:
        """Abandon any in-flight fit and release the worker thread."""
        with self._lock:
            executor = self._executor
            self._executor = None
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)
            logger.info("Network lifecycle worker shut down.")

    # ==========================================================
    # Worker
    # ==========================================================
    def _build_and_fit(self) -> BaseModel:
        try:
            X, y = generate_synthetic_data(
                num_samples=self.data_config.num_samples,
                num_features=self.data_config.num_features,
                num_targets=self.data_config.num_targets,
                seed=self.data_config.seed,
            )
            model = self.model_factory(self.network_params.model_dump())
            logger.info(f"Fitting network with params: {model.get_params()}")
            history = model.train(X, y)
        except Exception as exc:
            with self._lock:
                self._status = NetworkStatus.FAILED
                self._failure_reason = f"{type(exc).__name__}: {exc}"
            self.error_logger.log_error(
                "Network fitting failed",
                exception=exc,
                context={"epochs": self.network_params.epochs, "samples": self.data_config.num_samples},
                severity="error",
            )
            raise

        with self._lock:
            self._network = model
            self._status = NetworkStatus.READY

        final_loss = history[-1] if history else float("nan")
        logger.info(f"Network ready after {len(history)} epochs (final loss {final_loss:.6f}).")
        return model
