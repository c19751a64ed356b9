# solar_forecast/state/prediction.py

from dataclasses import replace
from typing import Optional

from solar_forecast.monitoring.error_logging import ErrorComponent, ErrorLogger, FallbackReason
from solar_forecast.state.app_state import AppState
from solar_forecast.state.network_lifecycle import NetworkLifecycleManager, NetworkStatus
from solar_forecast.utils.logger import get_logger

logger = get_logger(__name__)

NOT_READY_NOTICE = "The model is still training. Try again in a moment."
FAILED_NOTICE = "The model failed to train: {reason}"


def clamp_prediction(raw: float) -> float:
    """Production cannot be negative."""
    return max(0.0, float(raw))


class PredictionInvoker:
    """
    Runs one forward pass of the session network on the current inputs.

    A press that arrives before the network is ready leaves the previous
    prediction untouched and returns a notice instead.
    """

    def __init__(self, lifecycle: NetworkLifecycleManager, error_logger: Optional[ErrorLogger] = None):
        self.lifecycle = lifecycle
        self.error_logger = error_logger or ErrorLogger(component=ErrorComponent.PREDICTION_INVOKER)

    def invoke(self, state: AppState) -> AppState:
        """
        Compute a prediction for state.inputs.

        Args:
            state (AppState): Current session state.

        Returns:
            AppState: New state with the clamped prediction, or the same
                prediction plus a readiness notice if the network is not ready.
        """
        status = self.lifecycle.status
        network = self.lifecycle.network

        if status is not NetworkStatus.READY or network is None:
            return self._skip(state, status)

        raw = float(network.predict(state.inputs.to_array())[0, 0])
        value = clamp_prediction(raw)
        logger.info(f"Prediction computed: raw={raw:.6f}, clamped={value:.6f}")

        return replace(state, prediction=value, has_prediction=True, notice=None)

    def _skip(self, state: AppState, status: NetworkStatus) -> AppState:
        if status is NetworkStatus.FAILED:
            reason = FallbackReason.NETWORK_FAILED
            notice = FAILED_NOTICE.format(reason=self.lifecycle.failure_reason or "unknown error")
        else:
            reason = FallbackReason.NETWORK_NOT_READY
            notice = NOT_READY_NOTICE

        self.error_logger.log_fallback(
            reason=reason,
            context={"status": status.value},
            fallback_action="Prediction skipped; previous value kept",
        )
        return replace(state, notice=notice)
