# solar_forecast/dashboard/prediction_panel.py

from typing import Optional

import streamlit as st

from solar_forecast.dashboard.utils import format_prediction, get_ui_logger
from solar_forecast.state.app_state import AppState
from solar_forecast.state.network_lifecycle import NetworkStatus
from solar_forecast.utils.config_loader import DisplayConfig

logger = get_ui_logger(__name__)


class PredictionPanel:
    """
    Shows the latest predicted production and the network's readiness.
    """

    def __init__(self, display_config: DisplayConfig):
        self.display_config = display_config

    def readout(self, state: AppState) -> str:
        return format_prediction(
            state.prediction,
            unit=self.display_config.unit,
            decimals=self.display_config.decimals,
        )

    def render(self, state: AppState, status: NetworkStatus, failure_reason: Optional[str] = None) -> None:
        if status is NetworkStatus.UNREADY:
            st.info("Training the model on synthetic data...")
        elif status is NetworkStatus.FAILED:
            logger.warning(f"Showing training failure banner: {failure_reason}")
            st.error(f"Model training failed: {failure_reason or 'unknown error'}")

        # A notice from an early press is stale once the network is ready.
        if state.notice and status is not NetworkStatus.READY:
            st.warning(state.notice)

        st.metric("Predicted Production", self.readout(state))
        if not state.has_prediction:
            st.caption("Press 'Generate Prediction' to evaluate the current inputs.")
