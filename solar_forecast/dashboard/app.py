# solar_forecast/dashboard/app.py

import argparse
import os
import sys
import time
from typing import List, Optional

import streamlit as st

from solar_forecast.dashboard.forecast_panel import ForecastPanel
from solar_forecast.dashboard.prediction_panel import PredictionPanel
from solar_forecast.dashboard.ui_components import render_sidebar
from solar_forecast.dashboard.utils import get_ui_logger
from solar_forecast.monitoring.error_logging import ErrorComponent, create_component_logger
from solar_forecast.state.app_state import initial_state
from solar_forecast.state.network_lifecycle import NetworkLifecycleManager, NetworkStatus
from solar_forecast.state.prediction import PredictionInvoker
from solar_forecast.utils.config_loader import FullConfig, load_typed_config
from solar_forecast.utils.logger import configure_logging

logger = get_ui_logger("solar_forecast.dashboard.app")

DEFAULT_CONFIG_PATH = os.path.join("configs", "app_config.yaml")
READINESS_POLL_SECONDS = 0.5

ABOUT_TEXT = (
    "This solar energy production forecasting model uses PyTorch to predict energy output "
    "based on environmental parameters. The model takes into account temperature, cloud cover, "
    "wind speed, and humidity to generate predictions. Please note that this is a demonstration "
    "model and actual production values may vary."
)


def parse_app_args(argv: Optional[List[str]] = None) -> Optional[str]:
    """
    Read the config path passed after ``streamlit run app.py --``.

    Returns:
        Optional[str]: Config path, the default file if present, or None for built-in defaults.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", "-c", default=None)
    args, _ = parser.parse_known_args(argv)

    if args.config:
        return args.config
    if os.path.isfile(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def get_session(config: FullConfig):
    """
    Create the per-session lifecycle manager, invoker and state on first run.

    Returns:
        tuple: (lifecycle, invoker)
    """
    if "lifecycle" not in st.session_state:
        lifecycle = NetworkLifecycleManager(
            network_params=config.network,
            data_config=config.synthetic_data,
            error_logger=create_component_logger(ErrorComponent.NETWORK_LIFECYCLE, config.error_log.path),
        )
        lifecycle.start()
        st.session_state["lifecycle"] = lifecycle
        st.session_state["invoker"] = PredictionInvoker(
            lifecycle,
            error_logger=create_component_logger(ErrorComponent.PREDICTION_INVOKER, config.error_log.path),
        )
        st.session_state["app_state"] = initial_state(config.inputs)
        logger.info("New dashboard session initialised.")

    return st.session_state["lifecycle"], st.session_state["invoker"]


def main():
    st.set_page_config(page_title="Solar Energy Production Forecasting", layout="wide")

    config = load_typed_config(parse_app_args(sys.argv[1:]))
    configure_logging(config.logging.level, config.logging.file)

    # -------------------------------
    # Title
    # -------------------------------
    st.markdown(
        "<h2 style='text-align:center; margin-bottom:0px;'>Solar Energy Production Forecasting</h2>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align:center; color:gray;'>Predict solar energy production using machine learning</p>",
        unsafe_allow_html=True,
    )

    lifecycle, invoker = get_session(config)

    # ==========================================================
    # Step 1 - Sidebar inputs and the prediction trigger
    # ==========================================================
    state, predict_clicked = render_sidebar(st.session_state["app_state"], config.inputs)

    # ==========================================================
    # Step 2 - Prediction on demand
    # ==========================================================
    if predict_clicked:
        state = invoker.invoke(state)

    st.session_state["app_state"] = state

    # ==========================================================
    # Step 3 - Panels
    # ==========================================================
    status = lifecycle.status
    with st.container():
        st.markdown(
            "<h4 style='border-bottom:1px solid #ccc; padding-bottom:5px;'>Production Forecast</h4>",
            unsafe_allow_html=True,
        )
        PredictionPanel(config.display).render(state, status, lifecycle.failure_reason)
        ForecastPanel(config.chart.points, config.chart.scale, config.display.unit).render_forecast()

    with st.expander("About the Model"):
        st.write(ABOUT_TEXT)

    logger.info(f"Dashboard render complete (network {status.value}).")

    # Re-run until the background fit resolves so the readiness banner updates.
    if status is NetworkStatus.UNREADY:
        time.sleep(READINESS_POLL_SECONDS)
        st.rerun()


def start_dashboard(config_path: Optional[str] = None, port: int = 8501) -> int:
    """
    Launch this module with ``streamlit run``.

    Args:
        config_path (Optional[str]): YAML config forwarded to the app.
        port (int): Port for the Streamlit server.

    Returns:
        int: Streamlit's exit code.
    """
    from streamlit.web import cli as stcli

    argv = ["streamlit", "run", os.path.abspath(__file__), "--server.port", str(port)]
    if config_path:
        argv += ["--", "--config", config_path]

    logger.info(f"Starting dashboard on port {port}")
    sys.argv = argv
    return stcli.main()


if __name__ == "__main__":
    main()
