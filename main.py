"""
Central CLI entrypoint for the Solar Production Forecasting project.

Usage:
    python main.py <command> [--config CONFIG_PATH]

Supported commands:
    serve           Start the Streamlit dashboard
    predict         Fit a session network and print one prediction

Examples:
    python main.py serve --config configs/app_config.yaml --port 8501
    python main.py predict --temperature 30 --cloud-cover 50 --wind-speed 5 --humidity 70
"""

import argparse
import os
from typing import List, Optional

from solar_forecast.dashboard.app import start_dashboard
from solar_forecast.dashboard.utils import format_prediction
from solar_forecast.monitoring.error_logging import ErrorComponent, create_component_logger
from solar_forecast.state.app_state import initial_state, with_input
from solar_forecast.state.network_lifecycle import NetworkLifecycleManager, NetworkStatus
from solar_forecast.state.prediction import PredictionInvoker
from solar_forecast.utils.config_loader import load_typed_config
from solar_forecast.utils.logger import configure_logging, get_logger

logger = get_logger("solar_forecast.cli")


def validate_config_path(config_path: Optional[str]) -> None:
    """
    Validates whether the given config path exists and is a file.

    Args:
        config_path (Optional[str]): Path to the config file. None means built-in defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    if config_path is None:
        return
    if not os.path.isfile(config_path):
        logger.error(f"Config file not found: {config_path}")
        raise FileNotFoundError(f"Config file not found: {config_path}")


def run_prediction(
    config_path: Optional[str],
    temperature: Optional[float] = None,
    cloud_cover: Optional[float] = None,
    wind_speed: Optional[float] = None,
    humidity: Optional[float] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Fit a network, wait for it, and return the formatted prediction.

    Inputs left as None keep their configured slider defaults.

    Raises:
        RuntimeError: If fitting fails or does not finish within the timeout.
    """
    config = load_typed_config(config_path)
    configure_logging(config.logging.level, config.logging.file)

    state = initial_state(config.inputs)
    overrides = {
        "temperature": temperature,
        "cloud_cover": cloud_cover,
        "wind_speed": wind_speed,
        "humidity": humidity,
    }
    for name, value in overrides.items():
        if value is not None:
            state = with_input(state, name, value)

    lifecycle = NetworkLifecycleManager(
        network_params=config.network,
        data_config=config.synthetic_data,
        error_logger=create_component_logger(ErrorComponent.NETWORK_LIFECYCLE, config.error_log.path),
    )
    lifecycle.start()
    try:
        status = lifecycle.wait_until_ready(timeout=timeout)
    finally:
        lifecycle.shutdown()

    if status is NetworkStatus.FAILED:
        raise RuntimeError(f"Network fitting failed: {lifecycle.failure_reason}")
    if status is not NetworkStatus.READY:
        raise RuntimeError(f"Network was not ready after {timeout} seconds")

    invoker = PredictionInvoker(
        lifecycle,
        error_logger=create_component_logger(ErrorComponent.PREDICTION_INVOKER, config.error_log.path),
    )
    state = invoker.invoke(state)
    return format_prediction(state.prediction, config.display.unit, config.display.decimals)


def main(argv: Optional[List[str]] = None):
    """
    Parse CLI arguments and dispatch commands.
    """
    parser = argparse.ArgumentParser(description="Solar Production Forecasting CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- Serve ---
    serve_parser = subparsers.add_parser("serve", help="Start the dashboard")
    serve_parser.add_argument("--config", "-c", default=None, help="Path to app config YAML")
    serve_parser.add_argument("--port", type=int, default=8501, help="Port for the dashboard")

    # --- Predict ---
    predict_parser = subparsers.add_parser("predict", help="Print a single prediction")
    predict_parser.add_argument("--config", "-c", default=None, help="Path to app config YAML")
    predict_parser.add_argument("--temperature", type=float, default=None, help="Temperature (°C)")
    predict_parser.add_argument("--cloud-cover", type=float, default=None, help="Cloud cover (%%)")
    predict_parser.add_argument("--wind-speed", type=float, default=None, help="Wind speed (km/h)")
    predict_parser.add_argument("--humidity", type=float, default=None, help="Humidity (%%)")
    predict_parser.add_argument("--timeout", type=float, default=60.0, help="Seconds to wait for fitting")

    args = parser.parse_args(argv)

    try:
        validate_config_path(args.config)

        if args.command == "serve":
            logger.info(f"Launching dashboard on port {args.port}")
            start_dashboard(config_path=args.config, port=args.port)

        elif args.command == "predict":
            readout = run_prediction(
                args.config,
                temperature=args.temperature,
                cloud_cover=args.cloud_cover,
                wind_speed=args.wind_speed,
                humidity=args.humidity,
                timeout=args.timeout,
            )
            print(f"Predicted Production: {readout}")

    except Exception as e:
        logger.exception(f"Fatal error during execution: {e}")
        raise


if __name__ == "__main__":
    main()
