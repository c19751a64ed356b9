# solar_forecast/dashboard/utils.py

import logging
from typing import Optional

# -------------------------------
# Logger Function
# -------------------------------
def get_ui_logger(name: Optional[str] = "dashboard") -> logging.Logger:
    """
    Returns a configured logger for the dashboard module.

    Args:
        name (str): Logger name. Defaults to 'dashboard'.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
        logger.propagate = False
    return logger

# -------------------------------
# Helper Functions
# -------------------------------
def format_prediction(value: float, unit: str = "kW", decimals: int = 2) -> str:
    """
    Format a production value for display, e.g. ``"3.14 kW"``.

    Args:
        value (float): Production value.
        unit (str): Unit suffix.
        decimals (int): Digits after the decimal point.

    Returns:
        str: Formatted readout.
    """
    return f"{value:.{decimals}f} {unit}"


def format_slider_value(value: float, unit: str) -> str:
    """Readout under a slider: percent sign sticks to the number, other units are spaced."""
    number = f"{value:g}"
    if unit in ("%", "°C"):
        return f"{number}{unit}"
    return f"{number} {unit}"

# -------------------------------
# Dashboard Constants
# -------------------------------
CHART_LINE_COLOR = "rgb(255, 162, 0)"
CHART_FILL_COLOR = "rgba(255, 162, 0, 0.5)"
CHART_HEIGHT = 400
