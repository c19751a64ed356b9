import logging
import sys
import os
from typing import Optional

PACKAGE_LOGGER = "solar_forecast"

# Settings from the last configure_logging call, applied to package loggers created later.
_package_settings = {"level": None, "log_file": None}


def get_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Create or retrieve a logger with optional file logging.

    Args:
        name (str): Name of the logger.
        level (str, optional): Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        log_file (str, optional): Path to log file. If None, logs only to console.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid adding duplicate handlers
        if _is_package_logger(name) and _package_settings["level"] is not None:
            level = _package_settings["level"]
            log_file = log_file or _package_settings["log_file"]

        numeric_level = getattr(logging, level.upper(), logging.INFO)
        logger.setLevel(numeric_level)

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # Optional file handler
        if log_file:
            _attach_file_handler(logger, log_file, formatter)

    return logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Apply a logging level (and optional log file) to every package logger,
    including those created by get_logger afterwards.

    Args:
        level (str): Logging level name. Unknown names fall back to INFO.
        log_file (str, optional): Extra file destination for package loggers.
    """
    _package_settings["level"] = level
    _package_settings["log_file"] = log_file

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    for name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(candidate, logging.Logger):
            continue
        if not _is_package_logger(name):
            continue
        candidate.setLevel(numeric_level)
        if log_file and candidate.handlers:
            _attach_file_handler(candidate, log_file, formatter)


def _is_package_logger(name: str) -> bool:
    return name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}.")


def _attach_file_handler(logger: logging.Logger, log_file: str, formatter: logging.Formatter) -> None:
    target = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return

    log_dir = os.path.dirname(target)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)  # Ensure directory exists
    file_handler = logging.FileHandler(target)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
