# solar_forecast/monitoring/error_logging.py
"""
Error Logging Framework for the Solar Forecasting dashboard.

Turns the silent failure points of the session (a background fit that dies,
a prediction requested before the network is ready) into explicit,
component-tagged log records with a fallback reason.
"""

import logging
import traceback
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from pathlib import Path
import json
from enum import Enum

from solar_forecast.utils.logger import PACKAGE_LOGGER, get_logger


class ErrorComponent(Enum):
    """Component identifiers for error tracking and monitoring."""
    NETWORK_LIFECYCLE = "network_lifecycle"
    PREDICTION_INVOKER = "prediction_invoker"


class FallbackReason(Enum):
    """Reasons why fallback was triggered."""
    NETWORK_NOT_READY = "network_not_ready"
    NETWORK_FAILED = "network_failed"


class ErrorLogger:
    """
    Structured error logging with component tagging and fallback tracking.

    Usage:
        logger = ErrorLogger(component=ErrorComponent.PREDICTION_INVOKER)
        if not network_ready:
            logger.log_fallback(
                reason=FallbackReason.NETWORK_NOT_READY,
                context={"status": "unready"},
                fallback_action="Prediction skipped",
            )
    """

    def __init__(
        self,
        component: ErrorComponent,
        base_logger: Optional[logging.Logger] = None,
        error_log_path: Optional[str] = None,
    ):
        """
        Initialize error logger for a specific component.

        Args:
            component: ErrorComponent enum identifying the component
            base_logger: Optional logging.Logger to use (creates default if None)
            error_log_path: Optional JSONL file to append records to.
                Records are kept in memory only when None.
        """
        self.component = component
        self.logger = base_logger or get_logger(f"{PACKAGE_LOGGER}.monitoring.error.{component.value}")

        # Error statistics
        self.error_count = 0
        self.fallback_count = 0
        self.error_history: list[Dict[str, Any]] = []

        self.error_log_path = Path(error_log_path) if error_log_path else None
        if self.error_log_path is not None:
            self.error_log_path.parent.mkdir(parents=True, exist_ok=True)

    def log_fallback(
        self,
        reason: FallbackReason,
        exception: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        fallback_action: Optional[str] = None,
    ) -> None:
        """
        Log an event where the component skipped its normal path.

        Args:
            reason: FallbackReason enum indicating why fallback occurred
            exception: Optional exception that triggered the fallback
            context: Optional context dict (status, inputs, etc.)
            fallback_action: Optional description of fallback action taken
        """
        self.fallback_count += 1

        error_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.component.value,
            "reason": reason.value,
            "fallback_count": self.fallback_count,
            "exception_type": type(exception).__name__ if exception else None,
            "exception_message": str(exception) if exception else None,
            "traceback": _format_traceback(exception),
            "context": context or {},
            "fallback_action": fallback_action or "No action taken",
        }

        self.error_history.append(error_record)

        context_str = ", ".join(f"{k}={v}" for k, v in (context or {}).items())
        exc_str = f": {exception}" if exception else ""

        log_msg = (
            f"[{self.component.value.upper()}] "
            f"Fallback triggered ({reason.value}){exc_str} "
            f"| Context: {context_str} "
            f"| Action: {fallback_action or 'No action taken'}"
        )

        self.logger.warning(log_msg)
        self._persist_error(error_record)

    def log_error(
        self,
        error_msg: str,
        exception: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        severity: str = "warning",
    ) -> None:
        """
        Log a general error (not necessarily triggering fallback).

        Args:
            error_msg: Description of the error
            exception: Optional exception object
            context: Optional context dict
            severity: 'debug', 'info', 'warning', 'error', 'critical'
        """
        self.error_count += 1

        error_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.component.value,
            "message": error_msg,
            "exception_type": type(exception).__name__ if exception else None,
            "exception_message": str(exception) if exception else None,
            "traceback": _format_traceback(exception),
            "context": context or {},
            "severity": severity,
        }

        self.error_history.append(error_record)

        log_func = getattr(self.logger, severity, self.logger.warning)
        context_str = ", ".join(f"{k}={v}" for k, v in (context or {}).items())
        log_msg = f"[{self.component.value.upper()}] {error_msg} | Context: {context_str}"
        log_func(log_msg)

        self._persist_error(error_record)

    def _persist_error(self, error_record: Dict[str, Any]) -> None:
        """Append error record to JSONL error log file, if one is configured."""
        if self.error_log_path is None:
            return
        try:
            with open(self.error_log_path, "a") as f:
                f.write(json.dumps(error_record) + "\n")
        except OSError as e:
            self.logger.error(f"Failed to write error log: {e}")


def _format_traceback(exception: Optional[Exception]) -> Optional[str]:
    if exception is None:
        return None
    return "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))


def create_component_logger(
    component: ErrorComponent, error_log_path: Optional[str] = None
) -> ErrorLogger:
    """Create a component-specific error logger."""
    return ErrorLogger(component=component, error_log_path=error_log_path)
