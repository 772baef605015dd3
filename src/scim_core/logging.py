"""Logging utilities for the SCIM core.

This module provides standardized logging functionality for registry and
translation operations.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict

# Type for log callback functions
LogCallback = Callable[[int, str, Dict[str, Any]], None]

# Root logger name for the package
LOGGER_NAME = "scim_core"


class LogLevel(int, Enum):
    """Log levels for the core."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for core logging."""

    CODEC_REGISTRY = "codec_registry"
    ENDPOINT_REGISTRY = "endpoint_registry"
    EXCEPTION_TRANSLATION = "exception_translation"
    CONFIG = "config"


def get_logger(name: str = "") -> logging.Logger:
    """Get a logger below the package logger.

    Args:
        name: Child logger name. Module paths that already start with the
              package name are used as-is.

    Returns:
        Logger instance
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def _log(
    callback: LogCallback,
    level: LogLevel,
    event: LogEvent,
    data: Dict[str, Any],
) -> None:
    """Log an event with the provided callback.

    Args:
        callback: Function to call with the log data
        level: Severity level
        event: Event type
        data: Dictionary of event data
    """
    try:
        callback(level, event.value, data)
    except Exception as e:
        # Fallback to standard logging if callback fails
        logging.error(
            f"Logging callback failed with error: {e}. Original log: "
            f"level={level}, event={event}, data={data}"
        )


def _emit(level: int, event: str, data: Dict[str, Any]) -> None:
    message = data.pop("message", "")
    logger = get_logger()
    if logger.isEnabledFor(level):
        logger.log(level, "[%s] %s", event, message, extra={"event": event, "event_data": data})


def log_debug(event: LogEvent, message: str, **kwargs: Any) -> None:
    """Log a debug-level event."""
    _log(_emit, LogLevel.DEBUG, event, {"message": message, **kwargs})


def log_info(event: LogEvent, message: str, **kwargs: Any) -> None:
    """Log an info-level event."""
    _log(_emit, LogLevel.INFO, event, {"message": message, **kwargs})


def log_warning(event: LogEvent, message: str, **kwargs: Any) -> None:
    """Log a warning-level event."""
    _log(_emit, LogLevel.WARNING, event, {"message": message, **kwargs})


def log_error(event: LogEvent, message: str, **kwargs: Any) -> None:
    """Log an error-level event."""
    _log(_emit, LogLevel.ERROR, event, {"message": message, **kwargs})
