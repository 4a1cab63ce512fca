"""
Module: logger.py
Description: Structured logging configuration for the hook dispatcher.

Configures structlog for JSON output so every delivery attempt, round
and trigger is emitted as a single machine-readable line.

Key Components:
- JSON output with timestamp and level processors
- configure_logging(): level filtering, safe to call more than once
- get_logger() helper function

Dependencies: structlog, logging, sys, datetime
Author: Hook Fanout Team
"""

import logging
import sys
from datetime import datetime, timezone

import structlog


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def _stderr_logger(*args) -> structlog.WriteLogger:
    # Looked up per logger so redirected streams are honored
    return structlog.WriteLogger(sys.stderr)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for JSON output on stderr.

    Stdout stays free for command output such as the CLI report.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        # Reconfiguration must reach loggers that were already created
        cache_logger_on_first_use=False,
    )


configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Hook delivered", endpoint_id="hook_1", status_code=200)
        {"event": "Hook delivered", "endpoint_id": "hook_1", "status_code": 200, "timestamp": "2024-01-15T10:30:00Z", "level": "INFO"}
    """
    return structlog.get_logger(name)
