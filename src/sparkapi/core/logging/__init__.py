"""Structured logging primitives for the sparkapi core package."""

from .log_events import LogEvents, emit
from .logger import (
    DEFAULT_LOG_LEVEL,
    REDACTED,
    LogConfig,
    LogFormat,
    UnifiedLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LogConfig",
    "LogFormat",
    "REDACTED",
    "UnifiedLogger",
    "configure_logging",
    "get_logger",
    "LogEvents",
    "emit",
]
