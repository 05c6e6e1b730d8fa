"""Structured logging for sparkapi.

All library modules log through :class:`UnifiedLogger` under the ``sparkapi``
standard-library logger namespace. Until :meth:`UnifiedLogger.configure` is
called, events simply propagate to whatever logging the host application has
set up. ``configure`` (used by the bundled CLI) attaches one stream handler to
the ``sparkapi`` namespace only and leaves the root logger alone.
"""
from __future__ import annotations

import logging
import re
import sys
from collections.abc import Collection, MutableMapping, Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, TextIO

import structlog
from structlog.contextvars import bind_contextvars, bound_contextvars, clear_contextvars
from structlog.exceptions import DropEvent
from structlog.stdlib import BoundLogger

__all__ = [
    "LogFormat",
    "LogConfig",
    "DEFAULT_LOG_LEVEL",
    "REDACTED",
    "configure_logging",
    "get_logger",
    "UnifiedLogger",
]


class LogFormat(str, Enum):
    """Renderer used for emitted events."""

    JSON = "json"
    KEY_VALUE = "key_value"


DEFAULT_LOG_LEVEL = logging.WARNING

REDACTED: Final[str] = "***REDACTED***"

LIBRARY_LOGGER: Final[str] = "sparkapi"

_BEARER = re.compile(r"(Bearer\s+)\S+", re.IGNORECASE)

_EVENT_METHOD_LEVELS: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}

_KEY_ORDER: Sequence[str] = (
    "timestamp",
    "level",
    "component",
    "command",
    "method",
    "url",
    "status_code",
    "message",
)


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Settings accepted by :func:`configure_logging`."""

    level: int | str = DEFAULT_LOG_LEVEL
    format: LogFormat = LogFormat.KEY_VALUE
    redact_fields: Collection[str] = ("token", "authorization", "access_token")
    stream: TextIO | None = None


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.strip().upper())
    if resolved is None:
        raise ValueError(f"Unsupported log level: {level}")
    return resolved


class _CredentialMasker:
    """Processor hiding secrets by key name and any inline bearer credentials."""

    def __init__(self, fields: Collection[str]) -> None:
        self._fields = frozenset(field.lower() for field in fields)

    def __call__(
        self, _: Any, __: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        for key, value in event_dict.items():
            if key.lower() in self._fields:
                event_dict[key] = REDACTED
            elif isinstance(value, str):
                event_dict[key] = _BEARER.sub(rf"\g<1>{REDACTED}", value)
        return event_dict


def _event_as_text(
    _: Any, __: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    event = event_dict.get("event")
    if isinstance(event, Enum):
        event_dict["event"] = str(event.value)
    return event_dict


def _drop_below_level(
    logger: logging.Logger | None, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    target = logger or logging.getLogger(LIBRARY_LOGGER)
    if target.isEnabledFor(_EVENT_METHOD_LEVELS.get(method_name, logging.INFO)):
        return event_dict
    raise DropEvent


def _pre_chain(config: LogConfig) -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        _event_as_text,
        structlog.processors.EventRenamer("message"),
        _CredentialMasker(config.redact_fields),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(format: LogFormat) -> Any:
    if format is LogFormat.JSON:
        return structlog.processors.JSONRenderer(sort_keys=True, ensure_ascii=False)
    return structlog.processors.KeyValueRenderer(key_order=_KEY_ORDER, drop_missing=True)


def configure_logging(config: LogConfig | None = None) -> None:
    """Route ``sparkapi`` events to a single stream handler.

    Calling this again replaces the previous handler, so the CLI and tests
    can reconfigure freely.
    """

    cfg = config or LogConfig()
    level = _resolve_level(cfg.level)
    pre_chain = _pre_chain(cfg)

    handler = logging.StreamHandler(cfg.stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(cfg.format),
            ],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False

    structlog.configure(
        processors=[
            *pre_chain,
            _drop_below_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LIBRARY_LOGGER) -> BoundLogger:
    """Return a structlog logger writing to the stdlib logger ``name``."""

    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class UnifiedLogger:
    """Entry point used by every sparkapi component to obtain a logger."""

    @staticmethod
    def configure(config: LogConfig | None = None) -> None:
        configure_logging(config)

    @staticmethod
    def get(name: str | None = None) -> BoundLogger:
        return get_logger(name or LIBRARY_LOGGER)

    @staticmethod
    def bind(**context: Any) -> None:
        """Attach ``context`` to every event logged from the current context."""

        bind_contextvars(**context)

    @staticmethod
    def reset() -> None:
        clear_contextvars()

    @staticmethod
    def scoped(**context: Any) -> AbstractContextManager[None]:
        """Bind ``context`` for the duration of a ``with`` block, then restore."""

        return bound_contextvars(**context)
