"""Registry of structured logging event identifiers."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from structlog.stdlib import BoundLogger

__all__ = ["LogEvents", "emit"]


class LogEvents(str, Enum):
    """Strongly typed registry of UnifiedLogger events.

    Member names map to dotted identifiers: the first word is the namespace,
    the last word is the outcome and everything in between is the action, so
    ``HTTP_PAGINATOR_PAGE_FETCHED`` becomes ``http.paginator.page.fetched``.
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, _last_values: list[str]) -> str:
        parts = name.lower().split("_")
        namespace = parts[0] if parts else "event"
        suffix = parts[-1] if len(parts) > 1 else "event"
        action_parts = parts[1:-1] if len(parts) > 2 else ["event"]
        return ".".join((namespace, *action_parts, suffix))

    HTTP_REQUEST_SENT = auto()
    HTTP_REQUEST_COMPLETED = auto()
    HTTP_REQUEST_EXCEPTION = auto()
    HTTP_REQUEST_FAILED = auto()
    HTTP_REQUEST_INVALID = auto()
    HTTP_RESPONSE_UNREADABLE = auto()
    HTTP_PAGINATOR_PAGE_FETCHED = auto()
    HTTP_PAGINATOR_NEXT_RESOLVED = auto()
    HTTP_PAGINATOR_STOPPED = auto()
    HTTP_PAGINATOR_ABORTED = auto()
    CLIENT_VALIDATION_FAILED = auto()
    CLIENT_DECODE_FAILED = auto()
    CLIENT_LIST_PARTIAL = auto()
    CLIENT_LIST_COMPLETED = auto()
    CLI_COMMAND_FAILED = auto()

    def __str__(self) -> str:
        return str(self.value)


def emit(logger: BoundLogger, event: str | LogEvents, **fields: Any) -> None:
    """Send an event via ``BoundLogger`` without mutating the provided fields."""

    message = event.value if isinstance(event, LogEvents) else event
    logger.info(message, **fields)
