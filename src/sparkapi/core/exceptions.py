"""Public exceptions raised by sparkapi.

Upper layers (the client facade, the CLI, applications) import errors only
from here. Transport failures are the one exception: they propagate in the
transport's own types, which for :class:`~sparkapi.core.transport.RequestsTransport`
means :class:`requests.RequestException` (re-exported below).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from requests.exceptions import RequestException

__all__ = [
    "SparkError",
    "SparkValidationError",
    "InvalidURLError",
    "HTTPStatusError",
    "ResponseReadError",
    "ResponseDecodeError",
    "PartialResultError",
    "ResourceNotFoundError",
    "RequestException",
]


class SparkError(Exception):
    """Base exception for all library errors."""


class SparkValidationError(SparkError, ValueError):
    """An argument or required field was missing or malformed.

    Raised before any network I/O takes place.
    """


class InvalidURLError(SparkValidationError):
    """A request URL could not be turned into a request."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class HTTPStatusError(SparkError):
    """The server answered with a status other than 200 or 204."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP Status {status_code}: {body!r}")
        self.status_code = status_code
        self.body = body


class ResponseReadError(SparkError):
    """The response body stream failed while being read."""


class ResponseDecodeError(SparkError):
    """A response body did not contain the structured data that was expected."""


class PartialResultError(SparkError):
    """A list call failed after some items had already been retrieved.

    ``items`` holds every record decoded before the failure, in server order.
    They are valid data. ``causes`` lists each underlying error; a request
    failure and a decode failure may both be present.
    """

    def __init__(self, items: Sequence[Any], causes: Sequence[BaseException]) -> None:
        self.items = list(items)
        self.causes = tuple(causes)
        summary = "; ".join(f"{type(cause).__name__}: {cause}" for cause in self.causes)
        super().__init__(f"partial result with {len(self.items)} item(s): {summary}")


class ResourceNotFoundError(SparkError, LookupError):
    """A lookup helper found no matching resource."""
