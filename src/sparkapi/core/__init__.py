"""Core primitives: transport boundary, request execution, errors and logging.

:mod:`sparkapi.core.api_client` is imported directly by its users; it depends
on :mod:`sparkapi.config`, which in turn depends on the exceptions exported
here.
"""

from sparkapi.core.exceptions import (
    HTTPStatusError,
    InvalidURLError,
    PartialResultError,
    ResourceNotFoundError,
    ResponseDecodeError,
    ResponseReadError,
    SparkError,
    SparkValidationError,
)
from sparkapi.core.transport import (
    RequestsTransport,
    ResponseBody,
    Transport,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    "HTTPStatusError",
    "InvalidURLError",
    "PartialResultError",
    "RequestsTransport",
    "ResourceNotFoundError",
    "ResponseBody",
    "ResponseDecodeError",
    "ResponseReadError",
    "SparkError",
    "SparkValidationError",
    "Transport",
    "TransportRequest",
    "TransportResponse",
]
