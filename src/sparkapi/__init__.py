"""Typed synchronous client for the Cisco Spark REST API."""

from sparkapi.client import SparkClient
from sparkapi.config import ClientConfig, EnvironmentSettings, build_client_config
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
from sparkapi.schemas import (
    Message,
    MessageListParams,
    NewMessage,
    NewWebhook,
    PeopleListParams,
    Person,
    Room,
    RoomListParams,
    Webhook,
)

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "EnvironmentSettings",
    "HTTPStatusError",
    "InvalidURLError",
    "Message",
    "MessageListParams",
    "NewMessage",
    "NewWebhook",
    "PartialResultError",
    "PeopleListParams",
    "Person",
    "RequestsTransport",
    "ResourceNotFoundError",
    "ResponseBody",
    "ResponseDecodeError",
    "ResponseReadError",
    "Room",
    "RoomListParams",
    "SparkClient",
    "SparkError",
    "SparkValidationError",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "Webhook",
    "__version__",
    "build_client_config",
]
