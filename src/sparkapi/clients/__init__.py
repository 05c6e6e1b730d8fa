"""Per-resource clients built on the shared request and pagination path."""

from sparkapi.clients.base import ResourceClient
from sparkapi.clients.messages import MessagesClient
from sparkapi.clients.people import PeopleClient
from sparkapi.clients.rooms import RoomsClient
from sparkapi.clients.webhooks import WebhooksClient

__all__ = [
    "MessagesClient",
    "PeopleClient",
    "ResourceClient",
    "RoomsClient",
    "WebhooksClient",
]
