"""Typed wire records for the four resource kinds."""

from sparkapi.schemas.common import ItemList, SparkModel, decode, format_timestamp
from sparkapi.schemas.messages import Message, MessageListParams, NewMessage
from sparkapi.schemas.people import PeopleListParams, Person
from sparkapi.schemas.rooms import Room, RoomListParams
from sparkapi.schemas.webhooks import NewWebhook, Webhook

__all__ = [
    "ItemList",
    "Message",
    "MessageListParams",
    "NewMessage",
    "NewWebhook",
    "PeopleListParams",
    "Person",
    "Room",
    "RoomListParams",
    "SparkModel",
    "Webhook",
    "decode",
    "format_timestamp",
]
