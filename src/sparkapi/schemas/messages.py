"""Message records, the outgoing message payload and list filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sparkapi.schemas.common import SparkModel, format_timestamp

__all__ = ["Message", "MessageListParams", "NewMessage"]


class Message(SparkModel):
    id: str | None = None
    room_id: str | None = None
    room_type: str | None = None
    person_id: str | None = None
    person_email: str | None = None
    text: str | None = None
    markdown: str | None = None
    files: list[str] | None = None
    html: str | None = None
    created: datetime | None = None


class NewMessage(SparkModel):
    """Payload for posting a message.

    Exactly one destination should be set: ``room_id``, ``to_person_id`` or
    ``to_person_email``.
    """

    room_id: str | None = None
    to_person_id: str | None = None
    to_person_email: str | None = None
    text: str | None = None
    markdown: str | None = None
    files: list[str] | None = None

    @property
    def has_destination(self) -> bool:
        return bool(self.room_id or self.to_person_id or self.to_person_email)


@dataclass(frozen=True, slots=True)
class MessageListParams:
    mentioned_people: str | None = None
    before: datetime | None = None
    before_message_id: str | None = None

    def to_query(self, room_id: str) -> dict[str, list[str]]:
        query: dict[str, list[str]] = {"roomId": [room_id]}
        if self.mentioned_people:
            query["mentionedPeople"] = [self.mentioned_people]
        if self.before is not None:
            query["before"] = [format_timestamp(self.before)]
        if self.before_message_id:
            query["beforeMessage"] = [self.before_message_id]
        return query
