"""Client for the ``/messages`` collection."""

from __future__ import annotations

from sparkapi.clients.base import ResourceClient
from sparkapi.schemas.messages import Message, MessageListParams, NewMessage

__all__ = ["MessagesClient"]


class MessagesClient(ResourceClient):
    resource = "messages"

    def get(self, message_id: str) -> Message:
        self._require(message_id, "no message ID specified")
        return self._get(Message, self.item_url(message_id))

    def list(
        self,
        max_items: int,
        room_id: str,
        params: MessageListParams | None = None,
    ) -> list[Message]:
        self._require(room_id, "no room ID specified")
        query = (params or MessageListParams()).to_query(room_id)
        return self._list(Message, max_items, query)

    def create(self, message: NewMessage | None) -> Message:
        if message is None:
            raise self._invalid("nil message")
        if not message.has_destination:
            raise self._invalid("message requires a room ID, person ID, or email to send to")
        return self._post(Message, self.url, message)

    def delete(self, message_id: str) -> None:
        self._require(message_id, "no message ID specified")
        self._delete(self.item_url(message_id))
