"""High-level client exposing one method per API endpoint."""

from __future__ import annotations

from datetime import datetime

from sparkapi.clients import MessagesClient, PeopleClient, RoomsClient, WebhooksClient
from sparkapi.clients.http.pagination import Paginator
from sparkapi.config.environment import EnvironmentSettings
from sparkapi.config.models import ClientConfig, build_client_config
from sparkapi.core.api_client import APIClient
from sparkapi.core.transport import RequestsTransport, Transport
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

__all__ = ["SparkClient"]


class SparkClient:
    """Synchronous client for the Spark REST API.

    The configuration is immutable. :meth:`with_page_size` hands back a new
    client that shares the transport and leaves this one untouched, so it can
    be chained for a single call::

        client.with_page_size(25).list_people(50)

    Every ``list_*`` method takes ``max_items`` first; 0 means "everything
    the server has".
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        if config is None:
            config = build_client_config(token=token or "")
        self._config = config
        self._owns_transport = transport is None
        self._transport: Transport = transport or RequestsTransport(
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
        api = APIClient(config, self._transport)
        paginator = Paginator(api)
        self.people = PeopleClient(api, paginator)
        self.rooms = RoomsClient(api, paginator)
        self.messages = MessagesClient(api, paginator)
        self.webhooks = WebhooksClient(api, paginator)

    @classmethod
    def from_env(
        cls,
        settings: EnvironmentSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> SparkClient:
        """Build a client from ``SPARK_*`` environment variables."""

        resolved = settings or EnvironmentSettings()
        return cls(config=resolved.to_client_config(), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def page_size(self) -> int:
        return self._config.page_size

    def with_page_size(self, page_size: int) -> SparkClient:
        """Return a client identical to this one but with another page ceiling."""

        return SparkClient(config=self._config.with_page_size(page_size), transport=self._transport)

    set_max_per_page = with_page_size

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if self._owns_transport and callable(close):
            close()

    def __enter__(self) -> SparkClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def get_person(self, person_id: str) -> Person:
        return self.people.get(person_id)

    def get_myself(self) -> Person:
        return self.people.get_myself()

    def list_people(self, max_items: int = 0, params: PeopleListParams | None = None) -> list[Person]:
        return self.people.list(max_items, params)

    def create_person(self, person: Person) -> Person:
        return self.people.create(person)

    def update_person(self, person: Person) -> Person:
        return self.people.update(person)

    def delete_person(self, person_id: str) -> None:
        self.people.delete(person_id)

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def get_room(self, room_id: str) -> Room:
        return self.rooms.get(room_id)

    def get_room_by_name(self, room_name: str) -> Room:
        return self.rooms.get_by_name(room_name)

    def list_rooms(self, max_items: int = 0, params: RoomListParams | None = None) -> list[Room]:
        return self.rooms.list(max_items, params)

    def create_room(self, name: str, team_id: str | None = None) -> Room:
        return self.rooms.create(name, team_id)

    def update_room_name(self, room_id: str, new_name: str) -> Room:
        return self.rooms.update_name(room_id, new_name)

    def delete_room(self, room_id: str) -> None:
        self.rooms.delete(room_id)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def get_message(self, message_id: str) -> Message:
        return self.messages.get(message_id)

    def list_messages(
        self,
        max_items: int,
        room_id: str,
        params: MessageListParams | None = None,
    ) -> list[Message]:
        return self.messages.list(max_items, room_id, params)

    def list_messages_before(self, room_id: str, before: datetime, max_items: int = 0) -> list[Message]:
        return self.messages.list(max_items, room_id, MessageListParams(before=before))

    def create_message(self, message: NewMessage) -> Message:
        return self.messages.create(message)

    def delete_message(self, message_id: str) -> None:
        self.messages.delete(message_id)

    # ------------------------------------------------------------------
    # Webhooks
    # ------------------------------------------------------------------

    def get_webhook(self, webhook_id: str) -> Webhook:
        return self.webhooks.get(webhook_id)

    def list_webhooks(self, max_items: int = 0) -> list[Webhook]:
        return self.webhooks.list(max_items)

    def create_webhook(self, webhook: NewWebhook) -> Webhook:
        return self.webhooks.create(webhook)

    def update_webhook(self, webhook: Webhook) -> Webhook:
        return self.webhooks.update(webhook)

    def delete_webhook(self, webhook_id: str) -> None:
        self.webhooks.delete(webhook_id)
