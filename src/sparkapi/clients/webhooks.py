"""Client for the ``/webhooks`` collection."""

from __future__ import annotations

from sparkapi.clients.base import ResourceClient
from sparkapi.schemas.webhooks import NewWebhook, Webhook

__all__ = ["WebhooksClient"]


class WebhooksClient(ResourceClient):
    resource = "webhooks"

    def get(self, webhook_id: str) -> Webhook:
        self._require(webhook_id, "no webhook ID specified")
        return self._get(Webhook, self.item_url(webhook_id))

    def list(self, max_items: int = 0) -> list[Webhook]:
        return self._list(Webhook, max_items)

    def create(self, webhook: NewWebhook | None) -> Webhook:
        if webhook is None:
            raise self._invalid("nil webhook")
        self._require(webhook.name, "no webhook name specified")
        self._require(webhook.target_url, "no webhook target URL specified")
        self._require(webhook.resource, "no webhook resource specified")
        self._require(webhook.event, "no webhook event specified")
        return self._post(Webhook, self.url, webhook)

    def update(self, webhook: Webhook | None) -> Webhook:
        if webhook is None:
            raise self._invalid("nil webhook")
        if not webhook.id:
            raise self._invalid("no webhook ID specified")
        self._require(webhook.name, "no webhook name specified")
        self._require(webhook.target_url, "no webhook target URL specified")
        # resource and event are only required when registering
        return self._put(Webhook, self.item_url(webhook.id), webhook)

    def delete(self, webhook_id: str) -> None:
        self._require(webhook_id, "no webhook ID specified")
        self._delete(self.item_url(webhook_id))
