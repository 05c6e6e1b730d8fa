"""Webhook records and the creation payload."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from sparkapi.schemas.common import SparkModel

__all__ = ["NewWebhook", "Webhook"]


class Webhook(SparkModel):
    id: str | None = None
    name: str | None = None
    target_url: str | None = None
    resource: str | None = None
    event: str | None = None
    filter: str | None = None
    secret: str | None = None
    org_id: str | None = None
    created_by: str | None = None
    app_id: str | None = None
    owned_by: str | None = None
    status: str | None = Field(default=None, alias="active")
    actor_id: str | None = None
    data: dict[str, Any] | None = None


class NewWebhook(SparkModel):
    """Payload for registering a webhook; ``filter`` and ``secret`` are optional."""

    name: str = ""
    target_url: str = ""
    resource: str = ""
    event: str = ""
    filter: str | None = None
    secret: str | None = None
