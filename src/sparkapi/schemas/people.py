"""People records and list filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sparkapi.schemas.common import SparkModel

__all__ = ["Person", "PeopleListParams"]


class Person(SparkModel):
    id: str | None = None
    emails: list[str] | None = None
    display_name: str | None = None
    nick_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None
    org_id: str | None = None
    roles: list[str] | None = None
    licenses: list[str] | None = None
    created: datetime | None = None
    timezone: str | None = None
    last_activity: datetime | None = None
    status: str | None = None
    invite_pending: bool | None = None
    login_enabled: bool | None = None
    type: str | None = None


@dataclass(frozen=True, slots=True)
class PeopleListParams:
    """Optional filters for listing people."""

    email: str | None = None
    display_name: str | None = None
    id: str | None = None
    org_id: str | None = None

    def to_query(self) -> dict[str, list[str]]:
        query: dict[str, list[str]] = {}
        if self.email:
            query["email"] = [self.email]
        if self.display_name:
            query["displayName"] = [self.display_name]
        if self.id:
            query["id"] = [self.id]
        if self.org_id:
            query["orgId"] = [self.org_id]
        return query
