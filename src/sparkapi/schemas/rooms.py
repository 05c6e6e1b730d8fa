"""Room records and list filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sparkapi.schemas.common import SparkModel

__all__ = ["Room", "RoomListParams"]


class Room(SparkModel):
    id: str | None = None
    title: str | None = None
    type: str | None = None
    is_locked: bool | None = None
    sip_address: str | None = None
    team_id: str | None = None
    last_activity: datetime | None = None
    creator_id: str | None = None
    created: datetime | None = None


@dataclass(frozen=True, slots=True)
class RoomListParams:
    """Optional filters for listing rooms.

    ``type`` is ``"direct"`` or ``"group"``; ``sort_by`` is one of ``"id"``,
    ``"lastactivity"`` or ``"created"``.
    """

    team_id: str | None = None
    type: str | None = None
    sort_by: str | None = None

    def to_query(self) -> dict[str, list[str]]:
        query: dict[str, list[str]] = {}
        if self.team_id:
            query["teamId"] = [self.team_id]
        if self.type:
            query["type"] = [self.type]
        if self.sort_by:
            query["sortBy"] = [self.sort_by]
        return query
