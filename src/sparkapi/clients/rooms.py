"""Client for the ``/rooms`` collection."""

from __future__ import annotations

from sparkapi.clients.base import ResourceClient
from sparkapi.core.exceptions import ResourceNotFoundError
from sparkapi.schemas.rooms import Room, RoomListParams

__all__ = ["RoomsClient"]


class RoomsClient(ResourceClient):
    resource = "rooms"

    def get(self, room_id: str) -> Room:
        self._require(room_id, "no room ID specified")
        return self._get(Room, self.item_url(room_id))

    def get_by_name(self, room_name: str) -> Room:
        """Return the first room the caller belongs to whose title is ``room_name``.

        Lists every room (no cap) and scans it in server order.
        """

        self._require(room_name, "no room name specified")
        for room in self.list(0):
            if room.title == room_name:
                return room
        raise ResourceNotFoundError(f"no room with name {room_name!r} was found")

    def list(self, max_items: int = 0, params: RoomListParams | None = None) -> list[Room]:
        return self._list(Room, max_items, self._query(params))

    def create(self, name: str, team_id: str | None = None) -> Room:
        self._require(name, "no room name specified")
        return self._post(Room, self.url, Room(title=name, team_id=team_id or None))

    def update_name(self, room_id: str, new_name: str) -> Room:
        self._require(room_id, "no room ID specified")
        self._require(new_name, "no room name specified")
        return self._put(Room, self.item_url(room_id), Room(title=new_name))

    def delete(self, room_id: str) -> None:
        self._require(room_id, "no room ID specified")
        self._delete(self.item_url(room_id))
