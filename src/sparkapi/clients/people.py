"""Client for the ``/people`` collection."""

from __future__ import annotations

from sparkapi.clients.base import ResourceClient
from sparkapi.schemas.people import PeopleListParams, Person

__all__ = ["PeopleClient"]


class PeopleClient(ResourceClient):
    resource = "people"

    def get(self, person_id: str) -> Person:
        self._require(person_id, "no person ID specified")
        return self._get(Person, self.item_url(person_id))

    def get_myself(self) -> Person:
        """Return the person the token belongs to."""

        return self.get("me")

    def list(self, max_items: int = 0, params: PeopleListParams | None = None) -> list[Person]:
        return self._list(Person, max_items, self._query(params))

    def create(self, person: Person | None) -> Person:
        if person is None:
            raise self._invalid("nil person")
        # emails is the only field the API requires for a new person
        self._require(person.emails, "no email specified")
        return self._post(Person, self.url, person)

    def update(self, person: Person | None) -> Person:
        if person is None:
            raise self._invalid("nil person")
        if not person.id:
            raise self._invalid("no person ID specified")
        return self._put(Person, self.item_url(person.id), person)

    def delete(self, person_id: str) -> None:
        self._require(person_id, "no person ID specified")
        self._delete(self.item_url(person_id))
