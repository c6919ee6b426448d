"""In-memory implementation of PersonRepository (no DB)."""

from peoplebook.application.errors import TransportError
from peoplebook.domain import NewPerson, Person

NOT_FOUND = "Person not found"


class InMemoryPersonRepository:
    """Stores contacts in memory. Order preserved by insertion; ids count up from 1."""

    def __init__(self) -> None:
        self._by_id: dict[int, Person] = {}
        self._order: list[int] = []
        self._next_id = 1

    def _require(self, person_id: int) -> Person:
        person = self._by_id.get(person_id)
        if person is None:
            raise TransportError(NOT_FOUND)
        return person

    async def get_all(self) -> list[Person]:
        return [self._by_id[pid] for pid in self._order if pid in self._by_id]

    async def get_by_id(self, person_id: int) -> Person:
        return self._require(person_id)

    async def create(self, person: NewPerson) -> int:
        person_id = self._next_id
        self._next_id += 1
        self._by_id[person_id] = Person(id=person_id, **person.to_dict())
        self._order.append(person_id)
        return person_id

    async def update(self, person_id: int, person: NewPerson) -> None:
        self._require(person_id)
        self._by_id[person_id] = Person(id=person_id, **person.to_dict())

    async def delete(self, person_id: int) -> None:
        self._require(person_id)
        del self._by_id[person_id]
        self._order.remove(person_id)
