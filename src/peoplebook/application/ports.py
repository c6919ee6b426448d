"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from peoplebook.domain import NewPerson, Person


class PersonRepository(Protocol):
    """CRUD boundary to the backing store. Every failure is raised as TransportError."""

    async def get_all(self) -> list[Person]:
        """Return every stored contact."""
        ...

    async def get_by_id(self, person_id: int) -> Person:
        """Return the contact with the given id. Missing id is a TransportError."""
        ...

    async def create(self, person: NewPerson) -> int:
        """Store a new contact and return the id the store assigned."""
        ...

    async def update(self, person_id: int, person: NewPerson) -> None:
        """Replace all attributes of an existing contact."""
        ...

    async def delete(self, person_id: int) -> None:
        """Remove a contact. Deleting a missing id is a TransportError, not a no-op."""
        ...
