"""Directory controller: owns the in-memory snapshot and applies mutations through the repository."""

import logging

from peoplebook.application.errors import TransportError
from peoplebook.application.ports import PersonRepository
from peoplebook.domain import NewPerson, Person

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load contacts. Please try again."
ADD_FAILED = "Failed to add contact. Please try again."
UPDATE_FAILED = "Failed to update contact. Please try again."
DELETE_FAILED = "Failed to delete contact. Please try again."


def _dedupe(people: list[Person]) -> tuple[Person, ...]:
    seen: set[int] = set()
    out = []
    for person in people:
        if person.id in seen:
            logger.warning("Store returned duplicate id %s; keeping first", person.id)
            continue
        seen.add(person.id)
        out.append(person)
    return tuple(out)


class DirectoryController:
    """Single writer of the contact snapshot.

    create/update refetch everything after a successful write so ids and any
    store-side normalization come from the store. delete removes the entry
    locally since "this id is gone" is the only fact it produces.
    Callers run at most one mutation or import at a time.
    """

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository
        self._snapshot: tuple[Person, ...] = ()
        self.last_error: str | None = None

    @property
    def snapshot(self) -> tuple[Person, ...]:
        """Current contacts in store order. Immutable; replaced as a whole on refresh."""
        return self._snapshot

    @property
    def count(self) -> int:
        return len(self._snapshot)

    def get(self, person_id: int) -> Person | None:
        """Return the contact with the given id from the snapshot, or None."""
        for person in self._snapshot:
            if person.id == person_id:
                return person
        return None

    async def refresh(self) -> tuple[Person, ...]:
        """Replace the snapshot with the store's contents. Keeps the old snapshot on failure."""
        try:
            people = await self._repo.get_all()
        except TransportError as e:
            logger.error("Error fetching people: %s", e)
            self.last_error = LOAD_FAILED
            raise
        self._snapshot = _dedupe(list(people))
        self.last_error = None
        logger.info("Loaded %d contacts", len(self._snapshot))
        return self._snapshot

    async def refresh_after_write(self) -> None:
        """Refresh following a write that already succeeded.

        A failed refresh here must not look like a failed write, so the error
        stays in last_error and is not raised.
        """
        try:
            await self.refresh()
        except TransportError:
            pass

    async def load_person(self, person_id: int) -> Person:
        """Fetch one contact from the store (e.g. to edit it). Snapshot is not touched."""
        return await self._repo.get_by_id(person_id)

    async def create(self, person: NewPerson) -> None:
        """Create a contact, then refresh. Re-raises TransportError so the caller keeps the input."""
        try:
            person_id = await self._repo.create(person)
        except TransportError as e:
            logger.error("Error adding person: %s", e)
            self.last_error = ADD_FAILED
            raise
        logger.info("Created contact %s", person_id)
        await self.refresh_after_write()

    async def update(self, person_id: int, person: NewPerson) -> None:
        """Update a contact, then refresh. Same failure contract as create."""
        try:
            await self._repo.update(person_id, person)
        except TransportError as e:
            logger.error("Error updating person %s: %s", person_id, e)
            self.last_error = UPDATE_FAILED
            raise
        logger.info("Updated contact %s", person_id)
        await self.refresh_after_write()

    async def delete(self, person_id: int) -> bool:
        """Delete a contact and drop it from the snapshot. Failure is reported, not raised."""
        try:
            await self._repo.delete(person_id)
        except TransportError as e:
            logger.error("Error deleting person %s: %s", person_id, e)
            self.last_error = DELETE_FAILED
            return False
        self._snapshot = tuple(p for p in self._snapshot if p.id != person_id)
        self.last_error = None
        logger.info("Deleted contact %s", person_id)
        return True
