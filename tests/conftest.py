"""Shared fixtures: an in-memory repository that records calls and can be told to fail."""

import pytest

from peoplebook.application import DirectoryController, TransportError
from peoplebook.domain import NewPerson, Person
from peoplebook.infrastructure import InMemoryPersonRepository


class RecordingRepository(InMemoryPersonRepository):
    """InMemoryPersonRepository plus a call log and switchable failures."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []
        self.fail_get_all = False
        self.fail_create = False
        self.fail_update = False
        self.fail_delete = False
        self.reject_names: set[str] = set()

    async def get_all(self) -> list[Person]:
        self.calls.append("get_all")
        if self.fail_get_all:
            raise TransportError("Failed to fetch people")
        return await super().get_all()

    async def create(self, person: NewPerson) -> int:
        self.calls.append("create")
        if self.fail_create or person.name in self.reject_names:
            raise TransportError("Failed to create person")
        return await super().create(person)

    async def update(self, person_id: int, person: NewPerson) -> None:
        self.calls.append("update")
        if self.fail_update:
            raise TransportError("Failed to update person")
        await super().update(person_id, person)

    async def delete(self, person_id: int) -> None:
        self.calls.append("delete")
        if self.fail_delete:
            raise TransportError("Failed to delete person")
        await super().delete(person_id)

    def count(self, method: str) -> int:
        return self.calls.count(method)


@pytest.fixture
def repo() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def directory(repo: RecordingRepository) -> DirectoryController:
    return DirectoryController(repo)


@pytest.fixture
async def seeded(repo: RecordingRepository, directory: DirectoryController):
    """Three contacts in the store and in the snapshot; call log cleared."""
    for name in ("Ann", "Bo", "Cy"):
        await repo.create(NewPerson(name=name))
    await directory.refresh()
    repo.calls.clear()
    return directory
