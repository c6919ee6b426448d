"""Unit tests for DirectoryController. In-memory repo only."""

import pytest

from peoplebook.application import DirectoryController, TransportError
from peoplebook.domain import NewPerson, Person


async def test_refresh_replaces_snapshot(repo, directory) -> None:
    assert directory.snapshot == ()
    await repo.create(NewPerson(name="Ann"))
    result = await directory.refresh()
    assert [p.name for p in result] == ["Ann"]
    assert directory.snapshot is result
    assert directory.count == 1


async def test_refresh_twice_same_snapshot(seeded) -> None:
    first = await seeded.refresh()
    second = await seeded.refresh()
    assert first == second


async def test_refresh_failure_keeps_previous_snapshot(repo, seeded) -> None:
    before = seeded.snapshot
    repo.fail_get_all = True
    with pytest.raises(TransportError):
        await seeded.refresh()
    assert seeded.snapshot == before
    assert seeded.last_error == "Failed to load contacts. Please try again."


async def test_refresh_drops_duplicate_ids() -> None:
    class DuplicatingRepository:
        async def get_all(self) -> list[Person]:
            return [Person(id=1, name="Ann"), Person(id=1, name="Ann again"), Person(id=2, name="Bo")]

    directory = DirectoryController(DuplicatingRepository())
    snapshot = await directory.refresh()
    assert [(p.id, p.name) for p in snapshot] == [(1, "Ann"), (2, "Bo")]


async def test_create_refreshes_from_store(repo, seeded) -> None:
    await seeded.create(NewPerson(name="Dee", email="dee@example.com"))
    assert repo.calls == ["create", "get_all"]
    dee = [p for p in seeded.snapshot if p.name == "Dee"]
    assert len(dee) == 1
    assert dee[0].id == 4
    assert dee[0].email == "dee@example.com"


async def test_create_failure_reraises_without_refresh(repo, seeded) -> None:
    before = seeded.snapshot
    repo.fail_create = True
    with pytest.raises(TransportError):
        await seeded.create(NewPerson(name="Dee"))
    assert seeded.snapshot == before
    assert repo.count("get_all") == 0
    assert seeded.last_error == "Failed to add contact. Please try again."


async def test_update_refreshes_from_store(repo, seeded) -> None:
    target = seeded.snapshot[1]
    await seeded.update(target.id, NewPerson(name="Bo Renamed", company="Acme"))
    assert repo.calls == ["update", "get_all"]
    updated = seeded.get(target.id)
    assert updated == Person(id=target.id, name="Bo Renamed", company="Acme")


async def test_update_failure_reraises_without_refresh(repo, seeded) -> None:
    before = seeded.snapshot
    repo.fail_update = True
    with pytest.raises(TransportError):
        await seeded.update(before[0].id, NewPerson(name="X"))
    assert seeded.snapshot == before
    assert repo.count("get_all") == 0


async def test_update_missing_id_is_transport_error(seeded) -> None:
    with pytest.raises(TransportError):
        await seeded.update(999, NewPerson(name="Nobody"))


async def test_delete_removes_locally_and_keeps_order(repo, seeded) -> None:
    before = seeded.snapshot
    removed = before[1]
    assert await seeded.delete(removed.id) is True
    assert seeded.snapshot == tuple(p for p in before if p.id != removed.id)
    assert [p.name for p in seeded.snapshot] == ["Ann", "Cy"]
    assert repo.calls == ["delete"]
    assert seeded.get(removed.id) is None


async def test_delete_failure_reported_not_raised(repo, seeded) -> None:
    before = seeded.snapshot
    repo.fail_delete = True
    assert await seeded.delete(before[0].id) is False
    assert seeded.snapshot == before
    assert seeded.last_error == "Failed to delete contact. Please try again."


async def test_delete_missing_id_is_failure(seeded) -> None:
    before = seeded.snapshot
    assert await seeded.delete(999) is False
    assert seeded.snapshot == before


async def test_refresh_failure_after_successful_create_is_not_raised(repo, seeded) -> None:
    before = seeded.snapshot
    repo.fail_get_all = True
    await seeded.create(NewPerson(name="Dee"))
    assert seeded.snapshot == before
    assert seeded.last_error == "Failed to load contacts. Please try again."
    assert await repo.get_by_id(4) == Person(id=4, name="Dee")


async def test_load_person_does_not_touch_snapshot(seeded) -> None:
    before = seeded.snapshot
    person = await seeded.load_person(before[0].id)
    assert person == before[0]
    assert seeded.snapshot is before
    with pytest.raises(TransportError):
        await seeded.load_person(999)
