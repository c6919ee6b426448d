"""Neo4j implementation of PersonRepository.
Graph: one (:Person {id, name, title, ...}) node per contact. Integer ids come from a
(:Sequence {name: 'person'}) counter node, incremented inside the create query.
"""

import logging

from neo4j.exceptions import DriverError, Neo4jError

from peoplebook.application.errors import TransportError
from peoplebook.domain import NewPerson, Person

logger = logging.getLogger(__name__)

NOT_FOUND = "Person not found"

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT person_id_unique IF NOT EXISTS
FOR (p:Person) REQUIRE p.id IS UNIQUE
"""

_LIST_QUERY = """
MATCH (p:Person)
RETURN p
ORDER BY p.id
"""

_GET_QUERY = """
MATCH (p:Person {id: $id})
RETURN p
"""

_CREATE_QUERY = """
MERGE (s:Sequence {name: 'person'})
ON CREATE SET s.value = 0
SET s.value = s.value + 1
WITH s.value AS id
CREATE (p:Person {id: id})
SET p += $props
RETURN id
"""

_UPDATE_QUERY = """
MATCH (p:Person {id: $id})
SET p = $props, p.id = $id
RETURN p.id AS id
"""

_DELETE_QUERY = """
MATCH (p:Person {id: $id})
WITH p, p.id AS id
DETACH DELETE p
RETURN id
"""


async def ensure_person_id_constraint(driver) -> None:
    """Create the uniqueness constraint on Person.id if missing."""
    try:
        async with driver.session() as session:
            await session.run(_CONSTRAINT_QUERY)
    except (DriverError, Neo4jError) as e:
        raise TransportError(f"Neo4j error: {e}") from e


def _record_to_person(record) -> Person:
    try:
        return Person.from_mapping(dict(record["p"]))
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Unreadable Person node: %s", e)
        raise TransportError(f"Invalid person record: {e}") from e


class Neo4jPersonRepository:
    """Stores contacts in Neo4j through the async driver. Driver and query errors become TransportError."""

    def __init__(self, driver: object, database: str | None = None) -> None:
        self._driver = driver
        self._database = database

    async def aclose(self) -> None:
        await self._driver.close()

    async def _single(self, query: str, **params):
        try:
            async with self._driver.session(database=self._database) as session:
                result = await session.run(query, **params)
                return await result.single()
        except (DriverError, Neo4jError) as e:
            logger.warning("Neo4j query failed: %s", e)
            raise TransportError(f"Neo4j error: {e}") from e

    async def get_all(self) -> list[Person]:
        try:
            async with self._driver.session(database=self._database) as session:
                result = await session.run(_LIST_QUERY)
                records = [record async for record in result]
        except (DriverError, Neo4jError) as e:
            logger.warning("Neo4j query failed: %s", e)
            raise TransportError(f"Neo4j error: {e}") from e
        return [_record_to_person(rec) for rec in records]

    async def get_by_id(self, person_id: int) -> Person:
        record = await self._single(_GET_QUERY, id=person_id)
        if not record:
            raise TransportError(NOT_FOUND)
        return _record_to_person(record)

    async def create(self, person: NewPerson) -> int:
        record = await self._single(_CREATE_QUERY, props=person.to_dict())
        if not record:
            raise TransportError("Failed to create person")
        return int(record["id"])

    async def update(self, person_id: int, person: NewPerson) -> None:
        record = await self._single(_UPDATE_QUERY, id=person_id, props=person.to_dict())
        if not record:
            raise TransportError(NOT_FOUND)

    async def delete(self, person_id: int) -> None:
        record = await self._single(_DELETE_QUERY, id=person_id)
        if not record:
            raise TransportError(NOT_FOUND)
