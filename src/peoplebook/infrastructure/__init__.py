"""Infrastructure layer: concrete implementations of application ports."""

from peoplebook.infrastructure.http_repository import HttpPersonRepository
from peoplebook.infrastructure.memory_repository import InMemoryPersonRepository
from peoplebook.infrastructure.persistence.neo4j_repository import (
    Neo4jPersonRepository,
    ensure_person_id_constraint,
)

__all__ = [
    "HttpPersonRepository",
    "InMemoryPersonRepository",
    "Neo4jPersonRepository",
    "ensure_person_id_constraint",
]
