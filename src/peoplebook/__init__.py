"""
Peoplebook core: clean-architecture layout.

- domain: entities (Person, NewPerson) and the structural predicate. No outer dependencies.
- application: DirectoryController, filter engine, bulk import, ports (PersonRepository), DTOs.
- infrastructure: adapters (InMemoryPersonRepository, HttpPersonRepository, Neo4jPersonRepository).
"""

from peoplebook.application import (
    BulkImportPipeline,
    DirectoryController,
    FieldSelector,
    ImportReport,
    Invalid,
    ParseError,
    PersonRepository,
    TransportError,
    Valid,
    ValidationError,
    filter_people,
    sort_by_name,
    validate_record,
    visible_people,
)
from peoplebook.domain import NewPerson, Person, is_valid_new_person
from peoplebook.infrastructure import (
    HttpPersonRepository,
    InMemoryPersonRepository,
    Neo4jPersonRepository,
)

__all__ = [
    "BulkImportPipeline",
    "DirectoryController",
    "FieldSelector",
    "HttpPersonRepository",
    "ImportReport",
    "InMemoryPersonRepository",
    "Invalid",
    "Neo4jPersonRepository",
    "NewPerson",
    "ParseError",
    "Person",
    "PersonRepository",
    "TransportError",
    "Valid",
    "ValidationError",
    "filter_people",
    "is_valid_new_person",
    "sort_by_name",
    "validate_record",
    "visible_people",
]
