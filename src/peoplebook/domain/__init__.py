"""Domain layer: entities and the structural predicate. No dependencies on outer layers."""

from peoplebook.domain.entities import (
    OPTIONAL_FIELDS,
    SEARCHABLE_FIELDS,
    NewPerson,
    Person,
    is_valid_new_person,
)

__all__ = [
    "NewPerson",
    "OPTIONAL_FIELDS",
    "Person",
    "SEARCHABLE_FIELDS",
    "is_valid_new_person",
]
