"""Domain entities: Person and NewPerson."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

# Attributes every contact may carry besides id and name. Order matches the store columns.
OPTIONAL_FIELDS: tuple[str, ...] = (
    "title",
    "company",
    "email",
    "phone",
    "tags",
    "notes",
    "date_met",
    "location_met",
    "linkedin",
)

# Attributes the "all" filter looks at.
SEARCHABLE_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "company",
    "title",
    "location_met",
    "notes",
)


def _blank_to_none(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass(frozen=True)
class NewPerson:
    """
    Input shape for creating or updating a contact. Has no id.
    Optional attributes are None when they carry no value.
    """

    name: str = field(default="")
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    tags: str | None = None
    notes: str | None = None
    date_met: str | None = None
    location_met: str | None = None
    linkedin: str | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("NewPerson name must be non-empty.")

    def to_dict(self) -> dict[str, str]:
        """Return name plus the optional attributes that carry a value."""
        out = {"name": self.name}
        for attr in OPTIONAL_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                out[attr] = value
        return out


@dataclass(frozen=True)
class Person:
    """
    A stored contact. The id is assigned by the store and never changes.
    """

    id: int
    name: str = field(default="")
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    tags: str | None = None
    notes: str | None = None
    date_met: str | None = None
    location_met: str | None = None
    linkedin: str | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Person name must be non-empty.")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Person":
        """Build a Person from a store record. Unknown keys are ignored, empty strings become None."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        for attr in OPTIONAL_FIELDS:
            values[attr] = _blank_to_none(values.get(attr))
        return cls(**values)

    def to_new_person(self) -> NewPerson:
        """Editable copy without the id (used to pre-fill an update)."""
        return NewPerson(
            name=self.name,
            **{attr: getattr(self, attr) for attr in OPTIONAL_FIELDS},
        )


def is_valid_new_person(candidate: object) -> bool:
    """True if candidate has the structure of a NewPerson.

    name must be a string with non-whitespace content; every optional attribute
    must be absent, None, or a string. No format checks (email, phone, dates).
    """
    if not isinstance(candidate, Mapping):
        return False
    name = candidate.get("name")
    if not isinstance(name, str) or not name.strip():
        return False
    for attr in OPTIONAL_FIELDS:
        value = candidate.get(attr)
        if value is not None and not isinstance(value, str):
            return False
    return True
