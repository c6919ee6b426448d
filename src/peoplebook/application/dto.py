"""Result types for validation, filtering and bulk import."""

from dataclasses import dataclass
from enum import Enum

from peoplebook.domain import NewPerson


class FieldSelector(str, Enum):
    """Which attribute a search query is matched against."""

    ALL = "all"
    NAME = "name"
    EMAIL = "email"
    COMPANY = "company"
    TITLE = "title"
    LOCATION_MET = "location_met"
    NOTES = "notes"

    @classmethod
    def parse(cls, value: "str | FieldSelector") -> "FieldSelector":
        """Accept a selector name. 'location' is kept as an alias of location_met."""
        if isinstance(value, cls):
            return value
        key = (value or "").strip().lower()
        if key == "location":
            return cls.LOCATION_MET
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown search field: {value!r}") from None


class ImportState(str, Enum):
    IDLE = "idle"
    PARSING = "parsing"
    IMPORTING = "importing"
    REPORTING = "reporting"


# --- validate_record results ---


@dataclass(frozen=True)
class Valid:
    """Record has the structure of a contact. Carries the normalized input."""

    person: NewPerson


@dataclass(frozen=True)
class Invalid:
    """Record was rejected (e.g. missing or empty name)."""

    reason: str


# --- bulk import result ---


@dataclass(frozen=True)
class ImportReport:
    """Outcome of one bulk import run. errors are in record-processing order."""

    successful: int = 0
    failed: int = 0
    errors: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return self.successful + self.failed

    def summary(self) -> str:
        text = f"Imported {self.successful} of {self.total} records"
        if self.failed:
            text += f" ({self.failed} failed)"
        return text + "."
