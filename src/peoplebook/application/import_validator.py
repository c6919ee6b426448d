"""Narrow an untyped parsed JSON value to a normalized NewPerson."""

from peoplebook.application.dto import Invalid, Valid
from peoplebook.application.errors import ValidationError
from peoplebook.domain import OPTIONAL_FIELDS, NewPerson, is_valid_new_person

INVALID_STRUCTURE = "Invalid data structure. Required field 'name' missing or invalid."


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def validate_record(value: object) -> Valid | Invalid:
    """Return Valid(normalized NewPerson) or Invalid(reason). Unknown keys are ignored."""
    if not is_valid_new_person(value):
        return Invalid(reason=INVALID_STRUCTURE)
    person = NewPerson(
        name=value["name"].strip(),
        **{attr: _clean(value.get(attr)) for attr in OPTIONAL_FIELDS},
    )
    return Valid(person=person)


def require_new_person(value: object) -> NewPerson:
    """Like validate_record, but raise ValidationError for a rejected record."""
    result = validate_record(value)
    if isinstance(result, Invalid):
        raise ValidationError(result.reason)
    return result.person
