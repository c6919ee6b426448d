"""Unit tests for validate_record / require_new_person."""

import pytest

from peoplebook.application import Invalid, Valid, ValidationError, require_new_person, validate_record
from peoplebook.domain import NewPerson


def test_valid_record_is_normalized() -> None:
    result = validate_record(
        {
            "name": "  Ann Lee ",
            "title": " CTO ",
            "company": "   ",
            "email": "",
            "phone": None,
            "unknown": "ignored",
        }
    )
    assert isinstance(result, Valid)
    assert result.person == NewPerson(name="Ann Lee", title="CTO")
    assert result.person.to_dict() == {"name": "Ann Lee", "title": "CTO"}


def test_invalid_record_reason() -> None:
    result = validate_record({"phone": "555"})
    assert isinstance(result, Invalid)
    assert result.reason == "Invalid data structure. Required field 'name' missing or invalid."


@pytest.mark.parametrize(
    "value",
    [None, 3, "Ann", [{"name": "Ann"}], {"name": "  "}, {"name": "Ann", "tags": ["a", "b"]}],
)
def test_structurally_wrong_values_are_invalid(value) -> None:
    assert isinstance(validate_record(value), Invalid)


def test_require_new_person_raises() -> None:
    assert require_new_person({"name": "Bo"}) == NewPerson(name="Bo")
    with pytest.raises(ValidationError, match="name"):
        require_new_person({"name": ""})
