"""Local search over the snapshot. Pure functions, no I/O."""

import unicodedata
from collections.abc import Sequence

from peoplebook.application.dto import FieldSelector
from peoplebook.domain import SEARCHABLE_FIELDS, Person


def _contains(value: object, term: str) -> bool:
    if value is None:
        return False
    return term in str(value).lower()


def filter_people(
    people: Sequence[Person],
    query: str,
    field: FieldSelector | str = FieldSelector.ALL,
) -> Sequence[Person]:
    """Return people matching query (case-insensitive substring), keeping input order.

    A blank query returns people unchanged. With field ALL a person matches when
    any searchable attribute contains the term; absent attributes never match.
    """
    selector = FieldSelector.parse(field)
    term = (query or "").strip().lower()
    if not term:
        return people
    if selector is FieldSelector.ALL:
        return [
            p
            for p in people
            if any(_contains(getattr(p, attr), term) for attr in SEARCHABLE_FIELDS)
        ]
    attr = selector.value
    return [p for p in people if _contains(getattr(p, attr), term)]


def _name_sort_key(name: str) -> tuple[str, str]:
    """Collation key: accents and case ignored first, then the raw name as tiebreaker."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold().strip(), name)


def sort_by_name(people: Sequence[Person]) -> list[Person]:
    """Return a new list ordered by name. Always applied, with or without a query."""
    return sorted(people, key=lambda p: _name_sort_key(p.name))


def visible_people(
    people: Sequence[Person],
    query: str = "",
    field: FieldSelector | str = FieldSelector.ALL,
) -> list[Person]:
    """What a consumer shows: filter, then sort by name."""
    return sort_by_name(filter_people(people, query, field))
