"""HTTP implementation of PersonRepository.
REST resource /people on the contacts backend (base URL from settings).
"""

import logging

import httpx
import pydantic
from pydantic import BaseModel

from peoplebook.application.errors import TransportError
from peoplebook.domain import NewPerson, Person

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"


class PersonRecord(BaseModel):
    """One person as returned by the backend. Unknown keys are ignored."""

    id: int
    name: str
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    tags: str | None = None
    notes: str | None = None
    date_met: str | None = None
    location_met: str | None = None
    linkedin: str | None = None


_people_adapter = pydantic.TypeAdapter(list[PersonRecord])
_id_adapter = pydantic.TypeAdapter(int)


def _to_person(record: PersonRecord) -> Person:
    return Person.from_mapping(record.model_dump())


class HttpPersonRepository:
    """Talks to the contacts backend over HTTP. Every non-2xx reply or network error is a TransportError."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
            headers={"accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpPersonRepository":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(
        self, method: str, path: str, failure: str, **kwargs
    ) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(failure) from e
        if not resp.is_success:
            logger.warning("%s %s returned %s", method, path, resp.status_code)
            raise TransportError(failure)
        return resp

    async def get_all(self) -> list[Person]:
        failure = "Failed to fetch people"
        resp = await self._request("GET", "/people", failure)
        try:
            records = _people_adapter.validate_json(resp.content)
            return [_to_person(r) for r in records]
        except (pydantic.ValidationError, ValueError) as e:
            logger.warning("Unexpected /people payload: %s", e)
            raise TransportError(failure) from e

    async def get_by_id(self, person_id: int) -> Person:
        failure = "Failed to fetch person"
        resp = await self._request("GET", f"/people/{person_id}", failure)
        try:
            return _to_person(PersonRecord.model_validate_json(resp.content))
        except (pydantic.ValidationError, ValueError) as e:
            raise TransportError(failure) from e

    async def create(self, person: NewPerson) -> int:
        failure = "Failed to create person"
        resp = await self._request("POST", "/people", failure, json=person.to_dict())
        try:
            return _id_adapter.validate_json(resp.content)
        except pydantic.ValidationError as e:
            raise TransportError(failure) from e

    async def update(self, person_id: int, person: NewPerson) -> None:
        await self._request(
            "PUT",
            f"/people/{person_id}",
            "Failed to update person",
            json=person.to_dict(),
        )

    async def delete(self, person_id: int) -> None:
        await self._request("DELETE", f"/people/{person_id}", "Failed to delete person")
