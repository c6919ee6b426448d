"""
Command line client: list, search, add, edit, delete, and bulk import contacts.
Run: python -m cli --help (from repo root, with .env or env vars set).
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer

from peoplebook.application import (
    BulkImportPipeline,
    DirectoryController,
    FieldSelector,
    ParseError,
    PersonRepository,
    TransportError,
    ValidationError,
    require_new_person,
    visible_people,
)
from peoplebook.config import build_repository, load_settings
from peoplebook.domain import OPTIONAL_FIELDS, Person

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _repository_factory() -> PersonRepository:
    return build_repository(load_settings())


def _run(action: Callable[[PersonRepository, DirectoryController], Awaitable[T]]) -> T:
    """Build repository + controller, run one async action, close the repository."""

    async def runner() -> T:
        repo = _repository_factory()
        try:
            return await action(repo, DirectoryController(repo))
        finally:
            close = getattr(repo, "aclose", None)
            if close is not None:
                await close()

    return asyncio.run(runner())


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _format_line(person: Person) -> str:
    """One-line summary: id, name, company & title, email."""
    parts = [f"[{person.id}] {person.name}"]
    work = " - ".join(v for v in (person.company, person.title) if v)
    if work:
        parts.append(work)
    if person.email:
        parts.append(person.email)
    return " | ".join(parts)


def _format_details(person: Person) -> str:
    lines = [f"{person.name} (id {person.id})"]
    for attr in OPTIONAL_FIELDS:
        value = getattr(person, attr)
        if value:
            lines.append(f"  {attr.replace('_', ' ')}: {value}")
    return "\n".join(lines)


def _footer(count: int) -> str:
    return f"{count} {'contact' if count == 1 else 'contacts'} in your network"


@app.command("list")
def list_people(
    query: str = typer.Option("", "--query", "-q", help="Case-insensitive search text."),
    field: str = typer.Option(
        "all",
        "--field",
        "-f",
        help="all, name, email, company, title, location_met (or location), notes.",
    ),
) -> None:
    """List contacts sorted by name, optionally filtered."""
    try:
        selector = FieldSelector.parse(field)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--field") from e

    async def action(repo, directory: DirectoryController):
        try:
            await directory.refresh()
        except TransportError:
            return None
        return directory.snapshot

    snapshot = _run(action)
    if snapshot is None:
        _fail("Failed to load contacts. Please try again.")
    if not snapshot:
        typer.echo("No contacts yet. Add your first contact to get started.")
        return
    shown = visible_people(snapshot, query, selector)
    if not shown:
        typer.echo("No contacts match that search.")
    for person in shown:
        typer.echo(_format_line(person))
    typer.echo(_footer(len(snapshot)))


@app.command("show")
def show_person(person_id: int = typer.Argument(..., help="Contact id.")) -> None:
    """Show every attribute of one contact."""

    async def action(repo, directory: DirectoryController):
        try:
            return await directory.load_person(person_id)
        except TransportError as e:
            logger.warning("Error fetching person %s: %s", person_id, e)
            return None

    person = _run(action)
    if person is None:
        _fail(f"Contact {person_id} not found.")
    typer.echo(_format_details(person))


def _collect(name: str | None, **optional: str | None) -> dict[str, str]:
    data = {k: v for k, v in optional.items() if v is not None}
    if name is not None:
        data["name"] = name
    return data


@app.command("add")
def add_person(
    name: str = typer.Option(..., "--name", help="Full name (required)."),
    title: str | None = typer.Option(None, "--title"),
    company: str | None = typer.Option(None, "--company"),
    email: str | None = typer.Option(None, "--email"),
    phone: str | None = typer.Option(None, "--phone"),
    tags: str | None = typer.Option(None, "--tags"),
    notes: str | None = typer.Option(None, "--notes"),
    date_met: str | None = typer.Option(None, "--date-met"),
    location_met: str | None = typer.Option(None, "--location-met"),
    linkedin: str | None = typer.Option(None, "--linkedin"),
) -> None:
    """Add a contact."""
    data = _collect(
        name,
        title=title,
        company=company,
        email=email,
        phone=phone,
        tags=tags,
        notes=notes,
        date_met=date_met,
        location_met=location_met,
        linkedin=linkedin,
    )
    try:
        new_person = require_new_person(data)
    except ValidationError as e:
        _fail(str(e))

    async def action(repo, directory: DirectoryController):
        try:
            await directory.create(new_person)
        except TransportError:
            return directory.last_error
        return None

    error = _run(action)
    if error:
        _fail(error)
    typer.echo(f"Added {new_person.name}.")


@app.command("edit")
def edit_person(
    person_id: int = typer.Argument(..., help="Contact id."),
    name: str | None = typer.Option(None, "--name"),
    title: str | None = typer.Option(None, "--title"),
    company: str | None = typer.Option(None, "--company"),
    email: str | None = typer.Option(None, "--email"),
    phone: str | None = typer.Option(None, "--phone"),
    tags: str | None = typer.Option(None, "--tags"),
    notes: str | None = typer.Option(None, "--notes"),
    date_met: str | None = typer.Option(None, "--date-met"),
    location_met: str | None = typer.Option(None, "--location-met"),
    linkedin: str | None = typer.Option(None, "--linkedin"),
) -> None:
    """Edit a contact. Options not given keep their current value; an empty value clears it."""
    changes = _collect(
        name,
        title=title,
        company=company,
        email=email,
        phone=phone,
        tags=tags,
        notes=notes,
        date_met=date_met,
        location_met=location_met,
        linkedin=linkedin,
    )

    async def action(repo, directory: DirectoryController):
        try:
            current = await directory.load_person(person_id)
        except TransportError:
            return f"Contact {person_id} not found."
        try:
            updated = require_new_person({**current.to_new_person().to_dict(), **changes})
        except ValidationError as e:
            return str(e)
        try:
            await directory.update(person_id, updated)
        except TransportError:
            return directory.last_error
        return None

    error = _run(action)
    if error:
        _fail(error)
    typer.echo(f"Updated contact {person_id}.")


@app.command("delete")
def delete_person(
    person_id: int = typer.Argument(..., help="Contact id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete a contact."""
    if not yes:
        typer.confirm(f"Are you sure you want to delete contact {person_id}?", abort=True)

    async def action(repo, directory: DirectoryController):
        if not await directory.delete(person_id):
            return directory.last_error
        return None

    error = _run(action)
    if error:
        _fail(error)
    typer.echo(f"Deleted contact {person_id}.")


@app.command("import")
def import_people(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    """Import contacts from a JSON file (one object or an array of objects)."""

    async def action(repo, directory: DirectoryController):
        pipeline = BulkImportPipeline(repo, directory)
        return await pipeline.run_file(file)

    try:
        report = _run(action)
    except ParseError as e:
        _fail(f"Import failed: {e}")
    typer.echo(report.summary())
    for line in report.errors:
        typer.echo(f"  {line}")
    if report.failed:
        raise typer.Exit(code=1)
