"""Bulk import: JSON text -> records -> validate -> create, with per-record failure accounting."""

import json
import logging
from pathlib import Path

from peoplebook.application.directory import DirectoryController
from peoplebook.application.dto import ImportReport, ImportState, Invalid
from peoplebook.application.errors import ParseError, TransportError
from peoplebook.application.import_validator import validate_record
from peoplebook.application.ports import PersonRepository

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    # NaN / Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_records(text: str) -> list[object]:
    """Parse JSON text. A top-level array is the record list; anything else is a single record."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Import file is not valid JSON: {e}") from e
    if isinstance(data, list):
        return data
    return [data]


class BulkImportPipeline:
    """Imports many contacts in one run.

    Records are processed one at a time in input order; a bad record is counted
    and reported by its 1-based position without stopping the run. The directory
    is refreshed once at the end if anything was created. Only ParseError
    escapes. Callers must not start a second run while one is in flight.
    """

    def __init__(
        self, repository: PersonRepository, directory: DirectoryController
    ) -> None:
        self._repo = repository
        self._directory = directory
        self.state = ImportState.IDLE

    async def run(self, text: str) -> ImportReport:
        """Import the contacts in text. Raises ParseError if text is not JSON."""
        self.state = ImportState.PARSING
        try:
            records = parse_records(text)
            self.state = ImportState.IMPORTING
            report = await self._import(records)
        finally:
            self.state = ImportState.IDLE
        logger.info("Bulk import finished: %s", report.summary())
        return report

    async def _import(self, records: list[object]) -> ImportReport:
        successful = 0
        failed = 0
        errors: list[str] = []
        for index, record in enumerate(records, start=1):
            result = validate_record(record)
            if isinstance(result, Invalid):
                failed += 1
                errors.append(f"Record {index}: {result.reason}")
                logger.warning("Import record %d rejected: %s", index, result.reason)
                continue
            try:
                await self._repo.create(result.person)
            except TransportError as e:
                failed += 1
                errors.append(f"Record {index}: {e}")
                logger.warning("Import record %d failed: %s", index, e)
                continue
            successful += 1

        self.state = ImportState.REPORTING
        if successful > 0:
            await self._directory.refresh_after_write()
        return ImportReport(successful=successful, failed=failed, errors=tuple(errors))

    async def run_file(self, path: str | Path) -> ImportReport:
        """Read a UTF-8 file (a leading BOM is allowed) and import it."""
        try:
            text = Path(path).read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Import file is not valid UTF-8: {e}") from e
        return await self.run(text)
