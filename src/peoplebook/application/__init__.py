"""Application layer: directory controller, filter engine, bulk import, ports, and DTOs. Depends only on domain."""

from peoplebook.application.bulk_import import BulkImportPipeline, parse_records
from peoplebook.application.directory import DirectoryController
from peoplebook.application.dto import (
    FieldSelector,
    ImportReport,
    ImportState,
    Invalid,
    Valid,
)
from peoplebook.application.errors import (
    ParseError,
    PeoplebookError,
    TransportError,
    ValidationError,
)
from peoplebook.application.filtering import (
    filter_people,
    sort_by_name,
    visible_people,
)
from peoplebook.application.import_validator import require_new_person, validate_record
from peoplebook.application.ports import PersonRepository

__all__ = [
    "BulkImportPipeline",
    "DirectoryController",
    "FieldSelector",
    "ImportReport",
    "ImportState",
    "Invalid",
    "ParseError",
    "PeoplebookError",
    "PersonRepository",
    "TransportError",
    "Valid",
    "ValidationError",
    "filter_people",
    "parse_records",
    "require_new_person",
    "sort_by_name",
    "validate_record",
    "visible_people",
]
