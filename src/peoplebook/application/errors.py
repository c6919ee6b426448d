"""Error taxonomy shared by the application layer and the repository adapters."""


class PeoplebookError(Exception):
    """Base class for directory errors."""


class ParseError(PeoplebookError):
    """Bulk import text is not valid JSON. Aborts the whole import."""


class ValidationError(PeoplebookError):
    """A single record does not have the structure of a contact."""


class TransportError(PeoplebookError):
    """A repository call failed (not found, network, store error). Message only."""
