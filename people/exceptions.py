"""
Errors raised by the people services.

Every error the store, the enrichment client or the service raises derives
from PersonError, so the HTTP layer can map them with a single except.
"""


class PersonError(Exception):
    """Base class for people service failures."""


class InvalidFormatError(PersonError):
    """An identifier or filter value could not be parsed."""


class PersonNotFoundError(PersonError):
    """No person row matches the requested id."""

    def __init__(self, person_id, message=None):
        self.person_id = person_id
        super().__init__(message or f"person {person_id} not found")


class EnrichmentError(PersonError):
    """
    One of the external lookup calls failed.

    `stage` names the failed call: 'age', 'gender' or 'nationality'.
    """

    def __init__(self, stage, cause):
        self.stage = stage
        self.cause = cause
        super().__init__(f"failed to get {stage}: {cause}")


class PersistenceError(PersonError):
    """A database step failed; the surrounding transaction was rolled back."""
