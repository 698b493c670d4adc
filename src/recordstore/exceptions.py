"""
Exception hierarchy for record repository operations.

Exception Hierarchy:
    RecordStoreError (base)
    ├── ValidationError      - Required fields missing or empty (caller error)
    ├── NotFoundError        - No record with the requested id (caller error)
    └── StorageError         - Durable store unusable (server-side failure)
        ├── StorageReadError  - Store exists but cannot be read or parsed
        └── StorageWriteError - Store could not be written

ValidationError and NotFoundError are expected outcomes of normal traffic.
Only StorageError subclasses indicate something an operator should look at.
"""

from pathlib import Path
from typing import Iterable, Optional


class RecordStoreError(Exception):
    """Base exception for all repository errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(RecordStoreError):
    """
    One or more required fields are missing or empty.

    ``missing_fields`` keeps the order in which the fields were declared
    as required, so error messages are stable.
    """

    def __init__(self, missing_fields: Iterable[str], resource: Optional[str] = None):
        self.missing_fields = list(missing_fields)
        self.resource = resource
        super().__init__(
            "Missing required fields",
            ", ".join(self.missing_fields),
        )


class NotFoundError(RecordStoreError):
    """No record with the given id exists in the collection."""

    def __init__(self, resource: str, record_id: str):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} record not found", f"id={record_id!r}")


class StorageError(RecordStoreError):
    """
    The durable store could not be used.

    Carries the path of the artifact and the underlying exception (if any)
    so operational alarms can point at the right file.
    """

    def __init__(self, message: str, path: Path, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(message, f"{self.path}: {cause}" if cause else str(self.path))


class StorageReadError(StorageError):
    """Store exists but cannot be read or does not hold a collection."""


class StorageWriteError(StorageError):
    """Store could not be written; the previous content is left in place."""
