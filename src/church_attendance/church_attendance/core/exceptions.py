from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """Base exception for business rule outcomes."""


class ValidationError(DomainError):
    """Raised when input data is invalid; carries every problem found."""

    def __init__(self, errors: str | Iterable[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class DuplicateCheckIn(DomainError):
    """Raised when a member already checked in for the service today."""

    def __init__(self, message: str = "You have already checked in for this service today."):
        super().__init__(message)


class RegistrationFailed(DomainError):
    """Raised when a registration could not be stored; nothing was kept."""


class AccessDenied(DomainError):
    """Raised when the ledger PIN is missing or wrong."""


class ReportRenderError(DomainError):
    """Raised when the attendance PDF could not be produced."""


class StorageError(Exception):
    """Raised by repositories when the database call fails."""


class UniqueConstraintError(StorageError):
    """Raised when an insert hits a unique key."""
