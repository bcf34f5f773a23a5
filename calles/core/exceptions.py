"""Domain-level exception hierarchy for the service and API layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""


class NotFoundError(DomainError):
    """Raised when a requested street does not exist in the catalog."""


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""


class DataLoadError(DomainError):
    """Raised when a dataset file cannot be read or parsed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
