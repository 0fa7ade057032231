from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingFieldError(ValidationError):
    """A required field is blank or cannot be parsed."""


class InvalidNumberError(ValidationError):
    """A field parsed to NaN/infinity, a negative value, or an impossible date."""


class InvalidRangeError(DomainError):
    """Raised when a date range starts after it ends."""


class DataInconsistencyError(DomainError):
    """Raised when a referenced employee is missing or of the wrong kind."""


class DataIntegrityError(DomainError):
    """Raised when stored data that reached a computation is not a finite number."""
