from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations.

    `field` names the submitted form field the message belongs to, when there is one.
    """

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(DomainError):
    """Raised when an employee already has attendance for the given date."""


class NotFoundError(DomainError):
    """Raised when an operation targets a record id that does not exist."""


class StoreError(DomainError):
    """Raised when the underlying database fails unexpectedly."""
