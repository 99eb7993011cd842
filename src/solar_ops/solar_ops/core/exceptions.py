from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.errors = errors or []


class InvariantViolation(DomainError):
    """Raised when a state transition would break a record invariant (e.g. double punch-in)."""


class ConflictError(DomainError):
    """Raised when a unique field is already taken."""
