"""Shared domain components.

Exports the exception hierarchy and time helpers used across domain
boundaries.
"""

from fintrack.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)
from fintrack.domain.shared.time import ensure_tz_aware, to_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ForbiddenError",
    "ConflictError",
    # Utilities
    "ensure_tz_aware",
    "to_utc",
    "utc_now",
]
