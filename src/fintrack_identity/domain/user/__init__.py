"""User domain: identity only (id, email, display names)."""

from fintrack_identity.domain.user.aggregates import User
from fintrack_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from fintrack_identity.domain.user.repositories import UserRepository
from fintrack_identity.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
