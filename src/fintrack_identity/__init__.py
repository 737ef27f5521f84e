"""Fintrack Identity - users, passwords and access tokens.

The ledger packages only reference ``user_id``; everything about how a
user proves who they are lives here.
"""

from fintrack_identity.application.services import AuthenticationService
from fintrack_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)
from fintrack_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from fintrack_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)
from fintrack_identity.schemas import TokenPayload
from fintrack_identity.services import JWTService, PasswordHashingService

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
    # Repositories
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Services
    "AuthenticationService",
]
