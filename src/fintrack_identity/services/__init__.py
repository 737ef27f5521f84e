"""Pure authentication services (password hashing, JWT)."""

from fintrack_identity.services.jwt_service import JWTService
from fintrack_identity.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
