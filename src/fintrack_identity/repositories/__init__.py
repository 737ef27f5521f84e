from fintrack_identity.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = ["UserCredentialData", "UserCredentialRepository"]
