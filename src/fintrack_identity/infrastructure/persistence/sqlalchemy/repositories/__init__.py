from fintrack_identity.infrastructure.persistence.sqlalchemy.repositories.user_credential_repository import (  # NOQA: E501
    UserCredentialRepositorySQLAlchemy,
)
from fintrack_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy", "UserRepositorySQLAlchemy"]
