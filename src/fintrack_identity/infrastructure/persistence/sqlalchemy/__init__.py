"""SQLAlchemy implementation for fintrack_identity persistence.

Identity models share fintrack's declarative Base so ledger tables can
reference ``users.id``.
"""

from fintrack_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from fintrack_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
