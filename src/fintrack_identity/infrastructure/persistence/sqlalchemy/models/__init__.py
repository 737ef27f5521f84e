from fintrack_identity.infrastructure.persistence.sqlalchemy.models.user_credential_model import (  # NOQA: E501
    UserCredentialModel,
)
from fintrack_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserCredentialModel", "UserModel"]
