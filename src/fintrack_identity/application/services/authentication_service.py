"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from fintrack_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
)
from fintrack_identity.exceptions import InvalidCredentialsError
from fintrack_identity.schemas import TokenPayload

if TYPE_CHECKING:
    from fintrack_identity.domain.user import UserRepository
    from fintrack_identity.repositories import UserCredentialRepository
    from fintrack_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT issuing with the User aggregate:
    - User registration
    - Login with password
    - Profile updates
    - Account deletion
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _create_access_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    async def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> tuple[User, str]:
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(
            email,
            name=name,
            first_name=first_name,
            last_name=last_name,
        )
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user, self._create_access_token(user)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.info("Failed login attempt for: %s", user.email)
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)

        logger.info("User logged in: %s", user.email)
        return user, self._create_access_token(user)

    async def update_profile(
        self,
        user_id: UUID,
        name: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        user.update_profile(name=name, first_name=first_name, last_name=last_name)
        await self._user_repo.save(user)
        return user

    async def delete_account(self, user_id: UUID) -> None:
        await self._credential_repo.delete(user_id)
        await self._user_repo.delete_with_all_data(user_id)
        logger.info("Account deleted for user: %s", user_id)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
