"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from fintrack_identity import (
    AuthenticationService,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    User,
    UserCredentialData,
    UserNotFoundError,
    WeakPasswordError,
)

TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "secure-password"


class TestAuthenticationService:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.credential_repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.create_access_token.return_value = "token-123"

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_register(self):
        self.user_repo.find_by_email.return_value = None

        user, token = await self.service.register(
            TEST_EMAIL,
            TEST_PASSWORD,
            first_name="Ada",
            last_name="Lovelace",
        )

        assert user.email == TEST_EMAIL
        assert user.display_name == "Ada Lovelace"
        assert token == "token-123"
        self.user_repo.save.assert_awaited_once_with(user)
        saved_hash = self.credential_repo.save.call_args.kwargs["password_hash"]
        assert self.password_service.verify(TEST_PASSWORD, saved_hash)

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self):
        self.user_repo.find_by_email.return_value = User.create(TEST_EMAIL)

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register(TEST_EMAIL, TEST_PASSWORD)
        self.user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_weak_password(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(WeakPasswordError):
            await self.service.register(TEST_EMAIL, "123")
        self.user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login(self):
        user = User.create(TEST_EMAIL)
        self.user_repo.find_by_email.return_value = user
        self.credential_repo.find_by_user_id.return_value = UserCredentialData(
            user_id=str(user.id),
            password_hash=self.password_service.hash(TEST_PASSWORD),
            last_login_at=None,
        )

        logged_in, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert logged_in == user
        assert token == "token-123"
        self.credential_repo.update_last_login.assert_awaited_once_with(user.id)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self):
        user = User.create(TEST_EMAIL)
        self.user_repo.find_by_email.return_value = user
        self.credential_repo.find_by_user_id.return_value = UserCredentialData(
            user_id=str(user.id),
            password_hash=self.password_service.hash(TEST_PASSWORD),
            last_login_at=None,
        )

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong-password")
        self.credential_repo.update_last_login.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_update_profile(self):
        user = User.create(TEST_EMAIL, name="Old")
        self.user_repo.find_by_id.return_value = user

        updated = await self.service.update_profile(user.id, name="New")

        assert updated.name == "New"
        self.user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_update_profile_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.update_profile(uuid4(), name="New")

    @pytest.mark.asyncio
    async def test_delete_account(self):
        user_id = uuid4()

        await self.service.delete_account(user_id)

        self.credential_repo.delete.assert_awaited_once_with(user_id)
        self.user_repo.delete_with_all_data.assert_awaited_once_with(user_id)
