"""Pytest fixtures for API integration tests.

Each test gets its own SQLite file. The schema is created in a fresh
event loop before the TestClient starts its own loop, which NullPool
makes safe.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fintrack.infrastructure.persistence.sqlalchemy.database import (
    create_tables,
    drop_tables,
)
from fintrack.presentation.api.app import API_V1_PREFIX, create_app
from fintrack.presentation.api.config import get_api_settings
from fintrack.presentation.api.dependencies import (
    get_db_session,
    get_password_service,
)
from fintrack_config.settings import Settings, get_settings
from fintrack_identity import PasswordHashingService


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        favorite_category_limit=3,
    )


def _run_sync(coro) -> None:
    # Fresh event loop to avoid conflicts with TestClient's loop
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def test_client(api_settings, async_engine):
    """Create a test client bound to a per-test SQLite database."""
    _run_sync(create_tables(async_engine))

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    # Cheap bcrypt rounds keep registration fast
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )

    yield TestClient(app)

    _run_sync(drop_tables(async_engine))


def register_user(client, prefix, email, password="SecurePassword123!") -> dict:
    response = client.post(
        f"{prefix}/auth/register",
        json={"email": email, "password": password, "name": email.split("@")[0]},
    )
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )
    return response.json()


@pytest.fixture
def registered_user_data():
    return {
        "email": "api-test-user@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Get auth headers for a registered user."""
    body = register_user(
        test_client,
        api_v1_prefix,
        registered_user_data["email"],
        registered_user_data["password"],
    )
    return {"Authorization": f"Bearer {body['access_token']}"}


@pytest.fixture
def other_auth_headers(test_client, api_v1_prefix) -> dict:
    """Auth headers for a second user (isolation tests)."""
    body = register_user(test_client, api_v1_prefix, "other-user@example.com")
    return {"Authorization": f"Bearer {body['access_token']}"}
