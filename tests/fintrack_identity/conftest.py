"""
Pytest configuration for fintrack_identity tests.

This conftest provides fixtures specific to the identity domain
(users, passwords, tokens).
"""

import pytest

from fintrack_identity import JWTService, PasswordHashingService, User


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create("test@example.com", name="Test")


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Fast bcrypt settings for tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key="test-jwt-secret-for-testing-only")
