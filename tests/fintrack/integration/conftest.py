"""
Pytest configuration for fintrack integration tests.

Integration tests run against a fresh SQLite file per test.
Import the shared fixtures to make them available.
"""

import pytest

from fintrack.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    session_maker,
)

__all__ = [
    "async_engine",
    "db_session",
    "session_maker",
]


@pytest.fixture
def factory(db_session, user_context) -> SQLAlchemyRepositoryFactory:
    """Repository factory scoped to the default test user."""
    return SQLAlchemyRepositoryFactory(db_session, user_context)


@pytest.fixture
def other_factory(db_session, other_user_context) -> SQLAlchemyRepositoryFactory:
    """Repository factory scoped to the secondary test user."""
    return SQLAlchemyRepositoryFactory(db_session, other_user_context)
