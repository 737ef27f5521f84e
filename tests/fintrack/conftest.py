"""
Pytest configuration for fintrack domain tests.

Provides user contexts for the ledger, recurring and category tests.
"""

import pytest

from fintrack.application.context import UserContext
from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def user_context() -> UserContext:
    """Provide a UserContext for the default test user."""
    return TestUserFactory.default_context()


@pytest.fixture
def other_user_context() -> UserContext:
    """Provide a UserContext for the secondary user (isolation tests)."""
    return TestUserFactory.secondary_context()
