"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory, make_rule

    def test_something():
        ctx = TestUserFactory.default_context()
        rule = make_rule(ctx.user_id)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fintrack.application.context import UserContext
from fintrack.domain.ledger import Transaction, TransactionType
from fintrack.domain.recurring import Frequency, RecurringRule


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for test users with deterministic IDs.

    The IDs match the users seeded by ``tests.shared.fixtures.database``.
    """

    __test__ = False

    DEFAULT_ID = UUID("12345678-1234-5678-1234-567812345678")
    DEFAULT_EMAIL = "test@example.com"

    SECONDARY_ID = UUID("00000000-0000-0000-0000-000000000002")
    SECONDARY_EMAIL = "test2@example.com"

    @classmethod
    def default_context(cls) -> UserContext:
        return UserContext(user_id=cls.DEFAULT_ID, email=cls.DEFAULT_EMAIL)

    @classmethod
    def secondary_context(cls) -> UserContext:
        return UserContext(user_id=cls.SECONDARY_ID, email=cls.SECONDARY_EMAIL)


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


def make_rule(  # NOQA: PLR0913
    user_id: UUID,
    amount: str = "950.00",
    category: str = "Rent",
    frequency: Frequency = Frequency.MONTHLY,
    interval: int = 1,
    start_date: Optional[datetime] = None,
    next_run: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    is_active: bool = True,
) -> RecurringRule:
    """Build a rule with an explicit ``next_run`` (as if loaded from storage)."""
    start = start_date or utc(2024, 1, 1)
    return RecurringRule(
        user_id=user_id,
        amount=Decimal(amount),
        transaction_type=transaction_type,
        category=category,
        frequency=frequency,
        interval=interval,
        start_date=start,
        next_run=next_run or utc(2024, 2, 1),
        end_date=end_date,
        is_active=is_active,
    )


def make_transaction(  # NOQA: PLR0913
    user_id: UUID,
    amount: str = "12.50",
    category: str = "Food",
    date: Optional[datetime] = None,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    description: Optional[str] = None,
) -> Transaction:
    return Transaction(
        user_id=user_id,
        amount=Decimal(amount),
        transaction_type=transaction_type,
        category=category,
        date=date or utc(2024, 3, 10, 12),
        description=description,
    )
