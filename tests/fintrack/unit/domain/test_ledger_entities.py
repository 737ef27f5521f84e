"""Tests for Transaction and FavoriteCategory entities."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from fintrack.domain.categories import FavoriteCategory
from fintrack.domain.ledger import Transaction, TransactionSource, TransactionType
from fintrack.domain.ledger.value_objects import to_amount, to_category
from fintrack.domain.shared.exceptions import ErrorCode, ValidationError

USER_ID = uuid4()


class TestAmount:
    def test_rounds_half_up_to_cents(self):
        assert to_amount("10.005") == Decimal("10.01")
        assert to_amount(3) == Decimal("3.00")

    @pytest.mark.parametrize("value", ["0", "-5", "0.004"])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError) as exc_info:
            to_amount(value)
        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError):
            to_amount("ten")


class TestCategory:
    def test_strips_whitespace(self):
        assert to_category("  Food ") == "Food"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_rejects_empty(self, value):
        with pytest.raises(ValidationError) as exc_info:
            to_category(value)
        assert exc_info.value.code == ErrorCode.INVALID_CATEGORY

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            to_category("x" * 101)


class TestTransaction:
    def test_defaults(self):
        before = datetime.now(tz=timezone.utc)
        transaction = Transaction(
            user_id=USER_ID,
            amount="12.5",
            transaction_type=TransactionType.EXPENSE,
            category="Food",
        )

        assert transaction.amount == Decimal("12.50")
        assert transaction.source == TransactionSource.MANUAL
        assert transaction.recurring_rule_id is None
        assert transaction.date >= before
        assert transaction.is_expense is True

    def test_date_is_normalized_to_utc(self):
        local = datetime(2024, 3, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        transaction = Transaction(
            user_id=USER_ID,
            amount="1",
            transaction_type=TransactionType.INCOME,
            category="Gift",
            date=local,
        )
        assert transaction.date == datetime(2024, 2, 29, 23, 0, tzinfo=timezone.utc)

    def test_changes_touch_updated_at(self):
        transaction = Transaction(
            user_id=USER_ID,
            amount="1",
            transaction_type=TransactionType.EXPENSE,
            category="Food",
            created_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
        )

        transaction.change_amount("2")
        transaction.change_type(TransactionType.INCOME)
        transaction.change_category("Refund")

        assert transaction.amount == Decimal("2.00")
        assert transaction.transaction_type == TransactionType.INCOME
        assert transaction.category == "Refund"
        assert transaction.updated_at > transaction.created_at


class TestFavoriteCategory:
    def test_requires_emoji(self):
        with pytest.raises(ValidationError):
            FavoriteCategory(
                user_id=USER_ID,
                category="Food",
                emoji=" ",
                transaction_type=TransactionType.EXPENSE,
            )

    def test_change_emoji_and_order(self):
        favorite = FavoriteCategory(
            user_id=USER_ID,
            category="Food",
            emoji="🍔",
            transaction_type=TransactionType.EXPENSE,
        )

        favorite.change_emoji("🍕")
        favorite.move_to(4)

        assert favorite.emoji == "🍕"
        assert favorite.order == 4
