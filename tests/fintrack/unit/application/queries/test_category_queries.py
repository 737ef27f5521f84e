"""Unit tests for category and transaction listing queries."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from fintrack.application.queries.categories import ListUsedCategoriesQuery
from fintrack.application.queries.ledger import (
    CategorySuggestionsQuery,
    GetTransactionQuery,
    ListTransactionsQuery,
)
from fintrack.domain.ledger import TransactionNotFoundError, TransactionType
from tests.shared.fixtures.factories import utc


@pytest.fixture
def transaction_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.count_by_category = AsyncMock(
        return_value=[
            ("Food", TransactionType.EXPENSE, 7),
            ("Bus", TransactionType.EXPENSE, 3),
        ],
    )
    repo.find_filtered = AsyncMock(return_value=[])
    repo.find_by_id = AsyncMock(return_value=None)
    return repo


class TestCategorySuggestionsQuery:
    async def test_expense_categories_by_usage(self, transaction_repo):
        suggestions = await CategorySuggestionsQuery(transaction_repo).execute()

        assert [(s.category, s.count) for s in suggestions] == [("Food", 7), ("Bus", 3)]
        transaction_repo.count_by_category.assert_awaited_once_with(
            transaction_type=TransactionType.EXPENSE,
            limit=6,
        )


class TestListUsedCategoriesQuery:
    async def test_passes_type_filter(self, transaction_repo):
        usages = await ListUsedCategoriesQuery(transaction_repo).execute(
            transaction_type=TransactionType.INCOME,
        )

        assert len(usages) == 2
        transaction_repo.count_by_category.assert_awaited_once_with(
            transaction_type=TransactionType.INCOME,
        )


class TestListTransactionsQuery:
    async def test_forwards_filters(self, transaction_repo):
        await ListTransactionsQuery(transaction_repo).execute(
            start_date=utc(2024, 3, 1),
            end_date=utc(2024, 3, 31),
            category="Food",
            limit=10,
        )

        transaction_repo.find_filtered.assert_awaited_once_with(
            start_date=utc(2024, 3, 1),
            end_date=utc(2024, 3, 31),
            category="Food",
            transaction_type=None,
            limit=10,
        )


class TestGetTransactionQuery:
    async def test_not_found(self, transaction_repo):
        with pytest.raises(TransactionNotFoundError):
            await GetTransactionQuery(transaction_repo).execute(uuid4())
