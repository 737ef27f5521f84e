"""Most used expense categories, for the quick entry screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.application.dtos import CategoryUsage
from fintrack.domain.ledger import TransactionRepository, TransactionType

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class CategorySuggestionsQuery:
    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CategorySuggestionsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, limit: int = 6) -> list[CategoryUsage]:
        rows = await self._transaction_repo.count_by_category(
            transaction_type=TransactionType.EXPENSE,
            limit=limit,
        )
        return [
            CategoryUsage(category=category, transaction_type=tx_type, count=count)
            for category, tx_type, count in rows
        ]
