"""List and fetch ledger transactions."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from fintrack.domain.ledger import (
    Transaction,
    TransactionNotFoundError,
    TransactionRepository,
    TransactionType,
)

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

DEFAULT_LIMIT = 50


class ListTransactionsQuery:
    """List transactions with date/category/type filters, newest first."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListTransactionsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(  # NOQA: PLR0913
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        category: Optional[str] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Transaction]:
        """Run the query.

        The date range only applies when both ``start_date`` and
        ``end_date`` are given; a single bound is ignored.
        """
        return await self._transaction_repo.find_filtered(
            start_date=start_date,
            end_date=end_date,
            category=category,
            transaction_type=transaction_type,
            limit=limit,
        )


class GetTransactionQuery:
    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetTransactionQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, transaction_id: UUID) -> Transaction:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction
