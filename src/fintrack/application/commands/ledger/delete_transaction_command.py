"""Delete a transaction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.domain.ledger import TransactionNotFoundError, TransactionRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteTransactionCommand:
    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteTransactionCommand:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, transaction_id: UUID) -> None:
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)

        await self._transaction_repo.delete(transaction_id)
        logger.info("Transaction deleted: %s", transaction_id)
