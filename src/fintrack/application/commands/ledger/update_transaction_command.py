"""Edit a transaction."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from fintrack.domain.ledger import (
    Transaction,
    TransactionNotFoundError,
    TransactionRepository,
    TransactionType,
)

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class UpdateTransactionCommand:
    """Partially update a transaction; ``None`` leaves a field unchanged."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateTransactionCommand:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        amount: Optional[Union[Decimal, int, float, str]] = None,
        transaction_type: Optional[TransactionType] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        # Repo is user-scoped: another user's transaction is simply not found
        transaction = await self._transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)

        if amount is not None:
            transaction.change_amount(amount)
        if transaction_type is not None:
            transaction.change_type(transaction_type)
        if category is not None:
            transaction.change_category(category)
        if description is not None:
            transaction.set_description(description)
        if date is not None:
            transaction.change_date(date)

        await self._transaction_repo.save(transaction)
        return transaction
