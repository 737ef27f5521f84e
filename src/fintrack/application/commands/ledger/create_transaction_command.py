"""Record a manual income or expense."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from fintrack.domain.ledger import (
    Transaction,
    TransactionRepository,
    TransactionSource,
    TransactionType,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateTransactionCommand:
    """Create a manual transaction. Date defaults to now."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        user_context: UserContext,
    ):
        self._transaction_repo = transaction_repository
        self._user_id: UUID = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        amount: Union[Decimal, int, float, str],
        category: str,
        transaction_type: TransactionType = TransactionType.EXPENSE,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        transaction = Transaction(
            user_id=self._user_id,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            description=description,
            date=date,
            source=TransactionSource.MANUAL,
        )
        await self._transaction_repo.save(transaction)

        logger.info(
            "Transaction created: %s (%s %s)",
            transaction.id,
            transaction.transaction_type.value,
            transaction.amount,
        )
        return transaction
