from fintrack.domain.ledger.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = ["TransactionRepository"]
