"""Ledger domain: income and expense transactions."""

from fintrack.domain.ledger.entities import Transaction
from fintrack.domain.ledger.exceptions import TransactionNotFoundError
from fintrack.domain.ledger.repositories import TransactionRepository
from fintrack.domain.ledger.value_objects import (
    TransactionSource,
    TransactionType,
)

__all__ = [
    "Transaction",
    "TransactionNotFoundError",
    "TransactionRepository",
    "TransactionSource",
    "TransactionType",
]
