from fintrack.domain.ledger.value_objects.amount import to_amount
from fintrack.domain.ledger.value_objects.category import to_category
from fintrack.domain.ledger.value_objects.transaction_source import (
    TransactionSource,
)
from fintrack.domain.ledger.value_objects.transaction_type import TransactionType

__all__ = [
    "TransactionSource",
    "TransactionType",
    "to_amount",
    "to_category",
]
