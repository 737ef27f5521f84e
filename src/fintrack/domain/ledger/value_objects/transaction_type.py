"""Transaction type enum (direction of money flow)."""

from enum import Enum


class TransactionType(str, Enum):
    """Whether money leaves (expense) or enters (income) the user's wallet."""

    EXPENSE = "EXPENSE"
    INCOME = "INCOME"

    @classmethod
    def from_string(cls, value: str) -> "TransactionType":
        try:
            return cls(value.upper())
        except ValueError:
            valid = [t.value for t in cls]
            msg = f"Unknown transaction type: {value}. Valid: {valid}"
            raise ValueError(msg) from None
