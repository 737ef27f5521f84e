"""Ledger transaction entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID, uuid4

from fintrack.domain.ledger.value_objects import (
    TransactionSource,
    TransactionType,
    to_amount,
    to_category,
)
from fintrack.domain.shared.time import to_utc, utc_now


class Transaction:
    """
    A single income or expense entry in a user's ledger.

    Transactions are created manually by the user or materialized from a
    recurring rule. Materialized entries keep a reference to the rule they
    were produced from.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        amount: Union[Decimal, int, float, str],
        transaction_type: TransactionType,
        category: str,
        date: Optional[datetime] = None,
        description: Optional[str] = None,
        source: TransactionSource = TransactionSource.MANUAL,
        recurring_rule_id: Optional[UUID] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize a new transaction.

        Parameters
        ----------
        user_id
            Owner user ID
        amount
            Positive amount (rounded to cents)
        transaction_type
            EXPENSE or INCOME
        category
            Free-form, non-empty category name
        date
            When the money moved (defaults to now)
        description
            Optional note
        source
            MANUAL or RECURRING
        recurring_rule_id
            Rule that produced this entry, if any
        """
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._amount = to_amount(amount)
        self._transaction_type = TransactionType(transaction_type)
        self._category = to_category(category)
        self._date = to_utc(date) if date is not None else utc_now()
        self._description = description
        self._source = TransactionSource(source)
        self._recurring_rule_id = recurring_rule_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        amount: Decimal,
        transaction_type: TransactionType,
        category: str,
        date: datetime,
        description: Optional[str],
        source: TransactionSource,
        recurring_rule_id: Optional[UUID],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Transaction":
        return cls(
            id=id,
            user_id=user_id,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            date=date,
            description=description,
            source=source,
            recurring_rule_id=recurring_rule_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def transaction_type(self) -> TransactionType:
        return self._transaction_type

    @property
    def category(self) -> str:
        return self._category

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def source(self) -> TransactionSource:
        return self._source

    @property
    def recurring_rule_id(self) -> Optional[UUID]:
        return self._recurring_rule_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_expense(self) -> bool:
        return self._transaction_type == TransactionType.EXPENSE

    def change_amount(self, amount: Union[Decimal, int, float, str]) -> None:
        self._amount = to_amount(amount)
        self._touch()

    def change_type(self, transaction_type: TransactionType) -> None:
        self._transaction_type = TransactionType(transaction_type)
        self._touch()

    def change_category(self, category: str) -> None:
        self._category = to_category(category)
        self._touch()

    def change_date(self, date: datetime) -> None:
        self._date = to_utc(date)
        self._touch()

    def set_description(self, description: Optional[str]) -> None:
        self._description = description
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, type={self._transaction_type.value}, "
            f"amount={self._amount}, category={self._category!r})"
        )
