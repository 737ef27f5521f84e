"""Recurring rule entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID, uuid4

from fintrack.domain.ledger.entities import Transaction
from fintrack.domain.ledger.value_objects import (
    TransactionSource,
    TransactionType,
    to_amount,
    to_category,
)
from fintrack.domain.recurring.exceptions import (
    InvalidEndDateError,
    InvalidRecurrenceIntervalError,
    RecurrenceOutOfRangeError,
)
from fintrack.domain.recurring.services import compute_next_run
from fintrack.domain.recurring.value_objects import Frequency
from fintrack.domain.shared.time import to_utc, utc_now


def _validate_interval(interval: int) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int) or interval < 1:
        raise InvalidRecurrenceIntervalError(interval)
    return interval


class RecurringRule:
    """
    A schedule that materializes a ledger transaction every N calendar units.

    ``next_run`` is only ever produced by stepping an anchor with
    ``compute_next_run``: the start date on creation, the previous
    ``next_run`` while processing, or "now" when the schedule is edited.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        amount: Union[Decimal, int, float, str],
        transaction_type: TransactionType,
        category: str,
        frequency: Frequency,
        start_date: datetime,
        next_run: datetime,
        interval: int = 1,
        description: Optional[str] = None,
        end_date: Optional[datetime] = None,
        is_active: bool = True,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._amount = to_amount(amount)
        self._transaction_type = TransactionType(transaction_type)
        self._category = to_category(category)
        self._description = description
        self._frequency = Frequency(frequency)
        self._interval = _validate_interval(interval)
        self._start_date = to_utc(start_date)
        self._end_date = to_utc(end_date) if end_date is not None else None
        self._next_run = to_utc(next_run)
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        amount: Union[Decimal, int, float, str],
        transaction_type: TransactionType,
        category: str,
        frequency: Frequency,
        start_date: datetime,
        interval: int = 1,
        description: Optional[str] = None,
        end_date: Optional[datetime] = None,
    ) -> "RecurringRule":
        """Create a new active rule.

        The first occurrence is one step after ``start_date``.

        Raises
        ------
        InvalidEndDateError
            If ``end_date`` is not strictly after ``start_date``
        InvalidRecurrenceIntervalError
            If ``interval`` is not a positive integer
        RecurrenceOutOfRangeError
            If the first occurrence is past the supported date range
        """
        start = to_utc(start_date)
        end = to_utc(end_date) if end_date is not None else None
        if end is not None and end <= start:
            raise InvalidEndDateError(start, end)

        frequency = Frequency(frequency)
        interval = _validate_interval(interval)

        return cls(
            user_id=user_id,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            description=description,
            frequency=frequency,
            interval=interval,
            start_date=start,
            end_date=end,
            next_run=compute_next_run(start, frequency, interval),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        amount: Decimal,
        transaction_type: TransactionType,
        category: str,
        description: Optional[str],
        frequency: Frequency,
        interval: int,
        start_date: datetime,
        end_date: Optional[datetime],
        next_run: datetime,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "RecurringRule":
        return cls(
            id=id,
            user_id=user_id,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            description=description,
            frequency=frequency,
            interval=interval,
            start_date=start_date,
            end_date=end_date,
            next_run=next_run,
            is_active=is_active,
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
    def description(self) -> Optional[str]:
        return self._description

    @property
    def frequency(self) -> Frequency:
        return self._frequency

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def start_date(self) -> datetime:
        return self._start_date

    @property
    def end_date(self) -> Optional[datetime]:
        return self._end_date

    @property
    def next_run(self) -> datetime:
        return self._next_run

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_due(self, now: datetime) -> bool:
        """Whether an occurrence should be materialized at ``now``."""
        now = to_utc(now)
        if not self._is_active or self._next_run > now:
            return False
        return self._end_date is None or self._end_date >= now

    def materialize(self, occurred_at: datetime) -> Transaction:
        """Produce the ledger entry for the current occurrence.

        The entry is dated at processing time, not at ``next_run``.
        """
        return Transaction(
            user_id=self._user_id,
            amount=self._amount,
            transaction_type=self._transaction_type,
            category=self._category,
            description=self._description,
            date=occurred_at,
            source=TransactionSource.RECURRING,
            recurring_rule_id=self._id,
        )

    def advance(self) -> datetime:
        """Step ``next_run`` forward by exactly one occurrence.

        The rule is deactivated when the new ``next_run`` falls after
        ``end_date``, or when no later occurrence can be represented (the
        current ``next_run`` is then kept).
        """
        try:
            self._next_run = compute_next_run(
                self._next_run,
                self._frequency,
                self._interval,
            )
        except RecurrenceOutOfRangeError:
            self._is_active = False
        if self._end_date is not None and self._next_run > self._end_date:
            self._is_active = False
        self._touch()
        return self._next_run

    def reschedule(
        self,
        now: datetime,
        frequency: Optional[Frequency] = None,
        interval: Optional[int] = None,
    ) -> None:
        """Change frequency and/or interval and restart the schedule at ``now``.

        Nothing changes if the new schedule is invalid.
        """
        new_frequency = (
            Frequency(frequency) if frequency is not None else self._frequency
        )
        new_interval = (
            _validate_interval(interval) if interval is not None else self._interval
        )
        self._next_run = compute_next_run(to_utc(now), new_frequency, new_interval)
        self._frequency = new_frequency
        self._interval = new_interval
        self._touch()

    def change_amount(self, amount: Union[Decimal, int, float, str]) -> None:
        self._amount = to_amount(amount)
        self._touch()

    def change_category(self, category: str) -> None:
        self._category = to_category(category)
        self._touch()

    def set_description(self, description: Optional[str]) -> None:
        self._description = description
        self._touch()

    def set_end_date(self, end_date: Optional[datetime]) -> None:
        """Set or clear (``None``) the end date."""
        if end_date is None:
            self._end_date = None
        else:
            end = to_utc(end_date)
            if end <= self._start_date:
                raise InvalidEndDateError(self._start_date, end)
            self._end_date = end
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecurringRule):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"RecurringRule(id={self._id}, {self._frequency.value}/"
            f"{self._interval}, next_run={self._next_run.isoformat()}, "
            f"active={self._is_active})"
        )
