"""Next-occurrence calculation for recurring rules.

Month and year steps use dateutil's relativedelta. When the anchor's day
does not exist in the target month the day is clamped to the last valid
day (Jan 31 + 1 month = Feb 29 in a leap year, Feb 29 + 1 year = Feb 28).
The clamped day then becomes the new anchor, so a rule created on the
31st drifts to the 29th/28th after February.
"""

from datetime import datetime

from dateutil.relativedelta import relativedelta

from fintrack.domain.recurring.exceptions import RecurrenceOutOfRangeError
from fintrack.domain.recurring.value_objects import Frequency


def recurrence_step(frequency: Frequency, interval: int) -> relativedelta:
    """Return the calendar offset for one step of the given schedule."""
    if frequency == Frequency.DAILY:
        return relativedelta(days=interval)
    if frequency == Frequency.WEEKLY:
        return relativedelta(weeks=interval)
    if frequency == Frequency.MONTHLY:
        return relativedelta(months=interval)
    if frequency == Frequency.YEARLY:
        return relativedelta(years=interval)
    msg = f"Unsupported frequency: {frequency}"
    raise ValueError(msg)


def compute_next_run(
    anchor: datetime,
    frequency: Frequency,
    interval: int,
) -> datetime:
    """Compute the occurrence that follows ``anchor``.

    Pure and deterministic: time of day and tzinfo of the anchor are kept.
    The interval is expected to be validated by the caller.

    Parameters
    ----------
    anchor
        Start date or previous occurrence
    frequency
        Step unit
    interval
        Number of units per step

    Returns
    -------
    The next occurrence timestamp

    Raises
    ------
    RecurrenceOutOfRangeError
        If the step leaves the range ``datetime`` can represent
    """
    step = recurrence_step(frequency, interval)
    try:
        return anchor + step
    except (ValueError, OverflowError) as e:
        raise RecurrenceOutOfRangeError(anchor, frequency.value, interval) from e
