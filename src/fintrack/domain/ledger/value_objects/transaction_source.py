"""Transaction source enum.

Records how a ledger entry came into existence.
"""

from enum import Enum


class TransactionSource(str, Enum):
    """Origin of the transaction."""

    MANUAL = "MANUAL"
    RECURRING = "RECURRING"
