"""Stats and category usage DTOs.

Shaped for the mobile dashboard: one monthly summary card, a category
pie chart and a six-month bar chart.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from fintrack.domain.ledger.value_objects import TransactionType


@dataclass
class CategoryBreakdownItem:
    """One slice of the monthly expense breakdown."""

    category: str
    amount: Decimal
    count: int
    percentage: int  # 0-100, rounded


@dataclass
class MonthlyStatsResult:
    income: Decimal
    expenses: Decimal
    available: Decimal
    spent_percentage: int
    income_count: int
    expense_count: int
    weekly_expenses: Decimal
    categories: list[CategoryBreakdownItem] = field(default_factory=list)


@dataclass
class TrendPoint:
    month: str  # YYYY-MM
    income: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass
class MonthlyTrendResult:
    trend: list[TrendPoint] = field(default_factory=list)


@dataclass
class CategoryUsage:
    """How often a category was used for a transaction type."""

    category: str
    transaction_type: TransactionType
    count: int
