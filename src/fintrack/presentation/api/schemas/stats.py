"""Stats schemas for the dashboard."""

from decimal import Decimal

from pydantic import BaseModel


class TransactionCounts(BaseModel):
    income: int
    expenses: int


class MonthlySummary(BaseModel):
    income: Decimal
    expenses: Decimal
    available: Decimal
    spent_percentage: int
    transaction_count: TransactionCounts


class WeeklySummary(BaseModel):
    expenses: Decimal


class CategoryBreakdownResponse(BaseModel):
    category: str
    amount: Decimal
    count: int
    percentage: int


class StatsResponse(BaseModel):
    monthly: MonthlySummary
    weekly: WeeklySummary
    categories: list[CategoryBreakdownResponse]


class TrendPointResponse(BaseModel):
    month: str
    income: Decimal
    expenses: Decimal
    savings: Decimal


class TrendResponse(BaseModel):
    trend: list[TrendPointResponse]
